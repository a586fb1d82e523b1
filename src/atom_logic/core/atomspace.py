"""
AtomSpace: Bounded Hypergraph Store

Invariants:
    - 0 ≤ n_atoms ≤ capacity
    - atoms[0..n_atoms) is the live set; insertion order = slot = embedding row
    - link outgoing indices always refer to atoms already in this store
    - atoms are never removed individually, so indices never dangle

Creation beyond capacity returns None and leaves the store untouched.
"""

import logging
import torch
import numpy as np
from typing import Iterator, List, Optional, Sequence, Union

from .atoms import Atom, AtomType
from .embeddings import AtomEmbedding
from .query import query as match_pattern
from .truth_value import DEFAULT_TRUTH_VALUE, TruthValue

logger = logging.getLogger(__name__)

AtomRef = Union[Atom, int]


class AtomSpace:
    """
    Owner of all atoms and their embedding slots.

    Supports:
        - Node and link creation with a hard capacity bound
        - Name lookup (first match in slot order)
        - Embedding slot read/write
        - Explicit teardown (free() or use as a context manager)
    """

    def __init__(
        self,
        capacity: int = 1000,
        embedding_dim: int = 64,
        device: torch.device = None,
    ):
        """
        Allocate an empty store.

        Args:
            capacity: Maximum number of atoms (nodes and links together)
            embedding_dim: Width of each atom's embedding slot
            device: Torch device for the embedding table (default: CPU)
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if embedding_dim <= 0:
            raise ValueError(f"embedding_dim must be > 0, got {embedding_dim}")

        self._capacity = capacity
        self._embedding_dim = embedding_dim
        self._atoms: List[Atom] = []
        self.embeddings: Optional[AtomEmbedding] = AtomEmbedding(
            capacity, embedding_dim, device=device or torch.device("cpu")
        )
        self._freed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def embedding_dim(self) -> int:
        return self._embedding_dim

    @property
    def n_atoms(self) -> int:
        return len(self._atoms)

    @property
    def is_full(self) -> bool:
        return len(self._atoms) >= self._capacity

    def __len__(self) -> int:
        return len(self._atoms)

    def __getitem__(self, index: int) -> Atom:
        return self._atoms[index]

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._atoms)

    def __contains__(self, atom: object) -> bool:
        return isinstance(atom, Atom) and self._owns(atom)

    def __enter__(self) -> "AtomSpace":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.free()

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_node(
        self,
        atom_type: AtomType,
        name: str,
        tv: Optional[TruthValue] = None,
    ) -> Optional[Atom]:
        """
        Append a node and bind it to the next embedding slot.

        Names are not deduplicated; use lookup() first if that matters.

        Args:
            atom_type: Node type tag
            name: Node name
            tv: Truth value (default: DEFAULT_TRUTH_VALUE)

        Returns:
            The new atom, or None if the store is full
        """
        self._check_alive()
        atom_type = self._check_type(atom_type)
        if self.is_full:
            logger.debug("AtomSpace full (%d), refusing node %r", self._capacity, name)
            return None

        atom = Atom(
            index=len(self._atoms),
            type=atom_type,
            tv=tv if tv is not None else DEFAULT_TRUTH_VALUE,
            name=name,
        )
        self._atoms.append(atom)
        logger.debug("Created #%d %s", atom.index, atom)
        return atom

    def create_link(
        self,
        atom_type: AtomType,
        outgoing: Sequence[AtomRef],
        tv: Optional[TruthValue] = None,
    ) -> Optional[Atom]:
        """
        Append a link over existing atoms.

        The outgoing sequence is copied; members may be atoms of this
        store or their slot indices.

        Args:
            atom_type: Link type tag
            outgoing: Ordered members (length ≥ 1)
            tv: Truth value (default: DEFAULT_TRUTH_VALUE)

        Returns:
            The new link, or None if the store is full
        """
        self._check_alive()
        atom_type = self._check_type(atom_type)
        members = tuple(self._resolve_index(ref) for ref in outgoing)
        if not members:
            raise ValueError("A link needs at least one outgoing atom")

        if self.is_full:
            logger.debug("AtomSpace full (%d), refusing %s link", self._capacity, atom_type.label)
            return None

        link = Atom(
            index=len(self._atoms),
            type=atom_type,
            tv=tv if tv is not None else DEFAULT_TRUTH_VALUE,
            outgoing=members,
        )
        self._atoms.append(link)
        logger.debug("Created #%d %s", link.index, link)
        return link

    def link(
        self,
        source: AtomRef,
        target: AtomRef,
        atom_type: AtomType,
        tv: Optional[TruthValue] = None,
    ) -> bool:
        """
        Binary link shorthand: create_link(atom_type, [source, target], tv).

        Returns:
            True if the link was created, False if the store is full
        """
        return self.create_link(atom_type, [source, target], tv) is not None

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def lookup(self, name: str) -> Optional[Atom]:
        """Return the first atom (in slot order) named `name`, or None."""
        for atom in self._atoms:
            if atom.name is not None and atom.name == name:
                return atom
        return None

    def outgoing_atoms(self, atom: Atom) -> List[Atom]:
        """Resolve a link's outgoing indices to atoms of this store."""
        return [self._atoms[i] for i in atom.outgoing]

    def get_embedding(self, atom: AtomRef) -> np.ndarray:
        """
        Read an atom's embedding slot.

        Returns:
            [embedding_dim] float32 copy
        """
        self._check_alive()
        return self.embeddings.read(self._resolve_index(atom))

    def get_embeddings(self, atoms: Sequence[AtomRef]) -> torch.Tensor:
        """
        Batched lookup of embedding slots.

        Args:
            atoms: Atoms or slot indices of this store

        Returns:
            [len(atoms), embedding_dim] tensor
        """
        self._check_alive()
        indices = torch.tensor(
            [self._resolve_index(atom) for atom in atoms],
            dtype=torch.long,
            device=self.embeddings.weight.device,
        )
        return self.embeddings(indices)

    def set_embedding(self, atom: AtomRef, values: Sequence[float]):
        """Overwrite an atom's embedding slot with raw floats."""
        self._check_alive()
        self.embeddings.write(self._resolve_index(atom), values)

    def query(self, pattern) -> List[Atom]:
        """Type/confidence pattern match; see atom_logic.core.query."""
        return match_pattern(self, pattern)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def free(self):
        """Release every atom and the embedding table."""
        if self._freed:
            return
        self._atoms.clear()
        self.embeddings = None
        self._freed = True
        logger.debug("AtomSpace freed")

    @property
    def is_freed(self) -> bool:
        return self._freed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _owns(self, atom: Atom) -> bool:
        return 0 <= atom.index < len(self._atoms) and self._atoms[atom.index] is atom

    def _resolve_index(self, ref: AtomRef) -> int:
        if isinstance(ref, Atom):
            if not self._owns(ref):
                raise ValueError(f"Atom #{ref.index} does not belong to this AtomSpace")
            return ref.index
        if isinstance(ref, bool) or not isinstance(ref, (int, np.integer)):
            raise ValueError(f"Outgoing member must be an Atom or int index, got {ref!r}")
        index = int(ref)
        if not 0 <= index < len(self._atoms):
            raise ValueError(f"Atom index {index} out of range [0, {len(self._atoms)})")
        return index

    @staticmethod
    def _check_type(atom_type: AtomType) -> AtomType:
        atom_type = AtomType(atom_type)
        if atom_type == AtomType.COUNT:
            raise ValueError("AtomType.COUNT is a sentinel, not an atom type")
        return atom_type

    def _check_alive(self):
        if self._freed:
            raise RuntimeError("AtomSpace has been freed")

    def __repr__(self) -> str:
        return (
            f"AtomSpace(n_atoms={len(self._atoms)}, capacity={self._capacity}, "
            f"embedding_dim={self._embedding_dim})"
        )
