"""
Atom Types and Records

Two shapes share one tag space:
    Node: (type, name)          outgoing = ()
    Link: (type, outgoing)      name = None, outgoing = (i_1, ..., i_k), k ≥ 1

Outgoing members are slot indices into the owning AtomSpace, never object
references. Because the store never deletes individual atoms, an index
handed out once stays valid for the lifetime of the store.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Tuple

from .truth_value import TruthValue


class AtomType(IntEnum):
    """Closed, ordered set of atom kinds (plus a COUNT sentinel)."""

    CONCEPT_NODE = 0
    PREDICATE_NODE = 1
    LINK_NODE = 2
    INHERITANCE_LINK = 3
    SIMILARITY_LINK = 4
    IMPLICATION_LINK = 5
    EVALUATION_LINK = 6
    COUNT = 7

    @property
    def label(self) -> str:
        """CamelCase name, e.g. 'InheritanceLink'."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(eq=False)
class Atom:
    """
    A typed node or link owned by exactly one AtomSpace.

    index:    slot in the store (also the embedding table row)
    type:     AtomType tag
    tv:       current truth value (rules may revise it in place)
    name:     node name, None for links
    outgoing: ordered store indices, empty for nodes
    data:     opaque payload, never interpreted by the core

    Atoms compare by identity; two nodes may share a name.
    """

    index: int
    type: AtomType
    tv: TruthValue
    name: Optional[str] = None
    outgoing: Tuple[int, ...] = field(default_factory=tuple)
    data: Any = None

    @property
    def is_link(self) -> bool:
        return len(self.outgoing) > 0

    @property
    def is_node(self) -> bool:
        return not self.outgoing

    @property
    def arity(self) -> int:
        return len(self.outgoing)

    def __str__(self):
        if self.is_node:
            return f"({self.type.label} \"{self.name}\" {self.tv})"
        members = " ".join(f"#{i}" for i in self.outgoing)
        return f"({self.type.label} {members} {self.tv})"
