"""
AtomSpace Statistics

Counts of atoms per type, fill ratio against capacity, and the mean
strength/confidence of the live set. Used by the demo script to report the
state of a store after chaining.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from ..core.atoms import AtomType
from ..core.atomspace import AtomSpace


@dataclass
class AtomSpaceStats:
    """Snapshot of an AtomSpace."""

    n_atoms: int
    capacity: int
    embedding_dim: int
    n_nodes: int
    n_links: int
    mean_strength: float
    mean_confidence: float
    type_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def fill_ratio(self) -> float:
        return self.n_atoms / self.capacity if self.capacity else 0.0


def compute_stats(atomspace: AtomSpace) -> AtomSpaceStats:
    """
    Collect statistics over the live atoms.

    Args:
        atomspace: Store to inspect

    Returns:
        AtomSpaceStats
    """
    atoms = list(atomspace)
    counts = Counter(atom.type for atom in atoms)
    n = len(atoms)

    return AtomSpaceStats(
        n_atoms=n,
        capacity=atomspace.capacity,
        embedding_dim=atomspace.embedding_dim,
        n_nodes=sum(1 for atom in atoms if atom.is_node),
        n_links=sum(1 for atom in atoms if atom.is_link),
        mean_strength=sum(atom.tv.strength for atom in atoms) / n if n else 0.0,
        mean_confidence=sum(atom.tv.confidence for atom in atoms) / n if n else 0.0,
        type_counts={t.label: counts[t] for t in AtomType if t != AtomType.COUNT and counts[t]},
    )


def summary(stats: AtomSpaceStats) -> str:
    """Generate a printable report."""
    lines = ["=" * 60, " AtomSpace Summary", "=" * 60, ""]

    lines.append(f"Total atoms: {stats.n_atoms}/{stats.capacity} ({stats.fill_ratio:.1%})")
    lines.append(f"  Nodes: {stats.n_nodes}")
    lines.append(f"  Links: {stats.n_links}")
    lines.append(f"Embedding dimension: {stats.embedding_dim}")
    lines.append("")

    for label, count in stats.type_counts.items():
        lines.append(f"  {label:<16} {count}")
    if stats.type_counts:
        lines.append("")

    lines.append(f"Mean strength:   {stats.mean_strength:.4f}")
    lines.append(f"Mean confidence: {stats.mean_confidence:.4f}")
    lines.append("=" * 60)

    return "\n".join(lines)
