"""
Pattern Matching over an AtomSpace

An atom matches a pattern when:
    atom.type == pattern.type  AND  atom.tv.confidence ≥ 0.5

Only the type of the pattern is inspected; its name and truth value are
ignored. There is no variable binding. The 0.5 floor is fixed and
unrelated to the rule engine's min_confidence.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Union

from .atoms import Atom, AtomType
from .truth_value import TruthValue

if TYPE_CHECKING:
    from .atomspace import AtomSpace

QUERY_CONFIDENCE_THRESHOLD = 0.5


@dataclass
class Pattern:
    """Query pattern. Only `type` participates in matching."""

    type: AtomType
    name: Optional[str] = None
    tv: Optional[TruthValue] = None


def query(
    atomspace: "AtomSpace",
    pattern: Union[Pattern, Atom, AtomType],
) -> List[Atom]:
    """
    Scan live atoms for type and confidence matches.

    Args:
        atomspace: Store to scan (read only)
        pattern: Pattern, an existing Atom used as a pattern, or a bare AtomType

    Returns:
        Matching atoms in slot order (possibly empty)
    """
    wanted = pattern if isinstance(pattern, AtomType) else pattern.type
    return [
        atom
        for atom in atomspace
        if atom.type == wanted and atom.tv.confidence >= QUERY_CONFIDENCE_THRESHOLD
    ]
