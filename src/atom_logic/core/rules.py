"""
PLN Inference Rules

A rule is a (precondition, conclusion) pair over an ordered premise tuple:
    precondition(space, premises) -> bool
    conclusion(space, premises)   -> Atom or None

Rule types:
    1. Inheritance transitivity (synthesis):
       Inheritance(A,B), Inheritance(B,C)  =>  new Inheritance(A,C)
       s = s1·s2,  c = c1·c2·0.9,  n = min(n1, n2)

    2. Modus ponens (revision):
       P, Implication(P,Q)  =>  Q.tv ← OR(Q.tv, (s_P·s_I, c_P·c_I, min(n_P, n_I)))

A rule declares whether it synthesizes or revises by what it returns: a
freshly inserted atom, or an existing atom whose truth value it updated.
The engine treats both the same way.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from .atoms import Atom, AtomType
from .truth_value import TruthValue, tv_or

if TYPE_CHECKING:
    from .atomspace import AtomSpace

logger = logging.getLogger(__name__)

# Confidence decay applied to every transitive step
TRANSITIVITY_DECAY = 0.9

PreconditionFn = Callable[["AtomSpace", Sequence[Atom]], bool]
ConclusionFn = Callable[["AtomSpace", Sequence[Atom]], Optional[Atom]]


class InferenceRule(ABC):
    """
    Abstract base class for inference rules.

    All rules must implement:
        - precondition(): Cheap applicability test, never raises on bad input
        - conclusion(): Derive (insert or revise) an atom, or return None

    Rules are stateless; the engine calls them with a premise tuple drawn
    from the AtomSpace it owns.
    """

    name: str = "rule"
    confidence_boost: float = 0.0

    @abstractmethod
    def precondition(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> bool:
        """
        Check whether the rule applies to the premises.

        Args:
            atomspace: Store the premises belong to
            premises: Ordered premise atoms

        Returns:
            True if conclusion() would derive something
        """
        pass

    @abstractmethod
    def conclusion(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> Optional[Atom]:
        """
        Derive a fact from the premises.

        Args:
            atomspace: Store to read from and write to
            premises: Ordered premise atoms

        Returns:
            The new or revised atom, or None
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionRule(InferenceRule):
    """Rule built from a plain (precondition, conclusion) function pair."""

    def __init__(
        self,
        name: str,
        precondition: PreconditionFn,
        conclusion: ConclusionFn,
        confidence_boost: float = 0.0,
    ):
        self.name = name
        self._precondition = precondition
        self._conclusion = conclusion
        self.confidence_boost = confidence_boost

    def precondition(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> bool:
        return bool(self._precondition(atomspace, premises))

    def conclusion(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> Optional[Atom]:
        return self._conclusion(atomspace, premises)


class InheritanceTransitivityRule(InferenceRule):
    """
    Inheritance(A,B), Inheritance(B,C) => Inheritance(A,C)

    Always inserts a new link; never touches existing atoms. Returns None
    when the store is full.
    """

    def __init__(self, name: str = "Inheritance Transitivity", confidence_boost: float = 0.0):
        self.name = name
        self.confidence_boost = confidence_boost

    def precondition(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> bool:
        if len(premises) != 2:
            return False
        first, second = premises
        if first.type != AtomType.INHERITANCE_LINK or second.type != AtomType.INHERITANCE_LINK:
            return False
        if first.arity != 2 or second.arity != 2:
            return False
        # B must close the chain: first = A->B, second = B->C
        return first.outgoing[1] == second.outgoing[0]

    def conclusion(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> Optional[Atom]:
        if not self.precondition(atomspace, premises):
            return None

        first, second = premises
        a, c = first.outgoing[0], second.outgoing[1]
        tv = TruthValue(
            first.tv.strength * second.tv.strength,
            first.tv.confidence * second.tv.confidence * TRANSITIVITY_DECAY,
            min(first.tv.count, second.tv.count),
        )
        return atomspace.create_link(AtomType.INHERITANCE_LINK, [a, c], tv)


class ModusPonensRule(InferenceRule):
    """
    P, Implication(P,Q) => Q

    Revises Q in place by OR-ing its truth value with the deduced one;
    never inserts an atom.
    """

    def __init__(self, name: str = "Modus Ponens", confidence_boost: float = 0.0):
        self.name = name
        self.confidence_boost = confidence_boost

    def precondition(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> bool:
        if len(premises) != 2:
            return False
        p, implication = premises
        if implication.type != AtomType.IMPLICATION_LINK or implication.arity != 2:
            return False
        return implication.outgoing[0] == p.index

    def conclusion(self, atomspace: "AtomSpace", premises: Sequence[Atom]) -> Optional[Atom]:
        if not self.precondition(atomspace, premises):
            return None

        p, implication = premises
        q = atomspace[implication.outgoing[1]]
        deduced = TruthValue(
            p.tv.strength * implication.tv.strength,
            p.tv.confidence * implication.tv.confidence,
            min(p.tv.count, implication.tv.count),
        )
        q.tv = tv_or(q.tv, deduced)
        logger.debug("Modus ponens revised #%d to %s", q.index, q.tv)
        return q
