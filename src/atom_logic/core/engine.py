"""
Unified Rule Engine (URE)

Forward chaining:
    for pass in 1..max_iterations:
        for rule in rules (registration order):
            for i < j over the *live* atom count:
                if rule.precondition(atoms[i], atoms[j]):
                    conclusion = rule.conclusion(atoms[i], atoms[j])
                    accept if conclusion.tv.confidence ≥ min_confidence
                    stop if conclusion is the target
        stop if the pass accepted nothing (fixpoint)

The atom count is re-read at every step, so atoms inserted earlier in a
pass take part in later pairs of the same pass.

Cost: O(max_iterations · n_rules · n²) precondition checks. Bound
max_iterations and the store capacity accordingly.
"""

import logging
from typing import List, Optional

from .atoms import Atom
from .atomspace import AtomSpace
from .rules import InferenceRule

logger = logging.getLogger(__name__)


class UnifiedRuleEngine:
    """
    Holds an ordered rule list and drives chaining over one AtomSpace.

    Supports:
        - Rule registration (append only, duplicates allowed)
        - Forward chaining to fixpoint, target or iteration bound
        - Backward chaining (delegates to targeted forward chaining)
    """

    def __init__(
        self,
        atomspace: AtomSpace,
        max_iterations: int = 10,
        min_confidence: float = 0.5,
    ):
        """
        Initialize engine.

        Args:
            atomspace: Store the engine reasons over
            max_iterations: Upper bound on forward-chaining passes (≥ 0)
            min_confidence: Acceptance floor for derived facts, in [0, 1]
        """
        if max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {max_iterations}")
        if not 0.0 <= min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be in [0, 1], got {min_confidence}")

        self.atomspace = atomspace
        self.rules: List[InferenceRule] = []
        self._max_iterations = max_iterations
        self._min_confidence = float(min_confidence)

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @property
    def min_confidence(self) -> float:
        return self._min_confidence

    @property
    def n_rules(self) -> int:
        return len(self.rules)

    def add_rule(self, rule: InferenceRule):
        """
        Append a rule. No duplicate detection.

        Args:
            rule: Any InferenceRule implementation
        """
        if not isinstance(rule, InferenceRule):
            raise TypeError(f"Expected an InferenceRule, got {type(rule).__name__}")
        self.rules.append(rule)
        logger.debug("Registered rule %r (%d total)", rule.name, len(self.rules))

    def forward_chain(self, target: Optional[Atom] = None) -> int:
        """
        Forward chaining: apply all rules over all atom pairs until fixpoint.

        Args:
            target: Stop as soon as a conclusion is this atom

        Returns:
            Number of accepted inferences
        """
        space = self.atomspace
        if space is None:
            raise RuntimeError("UnifiedRuleEngine has been freed")
        inferences = 0

        for iteration in range(self._max_iterations):
            made_inference = False

            for rule in self.rules:
                i = 0
                while i < len(space):
                    j = i + 1
                    while j < len(space):
                        premises = (space[i], space[j])
                        j += 1

                        if not rule.precondition(space, premises):
                            continue

                        conclusion = rule.conclusion(space, premises)
                        if conclusion is None or conclusion.tv.confidence < self._min_confidence:
                            continue

                        made_inference = True
                        inferences += 1

                        if target is not None and conclusion is target:
                            logger.debug(
                                "Target #%d reached by %r after %d inferences",
                                target.index, rule.name, inferences,
                            )
                            return inferences
                    i += 1

            if not made_inference:
                logger.debug("Fixpoint after %d passes", iteration + 1)
                break
        else:
            logger.debug("Stopped at max_iterations=%d", self._max_iterations)

        return inferences

    def backward_chain(self, query: Atom) -> int:
        """
        Derive toward a query atom.

        There is no goal-directed search: this runs forward chaining with
        the query as target, so it stops early only if some rule concludes
        the query atom itself.

        Args:
            query: Atom to reach

        Returns:
            Number of accepted inferences
        """
        return self.forward_chain(target=query)

    def inference_step(self) -> int:
        """Run one untargeted forward chain."""
        return self.forward_chain(target=None)

    def free(self):
        """Drop the rule list and release the store reference."""
        self.rules = []
        self.atomspace = None

    def __repr__(self) -> str:
        return (
            f"UnifiedRuleEngine(n_rules={len(self.rules)}, "
            f"max_iterations={self._max_iterations}, "
            f"min_confidence={self._min_confidence})"
        )


URE = UnifiedRuleEngine
