"""
Truth Values for Probabilistic Logic Networks (PLN)

Mathematical basis:
    A truth value is a triple (s, c, n):
        s ∈ [0, 1]  strength   (probability the statement holds)
        c ∈ [0, 1]  confidence (weight of the evidence)
        n ≥ 0       count      (raw evidence tally)

Operators (independence assumption):
    AND(a, b) = (s_a·s_b,             c_a·c_b,        n_a + n_b)
    OR(a, b)  = (s_a + s_b − s_a·s_b, min(c_a, c_b),  max(n_a, n_b))
    NOT(a)    = (1 − s_a,             c_a,            n_a)

Every construction clamps out-of-range inputs, so all operators are total.
"""

from dataclasses import dataclass


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, float(value)))


@dataclass(frozen=True)
class TruthValue:
    """
    Immutable PLN truth value.

    Construction clamps strength and confidence to [0, 1] and count to
    [0, ∞) instead of failing:

        TruthValue(1.5, -0.5, -1.0) == TruthValue(1.0, 0.0, 0.0)
    """

    strength: float = 0.0
    confidence: float = 0.0
    count: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "strength", _clamp(self.strength, 0.0, 1.0))
        object.__setattr__(self, "confidence", _clamp(self.confidence, 0.0, 1.0))
        object.__setattr__(self, "count", max(0.0, float(self.count)))

    def to_probability(self) -> float:
        """
        Collapse to a single probability.

        p = s·c + (1 − c)·0.5

        With no evidence (c = 0) this is the uninformed prior 0.5; with
        full confidence it is the strength itself.
        """
        return self.strength * self.confidence + (1.0 - self.confidence) * 0.5

    def __and__(self, other: "TruthValue") -> "TruthValue":
        return tv_and(self, other)

    def __or__(self, other: "TruthValue") -> "TruthValue":
        return tv_or(self, other)

    def __invert__(self) -> "TruthValue":
        return tv_not(self)

    def __str__(self):
        return f"<{self.strength:.2f}, {self.confidence:.2f}, {self.count:g}>"


DEFAULT_TRUTH_VALUE = TruthValue(0.8, 0.9, 1.0)


def tv_create(strength: float, confidence: float, count: float) -> TruthValue:
    """Create a truth value, clamping each field into its range."""
    return TruthValue(strength, confidence, count)


def tv_and(a: TruthValue, b: TruthValue) -> TruthValue:
    """
    PLN conjunction of two independent statements.

    Args:
        a: First truth value
        b: Second truth value

    Returns:
        (s_a·s_b, c_a·c_b, n_a + n_b)
    """
    return TruthValue(
        a.strength * b.strength,
        a.confidence * b.confidence,
        a.count + b.count,
    )


def tv_or(a: TruthValue, b: TruthValue) -> TruthValue:
    """
    PLN disjunction (probabilistic union).

    Confidence of the disjunction is bounded by the weaker operand.

    Args:
        a: First truth value
        b: Second truth value

    Returns:
        (s_a + s_b − s_a·s_b, min(c_a, c_b), max(n_a, n_b))
    """
    return TruthValue(
        a.strength + b.strength - a.strength * b.strength,
        min(a.confidence, b.confidence),
        max(a.count, b.count),
    )


def tv_not(a: TruthValue) -> TruthValue:
    """PLN negation: flips strength, keeps confidence and count."""
    return TruthValue(1.0 - a.strength, a.confidence, a.count)
