"""
tests/test_truth_value.py - Tests for the PLN truth-value calculus

Verifies:
    - Clamping on construction
    - AND / OR / NOT formulas
    - Operator forms and probability collapse
"""
import dataclasses

import pytest

from atom_logic.core import DEFAULT_TRUTH_VALUE, TruthValue, tv_and, tv_create, tv_not, tv_or


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def tv1():
    return tv_create(0.8, 0.9, 5.0)


@pytest.fixture
def tv2():
    return tv_create(0.6, 0.7, 3.0)


# =============================================================================
# CONSTRUCTION
# =============================================================================

class TestCreate:
    """Tests for truth value construction."""

    def test_in_range_values_kept(self):
        tv = tv_create(0.8, 0.9, 5.0)
        assert tv.strength == pytest.approx(0.8)
        assert tv.confidence == pytest.approx(0.9)
        assert tv.count == pytest.approx(5.0)

    def test_out_of_range_values_clamped(self):
        tv = tv_create(1.5, -0.5, -1.0)
        assert tv == TruthValue(1.0, 0.0, 0.0)

    def test_count_has_no_upper_bound(self):
        assert tv_create(0.5, 0.5, 1e6).count == pytest.approx(1e6)

    def test_direct_constructor_clamps(self):
        tv = TruthValue(-3.0, 7.0, 2.0)
        assert tv.strength == 0.0
        assert tv.confidence == 1.0

    @pytest.mark.parametrize("s,c,n", [(-1, -1, -1), (2, 2, 2), (0.3, 1.2, -5), (float("1e9"), 0.5, 0)])
    def test_ranges_always_hold(self, s, c, n):
        tv = tv_create(s, c, n)
        assert 0.0 <= tv.strength <= 1.0
        assert 0.0 <= tv.confidence <= 1.0
        assert tv.count >= 0.0

    def test_immutable(self, tv1):
        with pytest.raises(dataclasses.FrozenInstanceError):
            tv1.strength = 0.1

    def test_default_truth_value(self):
        assert DEFAULT_TRUTH_VALUE == TruthValue(0.8, 0.9, 1.0)


# =============================================================================
# OPERATORS
# =============================================================================

class TestOperators:
    """Tests for AND / OR / NOT."""

    def test_and(self, tv1, tv2):
        result = tv_and(tv1, tv2)
        assert result.strength == pytest.approx(0.48)
        assert result.confidence == pytest.approx(0.63)
        assert result.count == pytest.approx(8.0)

    def test_or(self, tv1, tv2):
        result = tv_or(tv1, tv2)
        assert result.strength == pytest.approx(0.92)
        assert result.confidence == pytest.approx(0.7)
        assert result.count == pytest.approx(5.0)

    def test_not(self, tv1):
        result = tv_not(tv1)
        assert result.strength == pytest.approx(0.2)
        assert result.confidence == pytest.approx(0.9)
        assert result.count == pytest.approx(5.0)

    def test_double_negation(self, tv1):
        assert tv_not(tv_not(tv1)).strength == pytest.approx(tv1.strength)

    def test_operator_forms(self, tv1, tv2):
        assert (tv1 & tv2) == tv_and(tv1, tv2)
        assert (tv1 | tv2) == tv_or(tv1, tv2)
        assert ~tv1 == tv_not(tv1)

    def test_inputs_untouched(self, tv1, tv2):
        tv_and(tv1, tv2)
        tv_or(tv1, tv2)
        assert tv1 == tv_create(0.8, 0.9, 5.0)
        assert tv2 == tv_create(0.6, 0.7, 3.0)


class TestProbability:
    """Tests for collapsing a truth value to one probability."""

    def test_no_evidence_is_half(self):
        assert TruthValue(0.9, 0.0, 0.0).to_probability() == pytest.approx(0.5)

    def test_full_confidence_is_strength(self):
        assert TruthValue(0.9, 1.0, 3.0).to_probability() == pytest.approx(0.9)

    def test_mixed(self):
        assert TruthValue(0.8, 0.5, 1.0).to_probability() == pytest.approx(0.65)
