"""
tests/test_query.py - Tests for type/confidence pattern matching
"""
import pytest

from atom_logic.core import QUERY_CONFIDENCE_THRESHOLD, AtomSpace, AtomType, Pattern, TruthValue, query


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def space():
    """Two confident concepts, one weak concept, one confident predicate."""
    space = AtomSpace(capacity=100, embedding_dim=32)
    tv_high = TruthValue(0.9, 0.8, 10.0)
    tv_low = TruthValue(0.3, 0.4, 1.0)
    space.create_node(AtomType.CONCEPT_NODE, "Concept1", tv_high)
    space.create_node(AtomType.CONCEPT_NODE, "Concept2", tv_high)
    space.create_node(AtomType.CONCEPT_NODE, "Concept3", tv_low)
    space.create_node(AtomType.PREDICATE_NODE, "Predicate1", tv_high)
    return space


class TestQuery:
    """Tests for query()."""

    def test_matches_type_and_confidence(self, space):
        results = query(space, Pattern(AtomType.CONCEPT_NODE))
        assert [atom.name for atom in results] == ["Concept1", "Concept2"]

    def test_method_form(self, space):
        assert space.query(Pattern(AtomType.CONCEPT_NODE)) == query(space, Pattern(AtomType.CONCEPT_NODE))

    def test_bare_type(self, space):
        assert len(query(space, AtomType.PREDICATE_NODE)) == 1

    def test_atom_as_pattern(self, space):
        results = query(space, space.lookup("Concept3"))
        assert len(results) == 2

    def test_name_and_tv_ignored(self, space):
        pattern = Pattern(AtomType.CONCEPT_NODE, name="Nothing", tv=TruthValue(0.0, 0.0, 0.0))
        assert len(query(space, pattern)) == 2

    def test_empty_result(self, space):
        assert query(space, Pattern(AtomType.IMPLICATION_LINK)) == []

    def test_threshold_is_inclusive(self):
        space = AtomSpace(capacity=4, embedding_dim=4)
        edge = space.create_node(AtomType.CONCEPT_NODE, "edge", TruthValue(0.5, QUERY_CONFIDENCE_THRESHOLD, 1.0))
        assert query(space, AtomType.CONCEPT_NODE) == [edge]

    def test_store_order(self, space):
        late = space.create_node(AtomType.CONCEPT_NODE, "Concept4", TruthValue(0.9, 0.9, 1.0))
        assert query(space, AtomType.CONCEPT_NODE)[-1] is late

    def test_links_match_by_type(self, space):
        a, b = space[0], space[1]
        link = space.create_link(AtomType.INHERITANCE_LINK, [a, b], TruthValue(0.9, 0.6, 1.0))
        assert query(space, AtomType.INHERITANCE_LINK) == [link]
