"""Core components for Atom Logic."""

from .truth_value import (
    DEFAULT_TRUTH_VALUE,
    TruthValue,
    tv_and,
    tv_create,
    tv_not,
    tv_or,
)
from .atoms import Atom, AtomType
from .embeddings import AtomEmbedding
from .atomspace import AtomSpace
from .rules import (
    FunctionRule,
    InferenceRule,
    InheritanceTransitivityRule,
    ModusPonensRule,
)
from .engine import URE, UnifiedRuleEngine
from .query import QUERY_CONFIDENCE_THRESHOLD, Pattern, query

__all__ = [
    "DEFAULT_TRUTH_VALUE",
    "TruthValue",
    "tv_create",
    "tv_and",
    "tv_or",
    "tv_not",
    "Atom",
    "AtomType",
    "AtomEmbedding",
    "AtomSpace",
    "InferenceRule",
    "FunctionRule",
    "InheritanceTransitivityRule",
    "ModusPonensRule",
    "UnifiedRuleEngine",
    "URE",
    "Pattern",
    "QUERY_CONFIDENCE_THRESHOLD",
    "query",
]
