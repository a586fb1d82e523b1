"""
Atom Logic: Probabilistic Reasoning over a Typed Hypergraph

Mathematical foundation:
    - Knowledge is a hypergraph of typed atoms (nodes and links)
    - Every atom carries a truth value (strength, confidence, count)
    - Reasoning is forward/backward chaining of PLN rules over atom pairs
"""

__version__ = "0.1.0"
