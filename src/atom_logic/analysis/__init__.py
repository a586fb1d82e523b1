"""Analysis tools for Atom Logic."""

from .summary import AtomSpaceStats, compute_stats, summary

__all__ = ["AtomSpaceStats", "compute_stats", "summary"]
