"""Knowledge-base builders for Atom Logic."""

from .taxonomy import Taxonomy, animal_taxonomy

__all__ = ["Taxonomy", "animal_taxonomy"]
