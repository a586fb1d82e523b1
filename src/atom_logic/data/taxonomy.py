"""
Taxonomy Builders for Atom Logic

Includes:
    - Taxonomy: populate an AtomSpace from named edges
    - animal_taxonomy: small Animal/Mammal/Dog/Canine example

Edges are given as (child, parent) names and become binary links
child -> parent. Nodes are created on first mention and reused afterwards,
so the resulting store has one ConceptNode per distinct name.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..core.atoms import Atom, AtomType
from ..core.atomspace import AtomSpace
from ..core.truth_value import TruthValue

Edge = Tuple[str, str]


class Taxonomy:
    """
    Builder that writes named concepts and links into an AtomSpace.

    Creation stops silently once the store is full; check `complete`
    afterwards.
    """

    def __init__(self, atomspace: AtomSpace, node_type: AtomType = AtomType.CONCEPT_NODE):
        self.atomspace = atomspace
        self.node_type = node_type
        self.concepts: Dict[str, Atom] = {}
        self.links: List[Atom] = []
        self.complete = True

    def concept(self, name: str, tv: Optional[TruthValue] = None) -> Optional[Atom]:
        """Return the node named `name`, creating it on first use."""
        if name not in self.concepts:
            atom = self.atomspace.create_node(self.node_type, name, tv)
            if atom is None:
                self.complete = False
                return None
            self.concepts[name] = atom
        return self.concepts[name]

    def relate(
        self,
        child: str,
        parent: str,
        link_type: AtomType = AtomType.INHERITANCE_LINK,
        tv: Optional[TruthValue] = None,
    ) -> Optional[Atom]:
        """Add a binary link child -> parent."""
        source = self.concept(child)
        target = self.concept(parent)
        if source is None or target is None:
            return None

        link = self.atomspace.create_link(link_type, [source, target], tv)
        if link is None:
            self.complete = False
            return None
        self.links.append(link)
        return link

    def add_edges(
        self,
        edges: Iterable[Edge],
        link_type: AtomType = AtomType.INHERITANCE_LINK,
        tv: Optional[TruthValue] = None,
    ) -> "Taxonomy":
        """Add many links of the same type and truth value."""
        for child, parent in edges:
            self.relate(child, parent, link_type, tv)
        return self

    def __repr__(self) -> str:
        return (
            f"Taxonomy(\n"
            f"  concepts={len(self.concepts)},\n"
            f"  links={len(self.links)},\n"
            f"  complete={self.complete}\n"
            f")"
        )


def animal_taxonomy(atomspace: AtomSpace) -> Taxonomy:
    """
    Build the small animal example.

    Concepts:
        Animal, Mammal, Dog  <0.9, 0.8, 10>
        Canine               <0.7, 0.6, 5>

    Links (in creation order):
        Mammal -> Animal  <0.9, 0.8, 10>
        Dog -> Mammal     <0.9, 0.8, 10>
        Dog -> Canine     <0.7, 0.6, 5>
    """
    tv_high = TruthValue(0.9, 0.8, 10.0)
    tv_medium = TruthValue(0.7, 0.6, 5.0)

    taxonomy = Taxonomy(atomspace)
    for name in ("Animal", "Mammal", "Dog"):
        taxonomy.concept(name, tv_high)
    taxonomy.concept("Canine", tv_medium)

    taxonomy.add_edges([("Mammal", "Animal"), ("Dog", "Mammal")], tv=tv_high)
    taxonomy.relate("Dog", "Canine", tv=tv_medium)
    return taxonomy
