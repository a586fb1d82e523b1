#!/usr/bin/env python3
"""
Probabilistic Inference Demo

This script:
    1. Builds an AtomSpace with a small animal taxonomy
    2. Registers the inheritance transitivity rule
    3. Runs forward chaining
    4. Queries concept nodes above the confidence floor
    5. Shows the truth-value algebra
    6. Prints AtomSpace statistics
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import argparse
import logging

import torch

from atom_logic.core import (
    AtomSpace,
    AtomType,
    InheritanceTransitivityRule,
    ModusPonensRule,
    Pattern,
    TruthValue,
    UnifiedRuleEngine,
)
from atom_logic.data import animal_taxonomy
from atom_logic.analysis import compute_stats, summary


def parse_args():
    parser = argparse.ArgumentParser(description="Atom Logic inference demo")
    parser.add_argument("--capacity", type=int, default=1000)
    parser.add_argument("--embedding_dim", type=int, default=64)
    parser.add_argument("--max_iterations", type=int, default=10)
    parser.add_argument("--min_confidence", type=float, default=0.5)
    parser.add_argument("--modus_ponens", action="store_true",
                        help="Also register the modus ponens rule")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for embedding initialization")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.seed is not None:
        torch.manual_seed(args.seed)

    print("=" * 60)
    print(" Atom Logic Inference Demo")
    print("=" * 60)
    print()

    print("1. Initializing AtomSpace...")
    atomspace = AtomSpace(capacity=args.capacity, embedding_dim=args.embedding_dim)

    print("2. Creating concepts and inheritance links...")
    taxonomy = animal_taxonomy(atomspace)
    print(f"   Concepts: {', '.join(taxonomy.concepts)}")
    print("   Links: Mammal->Animal, Dog->Mammal, Dog->Canine")

    print("3. Initializing Unified Rule Engine...")
    engine = UnifiedRuleEngine(
        atomspace,
        max_iterations=args.max_iterations,
        min_confidence=args.min_confidence,
    )
    engine.add_rule(InheritanceTransitivityRule(confidence_boost=0.1))
    if args.modus_ponens:
        engine.add_rule(ModusPonensRule())
    for rule in engine.rules:
        print(f"   Rule: {rule.name} (confidence boost {rule.confidence_boost:.2f})")

    print("4. Forward chaining...")
    inferences = engine.forward_chain()
    print(f"   Made {inferences} inferences")

    print("5. Querying concept nodes...")
    results = atomspace.query(Pattern(AtomType.CONCEPT_NODE))
    print(f"   Found {len(results)} concept nodes with confidence >= 0.5:")
    for atom in results:
        print(
            f"     - {atom.name or 'Anonymous'} "
            f"(strength: {atom.tv.strength:.2f}, confidence: {atom.tv.confidence:.2f})"
        )

    print("6. Truth value operations...")
    tv1 = TruthValue(0.8, 0.9, 5.0)
    tv2 = TruthValue(0.7, 0.8, 3.0)
    print(f"   TV1: {tv1}")
    print(f"   TV2: {tv2}")
    print(f"   AND: {tv1 & tv2}")
    print(f"   OR:  {tv1 | tv2}")
    print(f"   NOT: {~tv1}")
    print(f"   P(TV1): {tv1.to_probability():.4f}")
    print()

    print(summary(compute_stats(atomspace)))

    engine.free()
    atomspace.free()


if __name__ == "__main__":
    main()
