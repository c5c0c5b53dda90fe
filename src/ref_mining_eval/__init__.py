"""ref-mining-eval - compare two reference-mining runs declaration by declaration."""

from __future__ import annotations

from ref_mining_eval.algorithm.config import ComparatorConfig
from ref_mining_eval.api import compare
from ref_mining_eval.comparator import RelationComparator
from ref_mining_eval.comparisons import Comparison, Comparisons, FileBreakdown, Versus
from ref_mining_eval.errors import DuplicateDeclarationError, RefMiningEvalError
from ref_mining_eval.relations import Position, Range, Relation, Relations

__version__: str = "0.1.0"
__all__: list[str] = [
    "Comparison",
    "ComparatorConfig",
    "Comparisons",
    "DuplicateDeclarationError",
    "FileBreakdown",
    "Position",
    "Range",
    "RefMiningEvalError",
    "Relation",
    "RelationComparator",
    "Relations",
    "Versus",
    "compare",
]
