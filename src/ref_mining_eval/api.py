"""Public API functions for ref-mining-eval.

``compare`` creates a fresh RelationComparator per call, so no state is
shared between calls.
"""

from __future__ import annotations

from ref_mining_eval.algorithm.config import ComparatorConfig
from ref_mining_eval.comparator import RelationComparator
from ref_mining_eval.comparisons import Comparisons
from ref_mining_eval.relations import Relations

__all__ = ["compare"]


def compare(
    baseline: Relations,
    evaluated: Relations,
    config: ComparatorConfig | None = None,
) -> Comparisons:
    """Compare a baseline mining run with an evaluated one.

    Args:
        baseline:  Relations of the reference run.
        evaluated: Relations of the candidate run.
        config:    Comparator options.  Defaults to ``ComparatorConfig()``.

    Returns:
        A ``Comparisons`` holding matched declarations with their reference
        diff, and the declarations found by only one of the runs.

    Raises:
        DuplicateDeclarationError: A run holds two relations for the same
            declaration.
    """
    return RelationComparator(config=config).compare(baseline, evaluated)
