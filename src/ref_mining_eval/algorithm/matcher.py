"""Reference matching for one declaration found by both runs.

The reference lists are treated as sets of positions (file, offset, len):
each side is deduplicated first, then every evaluated reference consumes at
most one equal baseline reference.  Removal from the baseline working list is
unstable (swap with the last element); only "remove one equal occurrence"
matters, not which one or where.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ref_mining_eval.comparisons import FileBreakdown
from ref_mining_eval.relations import Position, Range

__all__ = ["RefMatch", "dedup_refs", "group_by_file", "match_refs"]


@dataclass(frozen=True, slots=True)
class RefMatch:
    """Outcome of matching two reference lists.

    Attributes:
        exact: References present in both lists (in evaluated order).
        left:  Baseline references with no evaluated counterpart.
        right: Evaluated references with no baseline counterpart.
    """

    exact: list[Position]
    left: list[Position]
    right: list[Position]


def dedup_refs(refs: Iterable[Position]) -> list[Position]:
    """Sort *refs* by position and drop adjacent duplicates.

    Duplicates are decided on (file, offset, len); the first occurrence in
    sorted order is kept, with whatever type tag it carries.
    """
    result: list[Position] = []
    for ref in sorted(refs):
        if not result or result[-1] != ref:
            result.append(ref)
    return result


def match_refs(baseline: Iterable[Position], evaluated: Iterable[Position]) -> RefMatch:
    """Match deduplicated baseline and evaluated references in a single pass.

    Args:
        baseline:  References found by the baseline run.
        evaluated: References found by the evaluated run.

    Returns:
        A ``RefMatch`` where ``len(exact) + len(left)`` equals the number of
        distinct baseline references and ``len(exact) + len(right)`` the
        number of distinct evaluated references.
    """
    remaining = dedup_refs(baseline)
    exact: list[Position] = []
    not_matched: list[Position] = []

    for ref in dedup_refs(evaluated):
        try:
            i = remaining.index(ref)
        except ValueError:
            not_matched.append(ref)
            continue
        exact.append(ref)
        # swap-remove
        remaining[i] = remaining[-1]
        remaining.pop()

    return RefMatch(exact=exact, left=remaining, right=not_matched)


def group_by_file(
    left: Iterable[Position],
    right: Iterable[Position],
    intersection_left: bool = False,
) -> list[FileBreakdown]:
    """Bucket unmatched references by file, reduced to ranges.

    Args:
        left:              Baseline-only references.
        right:             Evaluated-only references.
        intersection_left: Keep only files with at least one baseline-only
                           reference.

    Returns:
        One ``FileBreakdown`` per retained file, sorted by file name.
    """
    buckets: dict[str, tuple[list[Range], list[Range]]] = {}
    for ref in right:
        buckets.setdefault(ref.file, ([], []))[1].append(ref.to_range())
    for ref in left:
        buckets.setdefault(ref.file, ([], []))[0].append(ref.to_range())

    return [
        FileBreakdown(file=file, left=file_left, right=file_right)
        for file, (file_left, file_right) in sorted(buckets.items())
        if file_left or not intersection_left
    ]
