"""ComparatorConfig: options for RelationComparator.

ComparatorConfig is a frozen (immutable) dataclass.  Options are changed with
builder-style ``with_*`` methods that return a new config.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = ["ComparatorConfig"]


@dataclass(frozen=True, slots=True)
class ComparatorConfig:
    """Immutable configuration for RelationComparator.

    Attributes:
        intersection_left: When True, a matched declaration's per-file
            breakdown keeps only files holding at least one baseline-only
            reference; files whose differences are all evaluated-only are
            dropped.  When False (default), every file with a difference on
            either side is kept.  The flattened ``left``/``right`` lists of a
            Comparison are not affected.
    """

    intersection_left: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.intersection_left, bool):
            msg = (
                "intersection_left must be a bool, "
                f"got {type(self.intersection_left).__name__}"
            )
            raise TypeError(msg)

    def with_intersection_left(self, intersection_left: bool = True) -> ComparatorConfig:
        """Return a copy with ``intersection_left`` set."""
        return replace(self, intersection_left=intersection_left)
