"""Result types returned by RelationComparator.compare().

``Comparisons`` is the whole diff between a baseline and an evaluated run;
``Comparison`` is the detail for one declaration found by both runs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

from ref_mining_eval.relations import Position, Range, Relation

__all__ = ["Comparison", "Comparisons", "FileBreakdown", "Versus"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Versus(Generic[T]):
    """A value reported by each run for the same declaration."""

    baseline: T
    evaluated: T

    @classmethod
    def pair(cls, baseline: T | None, evaluated: T | None, default: T) -> Versus[T] | None:
        """Pair two optional values.

        Returns None only when neither side reported a value.  When exactly one
        side did, the other is replaced by *default*.
        """
        if baseline is None and evaluated is None:
            return None
        return cls(
            baseline=default if baseline is None else baseline,
            evaluated=default if evaluated is None else evaluated,
        )


@dataclass(frozen=True, slots=True)
class FileBreakdown:
    """Unmatched references of one declaration inside one file.

    Attributes:
        file:  The source file shared by every range below.
        left:  Ranges only the baseline found.
        right: Ranges only the evaluated run found.
    """

    file: str
    left: list[Range] = field(default_factory=list)
    right: list[Range] = field(default_factory=list)

    def __iter__(self) -> Iterator[object]:
        return iter((self.file, self.left, self.right))


@dataclass(frozen=True, slots=True)
class Comparison:
    """Detail for one declaration present in both runs.

    Attributes:
        decl:            Shared declaration key (no type tag).
        duration:        Durations of both runs, None when neither measured one.
        search:          Search labels of both runs, None when neither had one.
        exact:           References found identically by both runs.
        per_file:        Unmatched references grouped by file, sorted by file.
        left:            Every baseline-only reference.
        right:           Every evaluated-only reference.
        left_contained:  Reserved for containment matches.  Always empty.
        right_contained: Reserved for containment matches.  Always empty.
    """

    decl: Position
    duration: Versus[int] | None = None
    search: Versus[str] | None = None
    exact: list[Position] = field(default_factory=list)
    per_file: list[FileBreakdown] = field(default_factory=list)
    left: list[Position] = field(default_factory=list)
    right: list[Position] = field(default_factory=list)
    left_contained: list[Position] = field(default_factory=list)
    right_contained: list[Position] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Comparisons:
    """Diff between a baseline ("left") and an evaluated ("right") run.

    All three buckets are ordered by declaration key.  The comparator leaves
    the run names empty; callers set them with ``named()``.
    """

    left_name: str = ""
    right_name: str = ""
    exact: list[Comparison] = field(default_factory=list)
    left: list[Relation] = field(default_factory=list)
    right: list[Relation] = field(default_factory=list)

    def named(self, left_name: str, right_name: str) -> Comparisons:
        return replace(self, left_name=left_name, right_name=right_name)
