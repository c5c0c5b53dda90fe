"""RelationComparator: merge-join of a baseline and an evaluated mining run.

Architecture:
- Keying pass: every baseline relation is normalized (``Relation.normalized``)
  and stored under its declaration key as LEFT_ONLY.
- Merge pass: every evaluated relation is normalized and looked up.  A new key
  becomes RIGHT_ONLY; a LEFT_ONLY key is promoted to MATCHED, moving the
  baseline record out of the slot.  Any other hit is a duplicate key.
- Finalization walks the keys in order.  LEFT_ONLY/RIGHT_ONLY relations are
  emitted unchanged; MATCHED pairs are expanded into a ``Comparison`` through
  ``match_refs`` and ``group_by_file``.

Key state transitions::

    unseen -> LEFT_ONLY -> MATCHED
    unseen -> RIGHT_ONLY

MATCHED is terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import NoReturn

from ref_mining_eval.algorithm.config import ComparatorConfig
from ref_mining_eval.algorithm.matcher import group_by_file, match_refs
from ref_mining_eval.comparisons import Comparison, Comparisons, Versus
from ref_mining_eval.errors import DuplicateDeclarationError
from ref_mining_eval.relations import Position, Relation, Relations

__all__ = ["EntryState", "RelationComparator"]

logger = logging.getLogger(__name__)


class EntryState(StrEnum):
    """Comparator-side state of one declaration key."""

    LEFT_ONLY = auto()
    RIGHT_ONLY = auto()
    MATCHED = auto()


@dataclass(slots=True)
class _Entry:
    state: EntryState
    baseline: Relation | None = None
    evaluated: Relation | None = None


class RelationComparator:
    """Compare the relations of a baseline run with those of an evaluated run.

    Example::

        from ref_mining_eval.comparator import RelationComparator

        cmp = RelationComparator().with_intersection_left(True)
        result = cmp.compare(baseline_relations, evaluated_relations)
        for comparison in result.exact:
            print(comparison.decl, len(comparison.exact), len(comparison.left))
    """

    def __init__(self, config: ComparatorConfig | None = None) -> None:
        self._config: ComparatorConfig = (
            config if config is not None else ComparatorConfig()
        )

    @property
    def config(self) -> ComparatorConfig:
        return self._config

    def with_intersection_left(self, intersection_left: bool = True) -> RelationComparator:
        """Return a new comparator with ``intersection_left`` set."""
        return RelationComparator(self._config.with_intersection_left(intersection_left))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, baseline: Relations, evaluated: Relations) -> Comparisons:
        """Compare two runs.

        Neither input is modified.  Calling this twice with the same inputs
        yields equal results.

        Args:
            baseline:  Relations of the reference run ("left").
            evaluated: Relations of the candidate run ("right").

        Returns:
            A ``Comparisons`` with empty run names and its three buckets
            ordered by declaration key.

        Raises:
            DuplicateDeclarationError: Two relations of the same run share a
                normalized declaration key.
        """
        entries = self._merge(baseline, evaluated)

        exact: list[Comparison] = []
        left: list[Relation] = []
        right: list[Relation] = []

        for key in sorted(entries):
            entry = entries[key]
            if entry.state is EntryState.LEFT_ONLY:
                assert entry.baseline is not None
                left.append(entry.baseline)
            elif entry.state is EntryState.RIGHT_ONLY:
                assert entry.evaluated is not None
                right.append(entry.evaluated)
            else:
                assert entry.baseline is not None and entry.evaluated is not None
                exact.append(self._expand(key, entry.baseline, entry.evaluated))

        logger.debug(
            "Compared %d baseline and %d evaluated relations: "
            "%d matched, %d baseline-only, %d evaluated-only",
            len(baseline),
            len(evaluated),
            len(exact),
            len(left),
            len(right),
        )
        return Comparisons(exact=exact, left=left, right=right)

    # ------------------------------------------------------------------
    # Keying and merge passes
    # ------------------------------------------------------------------

    def _merge(self, baseline: Relations, evaluated: Relations) -> dict[Position, _Entry]:
        entries: dict[Position, _Entry] = {}

        for raw in baseline:
            relation = raw.normalized()
            if relation.decl in entries:
                _duplicate("baseline", relation.decl)
            entries[relation.decl] = _Entry(EntryState.LEFT_ONLY, baseline=relation)

        for raw in evaluated:
            relation = raw.normalized()
            entry = entries.get(relation.decl)
            if entry is None:
                entries[relation.decl] = _Entry(EntryState.RIGHT_ONLY, evaluated=relation)
            elif entry.state is EntryState.LEFT_ONLY:
                entry.state = EntryState.MATCHED
                entry.evaluated = relation
            else:
                _duplicate("evaluated", relation.decl)

        return entries

    # ------------------------------------------------------------------
    # Matched-declaration expansion
    # ------------------------------------------------------------------

    def _expand(self, key: Position, baseline: Relation, evaluated: Relation) -> Comparison:
        matched = match_refs(baseline.refs, evaluated.refs)
        per_file = group_by_file(
            matched.left,
            matched.right,
            intersection_left=self._config.intersection_left,
        )
        return Comparison(
            decl=key,
            duration=Versus.pair(baseline.duration, evaluated.duration, 0),
            search=Versus.pair(baseline.search, evaluated.search, ""),
            exact=matched.exact,
            per_file=per_file,
            left=matched.left,
            right=matched.right,
            left_contained=[],
            right_contained=[],
        )


def _duplicate(run: str, key: Position) -> NoReturn:
    logger.error("Duplicate declaration %s in %s run", key, run)
    raise DuplicateDeclarationError(run, key)
