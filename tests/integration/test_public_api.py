"""Integration tests for the public API surface.

All imports are from the top-level ``ref_mining_eval`` package - never from
internal submodules.  Checks the properties every comparison must satisfy on
a set of realistic runs: partition completeness, normalization idempotence,
matching counts, per-file filter monotonicity and baseline/evaluated symmetry.
"""

from __future__ import annotations

import pytest

from ref_mining_eval import (
    ComparatorConfig,
    Comparisons,
    Position,
    Relation,
    Relations,
    Versus,
    compare,
)


def p(file: str, offset: int, length: int, typ: str | None = None) -> Position:
    return Position(file, offset, length, typ=typ)


SPOON_BASELINE: Relations = [
    Relation(
        decl=p("src/Factory.java", 300, 20, typ="method"),
        duration=120,
        refs=[
            p("src/Factory.java", 10, 7),
            p("src/Launcher.java", 55, 7),
            p("src/Launcher.java", 90, 7),
            p("src/Launcher.java", 90, 7),
        ],
    ),
    Relation(
        decl=p("src/Launcher.java", 0, 8, typ="type"),
        refs=[p("src/Main.java", 4, 8), p("test/LauncherTest.java", 12, 8)],
    ),
    Relation(
        decl=p("src/Util.java", 40, 3),
        search="local",
        refs=[p("src/Util.java", 60, 3)],
    ),
]

SPOON_EVALUATED: Relations = [
    Relation(
        decl=p("src/Factory.java", 300, 20),
        search="method",
        duration=80,
        refs=[
            p("src/Launcher.java", 55, 7, typ="method"),
            p("src/Factory.java", 10, 7),
            p("src/Model.java", 1, 7),
        ],
    ),
    Relation(
        decl=p("src/Launcher.java", 0, 8, typ="type"),
        refs=[p("src/Main.java", 4, 8), p("test/LauncherTest.java", 12, 8)],
    ),
    Relation(
        decl=p("src/Model.java", 0, 5, typ="type"),
        refs=[p("src/Factory.java", 2, 5)],
    ),
]

CASES = [
    pytest.param(SPOON_BASELINE, SPOON_EVALUATED, id="spoon"),
    pytest.param(SPOON_BASELINE, SPOON_BASELINE, id="self"),
    pytest.param(SPOON_BASELINE, [], id="evaluated-empty"),
    pytest.param([], SPOON_EVALUATED, id="baseline-empty"),
]


def _keys(result: Comparisons) -> tuple[set[Position], set[Position], set[Position]]:
    return (
        {c.decl for c in result.exact},
        {r.decl for r in result.left},
        {r.decl for r in result.right},
    )


def _renormalize(relations: Relations) -> Relations:
    """Move each search label back into the declaration tag."""
    out = []
    for relation in relations:
        normalized = relation.normalized()
        out.append(
            Relation(
                decl=Position(
                    normalized.decl.file,
                    normalized.decl.offset,
                    normalized.decl.len,
                    typ=normalized.search,
                ),
                duration=normalized.duration,
                refs=normalized.refs,
            )
        )
    return out


class TestPartitionCompleteness:
    @pytest.mark.parametrize(("baseline", "evaluated"), CASES)
    def test_every_key_in_exactly_one_bucket(
        self, baseline: Relations, evaluated: Relations
    ) -> None:
        exact, left, right = _keys(compare(baseline, evaluated))
        assert not exact & left
        assert not exact & right
        assert not left & right
        all_keys = {r.key for r in baseline} | {r.key for r in evaluated}
        assert exact | left | right == all_keys

    def test_spoon_partition(self) -> None:
        exact, left, right = _keys(compare(SPOON_BASELINE, SPOON_EVALUATED))
        assert exact == {p("src/Factory.java", 300, 20), p("src/Launcher.java", 0, 8)}
        assert left == {p("src/Util.java", 40, 3)}
        assert right == {p("src/Model.java", 0, 5)}


class TestNormalizationIdempotence:
    @pytest.mark.parametrize(("baseline", "evaluated"), CASES)
    def test_same_partition_after_round_trip(
        self, baseline: Relations, evaluated: Relations
    ) -> None:
        direct = compare(baseline, evaluated)
        round_tripped = compare(_renormalize(baseline), _renormalize(evaluated))
        assert _keys(direct) == _keys(round_tripped)
        assert direct == round_tripped


class TestMatchingCounts:
    @pytest.mark.parametrize(("baseline", "evaluated"), CASES)
    def test_counts_add_up(self, baseline: Relations, evaluated: Relations) -> None:
        by_key_b = {r.key: r for r in baseline}
        by_key_e = {r.key: r for r in evaluated}
        for comparison in compare(baseline, evaluated).exact:
            distinct_b = set(by_key_b[comparison.decl].refs)
            distinct_e = set(by_key_e[comparison.decl].refs)
            assert len(comparison.exact) + len(comparison.left) == len(distinct_b)
            assert len(comparison.exact) + len(comparison.right) == len(distinct_e)

    def test_spoon_factory_detail(self) -> None:
        comparison = compare(SPOON_BASELINE, SPOON_EVALUATED).exact[0]
        assert comparison.decl == p("src/Factory.java", 300, 20)
        assert sorted(comparison.exact) == [
            p("src/Factory.java", 10, 7),
            p("src/Launcher.java", 55, 7),
        ]
        assert comparison.left == [p("src/Launcher.java", 90, 7)]
        assert comparison.right == [p("src/Model.java", 1, 7)]
        assert comparison.duration == Versus(baseline=120, evaluated=80)
        assert comparison.search == Versus(baseline="method", evaluated="method")


class TestPerFileMonotonicity:
    @pytest.mark.parametrize(("baseline", "evaluated"), CASES)
    def test_intersection_left_is_subset(
        self, baseline: Relations, evaluated: Relations
    ) -> None:
        filtered = compare(baseline, evaluated, ComparatorConfig(intersection_left=True))
        unfiltered = compare(baseline, evaluated)
        for narrow, wide in zip(filtered.exact, unfiltered.exact, strict=True):
            assert all(b.left for b in narrow.per_file)
            assert {b.file for b in narrow.per_file} <= {b.file for b in wide.per_file}


class TestSymmetry:
    @pytest.mark.parametrize(("baseline", "evaluated"), CASES)
    def test_swapping_runs_swaps_sides(
        self, baseline: Relations, evaluated: Relations
    ) -> None:
        forward = compare(baseline, evaluated)
        backward = compare(evaluated, baseline)

        f_exact, f_left, f_right = _keys(forward)
        b_exact, b_left, b_right = _keys(backward)
        assert f_exact == b_exact
        assert f_left == b_right
        assert f_right == b_left

        for fc, bc in zip(forward.exact, backward.exact, strict=True):
            assert fc.decl == bc.decl
            assert set(fc.exact) == set(bc.exact)
            assert set(fc.left) == set(bc.right)
            assert set(fc.right) == set(bc.left)
            if fc.duration is None:
                assert bc.duration is None
            else:
                assert bc.duration == Versus(fc.duration.evaluated, fc.duration.baseline)
            if fc.search is None:
                assert bc.search is None
            else:
                assert bc.search == Versus(fc.search.evaluated, fc.search.baseline)
