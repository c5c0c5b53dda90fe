"""pytest plugin for ref-mining-eval.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from ref_mining_eval import ComparatorConfig, Comparisons, Relations, compare


def _describe_missing(result: Comparisons) -> list[str]:
    lines = [f"  missing declaration: {relation.decl}" for relation in result.left]
    for comparison in result.exact:
        if not comparison.left:
            continue
        lines.append(f"  {comparison.decl}: {len(comparison.left)} reference(s) missed")
        for breakdown in comparison.per_file:
            if breakdown.left:
                ranges = ", ".join(str(r) for r in breakdown.left)
                lines.append(f"    {breakdown.file}: {ranges}")
    return lines


@pytest.fixture(scope="session")
def assert_refs_found() -> Any:
    """Fixture that returns a callable asserting an evaluated run covers a baseline.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh RelationComparator per call).

    Usage in tests::

        def test_miner_finds_baseline_refs(assert_refs_found):
            result = assert_refs_found(baseline_relations, mined_relations)
            assert not result.right  # optionally inspect the rest

    Returns:
        A callable ``_assert(baseline, evaluated, config=None) -> Comparisons``
        that raises ``AssertionError`` when a baseline declaration is absent
        from the evaluated run or a matched declaration misses baseline
        references.  Extra evaluated declarations and references are allowed.
    """

    def _assert(
        baseline: Relations,
        evaluated: Relations,
        config: ComparatorConfig | None = None,
    ) -> Comparisons:
        """Assert that *evaluated* found everything *baseline* found.

        Raises:
            AssertionError: With one line per missing declaration and one
                line per file of missed reference ranges.
        """
        result = compare(baseline, evaluated, config=config)
        missing = _describe_missing(result)
        if missing:
            raise AssertionError(
                "evaluated run misses baseline references:\n" + "\n".join(missing)
            )
        return result

    return _assert
