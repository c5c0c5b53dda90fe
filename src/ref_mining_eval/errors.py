"""Exceptions raised by ref-mining-eval."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ref_mining_eval.relations import Position

__all__ = ["DuplicateDeclarationError", "RefMiningEvalError"]


class RefMiningEvalError(Exception):
    """Base class for ref-mining-eval errors."""


class DuplicateDeclarationError(RefMiningEvalError, ValueError):
    """Two relations of the same run normalize to the same declaration key.

    This is a producer bug: declarations must be deduplicated before they are
    compared.  No partial result is produced.

    Attributes:
        run: Which input held the duplicate, ``"baseline"`` or ``"evaluated"``.
        key: The duplicated declaration key.
    """

    def __init__(self, run: str, key: Position) -> None:
        super().__init__(f"duplicate declaration {key} in {run} run")
        self.run = run
        self.key = key
