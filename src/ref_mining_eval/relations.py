"""Value types for one reference-mining run.

A run maps declarations to the source positions that reference them.  The
types here are the input side of the comparison:

- ``Position``: a span of source text (file, byte offset, byte length) with an
  optional symbol-kind tag that never takes part in identity.
- ``Range``: a Position without its file, used once results are grouped by file.
- ``Relation``: one declaration with its reference list.
- ``RelationsWithPerfs``: a whole extraction run, split per module, with the
  construction/search cost measurements the miner recorded.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import PurePath
from typing import Generic, TypeVar

__all__ = [
    "AstPosition",
    "Info",
    "PerModule",
    "Perfs",
    "Position",
    "Range",
    "Relation",
    "Relations",
    "RelationsWithPerfs",
]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AstPosition:
    """Position as understood by the AST toolkit (file path + offset + length)."""

    file: PurePath
    offset: int
    len: int


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A span of source text.

    Attributes:
        file:   Path of the source file, as reported by the miner.
        offset: Byte offset of the span start.
        len:    Byte length of the span.
        typ:    Free-form symbol-kind tag ("local", "type", "method", ...).
                Metadata only: excluded from equality, hashing and ordering,
                so two positions at the same file/offset/len are the same
                position whatever their tags.
    """

    file: str
    offset: int
    len: int
    typ: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.file}:({self.offset},{self.len})"

    def to_range(self) -> Range:
        """Drop the file, keeping offset and length."""
        return Range(offset=self.offset, len=self.len)

    def to_ast_position(self) -> AstPosition:
        return AstPosition(file=PurePath(self.file), offset=self.offset, len=self.len)


@dataclass(frozen=True, slots=True, order=True)
class Range:
    """A Position stripped of its file."""

    offset: int
    len: int

    def __str__(self) -> str:
        return f"({self.offset},{self.len})"

    def with_file(self, file: str) -> Position:
        """Rebuild a Position in *file*.  The type tag is always absent."""
        return Position(file=file, offset=self.offset, len=self.len)


@dataclass(frozen=True, slots=True)
class Relation:
    """One declaration and every reference found for it in a single run.

    Attributes:
        decl:     Position of the declaration.
        duration: Time spent resolving the references (opaque units), if measured.
        search:   Kind of search performed, e.g. "local", "type", "method",
                  "static method", "attribute", "static attribute".
        refs:     Reference positions.  Logically a set; duplicates are
                  tolerated and collapsed at comparison time.
    """

    decl: Position
    duration: int | None = None
    search: str | None = None
    refs: list[Position] = field(default_factory=list)

    @property
    def key(self) -> Position:
        """Declaration identity used for matching: ``decl`` without its tag."""
        return replace(self.decl, typ=None)

    def normalized(self) -> Relation:
        """Return a copy whose declaration key carries no type tag.

        A missing ``search`` label is taken from ``decl.typ``; an existing one
        is kept and ``decl.typ`` is simply dropped.  ``self`` is untouched.
        """
        search = self.search if self.search is not None else self.decl.typ
        return replace(self, decl=self.key, search=search)


Relations = list[Relation]


@dataclass(frozen=True, slots=True)
class Perfs:
    """Cost of one mining phase.

    Attributes:
        time:   Wall time in nanoseconds.
        memory: Memory footprint in bytes.
    """

    time: int
    memory: int


@dataclass(frozen=True, slots=True)
class Info:
    repo_name: str
    commit: str
    no: int | None = None
    batch_id: str | None = None


@dataclass(frozen=True, slots=True)
class PerModule(Generic[T]):
    """Content produced for one module (build unit) of the mined repository."""

    module: str
    content: T


@dataclass(frozen=True, slots=True)
class RelationsWithPerfs:
    """Full output of one mining run.

    ``relations`` is None when the search phase did not run (construction
    only); ``search_perfs`` is then None as well.
    """

    construction_perfs: Perfs
    relations: list[PerModule[Relations]] | None = None
    search_perfs: Perfs | None = None
    info: Info | None = None

    def all_relations(self) -> Relations:
        """Concatenate the relations of every module, in module order."""
        if self.relations is None:
            return []
        return [relation for module in self.relations for relation in module.content]
