"""Document data structures for the docs engine.

This module contains the records produced by the parser and the builder:
- DocumentKind: tagged variant for component / pattern / foundation / enterprise docs
- Section and Document: one parsed source file
- ParseFailure: a per-file failure value (not an exception)
- IndexStats and Generation: one published index snapshot

Everything here is frozen. A generation is superseded by reindexing, never edited.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from functools import cached_property
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from . import markdown

if TYPE_CHECKING:
    from ..scoring.search_index import SearchIndex
    from .store import DocumentStore


class DocumentKind(StrEnum):
    """Kind of documentation file, decided by its top-level module folder."""

    COMPONENT = "component"
    PATTERN = "pattern"
    FOUNDATION = "foundation"
    ENTERPRISE = "enterprise"

    @property
    def names_from_title(self) -> bool:
        """Whether a doc of this kind documents the component named by its title."""
        match self:
            case DocumentKind.COMPONENT:
                return True
            case _:
                return False


@dataclass(frozen=True)
class Section:
    """A heading-delimited part of a document.

    Attributes:
        heading: Heading text ("" for the preamble before the first sub-heading)
        level: Heading level 1-6 (0 for the preamble)
        body: Section text without the heading line
    """

    heading: str
    level: int
    body: str

    @property
    def text(self) -> str:
        """Heading and body joined, as used for snippets and guides."""
        if self.heading:
            return f"{self.heading}\n{self.body}".strip()
        return self.body.strip()


@dataclass(frozen=True)
class ParseFailure:
    """A document that could not be parsed or categorized."""

    path: str
    reason: str


@dataclass(frozen=True)
class Document:
    """One parsed documentation file.

    Attributes:
        id: Stable identifier derived from the relative path
        path: Relative source path (POSIX separators)
        title: Display title
        kind: Document kind
        category: Classification string, never empty
        subcategory: Optional second-level classification
        component_names: Components this document documents (may be empty)
        metadata: Leading ``key: value`` block, keys and values verbatim
        sections: Body split by headings, in source order
        raw_text: Full original text
    """

    id: str
    path: str
    title: str
    kind: DocumentKind
    category: str
    subcategory: str | None
    component_names: tuple[str, ...]
    metadata: Mapping[str, str]
    sections: tuple[Section, ...]
    raw_text: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __hash__(self) -> int:
        return hash(self.id)

    def meta(self, key: str) -> str | None:
        """Case-insensitive metadata lookup."""
        wanted = key.lower()
        for name, value in self.metadata.items():
            if name.lower() == wanted:
                return value
        return None

    @property
    def file_stem(self) -> str:
        """File name without extension or numeric ``NN-`` prefix."""
        stem = PurePosixPath(self.path).stem
        head, sep, tail = stem.partition("-")
        return tail if sep and head.isdigit() and tail else stem

    @property
    def package_name(self) -> str | None:
        value = self.meta("package")
        return value.strip("`") if value else None

    @property
    def import_statement(self) -> str | None:
        value = self.meta("import")
        return value.strip("`") if value else None

    @cached_property
    def description(self) -> str | None:
        return markdown.extract_description(self.raw_text)

    @cached_property
    def see_also(self) -> tuple[str, ...]:
        return tuple(markdown.extract_see_also(self.raw_text))

    @property
    def has_props_table(self) -> bool:
        return markdown.has_props_table(self.raw_text)

    @property
    def has_code_examples(self) -> bool:
        return markdown.has_code_examples(self.raw_text)

    def summary(self) -> dict[str, Any]:
        """Compact JSON-serializable view used in listings and search results."""
        return {
            "id": self.id,
            "title": self.title,
            "kind": self.kind.value,
            "category": self.category,
            "subcategory": self.subcategory,
            "component_names": list(self.component_names),
            "package": self.package_name,
            "description": self.description,
        }


@dataclass(frozen=True)
class IndexStats:
    """Statistics of one build, reported with every successful rebuild."""

    total_files: int
    indexed_files: int
    failed_files: int
    duration_ms: float
    failures: tuple[ParseFailure, ...] = ()
    by_kind: Mapping[str, int] = field(default_factory=dict)
    by_category: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_kind", MappingProxyType(dict(self.by_kind)))
        object.__setattr__(self, "by_category", MappingProxyType(dict(self.by_category)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_files": self.total_files,
            "indexed_files": self.indexed_files,
            "failed_files": self.failed_files,
            "duration_ms": round(self.duration_ms, 2),
            "failures": [{"path": f.path, "reason": f.reason} for f in self.failures],
            "by_kind": dict(self.by_kind),
            "by_category": dict(self.by_category),
        }


@dataclass(frozen=True)
class Generation:
    """An immutable (store, index) snapshot published by the builder."""

    number: int
    store: "DocumentStore"
    index: "SearchIndex"
    stats: IndexStats
    source_root: str
    built_at: datetime

    @property
    def document_count(self) -> int:
        return len(self.store)
