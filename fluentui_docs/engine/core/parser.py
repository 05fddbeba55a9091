"""Document parser: one raw markdown file -> ``Document`` or ``ParseFailure``.

Parsing rules:
- Title: first ``#`` heading, else first ``##``/``###`` heading, else the file name
- Metadata: run of ``Key: value`` or ``> **Key**: value`` lines right after the title
- Component names: ``Components:`` metadata entry, else the title for component docs
- Sections: body split on headings outside fenced code blocks, in source order
- Kind/category/subcategory: from the caller-supplied mapping

The parser is pure: it never touches the filesystem.
"""

import re
from collections.abc import Callable
from pathlib import PurePosixPath

from .document import Document, DocumentKind, ParseFailure, Section
from .markdown import (
    CodeBlock,
    HEADING_PATTERN,
    extract_code_blocks,
    extract_description,
    extract_prop_tables,
    extract_props_section,
    extract_see_also,
    iter_outside_fences,
)

# (relative path) -> (kind, category, subcategory), or None when unmapped
CategoryMapping = Callable[[str], tuple[DocumentKind, str, str | None] | None]

NUMERIC_PREFIX_PATTERN = re.compile(r"^\d+-")

# "> **Package**: `@fluentui/react-button`"
BLOCKQUOTE_META_PATTERN = re.compile(r"^>\s*\*\*(?P<key>[^*]+?)\*\*\s*:\s*(?P<value>.*)$")
# "Package: @fluentui/react-button"
PLAIN_META_PATTERN = re.compile(r"^(?P<key>[A-Za-z][\w \-]{0,30}?)\s*:\s+(?P<value>\S.*)$")

COMPONENT_META_KEYS = ("components", "component")


def strip_numeric_prefix(segment: str) -> str:
    """``"01-foundation"`` -> ``"foundation"``; other names are unchanged."""
    return NUMERIC_PREFIX_PATTERN.sub("", segment)


def build_document_id(path: str) -> str:
    """Derive a stable id: ``02-components/01-forms/checkbox.md`` -> ``components/forms/checkbox``."""
    posix = PurePosixPath(path.replace("\\", "/"))
    segments = list(posix.parent.parts) + [posix.stem]
    return "/".join(strip_numeric_prefix(s) for s in segments if s not in ("", "."))


def title_from_filename(path: str) -> str:
    """``"03-toggle-button.md"`` -> ``"Toggle Button"``."""
    stem = strip_numeric_prefix(PurePosixPath(path).stem)
    words = re.split(r"[-_\s]+", stem)
    return " ".join(w[:1].upper() + w[1:] for w in words if w) or stem


def _match_metadata(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    match = BLOCKQUOTE_META_PATTERN.match(stripped) or PLAIN_META_PATTERN.match(stripped)
    if not match:
        return None
    return match.group("key").strip(), match.group("value").strip()


def _find_title(lines: list[str]) -> tuple[int | None, str | None]:
    """Return ``(line index, title)`` of the title heading, if any."""
    fallback: tuple[int, str] | None = None
    for index, line, in_fence in iter_outside_fences(lines):
        if in_fence:
            continue
        match = HEADING_PATTERN.match(line)
        if not match:
            continue
        level = len(match.group(1))
        if level == 1:
            return index, match.group(2).strip()
        if fallback is None and level <= 3:
            fallback = (index, match.group(2).strip())
    if fallback:
        return fallback
    return None, None


def _read_metadata(lines: list[str], start: int) -> tuple[dict[str, str], set[int]]:
    """Collect the metadata block starting at ``start``.

    Blank lines (and empty ``>`` lines) inside the block are allowed. The
    block ends at the first other line.
    """
    metadata: dict[str, str] = {}
    consumed: set[int] = set()
    pending_blank: list[int] = []

    for index in range(start, len(lines)):
        stripped = lines[index].strip()
        if not stripped or stripped == ">":
            pending_blank.append(index)
            continue
        entry = _match_metadata(stripped)
        if entry is None:
            break
        key, value = entry
        metadata.setdefault(key, value)
        consumed.update(pending_blank)
        pending_blank.clear()
        consumed.add(index)

    return metadata, consumed


def _split_sections(lines: list[str], skip: set[int]) -> tuple[Section, ...]:
    sections: list[Section] = []
    heading, level = "", 0
    body: list[str] = []

    def flush() -> None:
        text = "\n".join(body).strip("\n")
        if heading or text.strip():
            sections.append(Section(heading=heading, level=level, body=text))

    for index, line, in_fence in iter_outside_fences(lines):
        if index in skip:
            continue
        match = None if in_fence else HEADING_PATTERN.match(line)
        if match:
            flush()
            heading, level = match.group(2).strip(), len(match.group(1))
            body = []
            continue
        body.append(line)
    flush()
    return tuple(sections)


def _component_names(
    metadata: dict[str, str], title: str, kind: DocumentKind
) -> tuple[str, ...]:
    for key, value in metadata.items():
        if key.lower() in COMPONENT_META_KEYS:
            names = [n.strip().strip("`").strip() for n in value.split(",")]
            return tuple(dict.fromkeys(n for n in names if n))
    if kind.names_from_title:
        return (title,)
    return ()


def parse_document(
    path: str, raw_text: str | bytes, mapping: CategoryMapping
) -> Document | ParseFailure:
    """Parse one documentation file.

    Args:
        path: Path relative to the docs root (POSIX separators).
        raw_text: File content; bytes are decoded as UTF-8.
        mapping: Deterministic location -> (kind, category, subcategory) mapping.

    Returns:
        The parsed Document, or a ParseFailure naming the reason.
    """
    if isinstance(raw_text, bytes):
        try:
            raw_text = raw_text.decode("utf-8")
        except UnicodeDecodeError as e:
            return ParseFailure(path=path, reason=f"not valid UTF-8: {e}")

    if not raw_text.strip():
        return ParseFailure(path=path, reason="empty document")

    classification = mapping(path)
    if classification is None:
        return ParseFailure(path=path, reason="location maps to no known category")
    kind, category, subcategory = classification
    if not category or not category.strip():
        return ParseFailure(path=path, reason="empty category")

    lines = raw_text.splitlines()
    title_index, title = _find_title(lines)
    if title is None:
        title = title_from_filename(path)

    metadata_start = title_index + 1 if title_index is not None else 0
    metadata, decoration = _read_metadata(lines, metadata_start)
    if title_index is not None:
        decoration.add(title_index)

    return Document(
        id=build_document_id(path),
        path=path,
        title=title,
        kind=kind,
        category=category,
        subcategory=subcategory or None,
        component_names=_component_names(metadata, title, kind),
        metadata=metadata,
        sections=_split_sections(lines, decoration),
        raw_text=raw_text,
    )


__all__ = [
    "CategoryMapping",
    "CodeBlock",
    "build_document_id",
    "extract_code_blocks",
    "extract_description",
    "extract_prop_tables",
    "extract_props_section",
    "extract_see_also",
    "parse_document",
    "strip_numeric_prefix",
    "title_from_filename",
]
