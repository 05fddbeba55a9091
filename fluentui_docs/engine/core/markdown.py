"""Markdown extraction helpers for FluentUI documentation files.

These are pure functions over raw markdown text. They back the derived
``Document`` properties (description, See Also, props/code flags) and the
example/props lookups.
"""

import re
from dataclasses import dataclass

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")

# Code fences whose language tag marks a usage example
EXAMPLE_FENCE_PATTERN = re.compile(r"^```(typescript|tsx|jsx|ts)\s*$", re.IGNORECASE)
EXAMPLE_LABEL_PATTERN = re.compile(r"^(#{2,4})\s+(.+)$")

PROPS_HEADING_PATTERN = re.compile(r"^##\s+Props\s*(Reference)?", re.IGNORECASE)
OVERVIEW_HEADING_PATTERN = re.compile(r"^##\s+Overview", re.IGNORECASE)
SEE_ALSO_HEADING_PATTERN = re.compile(r"^##\s+See Also", re.IGNORECASE)
LINK_PATTERN = re.compile(r"\[(.+?)\]\(.+?\)")

DESCRIPTION_MAX_LENGTH = 300
MIN_TABLE_ROWS = 3  # header + separator + one data row


@dataclass(frozen=True)
class CodeBlock:
    """A code example labelled by the heading it appears under."""

    heading: str
    language: str
    code: str


def iter_outside_fences(lines: list[str]):
    """Yield ``(index, line, in_fence)`` tracking fenced code block state."""
    in_fence = False
    for index, line in enumerate(lines):
        if FENCE_PATTERN.match(line):
            yield index, line, True
            in_fence = not in_fence
            continue
        yield index, line, in_fence


def extract_code_blocks(content: str) -> list[CodeBlock]:
    """Extract TS/TSX/JSX code blocks, each labelled by the nearest heading."""
    blocks: list[CodeBlock] = []
    current_heading = "General"
    in_block = False
    language = ""
    code_lines: list[str] = []

    for line in content.splitlines():
        if not in_block:
            heading_match = EXAMPLE_LABEL_PATTERN.match(line)
            if heading_match:
                current_heading = heading_match.group(2).strip()
                continue
            fence_match = EXAMPLE_FENCE_PATTERN.match(line)
            if fence_match:
                in_block = True
                language = fence_match.group(1).lower()
                code_lines = []
            continue

        if line.strip() == "```":
            in_block = False
            code = "\n".join(code_lines).strip()
            if code:
                blocks.append(CodeBlock(heading=current_heading, language=language, code=code))
            continue
        code_lines.append(line)

    return blocks


def extract_props_section(content: str) -> str | None:
    """Return the ``## Props`` / ``## Props Reference`` section, heading included."""
    lines = content.splitlines()
    start = next((i for i, line in enumerate(lines) if PROPS_HEADING_PATTERN.match(line)), None)
    if start is None:
        return None

    section = [lines[start]]
    for line in lines[start + 1 :]:
        if re.match(r"^##\s+[^#]", line):
            break
        section.append(line)
    return "\n".join(section).strip()


def _is_prop_table_header(header: str) -> bool:
    lowered = header.lower()
    return (
        "prop" in lowered
        or "type" in lowered
        or "slot" in lowered
        or ("name" in lowered and "description" in lowered)
    )


def extract_prop_tables(content: str) -> list[str]:
    """Return markdown tables whose header row looks like a props table."""
    tables: list[str] = []
    current: list[str] = []

    def flush() -> None:
        if len(current) >= MIN_TABLE_ROWS and _is_prop_table_header(current[0]):
            tables.append("\n".join(current))
        current.clear()

    for line in content.splitlines():
        stripped = line.strip()
        if stripped.startswith("|"):
            current.append(stripped)
        elif current:
            flush()
    if current:
        flush()
    return tables


def has_props_table(content: str) -> bool:
    if any(PROPS_HEADING_PATTERN.match(line) for line in content.splitlines()):
        return True
    return bool(re.search(r"\|\s*Prop\s*\|", content, re.IGNORECASE))


def has_code_examples(content: str) -> bool:
    return bool(re.search(r"```(?:typescript|tsx|jsx|ts)", content, re.IGNORECASE))


def _is_structural(line: str) -> bool:
    return line.startswith(("#", "```", "|", "---"))


def _next_paragraph(lines: list[str], start: int) -> str | None:
    parts: list[str] = []
    for line in lines[start:]:
        stripped = line.strip()
        if not stripped:
            if parts:
                break
            continue
        if _is_structural(stripped):
            break
        # Blockquote metadata lines are not description text
        if stripped.startswith(">"):
            continue
        parts.append(stripped)
    return " ".join(parts) if parts else None


def truncate_text(text: str, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Truncate at a word boundary, appending ``...`` when cut."""
    if len(text) <= max_length:
        return text
    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    return (truncated[:last_space] if last_space > 0 else truncated) + "..."


def extract_description(content: str) -> str | None:
    """Description: first paragraph after ``## Overview``, else after the title.

    Falls back to the first non-structural line.
    """
    lines = content.splitlines()

    overview = next((i for i, line in enumerate(lines) if OVERVIEW_HEADING_PATTERN.match(line)), None)
    if overview is not None:
        paragraph = _next_paragraph(lines, overview + 1)
        if paragraph:
            return truncate_text(paragraph)

    title = next((i for i, line in enumerate(lines) if re.match(r"^#\s+", line)), None)
    if title is not None:
        paragraph = _next_paragraph(lines, title + 1)
        if paragraph:
            return truncate_text(paragraph)

    for line in lines:
        stripped = line.strip()
        if stripped and not _is_structural(stripped) and not stripped.startswith(">"):
            return truncate_text(stripped)
    return None


def extract_see_also(content: str) -> list[str]:
    """Link texts listed under a ``## See Also`` heading."""
    lines = content.splitlines()
    start = next((i for i, line in enumerate(lines) if SEE_ALSO_HEADING_PATTERN.match(line)), None)
    if start is None:
        return []

    references = []
    for line in lines[start + 1 :]:
        stripped = line.strip()
        if stripped.startswith("#"):
            break
        match = LINK_PATTERN.search(stripped)
        if match:
            references.append(match.group(1))
    return references
