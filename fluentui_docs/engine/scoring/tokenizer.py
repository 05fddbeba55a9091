"""Tokenizer and normalizer shared by indexing and querying.

Both document fields and queries go through ``tokenize`` so that the terms on
each side line up. A word is a run of letters and digits, optionally joined by
internal hyphens. Every word yields:

- its lowercase whole form ("colorpicker", "multi-word")
- its parts split on hyphens and case boundaries ("color", "picker"),
  only when there is more than one part

All emitted terms are plural-stemmed. Stop words are removed in free-text mode
only; component names are tokenized with ``filter_stop_words=False`` because
"Link", "Text" or "Tab" are real component names.
"""

import re

from .constants import DEFAULT_SCORING, ScoringConfig
from .stemmer import stem_term

# Letters/digits with optional internal hyphens: "SpinButton", "Multi-word", "v9"
WORD_PATTERN = re.compile(r"[^\W_]+(?:-[^\W_]+)*")

# Case-boundary parts: "HTMLElement" -> HTML, Element; "ColorPicker" -> Color, Picker
PART_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

MIN_TERM_LENGTH = 2


def split_parts(word: str) -> list[str]:
    """Split a word into its hyphen and camel-case parts (original case)."""
    parts: list[str] = []
    for segment in word.split("-"):
        pieces = PART_PATTERN.findall(segment)
        # Non-ASCII letters are not covered by the case pattern: keep the segment whole
        if "".join(pieces) != segment:
            pieces = [segment]
        parts.extend(pieces)
    return parts


def iter_words(text: str) -> list[str]:
    """Return the raw words of ``text`` in order, case preserved."""
    return WORD_PATTERN.findall(text)


def tokenize(
    text: str,
    *,
    filter_stop_words: bool = True,
    config: ScoringConfig = DEFAULT_SCORING,
) -> list[str]:
    """Convert text into an ordered list of normalized terms.

    Args:
        text: Raw field text or query string.
        filter_stop_words: Drop stop words and single-character terms
            (free-text mode). Pass False for component-name fields.
        config: Supplies the stop-word table.

    Returns:
        Terms in source order with duplicates retained.
    """
    if not text:
        return []

    terms: list[str] = []
    for word in iter_words(text):
        candidates = [word.lower()]
        parts = split_parts(word)
        if len(parts) > 1:
            candidates.extend(p.lower() for p in parts)

        for candidate in candidates:
            if filter_stop_words and (
                len(candidate) < MIN_TERM_LENGTH or candidate in config.stop_words
            ):
                continue
            terms.append(stem_term(candidate))
    return terms


def is_insufficient(text: str, config: ScoringConfig = DEFAULT_SCORING) -> bool:
    """True when free-text tokenization leaves no usable term."""
    return not tokenize(text, config=config)
