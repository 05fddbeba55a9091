"""Inverted search index built once per generation.

Each document contributes four separately tokenized fields (title, component
names, section headings, section bodies). Postings carry the field so the
ranker can weight title and component-name matches above body matches.

Precomputed statistics:
- per-document field lengths and total length
- per-field average lengths
- document frequency per term
- per-section term counts, used to pick the snippet section
"""

import logging
import math
from collections import Counter, defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from ..core.document import Document
from .constants import DEFAULT_SCORING, FIELD_ORDER, ScoringConfig, SearchField
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Posting:
    """One term's occurrences in one field of one document."""

    document_id: str
    field: SearchField
    term_frequency: int
    positions: tuple[int, ...]


@dataclass(frozen=True)
class SectionTerms:
    """Term counts of one section, heading and body kept apart."""

    heading: Counter
    body: Counter


def document_fields(doc: Document, config: ScoringConfig) -> dict[SearchField, list[str]]:
    """Tokenize the searchable fields of a document.

    Component names are never stop-word filtered. Documents without
    component names (patterns, guides) simply have an empty name field.
    """
    names: list[str] = []
    for name in doc.component_names:
        names.extend(tokenize(name, filter_stop_words=False, config=config))

    headings: list[str] = []
    bodies: list[str] = []
    for section in doc.sections:
        headings.extend(tokenize(section.heading, config=config))
        bodies.extend(tokenize(section.body, config=config))

    return {
        SearchField.TITLE: tokenize(doc.title, config=config),
        SearchField.COMPONENT_NAME: names,
        SearchField.HEADING: headings,
        SearchField.BODY: bodies,
    }


class SearchIndex:
    """Read-only inverted index. Build with ``SearchIndex.build``."""

    def __init__(
        self,
        postings: dict[str, tuple[Posting, ...]],
        field_lengths: dict[str, dict[SearchField, int]],
        section_terms: dict[str, tuple[SectionTerms, ...]],
    ) -> None:
        self._postings = MappingProxyType(postings)
        self._field_lengths = MappingProxyType(field_lengths)
        self._section_terms = MappingProxyType(section_terms)
        self._document_lengths = {
            doc_id: sum(lengths.values()) for doc_id, lengths in field_lengths.items()
        }
        self._document_frequency = {
            term: len({p.document_id for p in plist}) for term, plist in postings.items()
        }

        count = len(field_lengths)
        self._average_lengths: dict[SearchField, float] = {}
        for search_field in SearchField:
            total = sum(lengths.get(search_field, 0) for lengths in field_lengths.values())
            self._average_lengths[search_field] = total / count if count else 0.0

    @classmethod
    def build(
        cls, documents: Iterable[Document], config: ScoringConfig = DEFAULT_SCORING
    ) -> "SearchIndex":
        """Build the index in a single pass over ``documents``."""
        raw: dict[str, list[Posting]] = defaultdict(list)
        field_lengths: dict[str, dict[SearchField, int]] = {}
        section_terms: dict[str, tuple[SectionTerms, ...]] = {}

        for doc in documents:
            fields = document_fields(doc, config)
            field_lengths[doc.id] = {f: len(tokens) for f, tokens in fields.items()}

            for search_field, tokens in fields.items():
                positions: dict[str, list[int]] = defaultdict(list)
                for position, term in enumerate(tokens):
                    positions[term].append(position)
                for term, term_positions in positions.items():
                    raw[term].append(
                        Posting(
                            document_id=doc.id,
                            field=search_field,
                            term_frequency=len(term_positions),
                            positions=tuple(term_positions),
                        )
                    )

            section_terms[doc.id] = tuple(
                SectionTerms(
                    heading=Counter(tokenize(s.heading, config=config)),
                    body=Counter(tokenize(s.body, config=config)),
                )
                for s in doc.sections
            )

        postings = {
            term: tuple(sorted(plist, key=lambda p: (p.document_id, FIELD_ORDER[p.field])))
            for term, plist in raw.items()
        }
        index = cls(postings, field_lengths, section_terms)
        logger.debug(f"Search index built: {index.document_count} docs, {len(postings)} terms")
        return index

    # ============ ACCESSORS ============

    def lookup(self, term: str) -> tuple[Posting, ...]:
        """Postings for a normalized term, sorted by (document id, field)."""
        return self._postings.get(term, ())

    def document_frequency(self, term: str) -> int:
        return self._document_frequency.get(term, 0)

    def idf(self, term: str) -> float:
        """BM25 idf: ``ln(1 + (N - df + 0.5) / (df + 0.5))``, always positive."""
        df = self.document_frequency(term)
        n = self.document_count
        return math.log(1 + (n - df + 0.5) / (df + 0.5))

    def field_length(self, document_id: str, search_field: SearchField) -> int:
        return self._field_lengths.get(document_id, {}).get(search_field, 0)

    def average_field_length(self, search_field: SearchField) -> float:
        return self._average_lengths.get(search_field, 0.0)

    def document_length(self, document_id: str) -> int:
        """Total token count across all fields."""
        return self._document_lengths.get(document_id, 0)

    def section_terms(self, document_id: str) -> tuple[SectionTerms, ...]:
        return self._section_terms.get(document_id, ())

    @property
    def document_count(self) -> int:
        return len(self._field_lengths)

    @property
    def vocabulary_size(self) -> int:
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings
