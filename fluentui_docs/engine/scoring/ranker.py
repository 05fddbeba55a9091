"""BM25 ranker over the inverted index.

Scoring per query term ``t``, field ``f`` and document ``d``::

    weight[f] * idf(t) * tf * (k1 + 1) / (tf + k1 * (1 - b + b * len(d, f) / avglen(f)))

summed across matched fields and distinct query terms. Documents matching no
query term are never returned. Ties break on shorter document, then id, so a
repeated query on the same generation returns identical results.

Every match is scored before the top ``limit`` are selected; snippets are only
built for the selected results.
"""

import logging
import re
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..core.document import Document, DocumentKind
from .constants import (
    DEFAULT_SCORING,
    FIELD_ORDER,
    SNIPPET_LEAD,
    ScoringConfig,
    SearchField,
    normalize_name,
)
from .search_index import SearchIndex
from .tokenizer import WORD_PATTERN, tokenize

if TYPE_CHECKING:
    from ..core.store import DocumentStore

logger = logging.getLogger(__name__)

# Heading matches count double when choosing the snippet section
SECTION_HEADING_BOOST = 2.0


@dataclass(frozen=True)
class QueryFilters:
    """Restrictions applied before scoring. ``None`` means unrestricted."""

    category: str | None = None
    subcategory: str | None = None
    kind: DocumentKind | None = None
    component_name: str | None = None
    components_only: bool = False


@dataclass(frozen=True)
class Query:
    """A tokenized query. Transient, built per call."""

    raw: str
    terms: tuple[str, ...]
    filters: QueryFilters = field(default_factory=QueryFilters)

    @classmethod
    def parse(
        cls,
        raw: str,
        config: ScoringConfig = DEFAULT_SCORING,
        filters: QueryFilters | None = None,
        extra_terms: tuple[str, ...] = (),
    ) -> "Query":
        """Tokenize ``raw`` (free-text mode) and append any expansion terms."""
        terms = tuple(tokenize(raw or "", config=config)) + tuple(extra_terms)
        return cls(raw=raw or "", terms=terms, filters=filters or QueryFilters())

    @property
    def is_empty(self) -> bool:
        return not self.terms


@dataclass(frozen=True)
class SearchResult:
    """One ranked hit."""

    document_id: str
    score: float
    matched_fields: tuple[str, ...]
    snippet: str
    section_index: int | None = None


def _document_filter(
    filters: QueryFilters, store: "DocumentStore"
) -> Callable[[Document], bool] | None:
    if filters == QueryFilters():
        return None

    category = filters.category.strip().lower() if filters.category else None
    subcategory = filters.subcategory.strip().lower() if filters.subcategory else None
    wanted_names: set[str] = set()
    if filters.component_name:
        wanted_names.add(normalize_name(filters.component_name))
        canonical = store.resolve_alias(filters.component_name)
        if canonical:
            wanted_names.add(normalize_name(canonical))

    def allowed(doc: Document) -> bool:
        if category is not None and doc.category.lower() != category:
            return False
        if subcategory is not None and (doc.subcategory or "").lower() != subcategory:
            return False
        if filters.kind is not None and doc.kind is not filters.kind:
            return False
        if filters.components_only and not doc.component_names:
            return False
        if wanted_names and not wanted_names.intersection(
            normalize_name(n) for n in doc.component_names
        ):
            return False
        return True

    return allowed


def score_documents(
    query: Query,
    index: SearchIndex,
    store: "DocumentStore",
    config: ScoringConfig = DEFAULT_SCORING,
) -> tuple[dict[str, float], dict[str, set[SearchField]]]:
    """Score every document matching at least one query term.

    Returns:
        ``(scores, matched fields)`` keyed by document id.
    """
    scores: dict[str, float] = defaultdict(float)
    matched: dict[str, set[SearchField]] = defaultdict(set)
    allowed = _document_filter(query.filters, store)
    verdicts: dict[str, bool] = {}

    for term in dict.fromkeys(query.terms):
        postings = index.lookup(term)
        if not postings:
            continue
        idf = index.idf(term)
        for posting in postings:
            weight = config.weight(posting.field)
            if weight <= 0:
                continue
            if allowed is not None:
                verdict = verdicts.get(posting.document_id)
                if verdict is None:
                    doc = store.get_by_id(posting.document_id)
                    verdict = doc is not None and allowed(doc)
                    verdicts[posting.document_id] = verdict
                if not verdict:
                    continue

            tf = posting.term_frequency
            avg = index.average_field_length(posting.field)
            length = index.field_length(posting.document_id, posting.field)
            norm = 1 - config.b + config.b * (length / avg) if avg > 0 else 1.0
            scores[posting.document_id] += weight * idf * (tf * (config.k1 + 1)) / (tf + config.k1 * norm)
            matched[posting.document_id].add(posting.field)

    return dict(scores), dict(matched)


def best_section(
    doc: Document, terms: tuple[str, ...], index: SearchIndex, config: ScoringConfig
) -> int | None:
    """Index of the section that best matches ``terms`` (first section if none match)."""
    if not doc.sections:
        return None
    best_index, best_score = 0, 0.0
    unique_terms = list(dict.fromkeys(terms))
    for i, counts in enumerate(index.section_terms(doc.id)):
        score = 0.0
        for term in unique_terms:
            tf = SECTION_HEADING_BOOST * counts.heading.get(term, 0) + counts.body.get(term, 0)
            if tf:
                score += index.idf(term) * tf / (tf + config.k1)
        if score > best_score:
            best_index, best_score = i, score
    return best_index


def make_snippet(text: str, terms: tuple[str, ...], length: int, config: ScoringConfig) -> str:
    """Window of ``text`` around the first word that yields a query term.

    Whitespace is collapsed; cut ends are marked with ``...``.
    """
    collapsed = re.sub(r"\s+", " ", text).strip()
    if len(collapsed) <= length:
        return collapsed

    wanted = set(terms)
    first = 0
    for match in WORD_PATTERN.finditer(collapsed):
        if wanted.intersection(tokenize(match.group(0), filter_stop_words=False, config=config)):
            first = match.start()
            break

    start = max(0, first - SNIPPET_LEAD)
    if start > 0:
        space = collapsed.find(" ", start, first)
        if space != -1:
            start = space + 1
    end = min(len(collapsed), start + length)
    if end < len(collapsed):
        space = collapsed.rfind(" ", start, end)
        if space > first:
            end = space

    snippet = collapsed[start:end].strip()
    if start > 0:
        snippet = "..." + snippet
    if end < len(collapsed):
        snippet += "..."
    return snippet


def search(
    query: Query | str,
    index: SearchIndex,
    store: "DocumentStore",
    limit: int | None = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> list[SearchResult]:
    """Rank documents for a query.

    Args:
        query: A parsed Query or a raw query string.
        index: Search index of the generation.
        store: Document store of the same generation.
        limit: Maximum number of results (None for all matches).
        config: Weights, BM25 parameters and snippet length.

    Returns:
        Results ordered by score desc, shorter document, then id.
    """
    if isinstance(query, str):
        query = Query.parse(query, config=config)
    if query.is_empty or (limit is not None and limit <= 0):
        return []

    scores, matched = score_documents(query, index, store, config)
    ranked = sorted(
        scores.items(),
        key=lambda item: (-item[1], index.document_length(item[0]), item[0]),
    )
    if limit is not None:
        ranked = ranked[:limit]

    results = []
    for doc_id, score in ranked:
        doc = store.get_by_id(doc_id)
        if doc is None:
            continue
        section_index = best_section(doc, query.terms, index, config)
        text = doc.sections[section_index].text if section_index is not None else doc.title
        results.append(
            SearchResult(
                document_id=doc_id,
                score=score,
                matched_fields=tuple(
                    f.value for f in sorted(matched[doc_id], key=FIELD_ORDER.__getitem__)
                ),
                snippet=make_snippet(text, query.terms, config.snippet_length, config),
                section_index=section_index,
            )
        )

    logger.debug(f"search {query.raw!r}: {len(scores)} matches, returning {len(results)}")
    return results
