"""Scoring engine for FluentUI docs search.

This package provides the term pipeline and the ranked search:
- Tokenization with case/hyphen splitting and plural stemming
- Inverted index with per-field postings
- BM25 ranking with field weights and deterministic tie-breaking

Usage:
    from fluentui_docs.engine.scoring import (
        Query,
        SearchIndex,
        search,
        tokenize,
    )
"""

from .constants import (
    BM25_B,
    BM25_K1,
    COMPONENT_ALIASES,
    DEFAULT_FIELD_WEIGHTS,
    DEFAULT_SCORING,
    STOP_WORDS,
    UI_SYNONYMS,
    ScoringConfig,
    SearchField,
    normalize_name,
)
from .ranker import Query, QueryFilters, SearchResult, search
from .search_index import Posting, SearchIndex
from .stemmer import stem_term
from .tokenizer import is_insufficient, tokenize

__all__ = [
    # Constants
    "BM25_B",
    "BM25_K1",
    "COMPONENT_ALIASES",
    "DEFAULT_FIELD_WEIGHTS",
    "DEFAULT_SCORING",
    "STOP_WORDS",
    "UI_SYNONYMS",
    "ScoringConfig",
    "SearchField",
    "normalize_name",
    # Tokenizer
    "stem_term",
    "tokenize",
    "is_insufficient",
    # Index
    "Posting",
    "SearchIndex",
    # Ranker
    "Query",
    "QueryFilters",
    "SearchResult",
    "search",
]
