"""Synthesis operations built on ranked search.

- suggest_components: components for a free-text UI description
- build_guide: an implementation guide for a goal, assembled per category

Both are read-only compositions over one generation. Input that tokenizes to
nothing (empty or only stop words) yields ``insufficient_input`` rather than
a list of unrelated popular documents. Every guide entry points at the
document and section it was taken from.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import StrEnum

from .core.document import Document, DocumentKind, Generation, Section
from .core.markdown import truncate_text
from .scoring.constants import DEFAULT_SCORING, ScoringConfig
from .scoring.ranker import Query, QueryFilters, SearchResult, search
from .scoring.stemmer import stem_term
from .scoring.tokenizer import tokenize

logger = logging.getLogger(__name__)

RATIONALE_LENGTH = 160


class SynthesisStatus(StrEnum):
    OK = "ok"
    INSUFFICIENT_INPUT = "insufficient_input"
    NO_MATCH = "no_match"


# ============ RESULT TYPES ============


@dataclass(frozen=True)
class RankedComponent:
    """One suggested component with its aggregated score."""

    name: str
    score: float
    document_id: str
    category: str
    rationale: str
    package: str | None = None
    import_statement: str | None = None


@dataclass(frozen=True)
class Suggestions:
    status: SynthesisStatus
    query: str
    terms: tuple[str, ...] = ()
    components: tuple[RankedComponent, ...] = ()


@dataclass(frozen=True)
class GuideEntry:
    """One retrieved section of a guide, traceable to its source document."""

    category: str
    document: Document
    section: Section | None
    snippet: str
    score: float


@dataclass(frozen=True)
class Guide:
    """Structured implementation guide; rendering to text happens elsewhere."""

    status: SynthesisStatus
    goal: str
    terms: tuple[str, ...] = ()
    entries: tuple[GuideEntry, ...] = ()
    imports: tuple[str, ...] = ()
    packages: tuple[str, ...] = ()

    @property
    def categories(self) -> list[str]:
        return list(dict.fromkeys(entry.category for entry in self.entries))


# ============ QUERY EXPANSION ============


def expand_terms(terms: list[str], config: ScoringConfig = DEFAULT_SCORING) -> tuple[str, ...]:
    """Synonym expansion terms for already tokenized ``terms``.

    Synonym keys are stemmed like index terms, so "settings" and "setting"
    both expand. Terms already present are not repeated.
    """
    synonyms = {stem_term(key.lower()): values for key, values in config.synonyms.items()}
    present = set(terms)
    extra: list[str] = []
    for term in terms:
        for phrase in synonyms.get(term, ()):
            for expansion in tokenize(phrase, config=config):
                if expansion not in present:
                    present.add(expansion)
                    extra.append(expansion)
    return tuple(extra)


def _prepare(text: str, config: ScoringConfig) -> tuple[list[str], tuple[str, ...]]:
    base = tokenize(text or "", config=config)
    # Expansion runs after the insufficiency check so stop-word input stays insufficient
    extra = expand_terms(base, config) if base else ()
    return base, extra


# ============ SUGGEST COMPONENTS ============


def suggest_components(
    generation: Generation,
    text: str,
    limit: int = 10,
    config: ScoringConfig = DEFAULT_SCORING,
) -> Suggestions:
    """Suggest components for a UI description.

    Searches component-bearing documents only, groups hits by component
    name (a document naming several components counts for each) and ranks
    the groups by summed score.
    """
    base, extra = _prepare(text, config)
    if not base:
        return Suggestions(status=SynthesisStatus.INSUFFICIENT_INPUT, query=text or "")

    query = Query(
        raw=text,
        terms=tuple(base) + extra,
        filters=QueryFilters(components_only=True),
    )
    results = search(query, generation.index, generation.store, config=config)
    if not results:
        return Suggestions(status=SynthesisStatus.NO_MATCH, query=text, terms=query.terms)

    store = generation.store
    totals: dict[str, float] = defaultdict(float)
    best: dict[str, tuple[SearchResult, Document]] = {}
    for result in results:
        doc = store.get_by_id(result.document_id)
        if doc is None:
            continue
        for name in doc.component_names:
            totals[name] += result.score
            # Results arrive best first: the first hit per name supplies the rationale
            best.setdefault(name, (result, doc))

    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0].casefold(), item[0]))
    components = []
    for name, score in ranked[:limit]:
        result, doc = best[name]
        owner = store.get_by_component_name(name) or doc
        components.append(
            RankedComponent(
                name=name,
                score=score,
                document_id=owner.id,
                category=owner.category,
                rationale=truncate_text(result.snippet, RATIONALE_LENGTH),
                package=owner.package_name,
                import_statement=owner.import_statement,
            )
        )

    logger.debug(f"suggest_components {text!r}: {len(results)} hits, {len(components)} components")
    return Suggestions(
        status=SynthesisStatus.OK, query=text, terms=query.terms, components=tuple(components)
    )


# ============ IMPLEMENTATION GUIDE ============


def build_guide(
    generation: Generation,
    goal: str,
    per_category: int = 2,
    max_entries: int = 8,
    config: ScoringConfig = DEFAULT_SCORING,
) -> Guide:
    """Assemble an implementation guide for a goal.

    Runs one unrestricted search plus one search per known category, merges
    the hits by document id, keeps the top ``per_category`` per category and
    stops at ``max_entries``. Categories are ordered by their best score,
    then by declaration order.
    """
    base, extra = _prepare(goal, config)
    if not base:
        return Guide(status=SynthesisStatus.INSUFFICIENT_INPUT, goal=goal or "")

    terms = tuple(base) + extra
    store, index = generation.store, generation.index

    merged: dict[str, SearchResult] = {}

    def collect(results: list[SearchResult]) -> None:
        for result in results:
            current = merged.get(result.document_id)
            if current is None or result.score > current.score:
                merged[result.document_id] = result

    collect(search(Query(raw=goal, terms=terms), index, store, limit=max_entries, config=config))
    for category, _count in store.categories():
        category_query = Query(raw=goal, terms=terms, filters=QueryFilters(category=category))
        collect(search(category_query, index, store, limit=per_category, config=config))

    if not merged:
        return Guide(status=SynthesisStatus.NO_MATCH, goal=goal, terms=terms)

    by_category: dict[str, list[tuple[SearchResult, Document]]] = defaultdict(list)
    for result in merged.values():
        doc = store.get_by_id(result.document_id)
        if doc is not None:
            by_category[doc.category].append((result, doc))
    for hits in by_category.values():
        hits.sort(key=lambda hit: (-hit[0].score, index.document_length(hit[1].id), hit[1].id))

    category_order = sorted(
        by_category,
        key=lambda c: (-by_category[c][0][0].score, store.category_rank(c), c),
    )

    entries: list[GuideEntry] = []
    for category in category_order:
        for result, doc in by_category[category][:per_category]:
            if len(entries) >= max_entries:
                break
            section = doc.sections[result.section_index] if result.section_index is not None else None
            entries.append(
                GuideEntry(
                    category=category,
                    document=doc,
                    section=section,
                    snippet=result.snippet,
                    score=result.score,
                )
            )

    components = [e.document for e in entries if e.document.kind is DocumentKind.COMPONENT]
    imports = tuple(dict.fromkeys(d.import_statement for d in components if d.import_statement))
    packages = tuple(dict.fromkeys(d.package_name for d in components if d.package_name))

    logger.debug(f"build_guide {goal!r}: {len(merged)} candidate docs, {len(entries)} entries")
    return Guide(
        status=SynthesisStatus.OK,
        goal=goal,
        terms=terms,
        entries=tuple(entries),
        imports=imports,
        packages=packages,
    )
