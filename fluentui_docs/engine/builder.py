"""Index builder and the active-generation cell.

``build_index`` runs discovery -> parser -> store -> search index and returns
a fully built ``Generation`` or raises; nothing partial is ever returned.

``IndexManager`` holds the active generation in a single attribute. Readers
take the reference once and keep using it; a rebuild constructs a new
generation under a lock and replaces the reference in one assignment, so an
in-flight query always finishes against the generation it started with.
"""

import logging
import threading
import time
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from ..errors import (
    DocsIndexError,
    EmptyCorpusError,
    IndexNotReadyError,
    RebuildAborted,
    RebuildFailure,
)
from .core.document import Document, Generation, IndexStats, ParseFailure
from .core.parser import CategoryMapping, parse_document
from .core.store import DocumentStore
from .scoring.constants import DEFAULT_SCORING, ScoringConfig
from .scoring.search_index import SearchIndex

logger = logging.getLogger(__name__)

# root -> (relative path, raw content) pairs
Discovery = Callable[[Path], Iterable[tuple[str, str | bytes]]]


def build_index(
    source_root: Path | str,
    *,
    discover: Discovery,
    mapping: CategoryMapping,
    config: ScoringConfig = DEFAULT_SCORING,
    number: int = 1,
    abort_event: threading.Event | None = None,
) -> Generation:
    """Build one complete generation from a docs root.

    Args:
        source_root: Docs root handed to ``discover``.
        discover: File discovery collaborator.
        mapping: Location -> (kind, category, subcategory) mapping.
        config: Scoring configuration (aliases, weights, stop words).
        number: Generation number to assign.
        abort_event: When set, the build stops before the next file.

    Returns:
        The new Generation.

    Raises:
        EmptyCorpusError: No document parsed successfully.
        RebuildAborted: ``abort_event`` was set during the build.
        RebuildFailure: Discovery or parsing raised an unexpected error.
    """
    root = Path(source_root)
    started = time.perf_counter()
    documents: list[Document] = []
    failures: list[ParseFailure] = []
    seen_ids: set[str] = set()
    total_files = 0

    def check_abort() -> None:
        if abort_event is not None and abort_event.is_set():
            raise RebuildAborted(f"Rebuild of {root} aborted after {total_files} files")

    try:
        for path, raw_text in discover(root):
            check_abort()
            total_files += 1
            result = parse_document(path, raw_text, mapping)
            if isinstance(result, ParseFailure):
                logger.warning(f"Skipping {result.path}: {result.reason}")
                failures.append(result)
                continue
            if result.id in seen_ids:
                failure = ParseFailure(path=path, reason=f"duplicate document id {result.id!r}")
                logger.warning(f"Skipping {path}: {failure.reason}")
                failures.append(failure)
                continue
            seen_ids.add(result.id)
            documents.append(result)
    except DocsIndexError:
        raise
    except Exception as e:
        raise RebuildFailure(f"Document discovery failed under {root}: {e}") from e

    if not documents:
        raise EmptyCorpusError(str(root), failed_files=len(failures))
    check_abort()

    store = DocumentStore.build(documents, aliases=config.component_aliases)
    index = SearchIndex.build(store.all_documents(), config)

    duration_ms = (time.perf_counter() - started) * 1000
    stats = IndexStats(
        total_files=total_files,
        indexed_files=len(documents),
        failed_files=len(failures),
        duration_ms=duration_ms,
        failures=tuple(failures),
        by_kind=dict(Counter(doc.kind.value for doc in documents)),
        by_category=dict(store.categories()),
    )
    logger.info(
        f"Built generation {number}: {stats.indexed_files} docs indexed, "
        f"{stats.failed_files} failed, {index.vocabulary_size} terms in {duration_ms:.0f}ms"
    )
    return Generation(
        number=number,
        store=store,
        index=index,
        stats=stats,
        source_root=str(root),
        built_at=datetime.now(timezone.utc),
    )


@dataclass(frozen=True)
class ReindexOutcome:
    """Result of a reindex attempt.

    Attributes:
        active: Generation serving queries after the attempt
        published: Whether a new generation replaced the previous one
        error: The build error when nothing was published
        previous_count: Document count of the generation active before the attempt
    """

    active: Generation | None
    published: bool
    error: DocsIndexError | None = None
    previous_count: int | None = None


class IndexManager:
    """Single versioned cell holding the active generation."""

    def __init__(
        self,
        source_root: Path | str,
        *,
        discover: Discovery,
        mapping: CategoryMapping,
        config: ScoringConfig = DEFAULT_SCORING,
    ):
        self.source_root = Path(source_root)
        self.config = config
        self._discover = discover
        self._mapping = mapping
        self._generation: Generation | None = None
        self._build_lock = threading.Lock()
        self._abort_event = threading.Event()

    @property
    def current(self) -> Generation | None:
        """The active generation (None before the first successful build)."""
        return self._generation

    def require(self) -> Generation:
        generation = self._generation
        if generation is None:
            raise IndexNotReadyError("No index generation has been published yet")
        return generation

    @property
    def is_building(self) -> bool:
        return self._build_lock.locked()

    def rebuild(self) -> Generation:
        """Build and publish a new generation.

        Concurrent calls are serialized. On any error the active generation
        is left untouched and the error propagates.
        """
        with self._build_lock:
            self._abort_event.clear()
            previous = self._generation
            generation = build_index(
                self.source_root,
                discover=self._discover,
                mapping=self._mapping,
                config=self.config,
                number=previous.number + 1 if previous else 1,
                abort_event=self._abort_event,
            )
            self._generation = generation
            return generation

    def reindex(self) -> ReindexOutcome:
        """Rebuild, reporting failure as a value instead of raising."""
        previous = self._generation
        previous_count = len(previous.store) if previous else None
        try:
            generation = self.rebuild()
        except DocsIndexError as e:
            active = self._generation
            logger.error(
                f"Reindex of {self.source_root} failed: {e}; "
                f"still serving generation {active.number if active else 'none'}"
            )
            return ReindexOutcome(
                active=active, published=False, error=e, previous_count=previous_count
            )
        return ReindexOutcome(active=generation, published=True, previous_count=previous_count)

    def abort(self) -> None:
        """Ask an in-progress rebuild to stop before its next file."""
        self._abort_event.set()
