"""Document store for one index generation.

The store is built once by the index builder and is read-only afterwards.
Lookups:
- by id
- by component name (case/separator insensitive, alias-aware, never fuzzy)
- by title or file stem (``get_document`` fallback)
- by category (declaration order, then title), optionally narrowed to a subcategory
- by document kind
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ..scoring.constants import COMPONENT_ALIASES, normalize_name
from .document import Document, DocumentKind

logger = logging.getLogger(__name__)


class DocumentStore:
    """Immutable collection of documents with lookup indices.

    Use ``DocumentStore.build`` to construct one. Category and subcategory
    declaration order is the order in which they first appear in the build
    input (the builder feeds documents sorted by path, so numbered folders
    keep their intended order).
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Document] = {}
        self._component_index: dict[str, str] = {}
        self._name_index: dict[str, str] = {}
        self._aliases: Mapping[str, str] = MappingProxyType({})
        self._category_order: dict[str, int] = {}
        self._subcategory_order: dict[str, dict[str | None, int]] = {}
        self._by_category: dict[str, tuple[Document, ...]] = {}
        self._by_kind: dict[DocumentKind, tuple[Document, ...]] = {}
        self._ordered: tuple[Document, ...] = ()

    # ============ CONSTRUCTION ============

    @classmethod
    def build(
        cls,
        documents: Iterable[Document],
        aliases: Mapping[str, str] | None = None,
    ) -> "DocumentStore":
        """Build a store from parsed documents.

        Args:
            documents: Parsed documents in declaration order.
            aliases: Normalized alias -> canonical component name. Defaults
                to the static alias table.

        Returns:
            A populated, read-only store.

        Raises:
            ValueError: If two documents share an id.
        """
        store = cls()
        store._aliases = MappingProxyType(
            {normalize_name(k): v for k, v in (COMPONENT_ALIASES if aliases is None else aliases).items()}
        )

        kinds: dict[DocumentKind, list[Document]] = defaultdict(list)
        for doc in documents:
            if doc.id in store._by_id:
                raise ValueError(f"Duplicate document id: {doc.id}")
            store._by_id[doc.id] = doc
            kinds[doc.kind].append(doc)

            store._category_order.setdefault(doc.category, len(store._category_order))
            sub_order = store._subcategory_order.setdefault(doc.category, {})
            sub_order.setdefault(doc.subcategory, len(sub_order))

            store._index_names(doc)

        grouped: dict[str, list[Document]] = defaultdict(list)
        for doc in store._by_id.values():
            grouped[doc.category].append(doc)
        for category, docs in grouped.items():
            # Subcategories narrow a listing but do not reorder it
            docs.sort(key=lambda d: (d.title.casefold(), d.id))
            store._by_category[category] = tuple(docs)

        store._ordered = tuple(
            doc for category in store._category_order for doc in store._by_category[category]
        )
        store._by_kind = {kind: tuple(docs) for kind, docs in kinds.items()}
        logger.debug(
            f"Document store built: {len(store._by_id)} docs, "
            f"{len(store._category_order)} categories, {len(store._component_index)} component names"
        )
        return store

    def _index_names(self, doc: Document) -> None:
        for name in doc.component_names:
            key = normalize_name(name)
            existing_id = self._component_index.get(key)
            # A component doc owns its name over patterns that merely mention it
            if existing_id is None or (
                self._by_id[existing_id].kind is not DocumentKind.COMPONENT
                and doc.kind is DocumentKind.COMPONENT
            ):
                self._component_index[key] = doc.id

        for name in (doc.title, doc.file_stem):
            self._name_index.setdefault(normalize_name(name), doc.id)

    # ============ LOOKUPS ============

    def get_by_id(self, doc_id: str) -> Document | None:
        return self._by_id.get(doc_id)

    def resolve_alias(self, name: str) -> str | None:
        """Canonical component name for an alias, if the alias table knows it."""
        return self._aliases.get(normalize_name(name))

    def get_by_component_name(self, name: str) -> Document | None:
        """Look up a document by one of its component names.

        Matching ignores case, whitespace, hyphens and underscores. A name
        that is not itself a component name is resolved through the alias
        table. Anything else is not found.
        """
        key = normalize_name(name)
        if not key:
            return None
        doc_id = self._component_index.get(key)
        if doc_id is None:
            canonical = self._aliases.get(key)
            if canonical is not None:
                doc_id = self._component_index.get(normalize_name(canonical))
        return self._by_id.get(doc_id) if doc_id else None

    def get_document(self, name: str) -> Document | None:
        """Exact lookup: component name, then title or file stem, then id."""
        doc = self.get_by_component_name(name)
        if doc is not None:
            return doc
        doc_id = self._name_index.get(normalize_name(name))
        if doc_id is not None:
            return self._by_id[doc_id]
        return self._by_id.get(name.strip().strip("/"))

    def list_by_category(self, category: str, subcategory: str | None = None) -> list[Document]:
        """Documents in a category (optionally one subcategory), in stable order.

        Category and subcategory names match case-insensitively. An unknown
        category yields an empty list.
        """
        resolved = self._resolve_category(category)
        if resolved is None:
            return []
        docs = self._by_category[resolved]
        if subcategory is None:
            return list(docs)
        wanted = subcategory.strip().lower()
        return [d for d in docs if d.subcategory is not None and d.subcategory.lower() == wanted]

    def _resolve_category(self, category: str) -> str | None:
        if category in self._by_category:
            return category
        wanted = category.strip().lower()
        for name in self._category_order:
            if name.lower() == wanted:
                return name
        return None

    def all_documents(self) -> Iterator[Document]:
        """Fresh iterator over every document, in category listing order."""
        return iter(self._ordered)

    def categories(self) -> list[tuple[str, int]]:
        """``(category, document count)`` pairs in declaration order."""
        return [(c, len(self._by_category[c])) for c in self._category_order]

    def subcategories(self, category: str) -> list[tuple[str, int]]:
        """``(subcategory, document count)`` pairs of a category in declaration order."""
        resolved = self._resolve_category(category)
        if resolved is None:
            return []
        counts: dict[str, int] = defaultdict(int)
        for doc in self._by_category[resolved]:
            if doc.subcategory is not None:
                counts[doc.subcategory] += 1
        order = self._subcategory_order[resolved]
        return [(s, counts[s]) for s in sorted(counts, key=lambda s: order[s])]

    def by_kind(self, kind: DocumentKind) -> list[Document]:
        """Documents of one kind in declaration order."""
        return list(self._by_kind.get(kind, ()))

    def category_rank(self, category: str) -> int:
        """Declaration position of a category (unknown categories sort last)."""
        return self._category_order.get(category, len(self._category_order))

    def available_components(self) -> dict[str, list[str]]:
        """Component document titles grouped by category, for not-found hints."""
        grouped: dict[str, list[str]] = {}
        for doc in self._ordered:
            if doc.kind is DocumentKind.COMPONENT:
                grouped.setdefault(doc.category, []).append(doc.title)
        return grouped

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._by_id
