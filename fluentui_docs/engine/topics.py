"""Topic resolution for foundation, pattern and enterprise documents.

Foundation and enterprise docs are addressed by a small static set of topics
with aliases ("theme" -> "theming", "a11y" -> "accessibility"). Pattern docs
are addressed by their category folder, discovered from the store.
"""

from dataclasses import dataclass

from .core.document import Document, DocumentKind
from .core.store import DocumentStore


@dataclass(frozen=True)
class TopicInfo:
    """Display data for one static topic."""

    display_name: str
    description: str
    # Enterprise docs belong to a topic when their file stem contains this marker
    file_marker: str = ""


# ============ FOUNDATION ============

FOUNDATION_TOPICS: dict[str, TopicInfo] = {
    "getting-started": TopicInfo(
        "Getting Started", "Installation, package setup and the first FluentUI component."
    ),
    "fluent-provider": TopicInfo(
        "FluentProvider", "The FluentProvider root, theme injection and nested providers."
    ),
    "theming": TopicInfo("Theming", "Themes, design tokens and brand color ramps."),
    "styling-griffel": TopicInfo(
        "Styling with Griffel", "makeStyles, mergeClasses and token-based styling."
    ),
    "component-architecture": TopicInfo(
        "Component Architecture", "Slots, hooks and the render function split."
    ),
    "accessibility": TopicInfo(
        "Accessibility", "Keyboard navigation, focus management and ARIA guidance."
    ),
}

FOUNDATION_TOPIC_ALIASES: dict[str, str] = {
    "start": "getting-started",
    "setup": "getting-started",
    "install": "getting-started",
    "provider": "fluent-provider",
    "theme": "theming",
    "themes": "theming",
    "tokens": "theming",
    "styling": "styling-griffel",
    "griffel": "styling-griffel",
    "css": "styling-griffel",
    "architecture": "component-architecture",
    "hooks": "component-architecture",
    "slots": "component-architecture",
    "a11y": "accessibility",
}


# ============ ENTERPRISE ============

ENTERPRISE_TOPICS: dict[str, TopicInfo] = {
    "app-shell": TopicInfo(
        "Application Shell",
        "Application shell patterns: layout, navigation and overall app structure.",
        "app-shell",
    ),
    "dashboard": TopicInfo(
        "Dashboard Patterns",
        "KPI cards, charts and widgets, and real-time data updates.",
        "dashboard",
    ),
    "admin": TopicInfo(
        "Admin Panel Patterns",
        "CRUD operations, user management and settings panels.",
        "admin",
    ),
    "data": TopicInfo(
        "Data Management",
        "Virtualization, filtering and sorting, and export/import at scale.",
        "data-",
    ),
    "accessibility": TopicInfo(
        "Enterprise Accessibility",
        "WCAG compliance, keyboard and focus management, and screen readers.",
        "accessibility",
    ),
}

ENTERPRISE_TOPIC_ALIASES: dict[str, str] = {
    "shell": "app-shell",
    "layout": "app-shell",
    "kpi": "dashboard",
    "charts": "dashboard",
    "widgets": "dashboard",
    "realtime": "dashboard",
    "real-time": "dashboard",
    "crud": "admin",
    "users": "admin",
    "user-management": "admin",
    "settings": "admin",
    "virtualization": "data",
    "filtering": "data",
    "sorting": "data",
    "export": "data",
    "import": "data",
    "a11y": "accessibility",
    "wcag": "accessibility",
    "keyboard": "accessibility",
    "screen-reader": "accessibility",
    "screen-readers": "accessibility",
}


def resolve_topic(
    value: str, topics: dict[str, TopicInfo], aliases: dict[str, str]
) -> str | None:
    """Resolve user input to a topic key: exact key, alias, then containment."""
    wanted = value.strip().lower()
    if not wanted:
        return None
    if wanted in topics:
        return wanted
    if wanted in aliases:
        return aliases[wanted]
    for key in topics:
        if key in wanted or wanted in key:
            return key
    return None


def aliases_for(topic: str, aliases: dict[str, str]) -> list[str]:
    return [alias for alias, target in aliases.items() if target == topic]


def find_foundation_doc(store: DocumentStore, topic: str) -> Document | None:
    """Foundation doc for a topic: by id, then by file stem, then by name."""
    doc = store.get_by_id(f"foundation/{topic}")
    if doc is not None:
        return doc
    foundation_docs = store.by_kind(DocumentKind.FOUNDATION)
    for doc in foundation_docs:
        if doc.file_stem.lower() == topic:
            return doc
    for doc in foundation_docs:
        if topic in doc.file_stem.lower():
            return doc
    doc = store.get_document(topic)
    if doc is not None and doc.kind is DocumentKind.FOUNDATION:
        return doc
    return None


def enterprise_docs(store: DocumentStore, topic: str) -> list[Document]:
    """Enterprise docs whose file stem carries the topic's marker."""
    info = ENTERPRISE_TOPICS.get(topic)
    if info is None:
        return []
    return [
        doc
        for doc in store.by_kind(DocumentKind.ENTERPRISE)
        if info.file_marker in doc.file_stem.lower()
    ]


# ============ PATTERNS ============


def pattern_categories(store: DocumentStore) -> list[tuple[str, int]]:
    """Categories holding pattern docs, with pattern counts, in declaration order."""
    counts: dict[str, int] = {}
    for doc in store.by_kind(DocumentKind.PATTERN):
        counts[doc.category] = counts.get(doc.category, 0) + 1
    return sorted(counts.items(), key=lambda item: store.category_rank(item[0]))


def pattern_docs(store: DocumentStore, category: str) -> list[Document]:
    return [d for d in store.list_by_category(category) if d.kind is DocumentKind.PATTERN]


def find_pattern(docs: list[Document], name: str) -> Document | None:
    """Pick a pattern by title, then file stem, then id containment."""
    wanted = name.strip().lower()
    if not wanted:
        return None
    for doc in docs:
        if wanted in doc.title.lower():
            return doc
    for doc in docs:
        stem = doc.file_stem.lower()
        if wanted in stem or stem in wanted:
            return doc
    for doc in docs:
        if wanted in doc.id.lower():
            return doc
    return None
