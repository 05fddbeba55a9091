"""Scoring constants and static lookup tables for the docs search engine.

This module contains the policy data used by tokenization and ranking:
- Stop words for free-text fields
- Search fields and their default weights
- BM25 parameters
- Component name aliases
- UI synonym expansions used by the synthesis operations

All of it is bundled into an immutable ``ScoringConfig`` so callers can
override any table without touching module globals.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Stop words: dropped from free-text fields and queries only.
# Component-name fields are never filtered: "Link", "Text" or "Tab" are real
# component names.
# ---------------------------------------------------------------------------
STOP_WORDS = frozenset(
    {
        # Articles, auxiliaries, modals
        "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "shall", "can",
        # Prepositions
        "to", "of", "in", "for", "on", "with", "at", "by", "from", "as",
        "into", "through", "over", "under", "about", "up", "out",
        # Conjunctions and adverbs
        "and", "or", "but", "if", "then", "so", "than", "too", "very",
        "just", "also", "not", "no", "only", "when", "where", "how", "why",
        # Pronouns and determiners
        "i", "me", "my", "we", "us", "our", "you", "your", "he", "she",
        "his", "her", "it", "its", "they", "them", "their", "this", "that",
        "these", "those", "what", "which", "who", "whom", "some", "any",
        "each", "all", "let", "say",
        # Request filler that carries no UI meaning
        "want", "need", "like", "please", "build", "create", "make",
    }
)


class SearchField(StrEnum):
    """Indexed document fields, in weight order."""

    TITLE = "title"
    COMPONENT_NAME = "component_name"
    HEADING = "heading"
    BODY = "body"


# Position of each field in posting lists (postings sort by document, then field)
FIELD_ORDER: dict[SearchField, int] = {f: i for i, f in enumerate(SearchField)}


# ---------------------------------------------------------------------------
# Scoring Parameters
# ---------------------------------------------------------------------------
# Relative field weights: title > component name > heading > body.
# Policy values, overridable through ``ScoringConfig``.
DEFAULT_FIELD_WEIGHTS: dict[str, float] = {
    SearchField.TITLE.value: 4.0,
    SearchField.COMPONENT_NAME.value: 3.0,
    SearchField.HEADING.value: 2.0,
    SearchField.BODY.value: 1.0,
}
# BM25 term-frequency saturation and length normalization
BM25_K1 = 1.2
BM25_B = 0.75
# Snippet window (characters) and lead-in before the first match
SNIPPET_LENGTH = 200
SNIPPET_LEAD = 60


# ---------------------------------------------------------------------------
# Module folders → document kinds
# ---------------------------------------------------------------------------
# Top-level docs folders are named "XX-<module>"; the module decides the kind.
MODULE_KINDS: dict[str, str] = {
    "foundation": "foundation",
    "components": "component",
    "patterns": "pattern",
    "enterprise": "enterprise",
}


# ---------------------------------------------------------------------------
# Component aliases: alternate spellings resolved before name lookup.
# Keys are normalized (see ``normalize_name``); values are canonical names.
# ---------------------------------------------------------------------------
COMPONENT_ALIASES: dict[str, str] = {
    "textbox": "Input",
    "textfield": "Input",
    "textinput": "Input",
    "textarea": "Textarea",
    "multilineinput": "Textarea",
    "modal": "Dialog",
    "modaldialog": "Dialog",
    "alertdialog": "Dialog",
    "toggleswitch": "Switch",
    "snackbar": "Toast",
    "notification": "Toast",
    "loader": "Spinner",
    "progress": "ProgressBar",
    "progressindicator": "ProgressBar",
    "tabs": "TabList",
    "tabstrip": "TabList",
    "grid": "DataGrid",
    "datatable": "DataGrid",
    "chip": "Tag",
    "pill": "Tag",
    "flyout": "Popover",
    "callout": "Popover",
    "panel": "Drawer",
    "sidepanel": "Drawer",
    "sidebar": "Nav",
    "navigation": "Nav",
    "autocomplete": "Combobox",
    "typeahead": "Combobox",
    "numberinput": "SpinButton",
    "numericinput": "SpinButton",
    "stepper": "SpinButton",
    "treeview": "Tree",
    "infobar": "MessageBar",
    "banner": "MessageBar",
    "hr": "Divider",
    "separator": "Divider",
    "collapsible": "Accordion",
    "expander": "Accordion",
    "profilepicture": "Avatar",
    "calendar": "DatePicker",
}


# ---------------------------------------------------------------------------
# UI synonyms: abstract UI vocabulary → concrete component terms.
# Appended to suggestion and guide queries after the insufficiency check.
# ---------------------------------------------------------------------------
UI_SYNONYMS: dict[str, list[str]] = {
    "login": ["input", "field", "button", "checkbox"],
    "signin": ["input", "field", "button", "checkbox"],
    "password": ["input", "field"],
    "email": ["input", "field"],
    "modal": ["dialog"],
    "popup": ["dialog", "popover"],
    "confirmation": ["dialog", "button"],
    "dropdown": ["dropdown", "combobox", "select"],
    "autocomplete": ["combobox"],
    "toggle": ["switch", "togglebutton"],
    "settings": ["switch", "select", "slider", "field"],
    "preferences": ["switch", "select", "checkbox"],
    "notification": ["toast", "messagebar"],
    "alert": ["messagebar", "dialog"],
    "banner": ["messagebar"],
    "loading": ["spinner", "skeleton", "progressbar"],
    "sidebar": ["nav", "drawer"],
    "panel": ["drawer"],
    "grid": ["datagrid", "table"],
    "spreadsheet": ["datagrid", "table"],
    "hierarchy": ["tree"],
    "profile": ["avatar", "persona"],
    "chip": ["tag"],
    "hint": ["tooltip", "infolabel"],
    "calendar": ["datepicker", "calendar"],
    "date": ["datepicker"],
    "time": ["timepicker"],
    "upload": ["button", "field"],
    "wizard": ["tablist", "button", "progressbar"],
    "dashboard": ["card", "table", "badge"],
    "collapsible": ["accordion"],
    "expandable": ["accordion"],
}


def normalize_name(name: str) -> str:
    """Normalize a component or topic name for lookup.

    Lowercases and drops whitespace, hyphens and underscores, so
    ``"Toggle Button"``, ``"toggle-button"`` and ``"ToggleButton"`` all map
    to ``"togglebutton"``.
    """
    return re.sub(r"[\s_\-]+", "", name.strip().lower())


@dataclass(frozen=True)
class ScoringConfig:
    """Tunable ranking and normalization policy.

    Attributes:
        field_weights: Weight per search field.
        k1: BM25 term-frequency saturation.
        b: BM25 length normalization strength (0 disables it).
        snippet_length: Maximum snippet length in characters.
        stop_words: Words dropped from free-text fields and queries.
        component_aliases: Normalized alias -> canonical component name.
        synonyms: UI term -> expansion terms for synthesis queries.
    """

    field_weights: Mapping[SearchField, float]
    k1: float = BM25_K1
    b: float = BM25_B
    snippet_length: int = SNIPPET_LENGTH
    stop_words: frozenset[str] = STOP_WORDS
    component_aliases: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(COMPONENT_ALIASES))
    )
    synonyms: Mapping[str, list[str]] = field(
        default_factory=lambda: MappingProxyType(dict(UI_SYNONYMS))
    )

    @classmethod
    def create(
        cls,
        field_weights: Mapping[str, float] | None = None,
        k1: float = BM25_K1,
        b: float = BM25_B,
        snippet_length: int = SNIPPET_LENGTH,
        extra_stop_words: Iterable[str] = (),
        extra_aliases: Mapping[str, str] | None = None,
        extra_synonyms: Mapping[str, list[str]] | None = None,
    ) -> "ScoringConfig":
        """Build a config from plain values, layering overrides on the defaults.

        Args:
            field_weights: Per-field weights keyed by field name; missing
                fields keep their default weight.
            k1: BM25 k1.
            b: BM25 b.
            snippet_length: Snippet length in characters.
            extra_stop_words: Additional stop words.
            extra_aliases: Additional aliases (keys are normalized here).
            extra_synonyms: Additional synonym expansions.

        Returns:
            A frozen ScoringConfig.

        Raises:
            ValueError: If a weight names an unknown field or is negative.
        """
        weights = {SearchField(k): v for k, v in DEFAULT_FIELD_WEIGHTS.items()}
        for name, weight in (field_weights or {}).items():
            try:
                search_field = SearchField(name)
            except ValueError as exc:
                raise ValueError(f"Unknown search field in field_weights: {name!r}") from exc
            if weight < 0:
                raise ValueError(f"Field weight for {name!r} must be >= 0, got {weight}")
            weights[search_field] = float(weight)

        aliases = dict(COMPONENT_ALIASES)
        for alias, canonical in (extra_aliases or {}).items():
            aliases[normalize_name(alias)] = canonical

        synonyms = dict(UI_SYNONYMS)
        synonyms.update(extra_synonyms or {})

        return cls(
            field_weights=MappingProxyType(weights),
            k1=k1,
            b=b,
            snippet_length=snippet_length,
            stop_words=STOP_WORDS | {w.lower() for w in extra_stop_words},
            component_aliases=MappingProxyType(aliases),
            synonyms=MappingProxyType(synonyms),
        )

    def weight(self, search_field: SearchField) -> float:
        return self.field_weights.get(search_field, 0.0)


DEFAULT_SCORING = ScoringConfig.create()
