"""Tests for the document store lookups and category listings."""

import pytest

from fluentui_docs.engine.core.document import DocumentKind
from fluentui_docs.engine.core.parser import parse_document
from fluentui_docs.engine.core.store import DocumentStore

from .conftest import INDEXED_COUNT


def test_every_document_is_reachable_by_id(generation):
    store = generation.store
    docs = list(store.all_documents())
    assert len(docs) == INDEXED_COUNT
    for doc in docs:
        assert store.get_by_id(doc.id) is doc


def test_every_component_name_resolves(generation):
    store = generation.store
    for doc in store.all_documents():
        for name in doc.component_names:
            for variant in (name, name.lower(), name.upper()):
                found = store.get_by_component_name(variant)
                assert found is not None
                assert name in found.component_names


def test_exact_lookup_is_case_insensitive(generation):
    doc = generation.store.get_document("checkbox")
    assert doc is not None
    assert doc.title == "Checkbox"
    assert doc.component_names == ("Checkbox",)


def test_secondary_component_name(generation):
    assert generation.store.get_by_component_name("tab").id == "components/navigation/tablist"


def test_alias_resolves_to_canonical_component(generation):
    store = generation.store
    assert store.resolve_alias("text-box") == "Input"
    assert store.get_by_component_name("textbox").title == "Input"
    assert store.get_by_component_name("tabs").title == "TabList"


def test_lookup_is_never_fuzzy(generation):
    store = generation.store
    assert store.get_by_component_name("checkbx") is None
    assert store.get_by_component_name("") is None
    assert store.get_document("Spreadsheet") is None


def test_get_document_falls_back_to_title_stem_and_id(generation):
    store = generation.store
    assert store.get_document("Page Layout").id == "patterns/layout/page-layout"
    assert store.get_document("dashboard-kpi").id == "enterprise/dashboard-kpi"
    assert store.get_document("foundation/theming").title == "Theming"


def test_list_by_category_counts(generation):
    store = generation.store
    forms = store.list_by_category("forms")
    navigation = store.list_by_category("navigation")

    assert len(forms) == 5
    assert all(d.category == "forms" for d in forms)
    assert len(navigation) == 2
    assert not {d.id for d in forms} & {d.id for d in navigation}


def test_list_by_category_order_is_by_title(generation):
    titles = [d.title for d in generation.store.list_by_category("Forms")]
    assert titles == ["Checkbox", "Input", "Select", "Switch", "Textarea"]


def test_unknown_category_is_empty(generation):
    assert generation.store.list_by_category("charts") == []


def test_categories_in_declaration_order(generation):
    assert generation.store.categories() == [
        ("foundation", 3),
        ("forms", 5),
        ("navigation", 2),
        ("layout", 1),
        ("enterprise", 1),
    ]


def test_category_partition(generation):
    store = generation.store
    listed = [doc.id for name, _count in store.categories() for doc in store.list_by_category(name)]
    assert sorted(listed) == sorted(doc.id for doc in store.all_documents())
    assert len(listed) == len(set(listed))


def test_all_documents_is_restartable(generation):
    store = generation.store
    assert [d.id for d in store.all_documents()] == [d.id for d in store.all_documents()]


def test_by_kind(generation):
    store = generation.store
    assert len(store.by_kind(DocumentKind.COMPONENT)) == 7
    assert [d.id for d in store.by_kind(DocumentKind.ENTERPRISE)] == ["enterprise/dashboard-kpi"]


def _doc(path, text, kind, category):
    return parse_document(path, text, lambda _path: (kind, category, None))


def test_component_document_owns_its_name():
    pattern = _doc(
        "patterns/forms/login.md",
        "# Login Form\n\n> **Components**: `Checkbox`, `Input`\n\nA login form.\n",
        DocumentKind.PATTERN,
        "forms",
    )
    component = _doc("components/forms/checkbox.md", "# Checkbox\n\nA checkbox.\n", DocumentKind.COMPONENT, "forms")

    store = DocumentStore.build([pattern, component])

    assert store.get_by_component_name("Checkbox") is component
    assert store.get_by_component_name("Input") is pattern


def test_duplicate_ids_are_rejected():
    doc = _doc("components/forms/checkbox.md", "# Checkbox\n", DocumentKind.COMPONENT, "forms")
    with pytest.raises(ValueError, match="Duplicate document id"):
        DocumentStore.build([doc, doc])


def test_subcategories_do_not_reorder_a_category_listing():
    zeta = parse_document("forms/zeta.md", "# Zeta\n\nTop level.\n", lambda _p: (DocumentKind.COMPONENT, "forms", None))
    alpha = parse_document(
        "forms/sub/alpha.md", "# Alpha\n\nNested.\n", lambda _p: (DocumentKind.COMPONENT, "forms", "sub")
    )
    beta = parse_document(
        "forms/other/beta.md", "# Beta\n\nNested.\n", lambda _p: (DocumentKind.COMPONENT, "forms", "other")
    )

    store = DocumentStore.build([zeta, beta, alpha])

    assert [d.title for d in store.list_by_category("forms")] == ["Alpha", "Beta", "Zeta"]
    assert [d.title for d in store.list_by_category("forms", "sub")] == ["Alpha"]
    assert store.subcategories("forms") == [("other", 1), ("sub", 1)]


def test_document_metadata_is_read_only(generation):
    doc = generation.store.get_document("Checkbox")
    with pytest.raises(TypeError):
        doc.metadata["Package"] = "changed"
    assert doc.package_name == "@fluentui/react-checkbox"
