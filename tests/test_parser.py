"""Tests for document parsing and the directory category mapping."""

import textwrap

from fluentui_docs.engine.core.document import Document, DocumentKind, ParseFailure
from fluentui_docs.engine.core.markdown import extract_code_blocks, extract_prop_tables, extract_props_section
from fluentui_docs.engine.core.parser import build_document_id, parse_document, title_from_filename
from fluentui_docs.sources import DirectoryCategoryMapping

from .conftest import CORPUS

MAPPING = DirectoryCategoryMapping()


def parse(path: str, text: str):
    return parse_document(path, textwrap.dedent(text).lstrip(), MAPPING)


def test_build_document_id_strips_numeric_prefixes():
    assert build_document_id("02-components/01-forms/checkbox.md") == "components/forms/checkbox"
    assert build_document_id("00-overview.md") == "overview"


def test_title_from_filename():
    assert title_from_filename("03-toggle-button.md") == "Toggle Button"


def test_component_document():
    doc = parse("02-components/forms/checkbox.md", CORPUS["02-components/forms/checkbox.md"])

    assert isinstance(doc, Document)
    assert doc.id == "components/forms/checkbox"
    assert doc.title == "Checkbox"
    assert doc.kind is DocumentKind.COMPONENT
    assert doc.category == "forms"
    assert doc.subcategory is None
    assert doc.component_names == ("Checkbox",)
    assert doc.package_name == "@fluentui/react-checkbox"
    assert doc.import_statement == "import { Checkbox } from '@fluentui/react-components';"
    assert [s.heading for s in doc.sections] == ["Overview", "Usage", "Props", "See Also"]
    assert doc.see_also == ("Switch", "Field")
    assert doc.description.startswith("Checkbox lets users select")
    assert doc.has_props_table
    assert doc.has_code_examples


def test_components_metadata_overrides_title():
    doc = parse("02-components/navigation/tablist.md", CORPUS["02-components/navigation/tablist.md"])
    assert doc.component_names == ("TabList", "Tab")


def test_plain_metadata_lines():
    doc = parse(
        "02-components/forms/field.md",
        """
        # Field

        Package: @fluentui/react-field
        Components: Field, InfoLabel

        ## Overview

        Field adds a label and validation message to a control.
        """,
    )
    assert doc.meta("package") == "@fluentui/react-field"
    assert doc.component_names == ("Field", "InfoLabel")
    assert [s.heading for s in doc.sections] == ["Overview"]


def test_pattern_document_has_no_component_names():
    doc = parse("03-patterns/layout/01-page-layout.md", CORPUS["03-patterns/layout/01-page-layout.md"])
    assert doc.kind is DocumentKind.PATTERN
    assert doc.category == "layout"
    assert doc.component_names == ()
    assert doc.file_stem == "page-layout"


def test_headings_inside_code_fences_do_not_split_sections():
    doc = parse("01-foundation/01-getting-started.md", CORPUS["01-foundation/01-getting-started.md"])
    assert doc.title == "Getting Started"
    assert [s.heading for s in doc.sections] == ["Installation", "First Component"]
    assert "# install the components package" in doc.sections[0].body


def test_title_falls_back_to_second_level_heading():
    doc = parse("01-foundation/notes.md", "## Release Notes\n\nWhat changed in v9.\n")
    assert doc.title == "Release Notes"


def test_title_falls_back_to_file_name():
    doc = parse("01-foundation/02-fluent-provider.md", "The provider wraps the app.\n")
    assert doc.title == "Fluent Provider"
    assert doc.sections[0].heading == ""
    assert doc.sections[0].level == 0


def test_subcategory_from_second_folder():
    doc = parse("02-components/forms/pickers/date-picker.md", "# DatePicker\n\nPick a date.\n")
    assert doc.category == "forms"
    assert doc.subcategory == "pickers"


def test_root_file_is_foundation():
    doc = parse("00-overview.md", CORPUS["00-overview.md"])
    assert doc.kind is DocumentKind.FOUNDATION
    assert doc.category == "foundation"


def test_unmapped_location_is_a_failure():
    result = parse("99-drafts/notes.md", CORPUS["99-drafts/notes.md"])
    assert isinstance(result, ParseFailure)
    assert result.path == "99-drafts/notes.md"


def test_invalid_utf8_is_a_failure():
    result = parse_document("02-components/forms/bad.md", b"# Bad\n\xff\xfe", MAPPING)
    assert isinstance(result, ParseFailure)
    assert "UTF-8" in result.reason


def test_empty_document_is_a_failure():
    result = parse_document("02-components/forms/empty.md", "  \n\n", MAPPING)
    assert isinstance(result, ParseFailure)


def test_empty_category_is_a_failure():
    result = parse_document("a.md", "# A\n", lambda path: (DocumentKind.COMPONENT, " ", None))
    assert isinstance(result, ParseFailure)
    assert result.reason == "empty category"


def test_extract_code_blocks_labels():
    blocks = extract_code_blocks(textwrap.dedent(CORPUS["02-components/forms/checkbox.md"]))
    assert [(b.heading, b.language) for b in blocks] == [("Usage", "tsx")]
    assert blocks[0].code == '<Checkbox label="Remember me" />'


def test_props_section_and_inline_tables():
    checkbox = textwrap.dedent(CORPUS["02-components/forms/checkbox.md"])
    section = extract_props_section(checkbox)
    assert section.startswith("## Props")
    assert "See Also" not in section

    textarea = textwrap.dedent(CORPUS["02-components/forms/textarea.md"])
    assert extract_props_section(textarea) is None
    tables = extract_prop_tables(textarea)
    assert len(tables) == 1
    assert "resize" in tables[0]
