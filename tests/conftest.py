"""Shared fixtures: a small FluentUI docs tree written to a temp directory."""

import textwrap
from pathlib import Path

import pytest

from fluentui_docs.config import Settings
from fluentui_docs.engine.builder import IndexManager, build_index
from fluentui_docs.engine.handlers import HandlerContext
from fluentui_docs.sources import DirectoryCategoryMapping, discover_documents

CORPUS: dict[str, str] = {
    "00-overview.md": """
        # FluentUI v9 Documentation

        An index of the Fluent UI React v9 documentation for components, patterns and enterprise recipes.
        """,
    "01-foundation/01-getting-started.md": """
        # Getting Started

        > **Package**: `@fluentui/react-components`

        ## Installation

        Install the package with npm.

        ```bash
        # install the components package
        npm install @fluentui/react-components
        ```

        ## First Component

        Wrap the app in FluentProvider and render a Button.
        """,
    "01-foundation/03-theming.md": """
        # Theming

        ## Overview

        Themes provide design tokens for colors, typography and spacing.

        ## Brand Ramps

        Create a brand color ramp with createLightTheme.
        """,
    "02-components/forms/checkbox.md": """
        # Checkbox

        > **Package**: `@fluentui/react-checkbox`
        > **Import**: `import { Checkbox } from '@fluentui/react-components';`

        ## Overview

        Checkbox lets users select one or more options from a set.
        Use a checkbox in a login form for the remember me option.

        ## Usage

        ```tsx
        <Checkbox label="Remember me" />
        ```

        ## Props

        | Prop | Type | Default | Description |
        |------|------|---------|-------------|
        | checked | boolean | false | Whether the checkbox is checked |

        ## See Also

        - [Switch](./switch.md)
        - [Field](./field.md)
        """,
    "02-components/forms/input.md": """
        # Input

        > **Package**: `@fluentui/react-input`
        > **Import**: `import { Input } from '@fluentui/react-components';`

        ## Overview

        Input lets users enter and edit a single line of text.
        Pair an Input with a Field label for accessible forms.

        ## Usage

        ```tsx
        <Input placeholder="Email" type="email" />
        ```
        """,
    "02-components/forms/select.md": """
        # Select

        > **Package**: `@fluentui/react-select`

        ## Overview

        Select picks one option from a native dropdown list.
        """,
    "02-components/forms/switch.md": """
        # Switch

        > **Package**: `@fluentui/react-switch`

        ## Overview

        Switch toggles a single setting on or off.
        """,
    "02-components/forms/textarea.md": """
        # Textarea

        > **Package**: `@fluentui/react-textarea`
        > **Import**: `import { Textarea } from '@fluentui/react-components';`

        ## Overview

        Textarea accepts several lines of text. Prefer it over a single line input for long answers.

        ## API

        | Prop | Type | Description |
        |------|------|-------------|
        | resize | string | Resize handle |
        """,
    "02-components/navigation/breadcrumb.md": """
        # Breadcrumb

        > **Package**: `@fluentui/react-breadcrumb`

        ## Overview

        Breadcrumb shows the location of the current page in a hierarchy.
        """,
    "02-components/navigation/tablist.md": """
        # TabList

        > **Package**: `@fluentui/react-tabs`
        > **Components**: `TabList`, `Tab`

        ## Overview

        TabList switches between related views.
        """,
    "03-patterns/layout/01-page-layout.md": """
        # Page Layout

        ## Overview

        Structure a page with a header, navigation and a content area.

        ## Form Pages

        Group form fields with Field and Input, and place a Checkbox for consent.
        """,
    "04-enterprise/01-dashboard-kpi.md": """
        # Dashboard KPI Cards

        ## Overview

        Show key metrics with Card and Badge components.
        """,
    # Unknown module folder: counted as a failure, never indexed
    "99-drafts/notes.md": """
        # Notes

        Unfinished.
        """,
}

INDEXED_COUNT = len(CORPUS) - 1


def write_corpus(root: Path, files: dict[str, str] = CORPUS) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return root


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    return write_corpus(tmp_path / "docs")


@pytest.fixture
def mapping() -> DirectoryCategoryMapping:
    return DirectoryCategoryMapping()


@pytest.fixture
def generation(docs_root, mapping):
    return build_index(docs_root, discover=discover_documents, mapping=mapping)


@pytest.fixture
def manager(docs_root, mapping) -> IndexManager:
    return IndexManager(docs_root, discover=discover_documents, mapping=mapping)


@pytest.fixture
def test_settings(docs_root) -> Settings:
    return Settings(docs_path=docs_root)


@pytest.fixture
def ctx(generation, test_settings, manager) -> HandlerContext:
    return HandlerContext(generation=generation, settings=test_settings, manager=manager)
