"""File discovery and location -> category mapping for the docs tree.

Layout of a docs root (``docs/v9``)::

    00-overview.md                      -> foundation
    01-foundation/03-theming.md         -> foundation / foundation
    02-components/forms/checkbox.md     -> component / forms
    03-patterns/forms/02-validation.md  -> pattern / forms
    04-enterprise/01-dashboard-kpi.md   -> enterprise / enterprise

Top-level folders are ``NN-<module>``; the module decides the kind. For
component and pattern modules the next folder is the category and the one
after it the subcategory. Foundation and enterprise docs are categorized by
their module, with any subfolder as subcategory.
"""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from .engine.builder import IndexManager
from .engine.core.document import DocumentKind
from .engine.core.parser import strip_numeric_prefix
from .engine.scoring.constants import MODULE_KINDS
from .errors import DocsRootNotFoundError

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

DOC_SUFFIX = ".md"


def discover_documents(root: Path | str) -> Iterator[tuple[str, bytes]]:
    """Yield ``(relative posix path, raw bytes)`` for every markdown file under ``root``.

    Files are yielded sorted by relative path so builds are reproducible.
    Hidden files and folders are skipped.

    Raises:
        FileNotFoundError: If ``root`` does not exist.
        NotADirectoryError: If ``root`` is not a directory.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Docs root not found: {root_path}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Docs root is not a directory: {root_path}")

    paths = sorted(
        (
            p
            for p in root_path.rglob(f"*{DOC_SUFFIX}")
            if p.is_file()
            and not any(part.startswith(".") for part in p.relative_to(root_path).parts)
        ),
        key=lambda p: p.relative_to(root_path).as_posix(),
    )
    logger.debug(f"Discovered {len(paths)} markdown files under {root_path}")
    for path in paths:
        yield path.relative_to(root_path).as_posix(), path.read_bytes()


class DirectoryCategoryMapping:
    """Deterministic ``relative path -> (kind, category, subcategory)`` mapping.

    Args:
        module_kinds: Module folder name (numeric prefix stripped) -> kind value.
            Folders naming an unknown module map to ``None``.
    """

    def __init__(self, module_kinds: Mapping[str, str] | None = None):
        kinds = MODULE_KINDS if module_kinds is None else module_kinds
        self.module_kinds = {name.lower(): DocumentKind(kind) for name, kind in kinds.items()}

    def __call__(self, path: str) -> tuple[DocumentKind, str, str | None] | None:
        segments = [s for s in path.replace("\\", "/").split("/") if s]
        if not segments:
            return None

        # Root-level files (overview, changelog) are foundation material
        if len(segments) == 1:
            return DocumentKind.FOUNDATION, DocumentKind.FOUNDATION.value, None

        module = strip_numeric_prefix(segments[0]).lower()
        kind = self.module_kinds.get(module)
        if kind is None:
            return None

        folders = [strip_numeric_prefix(s) for s in segments[1:-1]]
        match kind:
            case DocumentKind.COMPONENT | DocumentKind.PATTERN:
                category = folders[0] if folders else module
                subcategory = folders[1] if len(folders) > 1 else None
            case _:
                category = module
                subcategory = folders[0] if folders else None
        return kind, category, subcategory


def create_index_manager(settings: "Settings") -> IndexManager:
    """Wire discovery, mapping and scoring config from settings into an IndexManager.

    Raises:
        DocsRootNotFoundError: If the resolved docs root is not a directory.
    """
    root = settings.resolved_docs_path
    if not root.is_dir():
        raise DocsRootNotFoundError(str(root))
    return IndexManager(
        root,
        discover=discover_documents,
        mapping=DirectoryCategoryMapping(settings.module_kinds),
        config=settings.scoring_config(),
    )
