"""Exceptions raised by the indexing engine.

Per-document parse problems are not exceptions: they are ``ParseFailure``
values collected in the build statistics. Lookups that match nothing return
``None`` or an empty list.
"""


class DocsIndexError(Exception):
    """Base class for index build and lifecycle errors."""


class EmptyCorpusError(DocsIndexError):
    """No document parsed successfully, so there is nothing to publish."""

    def __init__(self, source_root: str, failed_files: int = 0):
        self.source_root = source_root
        self.failed_files = failed_files
        super().__init__(
            f"No documents could be indexed from {source_root} ({failed_files} failed)"
        )


class RebuildFailure(DocsIndexError):
    """Discovery or parsing raised an unrecoverable error during a build."""


class RebuildAborted(RebuildFailure):
    """The build was cancelled between files; nothing was published."""


class IndexNotReadyError(DocsIndexError):
    """No generation has been published yet."""


class DocsRootNotFoundError(DocsIndexError):
    """The configured docs root does not exist or is not a directory."""

    def __init__(self, source_root: str):
        self.source_root = source_root
        super().__init__(
            f"Docs root not found: {source_root}. Set FLUENTUI_DOCS_PATH to the docs directory."
        )
