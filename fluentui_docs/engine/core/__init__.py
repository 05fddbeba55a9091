"""Engine core module.

This module contains the document model and its storage:
- Document, Section and generation data structures
- Markdown parsing into documents
- The per-generation document store
"""

from .document import (
    Document,
    DocumentKind,
    Generation,
    IndexStats,
    ParseFailure,
    Section,
)
from .parser import CategoryMapping, build_document_id, parse_document
from .store import DocumentStore

__all__ = [
    # Document structures
    "Document",
    "DocumentKind",
    "Generation",
    "IndexStats",
    "ParseFailure",
    "Section",
    # Parser
    "CategoryMapping",
    "build_document_id",
    "parse_document",
    # Store
    "DocumentStore",
]
