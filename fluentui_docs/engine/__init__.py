"""Indexing and retrieval engine for the FluentUI documentation corpus."""
