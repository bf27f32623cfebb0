from __future__ import annotations

from .corpus import generate_annotated_sources, generate_corpus_files

__all__ = ["generate_annotated_sources", "generate_corpus_files"]
