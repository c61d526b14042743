"""Corpus -> vocabulary -> dictionary file."""

from typeahead.pipeline.vocabulary import VocabularyBuilder, seed_engine
from typeahead.pipeline.run import DictionaryPipeline, run_pipeline

__all__ = [
    "VocabularyBuilder",
    "DictionaryPipeline",
    "run_pipeline",
    "seed_engine",
]
