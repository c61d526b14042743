"""Trie-based autocomplete with frequency ranking and typo-tolerant matching."""

from typeahead.config import EngineConfig, load_config
from typeahead.engine import AutocompleteEngine
from typeahead.fuzzy import FuzzyMatch
from typeahead.trie import Trie

__all__ = ["AutocompleteEngine", "EngineConfig", "FuzzyMatch", "Trie", "load_config"]
