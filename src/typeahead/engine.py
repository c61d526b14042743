"""Autocomplete session: load the dictionary, answer queries, save on exit."""

import logging
from pathlib import Path

from typeahead.config import EngineConfig
from typeahead.fuzzy import FuzzyMatch
from typeahead.ranking import best_match, keep_prefix_matches, suffix_difference
from typeahead.trie import Trie

logger = logging.getLogger(__name__)


class AutocompleteEngine:
    """Wraps a Trie with the configured edit budget, boosts and dictionary path."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.trie = Trie(
            selection_boost=self.config.selection_boost,
            prefix_boost=self.config.prefix_boost,
        )

    def start(self) -> int:
        return self.load(self.config.dictionary_path)

    def stop(self) -> bool:
        return self.save(self.config.dictionary_path)

    def load(self, path: str | Path) -> int:
        return self.trie.load(path)

    def save(self, path: str | Path) -> bool:
        return self.trie.save(path)

    def insert(self, word: str, frequency: int = 1) -> None:
        self.trie.insert(word, frequency)

    def log_selection(self, word: str) -> bool:
        return self.trie.log_selection(word)

    def words_with_prefix(self, prefix: str) -> list[tuple[str, int]]:
        return self.trie.words_with_prefix(prefix)

    def top_k_with_prefix(self, prefix: str, k: int | None = None) -> list[str]:
        return self.trie.top_k_with_prefix(prefix, self.config.top_k if k is None else k)

    def fuzzy_matches(self, text: str, max_edits: int | None = None) -> list[FuzzyMatch]:
        max_edits = self.config.max_edits if max_edits is None else max_edits
        return self.trie.fuzzy_matches(text, max_edits, self.config.alpha)

    def top_k_fuzzy_matches(
        self,
        text: str,
        max_edits: int | None = None,
        k: int | None = None,
    ) -> list[FuzzyMatch]:
        max_edits = self.config.max_edits if max_edits is None else max_edits
        k = self.config.top_k if k is None else k
        return self.trie.top_k_fuzzy_matches(text, max_edits, k, self.config.alpha)

    def suggest(self, text: str) -> str | None:
        """Best single completion for a typed word, or None."""
        matches = self.top_k_fuzzy_matches(text)
        matches = keep_prefix_matches(
            matches,
            self.top_k_with_prefix(text),
            self.config.suggestion_boost,
        )
        match = best_match(matches)
        if match is None:
            logger.debug("No suggestion for %r", text)
            return None
        return match.word

    def complete(self, text: str) -> str:
        """Letters to append to text to reach the best suggestion."""
        word = self.suggest(text)
        return suffix_difference(text, word) if word else ""
