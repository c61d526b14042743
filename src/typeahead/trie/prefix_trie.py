"""In-memory trie over a-z with frequencies, prefix lookup and fuzzy search."""

import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from typeahead import storage
from typeahead.fuzzy import FuzzyMatch, ranked_fuzzy_matches
from typeahead.ranking import keep_prefix_matches, top_k_words
from typeahead.node import TrieNode, normalize

logger = logging.getLogger(__name__)

SELECTION_BOOST = 5
PREFIX_BOOST = 10.0


class Trie:
    """Prefix dictionary. Input is reduced to a-z at every entry point."""

    def __init__(
        self,
        selection_boost: int = SELECTION_BOOST,
        prefix_boost: float = PREFIX_BOOST,
    ) -> None:
        self.root = TrieNode()
        self.selection_boost = selection_boost
        self.prefix_boost = prefix_boost

    def _find(self, word: str) -> TrieNode | None:
        node: TrieNode | None = self.root
        for ch in normalize(word):
            node = node.child(ch)
            if node is None:
                return None
        return node

    # insertion ---------------------------------------------------------------
    def insert(self, word: str, frequency: int = 1) -> None:
        """Insert word, overwriting any previous frequency."""
        if frequency < 0:
            raise ValueError(f"frequency must be non-negative, got {frequency}")
        letters = normalize(word)
        if not letters:
            logger.debug("Ignoring %r: no lowercase letters", word)
            return
        node = self.root
        for ch in letters:
            node = node.child_or_create(ch)
        node.is_word = True
        node.frequency = frequency

    def insert_many(self, pairs: Iterable[tuple[str, int]]) -> int:
        count = 0
        for word, freq in pairs:
            self.insert(word, freq)
            if normalize(word):
                count += 1
        return count

    def log_selection(self, word: str) -> bool:
        """Boost a selected word's frequency. Unknown words are left alone."""
        node = self._find(word)
        if node is None or not node.is_word:
            return False
        node.frequency += self.selection_boost
        return True

    # prefix queries ---------------------------------------------------------
    def _collect(self, node: TrieNode, current: list[str], out: list[tuple[str, int]]) -> None:
        if node.is_word:
            out.append(("".join(current), node.frequency))
        for ch, child in node.iter_children():
            current.append(ch)
            self._collect(child, current, out)
            current.pop()

    def words_with_prefix(self, prefix: str) -> list[tuple[str, int]]:
        """All (word, frequency) under prefix, in lexicographic order."""
        node = self._find(prefix)
        if node is None:
            return []
        out: list[tuple[str, int]] = []
        self._collect(node, list(normalize(prefix)), out)
        return out

    def top_k_with_prefix(self, prefix: str, k: int) -> list[str]:
        return top_k_words(self.words_with_prefix(prefix), k)

    # fuzzy queries ----------------------------------------------------------
    def fuzzy_matches(self, text: str, max_edits: int, alpha: float = 1.0) -> list[FuzzyMatch]:
        """Ranked fuzzy candidates before any prefix filtering."""
        return ranked_fuzzy_matches(self.root, text, max_edits, alpha)

    def top_k_fuzzy_matches(self, text: str, max_edits: int, k: int, alpha: float = 1.0) -> list[FuzzyMatch]:
        """Fuzzy candidates that are also among the top-k prefix matches of text."""
        ranked = self.fuzzy_matches(text, max_edits, alpha)
        survivors = keep_prefix_matches(ranked, self.top_k_with_prefix(text, k), self.prefix_boost)
        return survivors[:k] if k > 0 else []

    # whole-vocabulary helpers ----------------------------------------------
    def items(self) -> list[tuple[str, int]]:
        out: list[tuple[str, int]] = []
        self._collect(self.root, [], out)
        return out

    def __iter__(self) -> Iterator[str]:
        return (word for word, _ in self.items())

    def __len__(self) -> int:
        return len(self.items())

    def __contains__(self, word: str) -> bool:
        return self.frequency(word) is not None

    def frequency(self, word: str) -> int | None:
        node = self._find(word)
        if node is None or not node.is_word:
            return None
        return node.frequency

    def dump(self, stream: TextIO | None = None) -> None:
        """Write an indented listing of every word, two spaces per level."""
        stream = stream or sys.stdout
        self._dump(self.root, [], stream)

    def _dump(self, node: TrieNode, current: list[str], stream: TextIO) -> None:
        if node.is_word:
            stream.write(f"{'  ' * len(current)}- {''.join(current)} (Freq: {node.frequency})\n")
        for ch, child in node.iter_children():
            current.append(ch)
            self._dump(child, current, stream)
            current.pop()

    # persistence ------------------------------------------------------------
    def load(self, path: str | Path) -> int:
        """Insert every record from path. A missing file loads nothing."""
        count = self.insert_many(storage.read_records(path))
        logger.info("Loaded %d words from %s", count, path)
        return count

    def save(self, path: str | Path) -> bool:
        ok = storage.write_records(path, self.items())
        if ok:
            logger.info("Saved dictionary to %s", path)
        return ok
