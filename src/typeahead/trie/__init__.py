"""In-memory trie with prefix lookup, fuzzy matching and persistence."""

from typeahead.node import TrieNode, normalize
from typeahead.trie.prefix_trie import Trie

__all__ = ["Trie", "TrieNode", "normalize"]
