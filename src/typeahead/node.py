"""Trie node: 26 letter slots, a word marker and a frequency."""

ALPHABET_SIZE = 26


def letter_index(ch: str) -> int:
    return ord(ch) - ord("a")


def index_letter(index: int) -> str:
    return chr(ord("a") + index)


def normalize(word: str) -> str:
    """Keep only lowercase ASCII letters; everything else is dropped."""
    return "".join(ch for ch in word if "a" <= ch <= "z")


class TrieNode:
    """One node of the trie. Children are owned exclusively by their parent."""

    __slots__ = ("children", "is_word", "frequency")

    def __init__(self) -> None:
        self.children: list["TrieNode | None"] = [None] * ALPHABET_SIZE
        self.is_word = False
        self.frequency = 0

    def child(self, ch: str) -> "TrieNode | None":
        return self.children[letter_index(ch)]

    def child_or_create(self, ch: str) -> "TrieNode":
        i = letter_index(ch)
        node = self.children[i]
        if node is None:
            node = TrieNode()
            self.children[i] = node
        return node

    def iter_children(self):
        """Yield (letter, child) pairs in a..z order, skipping empty slots."""
        for i, node in enumerate(self.children):
            if node is not None:
                yield index_letter(i), node
