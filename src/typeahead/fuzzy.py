"""Bounded edit-distance search over the trie.

The search walks the trie and the target string together. At each step a trie
letter can match the target letter (free), substitute for it, or be inserted
in front of it; the target letter can also be deleted. Every operation other
than a match spends one unit of the edit budget. Once the whole target has
been consumed, terminal nodes are recorded and the walk keeps going with
trailing insertions, so "cat" with one edit also finds "cats".
"""

from dataclasses import dataclass

from typeahead.node import TrieNode, normalize


@dataclass
class FuzzyMatch:
    word: str
    frequency: int
    edit_distance: int
    score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "frequency": self.frequency,
            "edit_distance": self.edit_distance,
            "score": self.score,
        }


def ranking_key(match: FuzzyMatch) -> tuple[bool, float, str]:
    """Exact matches first regardless of score, then score desc, then word asc."""
    return (match.edit_distance != 0, -match.score, match.word)


def _search(
    node: TrieNode | None,
    target: str,
    current: list[str],
    index: int,
    edits_remaining: int,
    edits_used: int,
    results: dict[str, FuzzyMatch],
) -> None:
    if node is None or edits_remaining < 0:
        return

    if index == len(target):
        if node.is_word:
            word = "".join(current)
            seen = results.get(word)
            if seen is None or seen.edit_distance > edits_used:
                results[word] = FuzzyMatch(word, node.frequency, edits_used)
        # trailing insertions: target is a prefix of a longer trie word
        for ch, child in node.iter_children():
            current.append(ch)
            _search(child, target, current, index, edits_remaining - 1, edits_used + 1, results)
            current.pop()
        return

    target_ch = target[index]
    for ch, child in node.iter_children():
        current.append(ch)
        if ch == target_ch:
            _search(child, target, current, index + 1, edits_remaining, edits_used, results)
        else:
            _search(child, target, current, index + 1, edits_remaining - 1, edits_used + 1, results)
        # insertion: trie letter with no counterpart in the target
        _search(child, target, current, index, edits_remaining - 1, edits_used + 1, results)
        current.pop()

    # deletion: target letter with no counterpart in the trie word
    _search(node, target, current, index + 1, edits_remaining - 1, edits_used + 1, results)


def search_fuzzy(root: TrieNode, target: str, max_edits: int) -> dict[str, FuzzyMatch]:
    """Return word -> FuzzyMatch (minimum edit distance found) without scores."""
    results: dict[str, FuzzyMatch] = {}
    _search(root, normalize(target), [], 0, max_edits, 0, results)
    return results


def ranked_fuzzy_matches(
    root: TrieNode,
    target: str,
    max_edits: int,
    alpha: float = 1.0,
) -> list[FuzzyMatch]:
    """Score every candidate as frequency - alpha * edit_distance and rank them."""
    if max_edits < 0:
        return []
    matches = list(search_fuzzy(root, target, max_edits).values())
    for m in matches:
        m.score = m.frequency - alpha * m.edit_distance
    matches.sort(key=ranking_key)
    return matches
