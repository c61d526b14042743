"""Top-k selection and the prefix/fuzzy intersection used for suggestions."""

import heapq
from collections.abc import Iterable
from dataclasses import replace

from typeahead.fuzzy import FuzzyMatch


def top_k_words(pairs: Iterable[tuple[str, int]], k: int) -> list[str]:
    """k most frequent words, ties broken by ascending word."""
    if k <= 0:
        return []
    best = heapq.nsmallest(k, pairs, key=lambda p: (-p[1], p[0]))
    return [word for word, _ in best]


def keep_prefix_matches(
    matches: list[FuzzyMatch],
    prefix_words: Iterable[str],
    boost: float,
) -> list[FuzzyMatch]:
    """Drop fuzzy matches that are not also prefix matches and boost the rest.

    The boost is flat, so the input ranking is preserved.
    """
    allowed = set(prefix_words)
    return [replace(m, score=m.score + boost) for m in matches if m.word in allowed]


def best_match(matches: list[FuzzyMatch]) -> FuzzyMatch | None:
    return matches[0] if matches else None


def suffix_difference(typed: str, suggestion: str) -> str:
    """Part of suggestion after typed, or "" when typed is not its prefix."""
    if suggestion.startswith(typed):
        return suggestion[len(typed):]
    return ""
