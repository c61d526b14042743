import pytest

from typeahead import AutocompleteEngine, EngineConfig, Trie


@pytest.fixture
def trie():
    t = Trie()
    for word, freq in [("app", 9), ("apple", 5), ("apply", 5), ("apt", 1), ("banana", 50)]:
        t.insert(word, freq)
    return t


@pytest.fixture
def engine(tmp_path):
    config = EngineConfig(dictionary_path=str(tmp_path / "dictionary.txt"))
    e = AutocompleteEngine(config)
    for word, freq in [("apple", 10), ("apply", 3), ("application", 7), ("banana", 4)]:
        e.insert(word, freq)
    return e
