"""Build a (word, frequency) vocabulary from a text corpus."""

from pathlib import Path

import pandas as pd

from typeahead.engine import AutocompleteEngine

WORD_PATTERN = r"[a-z]+"


class VocabularyBuilder:
    """Loads documents, counts lowercase words and keeps the frequent ones."""

    DEFAULT_TEXT_COL = "text"

    def __init__(
        self,
        text_col: str = DEFAULT_TEXT_COL,
        min_count: int = 1,
        top_k: int | None = None,
    ) -> None:
        self._text_col = text_col
        self._min_count = min_count
        self._top_k = top_k

    def load(self, path: str | Path) -> pd.DataFrame:
        """Load documents from CSV, parquet or plain text (one per line)."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Corpus not found: {path}")

        if path.suffix == ".parquet":
            df = pd.read_parquet(path)
        elif path.suffix == ".csv":
            df = pd.read_csv(path)
        else:
            with open(path, encoding="utf-8") as f:
                lines = f.read().splitlines()
            df = pd.DataFrame({self._text_col: lines})

        if self._text_col not in df.columns:
            raise ValueError(f"Missing column: {self._text_col}")
        return df.rename(columns={self._text_col: "text"})[["text"]]

    def count_words(self, docs: pd.DataFrame) -> pd.DataFrame:
        """Word counts sorted by frequency desc, then word asc."""
        words = (
            docs["text"]
            .fillna("")
            .astype(str)
            .str.lower()
            .str.findall(WORD_PATTERN)
            .explode()
            .dropna()
        )
        if words.empty:
            return pd.DataFrame({"word": pd.Series(dtype=str), "frequency": pd.Series(dtype=int)})
        counts = words.value_counts().rename_axis("word").reset_index(name="frequency")
        counts["frequency"] = counts["frequency"].astype(int)
        return counts.sort_values(["frequency", "word"], ascending=[False, True]).reset_index(drop=True)

    def filter_vocabulary(self, counts: pd.DataFrame) -> pd.DataFrame:
        vocab = counts[counts["frequency"] >= self._min_count]
        if self._top_k is not None and self._top_k > 0:
            vocab = vocab.head(self._top_k)
        return vocab.reset_index(drop=True)

    def build(self, path: str | Path) -> pd.DataFrame:
        return self.filter_vocabulary(self.count_words(self.load(path)))


def seed_engine(engine: AutocompleteEngine, vocabulary: pd.DataFrame) -> int:
    """Insert every vocabulary row; returns the number inserted."""
    pairs = zip(vocabulary["word"].astype(str), vocabulary["frequency"].astype(int))
    return engine.trie.insert_many((w, int(f)) for w, f in pairs)
