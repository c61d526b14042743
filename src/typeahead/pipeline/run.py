"""Run the dictionary pipeline: corpus -> vocabulary -> dictionary file."""

import logging
from pathlib import Path

import yaml

from typeahead.config import EngineConfig
from typeahead.engine import AutocompleteEngine
from typeahead.pipeline.vocabulary import VocabularyBuilder, seed_engine

logger = logging.getLogger(__name__)


class DictionaryPipeline:
    """Reads the corpus named in the config and writes a dictionary file."""

    def __init__(self, config_path: str | Path) -> None:
        self._config_path = Path(config_path)
        self._config = self._load_config()

    def _load_config(self) -> dict:
        with open(self._config_path) as f:
            return yaml.safe_load(f)

    def run(self) -> AutocompleteEngine:
        inp = self._config["input"]
        out = self._config["output"]
        opts = self._config.get("vocabulary_options", {}) or {}

        builder = VocabularyBuilder(
            text_col=inp.get("text_col", "text"),
            min_count=opts.get("min_count", 1),
            top_k=opts.get("top_vocabulary_size"),
        )
        vocabulary = builder.build(inp["path"])

        dictionary_path = Path(out["dictionary_path"])
        dictionary_path.parent.mkdir(parents=True, exist_ok=True)
        engine = AutocompleteEngine(EngineConfig(dictionary_path=str(dictionary_path)))
        count = seed_engine(engine, vocabulary)
        if not engine.stop():
            raise OSError(f"Failed to write dictionary: {dictionary_path}")
        logger.info("Wrote %d words to %s", count, dictionary_path)
        return engine


def run_pipeline(config_path: str | Path) -> AutocompleteEngine:
    """Convenience function: run the dictionary pipeline with the given config."""
    return DictionaryPipeline(config_path).run()
