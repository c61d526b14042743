#!/usr/bin/env python3
"""Dictionary pipeline: corpus (text/CSV/parquet) -> word frequencies -> dictionary file."""
import argparse
import logging
import os
import sys
from pathlib import Path

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root / "src"))


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a dictionary file from a text corpus")
    parser.add_argument(
        "--config",
        type=Path,
        default=root / "configs" / "pipeline.yaml",
        help="Pipeline config YAML path",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    os.chdir(root)

    from typeahead.pipeline import DictionaryPipeline

    engine = DictionaryPipeline(args.config).run()
    print(f"Dictionary built with {len(engine.trie)} words. Try: python scripts/run_suggest.py <word>")


if __name__ == "__main__":
    main()
