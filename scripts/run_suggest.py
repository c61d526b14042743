#!/usr/bin/env python3
"""Load the dictionary and print prefix and fuzzy suggestions for a typed word."""
import argparse
import logging
import sys
from pathlib import Path

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root / "src"))
from typeahead import AutocompleteEngine, load_config


def main() -> None:
    parser = argparse.ArgumentParser(description="Show autocomplete suggestions for a typed word")
    parser.add_argument("word", nargs="?", default="wea", help="Typed word (e.g. wea, aple)")
    parser.add_argument("--limit", type=int, default=5, help="Max suggestions to return")
    parser.add_argument("--max-edits", type=int, default=None, help="Edit budget (default from config)")
    parser.add_argument("--config", type=Path, default=root / "configs" / "engine.yaml", help="Config YAML")
    parser.add_argument("--dump", action="store_true", help="Print the whole trie first")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config)
    if not Path(config.dictionary_path).is_absolute():
        config.dictionary_path = str(root / config.dictionary_path)

    engine = AutocompleteEngine(config)
    if not engine.start():
        print(f"Dictionary {config.dictionary_path} is empty. Build it with scripts/run_build_dictionary.py")
        return
    if args.dump:
        engine.trie.dump()

    prefix = engine.top_k_with_prefix(args.word, args.limit)
    fuzzy = engine.top_k_fuzzy_matches(args.word, args.max_edits, args.limit)

    print(f"Word: '{args.word}'\n")
    print("Prefix matches:")
    for i, word in enumerate(prefix, 1):
        print(f"  {i}. {word}")
    print("Fuzzy matches:")
    for i, m in enumerate(fuzzy, 1):
        print(f"  {i}. {m.word}  freq={m.frequency} dist={m.edit_distance} score={m.score:.1f}")
    best = engine.suggest(args.word)
    print(f"\nBest: {best or '-'}  (+'{engine.complete(args.word)}')")


if __name__ == "__main__":
    main()
