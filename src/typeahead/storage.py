"""Flat dictionary file: whitespace-separated `<word> <frequency>` pairs."""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

FREQUENCY_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_records(text: str) -> list[tuple[str, int]]:
    """Pair up whitespace-delimited tokens as (word, frequency).

    Reading stops at the first frequency that is not an integer; a trailing
    unpaired token is ignored; negative frequencies are skipped.
    """
    tokens = text.split()
    records: list[tuple[str, int]] = []
    for i in range(0, len(tokens) - 1, 2):
        word, raw_freq = tokens[i], tokens[i + 1]
        if not FREQUENCY_PATTERN.fullmatch(raw_freq):
            logger.warning("Stopped reading at %r: frequency %r is not an integer", word, raw_freq)
            break
        freq = int(raw_freq)
        if freq < 0:
            logger.warning("Skipping %r: negative frequency %d", word, freq)
            continue
        records.append((word, freq))
    return records


def read_records(path: str | Path) -> list[tuple[str, int]]:
    """Read a dictionary file. An unreadable file yields no records."""
    path = Path(path)
    try:
        # undecodable bytes become U+FFFD, which insert drops like any non-letter
        with open(path, encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        logger.warning("No saved data found (%s): %s", path, e)
        return []
    return parse_records(text)


def write_records(path: str | Path, records: Iterable[tuple[str, int]]) -> bool:
    """Write one `<word> <frequency>` line per record. Returns False on failure."""
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            for word, freq in records:
                f.write(f"{word} {freq}\n")
    except OSError as e:
        logger.error("Failed to save dictionary to %s: %s", path, e)
        return False
    return True
