"""Counting the words of a single file."""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from wordtally.exceptions import FileProcessingError, MissingFileError
from wordtally.textutils import clean_word, is_utf8_file, tokenize_text

_UTF8_BOM = b"\xef\xbb\xbf"


@dataclass(frozen=True)
class WordCountStats:
    """Word counts for one file and the time it took to get them."""

    file_name: str
    total_words: int
    unique_words: int
    processing_time_ms: int


def read_file_contents(file_path: str | Path) -> str:
    """Read a file as text, dropping a leading UTF-8 BOM.

    Bytes that are not valid UTF-8 are kept as escaped surrogates.
    """
    utf8 = is_utf8_file(file_path)
    try:
        with open(file_path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MissingFileError(str(file_path)) from exc

    if utf8 and data.startswith(_UTF8_BOM):
        data = data[len(_UTF8_BOM):]
    return data.decode("utf-8", "surrogateescape")


def count_words(text: str) -> Counter[str]:
    """Count the cleaned words of a text."""
    return Counter(
        word for word in map(clean_word, tokenize_text(text)) if word
    )


def process_file(file_path: str | Path) -> WordCountStats:
    """Count the words of one file."""
    start = time.perf_counter()
    try:
        counts = count_words(read_file_contents(file_path))
    except Exception as exc:
        raise FileProcessingError(str(file_path), str(exc)) from exc
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    return WordCountStats(
        file_name=str(file_path),
        total_words=sum(counts.values()),
        unique_words=len(counts),
        processing_time_ms=elapsed_ms,
    )