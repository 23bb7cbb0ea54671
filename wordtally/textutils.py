"""Text helpers: tokenizing, word cleaning and file checks."""

from __future__ import annotations

import unicodedata
from itertools import groupby
from pathlib import Path

_TEXT_EXTENSIONS = frozenset(
    {
        ".txt", ".log", ".csv", ".md", ".xml", ".json", ".cpp", ".h",
        ".hpp", ".py", ".java", ".c", ".js", ".html", ".css",
        ".php", ".rb", ".go", ".swift", ".ts", ".vb", ".pl",
        ".sql", ".yaml", ".yml", ".rst", ".tex", ".rtf",
    }
)

_UTF8_BOM = b"\xef\xbb\xbf"
_SAMPLE_SIZE = 1024


def _is_well_formed(text: str) -> bool:
    """True unless the text carries bytes that were not valid UTF-8."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _is_separator(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch)[0] in "PS"


def file_exists(file_path: str | Path) -> bool:
    """True if the path names an existing regular file."""
    return Path(file_path).is_file()


def clean_word(word: str) -> str:
    """Keep only the letters of a word, lower-cased."""
    if not _is_well_formed(word):
        return "".join(ch.lower() for ch in word if ch.isascii() and ch.isalpha())
    return "".join(ch.lower() for ch in word if ch.isalpha())


def is_text_file(file_path: str | Path) -> bool:
    """True if the file's extension is one of the known text extensions."""
    return Path(file_path).suffix.lower() in _TEXT_EXTENSIONS


def tokenize_text(text: str) -> list[str]:
    """Split text into tokens at whitespace and punctuation.

    Text holding undecodable bytes is split at whitespace only.
    """
    if not _is_well_formed(text):
        return text.split()
    return [
        "".join(chars)
        for separator, chars in groupby(text, key=_is_separator)
        if not separator
    ]


def is_letter(c: str | int) -> bool:
    """True if the single-byte character is an ASCII letter."""
    ch = chr(c) if isinstance(c, int) else c
    return ch.isascii() and ch.isalpha()


def is_other_letter(wc: str | int) -> bool:
    """True if the character is a letter in any script."""
    ch = chr(wc) if isinstance(wc, int) else wc
    return ch.isalpha()


def _sequence_length(lead: int) -> int | None:
    if lead <= 0x7F:
        return 1
    if lead >> 5 == 0x06:
        return 2
    if lead >> 4 == 0x0E:
        return 3
    if lead >> 3 == 0x1E:
        return 4
    return None


def is_utf8_file(file_path: str | Path) -> bool:
    """Guess whether a file is UTF-8 from its BOM or its first kilobyte."""
    try:
        with open(file_path, "rb") as handle:
            sample = handle.read(_SAMPLE_SIZE)
    except OSError:
        return False

    if sample.startswith(_UTF8_BOM):
        return True

    pos = 0
    while pos < len(sample):
        length = _sequence_length(sample[pos])
        if length is None:
            return False
        if pos + length > len(sample):
            # A sequence cut off by the end of the sample is not held against it.
            break
        if any(b >> 6 != 0x02 for b in sample[pos + 1 : pos + length]):
            return False
        pos += length
    return True