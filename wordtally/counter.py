"""Counting words across many files in parallel."""

from __future__ import annotations

import os
import sys
import threading
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from wordtally.exceptions import OutputError
from wordtally.processor import (
    WordCountStats,
    count_words,
    process_file,
    read_file_contents,
)
from wordtally.textutils import file_exists

_UTF8_BOM = b"\xef\xbb\xbf"
_SAVED_WORDS = 20
_PRINTED_WORDS = 5


class WordCounter:
    """Counts words in a set of files and keeps the combined totals."""

    def __init__(self, thread_count: int = 0) -> None:
        self._thread_count = thread_count if thread_count > 0 else (os.cpu_count() or 1)
        self._lock = threading.Lock()
        self._global_counts: Counter[str] = Counter()
        self._file_stats: list[WordCountStats] = []
        self._total_processing_time_ms = 0
        print(f"Using {self._thread_count} threads for word processing.")

    @property
    def thread_count(self) -> int:
        """Number of worker threads used for processing."""
        return self._thread_count

    @property
    def total_unique_words(self) -> int:
        """Number of distinct words seen across all processed files."""
        return len(self._global_counts)

    @property
    def total_processing_time(self) -> int:
        """Wall-clock time of the last run, in milliseconds."""
        return self._total_processing_time_ms

    @property
    def file_stats(self) -> list[WordCountStats]:
        """Statistics of each processed file, in the order given."""
        return list(self._file_stats)

    def _process_one(self, file_path: str) -> WordCountStats:
        stats = process_file(file_path)
        local_counts = count_words(read_file_contents(file_path))
        with self._lock:
            self._global_counts.update(local_counts)
        print(
            f"Processed files {file_path} ({stats.total_words} words, "
            f"{stats.unique_words} unique) in {stats.processing_time_ms} ms"
        )
        return stats

    def process_files(self, file_paths) -> None:
        """Count the words of every existing file, replacing earlier results."""
        start = time.perf_counter()
        self._global_counts.clear()
        self._file_stats.clear()

        existing: list[str] = []
        for path in map(str, file_paths):
            if file_exists(path):
                existing.append(path)
            else:
                print(f"File does not exist: {path}", file=sys.stderr)

        with ThreadPoolExecutor(max_workers=self._thread_count) as pool:
            futures = [pool.submit(self._process_one, path) for path in existing]
            self._file_stats.extend(future.result() for future in futures)

        self._total_processing_time_ms = int((time.perf_counter() - start) * 1000)

    def most_frequent(self, n: int) -> list[tuple[str, int]]:
        """The n most frequent words with their counts, most frequent first."""
        ranked = sorted(self._global_counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[: max(n, 0)]

    def _header_lines(self) -> list[str]:
        return [
            f"Total Unique Words: {self.total_unique_words}",
            f"Total Files Processed: {len(self._file_stats)}",
            f"Total Processing Time: {self.total_processing_time} ms",
            "",
        ]

    def _file_lines(self) -> list[str]:
        lines: list[str] = []
        for stats in self._file_stats:
            lines += [
                f"File: {stats.file_name}",
                f"Total Words: {stats.total_words}",
                f"Unique Words: {stats.unique_words}",
                f"Processing Time: {stats.processing_time_ms} ms",
                "",
            ]
        return lines

    def save_result_to_file(self, output_file_path: str | Path) -> None:
        """Write the summary and the top words to a UTF-8 file with a BOM."""
        lines = ["Word Count Summary", *self._header_lines(), "File Statistics"]
        lines += self._file_lines()
        lines.append(f"{_SAVED_WORDS} most frequent words")
        lines += [f"{word:<20}: {freq}" for word, freq in self.most_frequent(_SAVED_WORDS)]
        body = "".join(f"{line}\n" for line in lines)

        try:
            with open(output_file_path, "wb") as handle:
                handle.write(_UTF8_BOM)
                handle.write(body.encode("utf-8", "surrogateescape"))
        except OSError as exc:
            raise OutputError(str(output_file_path), "Unable to open output file.") from exc

        print(f"Results saved to {output_file_path}")

    def print_summary(self) -> None:
        """Print the summary and the top words to standard output."""
        lines = ["Word Count Summary", "===================", *self._header_lines()]
        lines += self._file_lines()
        lines.append(f"{_PRINTED_WORDS} most frequent words:")
        lines += [f"{word:<15}: {freq}" for word, freq in self.most_frequent(_PRINTED_WORDS)]
        sys.stdout.write("".join(f"{line}\n" for line in lines))