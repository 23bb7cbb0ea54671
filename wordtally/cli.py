"""Command-line entry point of the word counter."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from wordtally.counter import WordCounter
from wordtally.exceptions import WordCounterError
from wordtally.textutils import file_exists

_DEFAULT_OUTPUT = "wordCountSummary.txt"
_COUNT_PATTERN = re.compile(r"\s*\+?(\d+)")


def show_usage(program_name: str) -> None:
    """Print the usage message."""
    print(
        f"Usage: {program_name} <file1> <file2> ... <fileN>\n"
        "Options:\n"
        "  -h, --help       Show this help message\n"
        "  -t, --threads    Number of threads to use (default: auto-detect)\n"
        "Example:\n"
        f"  {program_name} file1.txt file2.txt\n"
        f"  {program_name} -t 4 file1.txt file2.txt"
    )


def _parse_count(text: str) -> int:
    """Parse the leading unsigned number of a string."""
    match = _COUNT_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a count: {text!r}")
    return int(match.group(1))


def _prompt(message: str, stream: TextIO) -> str | None:
    """Show a prompt and read one line; None at end of input."""
    sys.stdout.write(message)
    sys.stdout.flush()
    line = stream.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _ask_for_files(stream: TextIO) -> list[str]:
    print("Provide a path for files (empty line to finish):")
    paths: list[str] = []
    while (path := _prompt("> ", stream)):
        if file_exists(path):
            paths.append(path)
            print(f"Added: {path}")
        else:
            print(f"File does not exist: {path}", file=sys.stderr)
    return paths


def _ask_for_thread_count(stream: TextIO) -> int:
    answer = _prompt("Give number of threads (0 for auto-detect): ", stream)
    if not answer:
        return 0
    try:
        return _parse_count(answer)
    except ValueError:
        print("Warning: Invalid thread count. Using auto-detect.", file=sys.stderr)
        return 0


def _run(args: list[str], program_name: str) -> int:
    file_paths: list[str] = []
    thread_count = 0

    arg_iter = iter(args)
    for arg in arg_iter:
        if arg in ("-h", "--help"):
            show_usage(program_name)
            return 0
        if arg in ("-t", "--threads"):
            value = next(arg_iter, None)
            if value is None:
                print("Error: -t option requires a number.", file=sys.stderr)
                return 1
            try:
                thread_count = _parse_count(value)
            except ValueError:
                print("Error: Invalid thread count argument.", file=sys.stderr)
                return 1
        else:
            file_paths.append(arg)

    stdin = sys.stdin
    if not file_paths:
        file_paths = _ask_for_files(stdin)

    if thread_count == 0 and file_paths:
        thread_count = _ask_for_thread_count(stdin)

    if not file_paths:
        print("No files provided for processing.", file=sys.stderr)
        show_usage(program_name)
        return 1

    print(f"Processing {len(file_paths)} files...")
    counter = WordCounter(thread_count)
    counter.process_files(file_paths)
    counter.print_summary()

    answer = _prompt(f"Provide output file name (default: {_DEFAULT_OUTPUT}): ", stdin)
    counter.save_result_to_file(answer or _DEFAULT_OUTPUT)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the word counter; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    program_name = sys.argv[0] if sys.argv and sys.argv[0] else "wordtally"
    try:
        return _run(list(argv), program_name)
    except WordCounterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())