# wordtally

wordtally counts the words in one or more text files. A pool of worker
threads processes the files. Text is split into words at whitespace,
punctuation and symbol characters. Each word keeps only its letters, in
lower case. The counts from all files are then combined into one set of
totals.

## Installing

```
pip install .
```

## Command line

```
wordtally file1.txt file2.txt
wordtally -t 4 file1.txt file2.txt
wordtally --help
```

Options:

- `-h`, `--help`: show usage and exit.
- `-t`, `--threads N`: the number of worker threads. The default, 0, uses
  the number of CPUs.

If you give no files, wordtally asks for paths one at a time. A blank line
ends the list. If you gave no thread count (or gave 0), it asks for one;
enter 0 or leave it blank to auto-detect.

Files that do not exist are reported on standard error and skipped. After
counting, wordtally prints:

- the number of unique words, the number of files and the total time;
- for each file, its total words, its unique words and its processing time;
- the 5 most frequent words.

It then asks for an output file name. If you leave it blank, it uses
`wordCountSummary.txt`. The file holds the same summary and the 20 most
frequent words. It is written as UTF-8 with a byte-order mark.

Words with the same count are listed in alphabetical order. The command
exits with status 1 on any error, and 0 otherwise.

## Library use

```python
from wordtally.counter import WordCounter
from wordtally.processor import count_words, process_file
from wordtally.textutils import clean_word, tokenize_text

counter = WordCounter(4)
counter.process_files(["a.txt", "b.txt"])
print(counter.total_unique_words)       # property
print(counter.total_processing_time)    # milliseconds
print(counter.most_frequent(10))        # [(word, count), ...]
for stats in counter.file_stats:
    print(stats.file_name, stats.total_words, stats.unique_words)
counter.save_result_to_file("summary.txt")

stats = process_file("a.txt")           # WordCountStats
print(stats.total_words, stats.unique_words, stats.processing_time_ms)

print(count_words("The cat, the hat."))  # Counter({'the': 2, 'cat': 1, 'hat': 1})
print(tokenize_text("don't stop"))      # ['don', 't', 'stop']
print(clean_word("Hello123"))           # 'hello'
```

Modules:

- `wordtally.textutils`: contains `tokenize_text`, `clean_word`,
  `file_exists`, `is_text_file`, `is_utf8_file`, `is_letter` and
  `is_other_letter`.
- `wordtally.processor`: contains `WordCountStats`, `read_file_contents`,
  `count_words` and `process_file`.
- `wordtally.counter`: contains `WordCounter`.
- `wordtally.cli`: contains `main` and `show_usage`.
- `wordtally.exceptions`: contains the errors listed below.

Bytes that are not valid UTF-8 are kept as they are when a file is read. A
text that holds such bytes is split at whitespace only. Its words then keep
only their ASCII letters.

Errors are raised as subclasses of `wordtally.exceptions.WordCounterError`:

- `FileError` and its subclasses:
  - `MissingFileError`
  - `FilePermissionError`
  - `FileProcessingError`
  - `InvalidFileFormatError`
- `OutputError`
- `MemoryAllocationError`
- `ThreadError`
- `InvalidArgumentError`

## What it does not do

wordtally does not search directories. It does not filter files by type.
`is_text_file` and `is_utf8_file` are available to callers, but the
counter does not use them to choose files. Only UTF-8 text is decoded;
other encodings are not detected or converted.