import os
from collections import Counter

import pytest

from wordtally.counter import WordCounter
from wordtally.exceptions import OutputError, WordCounterError
from wordtally.processor import count_words


@pytest.fixture
def two_files(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("The cat and the dog. The end!", encoding="utf-8")
    second.write_text("Dog, dog; cat? Zebra", encoding="utf-8")
    return first, second


def test_thread_count_explicit():
    counter = WordCounter(3)
    assert counter.thread_count == 3


def test_thread_count_auto_detect():
    counter = WordCounter(0)
    assert counter.thread_count == (os.cpu_count() or 1)


def test_global_counts_are_sum_of_file_counts(two_files):
    first, second = two_files
    counter = WordCounter(2)
    counter.process_files([first, second])
    expected = count_words(first.read_text(encoding="utf-8")) + count_words(
        second.read_text(encoding="utf-8")
    )
    assert counter.total_unique_words == len(expected)
    assert dict(counter.most_frequent(len(expected))) == dict(expected)


def test_file_stats_in_given_order(two_files):
    first, second = two_files
    counter = WordCounter(2)
    counter.process_files([second, first])
    names = [stats.file_name for stats in counter.file_stats]
    assert names == [str(second), str(first)]
    for stats in counter.file_stats:
        words = count_words(open(stats.file_name, encoding="utf-8").read())
        assert stats.total_words == sum(words.values())
        assert stats.unique_words == len(words)


def test_missing_files_are_skipped(two_files, tmp_path, capsys):
    first, _ = two_files
    missing = tmp_path / "nope.txt"
    counter = WordCounter(1)
    counter.process_files([missing, first])
    assert [s.file_name for s in counter.file_stats] == [str(first)]
    assert f"File does not exist: {missing}" in capsys.readouterr().err


def test_process_files_replaces_previous_results(two_files):
    first, second = two_files
    counter = WordCounter(1)
    counter.process_files([first, second])
    counter.process_files([second])
    assert len(counter.file_stats) == 1
    assert dict(counter.most_frequent(100)) == dict(
        count_words(second.read_text(encoding="utf-8"))
    )


def test_most_frequent_negative_is_empty(two_files):
    counter = WordCounter(1)
    counter.process_files(list(two_files))
    assert counter.most_frequent(-1) == []


def test_unicode_words_counted(tmp_path):
    path = tmp_path / "u.txt"
    path.write_bytes(b"\xef\xbb\xbf" + "Zażółć gęślą, zażółć!".encode("utf-8"))
    counter = WordCounter(1)
    counter.process_files([path])
    assert counter.most_frequent(1) == [("zażółć", 2)]


def test_save_result_to_file(two_files, tmp_path, capsys):
    counter = WordCounter(2)
    counter.process_files(list(two_files))
    out = tmp_path / "summary.txt"
    counter.save_result_to_file(out)
    data = out.read_bytes()
    assert data.startswith(b"\xef\xbb\xbf")
    text = data[3:].decode("utf-8")
    lines = text.splitlines()
    assert lines[0] == "Word Count Summary"
    assert f"Total Unique Words: {counter.total_unique_words}" in lines
    assert "Total Files Processed: 2" in lines
    assert "20 most frequent words" in lines
    for word, freq in counter.most_frequent(20):
        assert f"{word:<20}: {freq}" in lines
    assert f"Results saved to {out}" in capsys.readouterr().out


def test_save_result_limits_to_twenty_words(tmp_path):
    path = tmp_path / "many.txt"
    words = [chr(ord("a") + i) * 2 for i in range(25)]
    path.write_text(" ".join(words), encoding="utf-8")
    counter = WordCounter(1)
    counter.process_files([path])
    out = tmp_path / "out.txt"
    counter.save_result_to_file(out)
    lines = out.read_bytes()[3:].decode("utf-8").splitlines()
    header = lines.index("20 most frequent words")
    assert len(lines[header + 1:]) == 20


def test_save_result_to_unwritable_path_raises(tmp_path):
    counter = WordCounter(1)
    with pytest.raises(OutputError) as info:
        counter.save_result_to_file(tmp_path)
    assert info.value.file_name == str(tmp_path)
    assert isinstance(info.value, WordCounterError)
    assert "Unable to open output file." in str(info.value)


def test_print_summary(two_files, capsys):
    counter = WordCounter(2)
    counter.process_files(list(two_files))
    capsys.readouterr()
    counter.print_summary()
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["Word Count Summary", "==================="]
    assert "5 most frequent words:" in lines
    header = lines.index("5 most frequent words:")
    expected = [f"{w:<15}: {f}" for w, f in counter.most_frequent(5)]
    assert lines[header + 1:] == expected
    for stats in counter.file_stats:
        assert f"File: {stats.file_name}" in lines


def test_empty_counter_summary(capsys):
    counter = WordCounter(1)
    counter.process_files([])
    assert counter.total_unique_words == 0
    assert counter.file_stats == []
    assert Counter(dict(counter.most_frequent(5))) == Counter()