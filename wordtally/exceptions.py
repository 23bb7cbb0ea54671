"""Exception hierarchy raised by the word counter."""

from __future__ import annotations


class WordCounterError(RuntimeError):
    """Base class for every error raised by the word counter."""

    def __init__(self, message: str) -> None:
        super().__init__(f"WordCounter Error: {message}")


class FileError(WordCounterError):
    """An error tied to a particular file."""

    def __init__(self, file_name: str, message: str) -> None:
        super().__init__(f"File error: {message}[File: {file_name}]")
        self.file_name = file_name


class MissingFileError(FileError):
    """The file could not be found or opened."""

    def __init__(self, file_name: str) -> None:
        super().__init__(file_name, "File not found.")


class FilePermissionError(FileError):
    """The file could not be accessed for lack of permission."""

    def __init__(self, file_name: str) -> None:
        super().__init__(file_name, "Permission denied.")


class FileProcessingError(FileError):
    """Something went wrong while counting the words of a file."""

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(file_name, f"Processing error: {reason}")


class InvalidFileFormatError(FileError):
    """The file is not in a format that can be processed."""

    def __init__(self, file_name: str, file_format: str) -> None:
        super().__init__(file_name, f"Invalid file format: {file_format}")


class MemoryAllocationError(WordCounterError):
    """Memory could not be obtained for an operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Memory allocation error during: {operation}")


class ThreadError(WordCounterError):
    """A worker thread failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Thread error: {message}")


class OutputError(WordCounterError):
    """The results could not be written."""

    def __init__(self, file_name: str, message: str) -> None:
        super().__init__(f"Output error: {message}[File: {file_name}]")
        self.file_name = file_name


class InvalidArgumentError(WordCounterError):
    """An argument given to the program is not acceptable."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"Invalid argument: {argument}. Reason: {reason}")