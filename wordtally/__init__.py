"""Parallel word counting over text files, with a command-line front end."""

__version__ = "1.0.0"
__all__ = ["cli", "counter", "exceptions", "processor", "textutils"]