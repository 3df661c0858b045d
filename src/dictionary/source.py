"""Word source reader."""

import os
from pathlib import Path
from typing import Iterable, Iterator, Union


WordSource = Union[str, os.PathLike, Iterable[str]]


def read_words(source: WordSource) -> Iterator[str]:
    """
    Yield whitespace-delimited words from a source.

    A str or path-like source is opened as a UTF-8 text file. An open text
    stream or any other iterable of strings is split item by item, so both
    a list of words and a list of lines work. Open and read errors are
    raised to the caller as OSError / UnicodeDecodeError.
    """
    if isinstance(source, (str, os.PathLike)):
        with Path(source).open("r", encoding="utf-8") as fh:
            for line in fh:
                yield from line.split()
        return

    for line in source:
        yield from line.split()
