"""Spell-check pass over a text using a WordIndex."""

import os
import time
from typing import Optional

from ..dictionary import WordIndex, WordSource
from .models import SpellReport
from .tokenize import extract_words


def spell_check(
    index: WordIndex,
    text: str,
    dictionary: Optional[WordSource] = None,
) -> SpellReport:
    """
    Check every word of a text against an index.

    If a dictionary is given it is loaded into the index first and the index
    is unloaded again at the end; otherwise the index must already be loaded
    and is left loaded.

    Args:
        index: The word index to query
        text: The text to check
        dictionary: Optional word source to load before checking

    Returns:
        A SpellReport with the misspelled words (in text order, repeats kept),
        the counts and the time spent in each index operation

    Raises:
        RuntimeError: If the dictionary could not be loaded
    """
    report = SpellReport()

    if dictionary is not None:
        start = time.perf_counter()
        loaded = index.load(dictionary)
        report.time_load = time.perf_counter() - start
        if not loaded:
            raise RuntimeError(f"Could not load dictionary: {index.last_error.message}")
        if isinstance(dictionary, (str, os.PathLike)):
            report.dictionary = os.fspath(dictionary)

    start = time.perf_counter()
    for word in extract_words(text, index.config.max_length):
        report.words_in_text += 1
        if not index.check(word):
            report.misspelled.append(word)
    report.time_check = time.perf_counter() - start
    report.words_misspelled = len(report.misspelled)

    start = time.perf_counter()
    report.words_in_dictionary = index.size()
    report.time_size = time.perf_counter() - start

    if dictionary is not None:
        start = time.perf_counter()
        index.unload()
        report.time_unload = time.perf_counter() - start

    return report
