"""Text tokenizing for the spell-check pass."""

import re
from typing import Iterator


# Runs of letters, digits and inner apostrophes
_TOKEN = re.compile(r"[^\W_](?:[^\W_]|')*")


def extract_words(text: str, max_length: int = 45) -> Iterator[str]:
    """
    Yield the words of a text that are worth spell-checking.

    A word is a run of letters and apostrophes that starts with a letter.
    Runs containing digits and runs longer than max_length are skipped
    as a whole.
    """
    for match in _TOKEN.finditer(text):
        token = match.group(0)
        if len(token) > max_length or any(ch.isdigit() for ch in token):
            continue
        yield token
