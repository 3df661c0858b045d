"""Fixed-bucket hash table of words with case-insensitive lookup."""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from .hashing import fold, get_hash_function
from .models import IndexConfig, IndexState, IndexStats, LoadError
from .source import WordSource, read_words

log = logging.getLogger("wordindex")


class IndexStateError(ValueError):
    """Raised when an operation is called in the wrong lifecycle state."""


class Entry:
    """One stored word and the link to the next entry in its chain."""

    __slots__ = ("word", "next")

    def __init__(self, word: str, next: Optional[Entry] = None):
        self.word = word
        self.next = next


class WordIndex:
    """
    Membership index over a static word list.

    Words are chained into a fixed number of buckets chosen by a
    case-insensitive hash. The index moves through three states:
    uninitialized -> loaded (via load) -> unloaded (via unload), and may be
    loaded again after an unload.

    Attributes:
        config: The construction-time parameters (bucket count, max length...)
        last_error: Why the most recent load failed, or None
    """

    def __init__(self, config: Optional[IndexConfig] = None, **overrides):
        if config is None:
            config = IndexConfig(**overrides)
        elif overrides:
            config = IndexConfig(**{**config.model_dump(), **overrides})
        self.config = config
        self.last_error: Optional[LoadError] = None
        self._hash = get_hash_function(config.hash_name)
        self._table: List[Optional[Entry]] = [None] * config.bucket_count
        self._count = 0
        self._duplicates = 0
        self._state: IndexState = "uninitialized"

    @property
    def state(self) -> IndexState:
        """Current lifecycle state."""
        return self._state

    @property
    def bucket_count(self) -> int:
        return self.config.bucket_count

    def hash(self, word: str) -> int:
        """Bucket id of a word."""
        return self._hash(word, self.config.bucket_count)

    def load(self, source: WordSource) -> bool:
        """
        Load every word of a source into the index.

        The source is a path to a word list, an open text stream or an
        iterable of words. The load is all-or-nothing: entries are built in
        a fresh table that replaces the current one only if every word was
        read and accepted.

        Returns:
            True on success, False on failure (see last_error)

        Raises:
            IndexStateError: If the index is already loaded
        """
        if self._state == "loaded":
            raise IndexStateError("Index is already loaded; unload it before loading again")

        table: List[Optional[Entry]] = [None] * self.config.bucket_count
        count = 0
        duplicates = 0
        max_length = self.config.max_length
        words = read_words(source)

        try:
            for position, word in enumerate(words, start=1):
                if len(word) > max_length:
                    return self._fail(LoadError(
                        code="OVERSIZED_WORD",
                        message=f"Word {position} is {len(word)} characters long (maximum {max_length})",
                        word=word,
                        position=position,
                    ))

                bucket = self.hash(word)
                if self.config.unique and self._find(table[bucket], word):
                    duplicates += 1
                    continue

                table[bucket] = Entry(word, table[bucket])
                count += 1
        except (OSError, UnicodeDecodeError) as e:
            return self._fail(LoadError(
                code="SOURCE_UNAVAILABLE",
                message=f"Cannot read word source {_describe(source)}: {e}",
            ))
        except MemoryError:
            return self._fail(LoadError(
                code="ALLOCATION_FAILURE",
                message=f"Out of memory after {count} words from {_describe(source)}",
            ))
        finally:
            words.close()

        self._table = table
        self._count = count
        self._duplicates = duplicates
        self._state = "loaded"
        self.last_error = None
        log.info("Loaded %s words from %s", f"{count:,}", _describe(source))
        return True

    def check(self, word: str) -> bool:
        """
        Whether a word is in the index, ignoring case.

        Raises:
            IndexStateError: If the index is not loaded
        """
        self._require_loaded("check")
        if not word or len(word) > self.config.max_length:
            return False
        return self._find(self._table[self.hash(word)], word)

    def size(self) -> int:
        """
        Number of loaded words; zero before the first successful load.

        Raises:
            IndexStateError: If the index has been unloaded
        """
        if self._state == "unloaded":
            raise IndexStateError("Index has been unloaded")
        return self._count

    def unload(self) -> bool:
        """
        Release every entry and reset the count.

        Raises:
            IndexStateError: If the index is not loaded
        """
        self._require_loaded("unload")
        for i in range(len(self._table)):
            node = self._table[i]
            self._table[i] = None
            while node is not None:
                nxt = node.next
                node.next = None
                node = nxt

        log.debug("Unloaded %d words", self._count)
        self._count = 0
        self._duplicates = 0
        self._state = "unloaded"
        return True

    def chain(self, bucket: int) -> List[str]:
        """Words in a bucket, front of the chain first."""
        self._require_loaded("chain")
        words = []
        node = self._table[bucket]
        while node is not None:
            words.append(node.word)
            node = node.next
        return words

    def stats(self) -> IndexStats:
        """Chain-length statistics of the loaded index."""
        self._require_loaded("stats")
        lengths = []
        for head in self._table:
            length = 0
            node = head
            while node is not None:
                length += 1
                node = node.next
            lengths.append(length)

        return IndexStats(
            size=self._count,
            bucket_count=self.config.bucket_count,
            load_factor=self._count / self.config.bucket_count,
            longest_chain=max(lengths),
            empty_buckets=lengths.count(0),
            chain_lengths=lengths,
            duplicates_skipped=self._duplicates,
        )

    def __contains__(self, word: str) -> bool:
        return self.check(word)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"WordIndex(state={self._state!r}, size={self._count}, buckets={self.config.bucket_count})"

    @staticmethod
    def _find(node: Optional[Entry], word: str) -> bool:
        target = fold(word)
        while node is not None:
            if fold(node.word) == target:
                return True
            node = node.next
        return False

    def _require_loaded(self, operation: str) -> None:
        if self._state != "loaded":
            raise IndexStateError(f"Cannot {operation}: index is {self._state}")

    def _fail(self, error: LoadError) -> bool:
        self.last_error = error
        log.warning("Load failed (%s): %s", error.code, error.message)
        return False


def _describe(source: WordSource) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return getattr(source, "name", None) or type(source).__name__
