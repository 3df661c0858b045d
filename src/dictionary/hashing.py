"""Bucket hash functions.

Both functions are case-insensitive: they hash the folded form of the word,
and the index compares folded forms, so a lookup always lands in the bucket
the word was loaded into.
"""

import hashlib
from typing import Callable, Dict


HashFunction = Callable[[str, int], int]


def fold(word: str) -> str:
    """Case-fold a word for hashing and comparison."""
    return word.lower()


def additive_hash(word: str, bucket_count: int) -> int:
    """Sum of the folded characters' code points, modulo the bucket count."""
    total = 0
    for ch in fold(word):
        total += ord(ch)
    return total % bucket_count


def blake2b_hash(word: str, bucket_count: int) -> int:
    """BLAKE2b digest of the folded word, modulo the bucket count."""
    digest = hashlib.blake2b(fold(word).encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big") % bucket_count


HASH_FUNCTIONS: Dict[str, HashFunction] = {
    "additive": additive_hash,
    "blake2b": blake2b_hash,
}


def get_hash_function(name: str) -> HashFunction:
    """
    Look up a hash function by name.

    Raises:
        ValueError: If no hash function has that name
    """
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown hash function '{name}' (expected one of {', '.join(HASH_FUNCTIONS)})"
        ) from None
