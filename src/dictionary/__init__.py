"""In-memory word index for case-insensitive membership checks."""

from .index import WordIndex, Entry, IndexStateError
from .models import IndexConfig, IndexState, IndexStats, LoadError
from .hashing import fold, additive_hash, blake2b_hash, get_hash_function
from .source import WordSource, read_words

__all__ = [
    # Index
    "WordIndex",
    "Entry",
    "IndexStateError",
    # Models
    "IndexConfig",
    "IndexState",
    "IndexStats",
    "LoadError",
    # Hashing
    "fold",
    "additive_hash",
    "blake2b_hash",
    "get_hash_function",
    # Sources
    "WordSource",
    "read_words",
]
