"""Data models for the word index."""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field


IndexState = Literal["uninitialized", "loaded", "unloaded"]
HashName = Literal["additive", "blake2b"]


class IndexConfig(BaseModel):
    """Construction-time parameters of a WordIndex."""
    bucket_count: int = Field(28, ge=1)
    max_length: int = Field(45, ge=1)
    hash_name: HashName = "additive"
    unique: bool = False  # Skip words already present (O(chain) insert)


class LoadError(BaseModel):
    """Why a load attempt failed."""
    code: str  # SOURCE_UNAVAILABLE, ALLOCATION_FAILURE, OVERSIZED_WORD
    message: str
    word: Optional[str] = None
    position: Optional[int] = Field(None, ge=1)


class IndexStats(BaseModel):
    """Shape of a loaded index."""
    size: int = 0
    bucket_count: int
    load_factor: float = 0.0
    longest_chain: int = 0
    empty_buckets: int = 0
    chain_lengths: List[int] = Field(default_factory=list)
    duplicates_skipped: int = 0
