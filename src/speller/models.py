"""Data models for the spell-check pass."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..dictionary.models import IndexConfig, HashName


class SpellerConfig(BaseModel):
    """Configuration for a spell-check run."""
    dictionary: str = "dictionaries/large"
    bucket_count: int = Field(28, ge=1)
    max_length: int = Field(45, ge=1)
    hash_name: HashName = "additive"
    unique: bool = False
    quiet: bool = False  # Only print the summary

    def index_config(self) -> IndexConfig:
        """Index parameters for this run."""
        return IndexConfig(
            bucket_count=self.bucket_count,
            max_length=self.max_length,
            hash_name=self.hash_name,
            unique=self.unique,
        )


class SpellReport(BaseModel):
    """Result of spell-checking one text."""
    misspelled: List[str] = Field(default_factory=list)
    words_misspelled: int = 0
    words_in_dictionary: int = 0
    words_in_text: int = 0
    time_load: float = 0.0
    time_check: float = 0.0
    time_size: float = 0.0
    time_unload: float = 0.0
    dictionary: Optional[str] = None

    @property
    def time_total(self) -> float:
        """Seconds spent in all index operations."""
        return self.time_load + self.time_check + self.time_size + self.time_unload
