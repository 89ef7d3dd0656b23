"""Search data models."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Occurrence:
    """A keyword occurrence: the document it appears in and how often."""

    document: str
    frequency: int = 1

    def __post_init__(self) -> None:
        if self.frequency < 1:
            raise ValueError(f"Occurrence frequency must be positive, got {self.frequency}")

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


# Posting lists are lists while the index is being built and tuples once frozen.
PostingList = Sequence[Occurrence]
KeywordIndex = Mapping[str, PostingList]
