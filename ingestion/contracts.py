"""
Dataset Ingestion Contracts

Immutable data structures for loading the people dataset.

BOUNDARY: Ingestion Layer
All person data enters the engine through these contracts.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from lifetimes.contracts.base import ErrorCode
from lifetimes.contracts.person import PersonRecord


@dataclass(frozen=True)
class LoaderConfig:
    """How raw records are turned into PersonRecords."""
    sort_language: str = "en"   # which ``name.sort`` entry becomes the sort key

    def __post_init__(self):
        if not self.sort_language:
            raise ValueError("sort_language must be a non-empty string")


@dataclass(frozen=True)
class LoadIssue:
    """Record of a dataset entry that was skipped or flagged during loading."""
    index: int                    # position in the source document
    person_id: Optional[str]      # None when the record has no usable id
    code: ErrorCode
    message: str

    def to_dict(self) -> dict:
        return {
            'index': self.index,
            'person_id': self.person_id,
            'code': self.code.value,
            'message': self.message,
        }


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of loading a dataset.

    Every source record is either in ``people`` or described by an issue.
    """
    people: Tuple[PersonRecord, ...]
    issues: Tuple[LoadIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues

    def ids(self) -> Tuple[str, ...]:
        return tuple(p.person_id for p in self.people)
