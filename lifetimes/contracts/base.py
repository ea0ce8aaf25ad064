"""
Base Contracts and Shared Types

Error taxonomy shared by every layer of the timeline engine.
All error states are enumerated; nothing fails silently.

BOUNDARY ENFORCEMENT:
=====================
- This module is READ-ONLY from all layers
- Layers raise these exceptions, they never define their own ad hoc ones
- Every exception carries an explicit ErrorCode so callers (API, CLI,
  loader) can report failures as data
"""

from __future__ import annotations
from enum import Enum


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for deterministic error handling.
    No silent fallbacks - every error state is enumerated.
    """
    # Parsing errors
    MALFORMED_DATE = "malformed_date"
    INVERTED_INTERVAL = "inverted_interval"

    # Layout errors
    EMPTY_WINDOW = "empty_window"
    DEGENERATE_INTERVAL = "degenerate_interval"
    OUT_OF_WINDOW = "out_of_window"

    # Selection / dataset errors
    UNKNOWN_ENTITY = "unknown_entity"
    DATASET_FORMAT = "dataset_format"
    DUPLICATE_ID = "duplicate_id"
    MISSING_FIELD = "missing_field"


class TimelineError(Exception):
    """Root of every error raised by the timeline engine."""
    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedDateError(TimelineError, ValueError):
    """Date string is empty or has a non-numeric / impossible component."""
    code = ErrorCode.MALFORMED_DATE


class InvertedIntervalError(TimelineError, ValueError):
    """Uncertain interval whose earliest bound lies after its latest bound."""
    code = ErrorCode.INVERTED_INTERVAL


class EmptyWindowError(TimelineError, ValueError):
    """
    Time window with no extent (min_date == max_date) or no entities.

    Surfaced to the caller; the range computer never widens silently.
    """
    code = ErrorCode.EMPTY_WINDOW


class DegenerateIntervalError(TimelineError, ValueError):
    """Certain segment would have negative width (death bound before birth bound)."""
    code = ErrorCode.DEGENERATE_INTERVAL


class OutOfWindowError(TimelineError, ValueError):
    """A percentage fell outside [0, 100] by more than floating-point error."""
    code = ErrorCode.OUT_OF_WINDOW


class UnknownEntityError(TimelineError, KeyError):
    """Selection references an id that is not part of the dataset."""
    code = ErrorCode.UNKNOWN_ENTITY

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class DatasetFormatError(TimelineError, ValueError):
    """Dataset document does not have the expected shape."""
    code = ErrorCode.DATASET_FORMAT


class MissingFieldError(TimelineError, ValueError):
    """A dataset record lacks a field the core needs (id, birth, death bounds)."""
    code = ErrorCode.MISSING_FIELD
