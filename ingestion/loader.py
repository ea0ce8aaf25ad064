"""
People Dataset Loader
=====================

Converts raw person records (the ``people.json`` document) into immutable
PersonRecords.

GUARANTEES:
- Every record is either loaded or reported as a LoadIssue
- One malformed record never stops the rest of the dataset from loading
- Duplicate ids are reported; the first occurrence wins
- Records whose earliest birth is after their latest death are kept as-is
  and logged as a data-quality condition

RECORD SHAPE:
    {
      "id": "socrates",
      "birth": {"earliest": "-0470", "latest": "-0469", "label": "470/469 BC"},
      "death": {"earliest": "-0399", "latest": "-0399"},
      "name": {"sort": {"en": "Socrates", "ru": "Сократ"}, ...},
      ...any other display fields
    }
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Set, Union
import json
import logging

from lifetimes.contracts.base import (
    DatasetFormatError, ErrorCode, MissingFieldError, TimelineError,
)
from lifetimes.contracts.person import PersonRecord
from lifetimes.contracts.temporal import UncertainInterval
from lifetimes.temporal.parser import parse_interval

from .contracts import LoadIssue, LoadResult, LoaderConfig

logger = logging.getLogger(__name__)

Source = Union[str, Path, Sequence[Mapping[str, Any]]]


def _interval(raw: Mapping[str, Any], name: str) -> UncertainInterval:
    bounds = raw.get(name)
    if not isinstance(bounds, Mapping):
        raise MissingFieldError(f"missing '{name}' bounds")
    for bound in ("earliest", "latest"):
        if bound not in bounds:
            raise MissingFieldError(f"missing '{name}.{bound}'")
    try:
        return parse_interval(bounds["earliest"], bounds["latest"])
    except TimelineError as e:
        raise type(e)(f"{name}: {e.message}") from e


def _sort_key(raw: Mapping[str, Any], person_id: str, config: LoaderConfig) -> str:
    explicit = raw.get("sort_key")
    if isinstance(explicit, str) and explicit:
        return explicit
    name = raw.get("name")
    if isinstance(name, Mapping):
        sort_names = name.get("sort")
        if isinstance(sort_names, Mapping):
            value = sort_names.get(config.sort_language)
            if isinstance(value, str) and value:
                return value
        elif isinstance(sort_names, str) and sort_names:
            return sort_names
    return person_id


def parse_person(raw: Mapping[str, Any], config: Optional[LoaderConfig] = None) -> PersonRecord:
    """
    Build one PersonRecord from a raw record.

    Raises MissingFieldError, MalformedDateError or InvertedIntervalError.
    """
    config = config or LoaderConfig()
    if not isinstance(raw, Mapping):
        raise DatasetFormatError(f"record must be an object, got {type(raw).__name__}")

    person_id = raw.get("id")
    if not isinstance(person_id, str) or not person_id:
        raise MissingFieldError("missing 'id'")

    return PersonRecord(
        person_id=person_id,
        birth=_interval(raw, "birth"),
        death=_interval(raw, "death"),
        sort_key=_sort_key(raw, person_id, config),
        display={k: v for k, v in raw.items() if k != "id"},
    )


def read_document(path: Union[str, Path]) -> List[Any]:
    """Read the dataset file; the top level must be a JSON list."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetFormatError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(document, list):
        raise DatasetFormatError(f"{path}: top level must be a list of person records")
    return document


def load_people(source: Source, config: Optional[LoaderConfig] = None) -> LoadResult:
    """Load a dataset from a path or an already-decoded list of records."""
    config = config or LoaderConfig()
    if isinstance(source, (str, Path)):
        records = read_document(source)
        logger.info("Loaded %d raw records from %s", len(records), source)
    elif isinstance(source, Sequence):
        records = list(source)
    else:
        raise DatasetFormatError(f"unsupported dataset source: {type(source).__name__}")

    people: List[PersonRecord] = []
    issues: List[LoadIssue] = []
    seen: Set[str] = set()

    for index, raw in enumerate(records):
        raw_id = raw.get("id") if isinstance(raw, Mapping) else None
        raw_id = raw_id if isinstance(raw_id, str) and raw_id else None
        try:
            person = parse_person(raw, config)
        except TimelineError as e:
            issues.append(LoadIssue(index=index, person_id=raw_id, code=e.code, message=e.message))
            logger.warning("Skipping record %d (%s): %s", index, raw_id or "no id", e.message)
            continue

        if person.person_id in seen:
            issues.append(LoadIssue(
                index=index,
                person_id=person.person_id,
                code=ErrorCode.DUPLICATE_ID,
                message=f"duplicate id {person.person_id!r}",
            ))
            logger.warning("Skipping record %d: duplicate id %r", index, person.person_id)
            continue

        if not person.is_consistent:
            logger.warning(
                "Person %r: earliest birth %s is after latest death %s; kept as-is",
                person.person_id, person.birth.earliest, person.death.latest,
            )

        seen.add(person.person_id)
        people.append(person)

    return LoadResult(people=tuple(people), issues=tuple(issues))
