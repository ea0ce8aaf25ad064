"""
Deterministic Person Fixtures

Builders for PersonRecords from literal date strings, plus the small
datasets the engine, loader and API tests share.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from lifetimes.contracts.person import PersonRecord
from lifetimes.temporal.parser import parse_interval

Bounds = Union[str, Tuple[str, str]]


def make_person(
    person_id: str,
    birth: Bounds,
    death: Bounds,
    sort_key: Optional[str] = None,
) -> PersonRecord:
    """Build a PersonRecord; a single string means a certain date."""
    b = (birth, birth) if isinstance(birth, str) else birth
    d = (death, death) if isinstance(death, str) else death
    return PersonRecord(
        person_id=person_id,
        birth=parse_interval(*b),
        death=parse_interval(*d),
        sort_key=sort_key if sort_key is not None else person_id,
    )


def make_raw_record(
    person_id: str,
    birth: Bounds,
    death: Bounds,
    sort_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Raw dataset record in the people.json shape."""
    b = (birth, birth) if isinstance(birth, str) else birth
    d = (death, death) if isinstance(death, str) else death
    record: Dict[str, Any] = {
        "id": person_id,
        "birth": {"earliest": b[0], "latest": b[1]},
        "death": {"earliest": d[0], "latest": d[1]},
    }
    if sort_name is not None:
        record["name"] = {"sort": {"en": sort_name}}
    return record


def make_era_dataset() -> List[Dict[str, Any]]:
    """A: 450-380 BCE and B: 50-121 CE, plus a later and an uncertain person."""
    return [
        make_raw_record("A", "-0450", "-0380", sort_name="Alpha"),
        make_raw_record("B", "0050-03-01", "0121", sort_name="Beta"),
        make_raw_record("C", "1800", "1850", sort_name="Gamma"),
        make_raw_record("D", ("1700", "1705"), ("1750", "1760"), sort_name="Delta"),
    ]


def make_russian_dataset() -> List[Dict[str, Any]]:
    """Two people whose Russian sort names differ only in И / Й."""
    records = [
        make_raw_record("yakubov", "1800", "1850"),
        make_raw_record("ibragimov", "1800", "1850"),
    ]
    records[0]["name"] = {"sort": {"en": "Akubov", "ru": "Йакубов"}}
    records[1]["name"] = {"sort": {"en": "Ibragimov", "ru": "Ибрагимов"}}
    return records
