"""
API Response Models

Wire shapes of the read-only API. Mirrors the layout contracts one to one;
no field here is computed by the API layer.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class WindowModel(BaseModel):
    min_date: str
    max_date: str
    span_days: int
    widened: bool = False


class TickModel(BaseModel):
    year: Optional[int]
    label: str
    position_percent: float
    kind: str


class SegmentModel(BaseModel):
    kind: str
    left_percent: float
    width_percent: float


class RowModel(BaseModel):
    person_id: str
    segments: List[SegmentModel]
    display: Dict[str, Any] = {}


class LayoutModel(BaseModel):
    window: WindowModel
    ticks: List[TickModel]
    rows: List[RowModel]


class IntervalModel(BaseModel):
    earliest: str
    latest: str
    certain: bool


class PersonModel(BaseModel):
    person_id: str
    sort_key: str
    birth: IntervalModel
    death: IntervalModel
    display: Dict[str, Any] = {}


class IssueModel(BaseModel):
    index: int
    person_id: Optional[str]
    code: str
    message: str


class HealthModel(BaseModel):
    status: str
    people: int
    issues: int
