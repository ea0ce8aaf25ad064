"""
Person Contracts

The only entity the layout engine knows about.

The core touches ``person_id``, ``birth``, ``death`` and ``sort_key``.
Everything the presentation layer needs (names in several languages,
human-readable date labels, aliases, categories) rides along in
``display`` and is never interpreted here.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from .temporal import TimePoint, UncertainInterval


@dataclass(frozen=True)
class PersonRecord:
    """
    Immutable person with uncertain birth and death.

    INVARIANT (documented, not enforced):
    birth.earliest <= death.latest. Records violating it are accepted
    as-is; the loader reports them as a data-quality condition.
    """
    person_id: str
    birth: UncertainInterval
    death: UncertainInterval
    sort_key: str
    display: Mapping[str, Any] = field(
        default_factory=dict, compare=False, hash=False, repr=False
    )

    def __post_init__(self):
        if not self.person_id or not isinstance(self.person_id, str):
            raise ValueError("person_id must be a non-empty string")
        if not isinstance(self.display, MappingProxyType):
            object.__setattr__(self, "display", MappingProxyType(dict(self.display)))

    @property
    def bounds(self) -> Tuple[TimePoint, TimePoint, TimePoint, TimePoint]:
        """The four dates that determine this person's extent on the axis."""
        return (
            self.birth.earliest,
            self.birth.latest,
            self.death.earliest,
            self.death.latest,
        )

    @property
    def certain_start(self) -> TimePoint:
        """Latest possible birth: from here on the person was certainly born."""
        return self.birth.latest

    @property
    def certain_end(self) -> TimePoint:
        """Earliest possible death: until here the person was certainly alive."""
        return self.death.earliest

    @property
    def is_consistent(self) -> bool:
        return self.birth.earliest <= self.death.latest
