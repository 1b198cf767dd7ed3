"""Request-scoped records passed between the generator and the map-link builder."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class TripRequest:
    destination: str
    start: Optional[datetime]
    end: Optional[datetime]
    interests: Tuple[str, ...] = ()
    companions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DayPlan:
    """One rendered day: a city and five time-stamped slots."""
    day: int
    city: str
    breakfast: str
    morning_activity: str
    lunch: str
    afternoon_activity: str
    dinner: str


@dataclass(frozen=True)
class MapLink:
    place: str
    context: str
    url: str

    def to_markdown(self) -> str:
        return f"• [{self.place} ({self.context})]({self.url})"


@dataclass(frozen=True)
class ExtractedDay:
    title: str
    context: str
    places: Tuple[str, ...] = ()
