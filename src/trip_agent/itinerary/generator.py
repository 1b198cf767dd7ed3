"""
Template-driven itinerary generator.

Turns a destination and a date range into a markdown day-by-day plan. Content is
picked deterministically from the pools in ``catalog`` so the same request always
produces the same text.
"""

import logging
import math
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .catalog import EXAMPLE_ACTIVITIES, EXAMPLE_RESTAURANTS, resolve_sub_locations
from .models import DayPlan, TripRequest

SECONDS_PER_DAY = 24 * 60 * 60

# Formats tried after ISO-8601, e.g. "May 1, 2024" or "05/01/2024".
FALLBACK_DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%m/%d/%Y", "%d %B %Y")

# (k, offset) per slot: pool[(day_index * k + offset) % len(pool)]
BREAKFAST_ROTATION = (3, 0)
LUNCH_ROTATION = (3, 1)
DINNER_ROTATION = (3, 2)
MORNING_ROTATION = (4, 0)
AFTERNOON_ROTATION = (2, 1)


def parse_trip_date(value: Optional[str]) -> Optional[datetime]:
    """Parses a trip date. Returns None instead of raising for anything unreadable."""
    if not value or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    parsed = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in FALLBACK_DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        logging.warning(f"Could not parse trip date '{value}'.")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def trip_length(start: Optional[datetime], end: Optional[datetime]) -> int:
    """Number of days between start and end (end exclusive), never less than 1."""
    if start is None or end is None:
        return 1
    days = max(1.0, (end - start).total_seconds() / SECONDS_PER_DAY)
    return math.ceil(days)


def _rotate(pool: Sequence[str], day_index: int, rotation) -> str:
    k, offset = rotation
    return pool[(day_index * k + offset) % len(pool)]


def plan_days(request: TripRequest) -> List[DayPlan]:
    cities = resolve_sub_locations(request.destination)
    plans = []
    for i in range(trip_length(request.start, request.end)):
        plans.append(DayPlan(
            day=i + 1,
            city=cities[i % len(cities)],
            breakfast=_rotate(EXAMPLE_RESTAURANTS, i, BREAKFAST_ROTATION),
            morning_activity=_rotate(EXAMPLE_ACTIVITIES, i, MORNING_ROTATION),
            lunch=_rotate(EXAMPLE_RESTAURANTS, i, LUNCH_ROTATION),
            afternoon_activity=_rotate(EXAMPLE_ACTIVITIES, i, AFTERNOON_ROTATION),
            dinner=_rotate(EXAMPLE_RESTAURANTS, i, DINNER_ROTATION),
        ))
    return plans


def render_day(plan: DayPlan) -> str:
    # The heading is what map_links.DAY_HEADING_PATTERN splits on.
    return (
        f"**Day {plan.day} — {plan.city}**  \n"
        f"- **08:00 AM:** Breakfast at {plan.breakfast}  \n"
        f"- **10:00 AM:** {plan.morning_activity} in {plan.city}  \n"
        f"- **12:30 PM:** Lunch at {plan.lunch}  \n"
        f"- **03:00 PM:** {plan.afternoon_activity} nearby  \n"
        f"- **07:30 PM:** Dinner at {plan.dinner}  \n"
    )


def render_header(request: TripRequest) -> str:
    lines = [f"Trip to **{request.destination}**  "]
    if request.companions:
        lines.append(f"Traveling with: {', '.join(request.companions)}")
    if request.interests:
        lines.append(f"Traveler interests: {', '.join(request.interests)}")
    lines.append("")
    lines.append("Here’s your detailed itinerary:")
    return "\n".join(lines)


def render_itinerary(request: TripRequest) -> str:
    days = [render_day(plan) for plan in plan_days(request)]
    return f"{render_header(request)}\n" + "\n".join(days)


def generate_itinerary(
    destination: str,
    start_date: str,
    end_date: str,
    interests: Optional[Sequence[str]] = None,
    companions: Optional[Sequence[str]] = None,
) -> str:
    """Builds the itinerary text for a trip.

    Unknown destinations are used verbatim as the only city, and unreadable dates
    produce a one-day trip.
    """
    request = TripRequest(
        destination=destination,
        start=parse_trip_date(start_date),
        end=parse_trip_date(end_date),
        interests=tuple(interests or ()),
        companions=tuple(companions or ()),
    )
    return render_itinerary(request).strip()
