"""
Recovers place names from itinerary text and turns them into Google Maps links.

Works on any text that uses the ``**Day <n> ...`` heading convention, not just
output of the generator.
"""

import re
from typing import List, Optional
from urllib.parse import quote

from ..config.settings import GOOGLE_MAPS_SEARCH_URL
from .models import ExtractedDay, MapLink

DEFAULT_CONTEXT = "the trip destination"
NO_LOCATIONS_LINE = "No recognizable locations found."
LINKS_HEADER = "**Google Maps Links for Each Day**"

DAY_HEADING_PATTERN = re.compile(r"\*\*Day\s+\d+")
DAY_TITLE_PATTERN = re.compile(r"\*\*Day\s+(\d+)[^*]*")
PLACE_PATTERN = re.compile(
    r"\b(?:at|in|around|near|visit|explore|lunch at|dinner at)\s+([A-Z][\w'&\- ]+)",
    re.IGNORECASE,
)
CONTEXT_PATTERN = re.compile(
    r"\b(?:in|around|near|visit|explore)\s+([A-Z][\w'&\- ]+)",
    re.IGNORECASE,
)

# Characters encodeURIComponent leaves alone on top of quote()'s defaults.
_URI_COMPONENT_SAFE = "!~*'()"


def split_day_blocks(itinerary: str) -> List[str]:
    """Returns the text following each day heading; the preamble is dropped."""
    return DAY_HEADING_PATTERN.split(itinerary)[1:]


def day_titles(itinerary: str) -> List[str]:
    return [match.group(0).strip().lstrip("*").strip() for match in DAY_TITLE_PATTERN.finditer(itinerary)]


def extract_places(block: str) -> List[str]:
    return [match.group(1).strip() for match in PLACE_PATTERN.finditer(block)]


def resolve_local_context(block: str, destination: Optional[str] = None) -> str:
    match = CONTEXT_PATTERN.search(block)
    if match:
        return match.group(1).strip()
    return destination or DEFAULT_CONTEXT


def build_map_link(place: str, context: str) -> MapLink:
    query = quote(f"{place}, {context}", safe=_URI_COMPONENT_SAFE)
    return MapLink(place=place, context=context, url=GOOGLE_MAPS_SEARCH_URL.format(query=query))


def extract_days(itinerary: str, destination: Optional[str] = None) -> List[ExtractedDay]:
    titles = day_titles(itinerary)
    days = []
    for index, block in enumerate(split_day_blocks(itinerary)):
        title = titles[index] if index < len(titles) and titles[index] else f"Day {index + 1}"
        days.append(ExtractedDay(
            title=title,
            context=resolve_local_context(block, destination),
            places=tuple(extract_places(block)),
        ))
    return days


def render_day_links(day: ExtractedDay) -> str:
    if not day.places:
        return f"**{day.title}**\n{NO_LOCATIONS_LINE}"
    links = [build_map_link(place, day.context) for place in day.places]
    body = "\n".join(link.to_markdown() for link in links)
    return f"**{day.title}**\n{body}"


def extract_map_links(itinerary: str, destination: Optional[str] = None) -> str:
    """Builds the markdown block of map links, one section per itinerary day."""
    sections = [render_day_links(day) for day in extract_days(itinerary, destination)]
    return (f"{LINKS_HEADER}\n\n" + "\n\n".join(sections)).strip()
