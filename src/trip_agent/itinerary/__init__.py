"""
Itinerary generation and map-link extraction.
"""

from .generator import generate_itinerary, parse_trip_date, trip_length
from .map_links import build_map_link, extract_days, extract_map_links


def plan_trip_with_links(destination, start_date, end_date, interests=None, companions=None) -> str:
    """Generates an itinerary and appends its map links after a blank line."""
    itinerary = generate_itinerary(destination, start_date, end_date, interests, companions)
    links = extract_map_links(itinerary, destination)
    return f"{itinerary}\n\n{links}"


__all__ = [
    'generate_itinerary',
    'parse_trip_date',
    'trip_length',
    'build_map_link',
    'extract_days',
    'extract_map_links',
    'plan_trip_with_links'
]
