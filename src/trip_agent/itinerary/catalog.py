"""Static lookup tables used to fill in generated itineraries."""

from types import MappingProxyType
from typing import Tuple

REGION_TO_CITIES = MappingProxyType({
    "california": ("Los Angeles", "San Francisco", "San Diego", "Yosemite National Park"),
    "japan": ("Tokyo", "Kyoto", "Osaka", "Hiroshima"),
    "italy": ("Rome", "Florence", "Venice", "Milan"),
    "france": ("Paris", "Nice", "Lyon", "Bordeaux"),
    "spain": ("Barcelona", "Madrid", "Seville", "Valencia"),
    "india": ("Delhi", "Jaipur", "Agra", "Mumbai"),
    "greece": ("Athens", "Santorini", "Mykonos", "Crete"),
})

EXAMPLE_RESTAURANTS = (
    "Blue Bottle Coffee",
    "The Grove Café",
    "The Local Diner",
    "Harbor View Seafood Grill",
    "Mountain Bistro",
    "Sunset Terrace",
)

EXAMPLE_ACTIVITIES = (
    "city walking tour",
    "museum visit",
    "boat ride",
    "scenic lookout",
    "shopping district",
    "local market exploration",
    "fine dining experience",
)


def resolve_sub_locations(destination: str) -> Tuple[str, ...]:
    """Expands a region name into its cities, or returns the destination itself."""
    return REGION_TO_CITIES.get(destination.lower(), (destination,))
