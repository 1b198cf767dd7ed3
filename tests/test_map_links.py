"""
Map Link Extraction Tests
=========================
Pins the place-extraction heuristic on generated and hand-written itineraries.
"""

from trip_agent.itinerary import build_map_link, extract_days, extract_map_links
from trip_agent.itinerary.map_links import day_titles, extract_places, resolve_local_context


def test_eiffel_tower_link():
    """Place and context are joined and URI-encoded into a search link"""
    link = build_map_link("Eiffel Tower", "Paris")
    assert link.url == "https://www.google.com/maps/search/?api=1&query=Eiffel%20Tower%2C%20Paris"
    assert link.to_markdown() == (
        "• [Eiffel Tower (Paris)]"
        "(https://www.google.com/maps/search/?api=1&query=Eiffel%20Tower%2C%20Paris)"
    )


def test_link_encoding_matches_uri_component_rules():
    """Apostrophes and parentheses stay literal, ampersands are escaped"""
    link = build_map_link("Joe's Pizza & Bar", "New York (Midtown)")
    assert link.url.endswith("query=Joe's%20Pizza%20%26%20Bar%2C%20New%20York%20(Midtown)")


def test_generated_itinerary_places_per_day(japan_itinerary):
    """Places and local context pulled from each generated day"""
    days = extract_days(japan_itinerary, "japan")
    assert [day.title for day in days] == ["Day 1 — Tokyo", "Day 2 — Kyoto", "Day 3 — Osaka"]

    assert days[0].places == ("Blue Bottle Coffee", "Tokyo", "The Grove Café", "nearby", "The Local Diner")
    assert days[0].context == "Tokyo"

    assert days[1].places == ("Harbor View Seafood Grill", "Kyoto", "Mountain Bistro", "Sunset Terrace")
    assert days[1].context == "Kyoto"

    # "museum visit in Osaka" is matched on "visit", so the phrase keeps its "in"
    assert days[2].places == ("Blue Bottle Coffee", "in Osaka", "The Grove Café", "The Local Diner")
    assert days[2].context == "in Osaka"


def test_rendered_links_for_generated_itinerary(japan_itinerary):
    """Links are grouped under each day heading"""
    output = extract_map_links(japan_itinerary, "japan")
    assert output.startswith("**Google Maps Links for Each Day**\n\n**Day 1 — Tokyo**\n")
    assert "• [Blue Bottle Coffee (Tokyo)](https://www.google.com/maps/search/?api=1&query=Blue%20Bottle%20Coffee%2C%20Tokyo)" in output
    assert "query=The%20Grove%20Caf%C3%A9%2C%20Tokyo" in output
    assert "\n\n**Day 2 — Kyoto**\n" in output
    assert output.count("• [") == 13


def test_hand_written_itinerary():
    """Free-form notes with bare day headings still yield places"""
    text = (
        "My notes for the trip\n"
        "**Day 1** Morning walk around Central Park then lunch at Joe's Pizza\n"
        "**Day 2** Rest day.\n"
        "**Day 3 - Brooklyn** Dinner at Luigi's\n"
    )
    days = extract_days(text, "New York")
    assert len(days) == 3
    assert [day.title for day in days] == ["Day 1", "Day 2", "Day 3 - Brooklyn"]

    # The capture runs to the end of the line; phrases are not split apart
    assert days[0].places == ("Central Park then lunch at Joe's Pizza",)
    assert days[0].context == "Central Park then lunch at Joe's Pizza"
    assert days[1].places == ()
    assert days[2].places == ("Luigi's",)
    assert days[2].context == "New York"


def test_day_without_places_renders_placeholder():
    """A day with nothing to link gets the placeholder line"""
    text = "**Day 1** Rest day.\n**Day 2** Dinner at Luigi's\n"
    output = extract_map_links(text)
    assert output == (
        "**Google Maps Links for Each Day**\n\n"
        "**Day 1**\nNo recognizable locations found.\n\n"
        "**Day 2**\n"
        "• [Luigi's (the trip destination)]"
        "(https://www.google.com/maps/search/?api=1&query=Luigi's%2C%20the%20trip%20destination)"
    )


def test_text_without_headings():
    """Text with no day headings renders only the title"""
    assert extract_map_links("Just some notes about Rome", "Italy") == "**Google Maps Links for Each Day**"


def test_repeated_mentions_are_kept():
    """Duplicate places are not collapsed"""
    assert extract_places(" Coffee at Bean Bar\nTea at Bean Bar\n") == ["Bean Bar", "Bean Bar"]


def test_local_context_skips_at():
    """Context comes from the first non-"at" phrase, else the destination"""
    block = " Breakfast at Cafe Uno\nWalk around Trastevere\n"
    assert resolve_local_context(block, "Rome") == "Trastevere"
    assert resolve_local_context(" Breakfast at Cafe Uno\n", "Rome") == "Rome"
    assert resolve_local_context(" Breakfast at Cafe Uno\n") == "the trip destination"


def test_day_titles_drop_leading_markers():
    """Heading titles lose their bold markers"""
    assert day_titles("**Day 12 — Nice**  \n**Day  3**") == ["Day 12 — Nice", "Day  3"]
