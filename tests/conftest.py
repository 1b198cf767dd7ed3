import sys
from pathlib import Path

import pytest

# Add src/ to path so the tests run without an install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def japan_itinerary():
    from trip_agent.itinerary import generate_itinerary
    return generate_itinerary("japan", "2024-05-01", "2024-05-04")
