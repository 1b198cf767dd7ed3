"""
Configuration settings and constants for the trip agent.
"""

import os
import logging
from langchain_google_genai import HarmBlockThreshold, HarmCategory
from google.api_core import exceptions as google_exceptions

# API Keys
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")
SENDGRID_EMAIL_API = os.environ.get("SENDGRID_EMAIL_API")
SENDER_EMAIL = os.environ.get("SENDER_EMAIL")

# API Endpoints
SENDGRID_MAIL_ENDPOINT = "https://api.sendgrid.com/v3/mail/send"
GOOGLE_MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={query}"

REQUEST_TIMEOUT_SECONDS = 10

# System Prompt
SYSTEM_PROMPT = """You are a helpful trip planning assistant that can also check the weather, tell the local time, schedule tasks and email itineraries.

**Your Responsibilities:**

1.  **Plan Trips:** When the user wants a trip, call `plan_trip` with the destination, start date, end date and any interests or friends they mention. Dates should be YYYY-MM-DD. Present the returned itinerary and map links as they are.
2.  **Map Links:** If the user pastes or edits an itinerary, call `generate_map_links` on the text so every day gets Google Maps links.
3.  **Email:** When asked to share the itinerary, call `send_email` with the most up to date itinerary as the body.
4.  **Scheduling:** Use `schedule_task` for reminders (an exact date, a delay in seconds, or a cron expression), `get_scheduled_tasks` to list them and `cancel_scheduled_task` to cancel one by ID.
5.  **Weather and Time:** Use `get_weather_information` and `get_local_time` for those questions. Weather lookups are confirmed by the user before they run.
6.  **Be Clear:** If a tool reports an error, tell the user plainly what went wrong.
"""

# Logging Configuration
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - [%(levelname)s] - %(message)s'
)

def validate_api_keys() -> bool:
    """Validate that all required API keys are present."""
    missing_keys = []

    if not GEMINI_API_KEY:
        missing_keys.append("GEMINI_API_KEY")
        logging.error("GEMINI_API_KEY not found. LLM will not function.")
    if not SENDGRID_EMAIL_API:
        missing_keys.append("SENDGRID_EMAIL_API")
        logging.warning("SENDGRID_EMAIL_API not found. Emailing itineraries will fail.")
    if not SENDER_EMAIL:
        missing_keys.append("SENDER_EMAIL")
        logging.warning("SENDER_EMAIL not found. Emailing itineraries will fail.")

    if missing_keys:
        logging.error(f"Missing required API keys: {', '.join(missing_keys)}")
        return False

    return True

# --- LLM Configuration ---
GEMINI_MODEL_CONFIG = {
    "model": "gemini-2.5-pro",
    "temperature": 0.7,
    "safety_settings": {
        HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_NONE,
        HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_NONE,
        HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_NONE,
        HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_NONE,
    }
}
