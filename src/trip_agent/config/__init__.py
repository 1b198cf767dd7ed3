"""
Configuration settings and constants for the trip agent.
"""

from .settings import (
    GEMINI_API_KEY,
    SENDGRID_EMAIL_API,
    SENDER_EMAIL,
    SENDGRID_MAIL_ENDPOINT,
    GOOGLE_MAPS_SEARCH_URL,
    SYSTEM_PROMPT,
    validate_api_keys
)

__all__ = [
    'GEMINI_API_KEY',
    'SENDGRID_EMAIL_API',
    'SENDER_EMAIL',
    'SENDGRID_MAIL_ENDPOINT',
    'GOOGLE_MAPS_SEARCH_URL',
    'SYSTEM_PROMPT',
    'validate_api_keys'
]
