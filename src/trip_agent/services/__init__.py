"""
Collaborators the tools delegate to: task scheduling and email delivery.
"""

from .scheduler import Schedule, Scheduler, InMemoryScheduler
from .mailer import send_itinerary_email, render_email_html, clean_itinerary_body

__all__ = [
    'Schedule',
    'Scheduler',
    'InMemoryScheduler',
    'send_itinerary_email',
    'render_email_html',
    'clean_itinerary_body'
]
