"""
Trip agent: chat tools for itinerary planning, map links, scheduling and email.
"""

__version__ = "0.1.0"
