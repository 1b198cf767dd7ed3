"""
SendGrid transport for emailing itineraries.
"""

import logging
import re
from typing import List, Optional

import requests

from ..config import settings

DAY_HEADING_WITH_CITY = re.compile(r"\*\*Day\s+(\d+)\s+—[^\*]+\*\*")

EMAIL_TEMPLATE = """
      <div style="font-family: Arial, sans-serif; background-color: #f9fafc; padding: 20px;">
        <div style="max-width: 600px; margin: 0 auto; background: white; border-radius: 10px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); overflow: hidden;">
          <div style="background-color: #0078d4; color: white; padding: 20px;">
            <h2 style="margin: 0;">Your Trip Itinerary 🌍</h2>
          </div>
          <div style="padding: 20px; line-height: 1.6; color: #333;">
            {content}
          </div>
          <div style="background-color: #f1f1f1; padding: 15px; text-align: center; font-size: 13px; color: #555;">
            ✈️ Planned with <strong>Trip Agent</strong>
          </div>
        </div>
      </div>
    """


def clean_itinerary_body(body: str) -> str:
    """Collapses '**Day N — City**' headings to '**Day N**'."""
    return DAY_HEADING_WITH_CITY.sub(r"**Day \1**", body)


def markdown_to_html(text: str) -> str:
    text = re.sub(r"#{1,6}\s*", "", text)
    text = re.sub(r"\*\*(.*?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"(Day\s\d+)", r'<h3 style="color:#0078d4;margin-top:24px;">\1</h3>', text)
    return text.replace("\n", "<br>")


def render_email_html(body: str) -> str:
    return EMAIL_TEMPLATE.format(content=markdown_to_html(clean_itinerary_body(body)))


def send_itinerary_email(to: List[str], subject: str, body: str,
                         api_key: Optional[str] = None, sender: Optional[str] = None) -> str:
    """Sends the itinerary through SendGrid and describes the outcome as a string."""
    api_key = api_key or settings.SENDGRID_EMAIL_API
    sender = sender or settings.SENDER_EMAIL
    if not api_key or not sender:
        logging.error("SendGrid API key or sender address is not configured.")
        return "Error sending email: email service is not configured."

    payload = {
        "personalizations": [{"to": [{"email": address} for address in to]}],
        "from": {"email": sender},
        "subject": subject,
        "content": [{"type": "text/html", "value": render_email_html(body)}],
    }
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            settings.SENDGRID_MAIL_ENDPOINT,
            json=payload,
            headers=headers,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        logging.error(f"Error sending email: {e}", exc_info=True)
        return f"Error sending email: {e}"

    if not response.ok:
        logging.error(f"SendGrid rejected the email ({response.status_code}): {response.text}")
        return f"Failed to send email: {response.text}"

    return f"Email sent successfully to: {', '.join(to)}"
