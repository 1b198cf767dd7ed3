"""Argument schemas the LLM sees for each tool."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class GetWeatherInformation(BaseModel):
    """show the weather in a given city to the user"""
    model_config = ConfigDict(title="get_weather_information")

    city: str


class LocalTimeInput(BaseModel):
    location: str


class ScheduleWhen(BaseModel):
    type: Literal["scheduled", "delayed", "cron", "no-schedule"] = Field(
        description="The type of scheduling details: an exact date, a delay, a cron pattern, or no-schedule if none was given."
    )
    date: Optional[datetime] = Field(default=None, description="Execution time for 'scheduled' tasks.")
    delay_in_seconds: Optional[int] = Field(default=None, description="Delay for 'delayed' tasks, in seconds.")
    cron: Optional[str] = Field(default=None, description="Cron pattern for 'cron' tasks.")


class ScheduleTaskInput(BaseModel):
    description: str = Field(description="A description of the task.")
    when: ScheduleWhen


class CancelTaskInput(BaseModel):
    task_id: str = Field(description="The ID of the task to cancel")


class PlanTripInput(BaseModel):
    destination: str = Field(description="The main location for this trip (can be a city, region, or country). The itinerary should remain specific even for large regions.")
    start_date: str = Field(description="The starting date of the trip.")
    end_date: str = Field(description="The ending date of the trip.")
    interests: Optional[List[str]] = Field(default=None, description="User interests or activities to tailor the itinerary.")
    friends: Optional[List[str]] = Field(default=None, description="Friends joining the trip.")


class SendEmailInput(BaseModel):
    to: List[EmailStr] = Field(description="A list of email addresses to send the itinerary to.")
    subject: str = Field(description="The subject line of the email.")
    body: str = Field(description="The body content of the email, including the trip itinerary. This will be plain text or HTML.")


class MapLinksInput(BaseModel):
    itinerary: str = Field(description="The full itinerary text generated by the trip planner.")
    destination: Optional[str] = Field(default=None, description="The overall trip destination. Optional when invoked by the trip planner.")
