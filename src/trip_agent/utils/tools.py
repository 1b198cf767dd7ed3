"""
Tools exposed to the chat agent.

Tools with a handler run automatically. ``get_weather_information`` only has a
schema; its implementation lives in ``executions`` and runs after the user
approves the call.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from langchain_core.tools import tool

from ..core.context import get_current_agent
from ..itinerary import extract_map_links, plan_trip_with_links
from ..services.mailer import send_itinerary_email
from .registry import auto_executing, confirmation_required, index_descriptors
from .schemas import (
    CancelTaskInput,
    GetWeatherInformation,
    LocalTimeInput,
    MapLinksInput,
    PlanTripInput,
    ScheduleTaskInput,
    ScheduleWhen,
    SendEmailInput,
)


@tool(args_schema=LocalTimeInput)
def get_local_time(location: str) -> str:
    """get the local time for a specified location"""
    logging.info(f"TOOL CALLED: get_local_time(location='{location}')")
    return "10am"


@tool(args_schema=ScheduleTaskInput)
def schedule_task(description: str, when: Union[ScheduleWhen, Dict[str, Any]]) -> str:
    """A tool to schedule a task to be executed at a later time"""
    when = ScheduleWhen.model_validate(when)
    logging.info(f"TOOL CALLED: schedule_task(description='{description}', when={when.type})")

    if when.type == "no-schedule":
        return "Not a valid schedule input"

    if when.type == "scheduled":
        schedule_input = when.date
    elif when.type == "delayed":
        schedule_input = when.delay_in_seconds
    else:
        schedule_input = when.cron

    try:
        get_current_agent().scheduler.schedule(schedule_input, "execute_task", description)
    except Exception as e:
        logging.error(f"Error scheduling task: {e}", exc_info=True)
        return f"Error scheduling task: {e}"

    if hasattr(schedule_input, "isoformat"):
        schedule_input = schedule_input.isoformat()
    return f'Task scheduled for type "{when.type}" : {schedule_input}'


@tool
def get_scheduled_tasks() -> Union[str, List[Dict[str, Any]]]:
    """List all tasks that have been scheduled"""
    logging.info("TOOL CALLED: get_scheduled_tasks()")
    try:
        tasks = get_current_agent().scheduler.get_schedules()
    except Exception as e:
        logging.error(f"Error listing scheduled tasks: {e}", exc_info=True)
        return f"Error listing scheduled tasks: {e}"

    if not tasks:
        return "No scheduled tasks found."
    return [task.to_dict() for task in tasks]


@tool(args_schema=CancelTaskInput)
def cancel_scheduled_task(task_id: str) -> str:
    """Cancel a scheduled task using its ID"""
    logging.info(f"TOOL CALLED: cancel_scheduled_task(task_id='{task_id}')")
    try:
        canceled = get_current_agent().scheduler.cancel_schedule(task_id)
    except Exception as e:
        logging.error(f"Error canceling scheduled task: {e}", exc_info=True)
        return f"Error canceling task {task_id}: {e}"

    if not canceled:
        return f"No scheduled task found with ID {task_id}."
    return f"Task {task_id} has been successfully canceled."


@tool(args_schema=PlanTripInput)
def plan_trip(destination: str, start_date: str, end_date: str,
              interests: Optional[List[str]] = None, friends: Optional[List[str]] = None) -> str:
    """Plan a detailed trip itinerary and automatically generate Google Maps links for each day."""
    logging.info(f"TOOL CALLED: plan_trip(destination='{destination}', start_date='{start_date}', end_date='{end_date}')")
    return plan_trip_with_links(destination, start_date, end_date, interests, friends)


@tool(args_schema=SendEmailInput)
def send_email(to: List[str], subject: str, body: str) -> str:
    """Send an email with the most up to date trip itinerary with a subject and body to a list of recipients"""
    logging.info(f"TOOL CALLED: send_email(to={to}, subject='{subject}')")
    return send_itinerary_email(to, subject, body)


@tool(args_schema=MapLinksInput)
def generate_map_links(itinerary: str, destination: Optional[str] = None) -> str:
    """Generate clickable Google Maps links for each day in the itinerary, using inferred local context."""
    logging.info(f"TOOL CALLED: generate_map_links(destination='{destination}')")
    return extract_map_links(itinerary, destination)


def get_weather_information(city: str) -> str:
    """Runs once the user has approved a weather lookup."""
    logging.info(f"Getting weather information for {city}")
    return f"The weather in {city} is sunny"


# Implementations of the tools that need human approval, keyed by tool name
executions = {
    "get_weather_information": get_weather_information,
}

TOOL_DESCRIPTORS = index_descriptors([
    confirmation_required("get_weather_information", GetWeatherInformation),
    auto_executing(get_local_time),
    auto_executing(schedule_task),
    auto_executing(get_scheduled_tasks),
    auto_executing(cancel_scheduled_task),
    auto_executing(plan_trip),
    auto_executing(send_email),
    auto_executing(generate_map_links),
])

# List of all available tools, as handed to bind_tools
tools = [descriptor.definition for descriptor in TOOL_DESCRIPTORS.values()]
