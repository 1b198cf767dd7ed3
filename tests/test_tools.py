"""
Tool surface tests: each LangChain tool invoked the way the dispatcher does.
"""

from trip_agent.core.context import AgentContext, agent_context
from trip_agent.itinerary import extract_map_links, generate_itinerary
from trip_agent.utils import (
    TOOL_DESCRIPTORS,
    cancel_scheduled_task,
    executions,
    generate_map_links,
    get_local_time,
    get_scheduled_tasks,
    plan_trip,
    schedule_task,
    tools,
)
from trip_agent.utils.registry import AutoExecuting, ConfirmationRequired
from trip_agent.utils.schemas import GetWeatherInformation


def test_tool_descriptors():
    """Only the weather tool needs confirmation"""
    assert set(TOOL_DESCRIPTORS) == {
        "get_weather_information", "get_local_time", "schedule_task", "get_scheduled_tasks",
        "cancel_scheduled_task", "plan_trip", "send_email", "generate_map_links",
    }
    weather = TOOL_DESCRIPTORS["get_weather_information"]
    assert isinstance(weather.execution, ConfirmationRequired)
    assert weather.requires_confirmation
    assert weather.definition is GetWeatherInformation
    assert "get_weather_information" in executions

    for name, descriptor in TOOL_DESCRIPTORS.items():
        if name != "get_weather_information":
            assert isinstance(descriptor.execution, AutoExecuting)
            assert descriptor.execution.handler.name == name
    assert len(tools) == len(TOOL_DESCRIPTORS)


def test_weather_execution():
    """Weather execution returns the canned forecast"""
    assert executions["get_weather_information"](city="Paris") == "The weather in Paris is sunny"


def test_get_local_time():
    """Local time tool returns the canned time"""
    assert get_local_time.invoke({"location": "Tokyo"}) == "10am"


def test_plan_trip_appends_map_links():
    """plan_trip returns the itinerary followed by its map links"""
    args = {"destination": "japan", "start_date": "2024-05-01", "end_date": "2024-05-03",
            "friends": ["Sam"], "interests": ["ramen"]}
    result = plan_trip.invoke(args)

    itinerary = generate_itinerary("japan", "2024-05-01", "2024-05-03", ["ramen"], ["Sam"])
    assert result == f"{itinerary}\n\n{extract_map_links(itinerary, 'japan')}"
    assert "Traveling with: Sam" in result
    assert "\n\n**Google Maps Links for Each Day**\n\n**Day 1 — Tokyo**" in result


def test_plan_trip_unknown_destination_uses_it_as_context():
    """Bad dates give a one-day trip in the destination itself"""
    result = plan_trip.invoke({"destination": "Atlantis", "start_date": "bad", "end_date": "dates"})
    assert result.count("**Day 1 — Atlantis**") == 2
    assert "**Day 2" not in result


def test_generate_map_links_tool():
    """Map links tool uses the given destination as context"""
    result = generate_map_links.invoke({"itinerary": "**Day 1** Dinner at Luigi's", "destination": "Rome"})
    assert "• [Luigi's (Rome)]" in result


def test_schedule_task_variants():
    """Each schedule type lands in the active agent's scheduler"""
    with agent_context(AgentContext()) as agent:
        delayed = schedule_task.invoke({"description": "Call hotel",
                                        "when": {"type": "delayed", "delay_in_seconds": 60}})
        cron = schedule_task.invoke({"description": "Check flights",
                                     "when": {"type": "cron", "cron": "0 9 * * *"}})
        scheduled = schedule_task.invoke({"description": "Pack",
                                          "when": {"type": "scheduled", "date": "2030-01-01T09:00:00Z"}})
        nothing = schedule_task.invoke({"description": "Someday", "when": {"type": "no-schedule"}})

    assert delayed == 'Task scheduled for type "delayed" : 60'
    assert cron == 'Task scheduled for type "cron" : 0 9 * * *'
    assert scheduled == 'Task scheduled for type "scheduled" : 2030-01-01T09:00:00+00:00'
    assert nothing == "Not a valid schedule input"
    assert [s.payload for s in agent.scheduler.get_schedules()] == ["Call hotel", "Check flights", "Pack"]


def test_schedule_task_reports_scheduler_errors():
    """Scheduler errors come back as text"""
    with agent_context(AgentContext()):
        result = schedule_task.invoke({"description": "Call hotel", "when": {"type": "delayed"}})
    assert result.startswith("Error scheduling task:")


def test_tools_without_agent_context_return_errors():
    """Scheduling tools report a missing agent context instead of raising"""
    result = schedule_task.invoke({"description": "x", "when": {"type": "cron", "cron": "* * * * *"}})
    assert result.startswith("Error scheduling task: No active agent context")
    assert get_scheduled_tasks.invoke({}).startswith("Error listing scheduled tasks:")
    assert cancel_scheduled_task.invoke({"task_id": "abc"}).startswith("Error canceling task abc:")


def test_list_and_cancel_tasks():
    """Listing and cancelling go through the same scheduler"""
    with agent_context(AgentContext()) as agent:
        assert get_scheduled_tasks.invoke({}) == "No scheduled tasks found."

        schedule_task.invoke({"description": "Call hotel", "when": {"type": "delayed", "delay_in_seconds": 30}})
        listed = get_scheduled_tasks.invoke({})
        assert len(listed) == 1
        assert listed[0]["payload"] == "Call hotel"
        assert listed[0]["type"] == "delayed"

        task_id = listed[0]["id"]
        assert cancel_scheduled_task.invoke({"task_id": task_id}) == f"Task {task_id} has been successfully canceled."
        assert cancel_scheduled_task.invoke({"task_id": task_id}) == f"No scheduled task found with ID {task_id}."
        assert agent.scheduler.get_schedules() == []
