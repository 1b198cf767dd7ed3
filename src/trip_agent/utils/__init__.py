"""
Tools and tool descriptors for the trip agent.
"""

from .tools import (
    tools,
    executions,
    TOOL_DESCRIPTORS,
    get_local_time,
    schedule_task,
    get_scheduled_tasks,
    cancel_scheduled_task,
    plan_trip,
    send_email,
    generate_map_links,
)

__all__ = [
    'tools',
    'executions',
    'TOOL_DESCRIPTORS',
    'get_local_time',
    'schedule_task',
    'get_scheduled_tasks',
    'cancel_scheduled_task',
    'plan_trip',
    'send_email',
    'generate_map_links'
]
