"""Per-session agent context that tools read while the graph is running."""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..services.scheduler import InMemoryScheduler, Scheduler


@dataclass
class AgentContext:
    scheduler: Scheduler = field(default_factory=InMemoryScheduler)


_current_agent: ContextVar[Optional[AgentContext]] = ContextVar("current_agent", default=None)


def get_current_agent() -> AgentContext:
    agent = _current_agent.get()
    if agent is None:
        raise RuntimeError("No active agent context; tools must run inside a chat session.")
    return agent


@contextmanager
def agent_context(agent: AgentContext) -> Iterator[AgentContext]:
    token = _current_agent.set(agent)
    try:
        yield agent
    finally:
        _current_agent.reset(token)
