"""
Chat session wrapper around the compiled trip agent graph.
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Optional
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage

from ..services.scheduler import Schedule, Scheduler, InMemoryScheduler
from .context import AgentContext, agent_context
from .graph import compile_graph
from .nodes import resolve_confirmation

class ChatAgent:
    """One conversation: its history, its scheduler and any tool calls awaiting approval."""

    def __init__(self, scheduler: Optional[Scheduler] = None, app: Any = None):
        self.context = AgentContext(scheduler=scheduler or InMemoryScheduler())
        self.app = app if app is not None else compile_graph()
        self.messages: List[BaseMessage] = []
        self.pending_confirmations: List[Dict[str, Any]] = []
        self.error_message: Optional[str] = None
        self.task_callbacks = {"execute_task": self.execute_task}

    def _run(self) -> Optional[AIMessage]:
        if self.app is None:
            self.error_message = "Trip agent graph is not available."
            return None

        with agent_context(self.context):
            result = self.app.invoke({
                "messages": self.messages,
                "pending_confirmations": [],
                "error_message": None
            })

        self.messages = list(result.get("messages", self.messages))
        self.pending_confirmations = list(result.get("pending_confirmations") or [])
        self.error_message = result.get("error_message")
        return self.last_reply()

    def execute_task(self, description: Any, schedule: Schedule) -> None:
        """Callback named by schedule_task; feeds the task back into the conversation."""
        logging.info(f"Running scheduled task {schedule.id}: {description}")
        self.messages.append(HumanMessage(content=f"Running scheduled task: {description}"))

    def _collect_due_tasks(self, now: Optional[datetime] = None) -> int:
        due = self.context.scheduler.pop_due(now)
        for schedule in due:
            callback = self.task_callbacks.get(schedule.callback)
            if callback is None:
                logging.warning(f"No callback '{schedule.callback}' for scheduled task {schedule.id}")
                continue
            callback(schedule.payload, schedule)
        return len(due)

    def run_due_tasks(self, now: Optional[datetime] = None) -> Optional[AIMessage]:
        """Fires any scheduled tasks that have come due and lets the agent respond to them."""
        if self.pending_confirmations or not self._collect_due_tasks(now):
            return None
        return self._run()

    def send(self, text: str) -> Optional[AIMessage]:
        """Adds a user message and runs the graph until it answers or needs approval."""
        if self.pending_confirmations:
            raise RuntimeError("Resolve pending tool confirmations before sending a new message.")
        self._collect_due_tasks()
        self.messages.append(HumanMessage(content=text))
        return self._run()

    def confirm(self, approved: bool) -> Optional[AIMessage]:
        """Approves or denies every pending tool call, then resumes the conversation."""
        if not self.pending_confirmations:
            logging.warning("confirm() called with no pending tool calls.")
            return self.last_reply()

        with agent_context(self.context):
            results = [resolve_confirmation(call, approved) for call in self.pending_confirmations]
        self.messages.extend(results)
        self.pending_confirmations = []
        return self._run()

    def last_reply(self) -> Optional[AIMessage]:
        return next((msg for msg in reversed(self.messages) if isinstance(msg, AIMessage)), None)
