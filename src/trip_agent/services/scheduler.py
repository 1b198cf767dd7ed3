"""
Task scheduling backend used by the scheduling tools.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union

ScheduleWhen = Union[datetime, int, float, str]


@dataclass(frozen=True)
class Schedule:
    id: str
    callback: str
    payload: Any
    type: str  # "scheduled", "delayed" or "cron"
    time: Optional[datetime] = None
    delay_in_seconds: Optional[float] = None
    cron: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in ("time", "created_at"):
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data


class Scheduler(ABC):
    """Interface the scheduling tools talk to."""

    @abstractmethod
    def schedule(self, when: ScheduleWhen, callback: str, payload: Any = None) -> Schedule:
        ...

    @abstractmethod
    def get_schedules(self) -> List[Schedule]:
        ...

    @abstractmethod
    def cancel_schedule(self, schedule_id: str) -> bool:
        ...

    @abstractmethod
    def pop_due(self, now: Optional[datetime] = None) -> List[Schedule]:
        ...


class InMemoryScheduler(Scheduler):
    """Keeps schedules for the lifetime of one chat session."""

    def __init__(self):
        self._schedules: Dict[str, Schedule] = {}

    def schedule(self, when: ScheduleWhen, callback: str, payload: Any = None) -> Schedule:
        schedule_id = uuid.uuid4().hex[:12]
        now = datetime.now(timezone.utc)

        if isinstance(when, datetime):
            run_at = when if when.tzinfo else when.replace(tzinfo=timezone.utc)
            entry = Schedule(id=schedule_id, callback=callback, payload=payload,
                             type="scheduled", time=run_at)
        elif isinstance(when, bool):
            raise ValueError(f"Invalid schedule input: {when!r}")
        elif isinstance(when, (int, float)):
            if when < 0:
                raise ValueError(f"Delay must not be negative, got {when}")
            entry = Schedule(id=schedule_id, callback=callback, payload=payload,
                             type="delayed", time=now + timedelta(seconds=when),
                             delay_in_seconds=when)
        elif isinstance(when, str) and when.strip():
            entry = Schedule(id=schedule_id, callback=callback, payload=payload,
                             type="cron", cron=when.strip())
        else:
            raise ValueError(f"Invalid schedule input: {when!r}")

        self._schedules[schedule_id] = entry
        logging.info(f"Scheduled '{callback}' ({entry.type}) with id {schedule_id}")
        return entry

    def get_schedules(self) -> List[Schedule]:
        return list(self._schedules.values())

    def cancel_schedule(self, schedule_id: str) -> bool:
        return self._schedules.pop(schedule_id, None) is not None

    def pop_due(self, now: Optional[datetime] = None) -> List[Schedule]:
        """Removes and returns one-off schedules whose run time has passed. Cron entries stay."""
        now = now or datetime.now(timezone.utc)
        due = [s for s in self._schedules.values() if s.time is not None and s.time <= now]
        for entry in due:
            del self._schedules[entry.id]
        return due
