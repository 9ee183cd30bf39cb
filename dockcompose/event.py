"""Progress events and their constructors."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field

from dockcompose.spinner import Spinner

__all__ = [
    "EventStatus",
    "Event",
    "new_event",
    "error_message_event",
    "error_event",
    "creating_event",
    "starting_event",
    "started_event",
    "restarting_event",
    "restarted_event",
    "running_event",
    "created_event",
    "stopping_event",
    "stopped_event",
    "killing_event",
    "killed_event",
    "removing_event",
    "removed_event",
]


class EventStatus(enum.IntEnum):
    """State of the task an event reports on."""

    WORKING = 0
    DONE = 1
    ERROR = 2


@dataclass
class Event:
    """A progress event; times are monotonic seconds."""

    id: str
    parent_id: str = ""
    text: str = ""
    status: EventStatus = EventStatus.WORKING
    status_text: str = ""
    start_time: float | None = None
    end_time: float | None = None
    spinner: Spinner | None = field(default=None, compare=False)

    def stop(self) -> None:
        """Record the end time and stop the spinner."""
        self.end_time = time.monotonic()
        if self.spinner is not None:
            self.spinner.stop()


def new_event(id_: str, status: EventStatus, status_text: str) -> Event:
    """Create an event with the given id, status and status text."""
    return Event(id=id_, status=status, status_text=status_text)


def error_message_event(id_: str, msg: str) -> Event:
    return new_event(id_, EventStatus.ERROR, msg)


def error_event(id_: str) -> Event:
    return new_event(id_, EventStatus.ERROR, "Error")


def creating_event(id_: str) -> Event:
    return new_event(id_, EventStatus.WORKING, "Creating")


def starting_event(id_: str) -> Event:
    return new_event(id_, EventStatus.WORKING, "Starting")


def started_event(id_: str) -> Event:
    return new_event(id_, EventStatus.DONE, "Started")


def restarting_event(id_: str) -> Event:
    return new_event(id_, EventStatus.WORKING, "Restarting")


def restarted_event(id_: str) -> Event:
    return new_event(id_, EventStatus.DONE, "Restarted")


def running_event(id_: str) -> Event:
    return new_event(id_, EventStatus.DONE, "Running")


def created_event(id_: str) -> Event:
    return new_event(id_, EventStatus.DONE, "Created")


def stopping_event(id_: str) -> Event:
    return new_event(id_, EventStatus.WORKING, "Stopping")


def stopped_event(id_: str) -> Event:
    return new_event(id_, EventStatus.DONE, "Stopped")


def killing_event(id_: str) -> Event:
    return new_event(id_, EventStatus.WORKING, "Killing")


def killed_event(id_: str) -> Event:
    return new_event(id_, EventStatus.DONE, "Killed")


def removing_event(id_: str) -> Event:
    return new_event(id_, EventStatus.WORKING, "Removing")


def removed_event(id_: str) -> Event:
    return new_event(id_, EventStatus.DONE, "Removed")