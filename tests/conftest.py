from __future__ import annotations

import io
import itertools
from typing import Callable, List

import pytest

from patient_console.notifications import NotificationBroadcaster, PatientManager
from patient_console.session import ConsoleSession


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"p{next(counter):04d}"


@pytest.fixture
def recording_manager():
    """PatientManager whose subscribers record (event, patient, amount) tuples."""

    events: List[tuple] = []
    broadcaster = NotificationBroadcaster()
    broadcaster.subscribe_admission(lambda p: events.append(("admit", p, None)))
    broadcaster.subscribe_bill(lambda p, amount: events.append(("bill", p, amount)))
    manager = PatientManager(broadcaster)
    manager.events = events
    return manager


@pytest.fixture
def console(recording_manager, sequential_ids):
    """Build a ConsoleSession reading from the given lines and writing to a StringIO."""

    def _make(*lines: str) -> ConsoleSession:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        return ConsoleSession(recording_manager, stdin=stdin, stdout=io.StringIO(), id_factory=sequential_ids)

    return _make
