from __future__ import annotations

from datetime import date
from typing import List, Sequence

from habitgrid.core.models import Habit
from habitgrid.database.storage import KeyValueStorage

TODAY = date(2026, 10, 19)


class RecordingStorage(KeyValueStorage):
    """Key-value storage that counts save() calls."""

    def __init__(self, backend=None) -> None:
        super().__init__(backend)
        self.saves: List[int] = []

    def save(self, habits: Sequence[Habit]) -> None:
        self.saves.append(len(habits))
        super().save(habits)


def fixed_today() -> date:
    return TODAY


def make_tracker(storage=None):
    from habitgrid.core.store import HabitStore
    from habitgrid.core.tracker import HabitTracker

    storage = storage if storage is not None else RecordingStorage()
    return HabitTracker(HabitStore(storage, today=fixed_today), today=fixed_today)
