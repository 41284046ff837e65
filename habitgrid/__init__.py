#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0
Трекер привычек: серии, процент выполнения и годовая тепловая карта

Версия: 1.0.0
"""

from .core.models import (
    ValidationError,
    Habit,
    HabitStats,
    CalendarCell,
    MonthLabel,
    CalendarGrid,
    HabitView
)

from .core.stats import (
    current_streak,
    longest_streak,
    completion_rate,
    calculate_stats
)

from .core.calendar_grid import build_calendar_grid

from .core.store import HabitStore
from .core.tracker import HabitTracker

from .database.storage import (
    StorageError,
    HabitStorage,
    KeyValueStorage,
    JsonFileStorage
)

from .app import create_tracker

__version__ = "1.0.0"

__all__ = [
    # Models
    'ValidationError',
    'Habit',
    'HabitStats',
    'CalendarCell',
    'MonthLabel',
    'CalendarGrid',
    'HabitView',

    # Statistics
    'current_streak',
    'longest_streak',
    'completion_rate',
    'calculate_stats',

    # Calendar
    'build_calendar_grid',

    # Store and commands
    'HabitStore',
    'HabitTracker',

    # Storage
    'StorageError',
    'HabitStorage',
    'KeyValueStorage',
    'JsonFileStorage',

    # Bootstrap
    'create_tracker'
]
