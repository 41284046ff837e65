#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Habit Tracker
Командный интерфейс для любого слоя представления: create, delete, toggle, select.

Трекер хранит только выбранную привычку; статистика и сетка календаря
пересчитываются из completions при каждом запросе.

Версия: 1.0.0
"""

import logging
from datetime import date
from typing import Callable, List, Optional, Union

from habitgrid.core.calendar_grid import WINDOW_DAYS, build_calendar_grid
from habitgrid.core.models import CalendarGrid, Habit, HabitStats, HabitView
from habitgrid.core.stats import RATE_WINDOW_DAYS, calculate_stats
from habitgrid.core.store import HabitStore

logger = logging.getLogger(__name__)

class HabitTracker:
    """Выбор привычки и сборка данных для отображения"""

    def __init__(self, store: HabitStore, today: Callable[[], date],
                 window_days: int = WINDOW_DAYS, rate_window_days: int = RATE_WINDOW_DAYS):
        self.store = store
        self._today = today
        self.window_days = window_days
        self.rate_window_days = rate_window_days

        first = store.first()
        self.selected_id: Optional[str] = first.id if first else None

    @property
    def habits(self) -> List[Habit]:
        return self.store.list()

    @property
    def selected(self) -> Optional[Habit]:
        if self.selected_id is None:
            return None
        return self.store.get(self.selected_id)

    def today(self) -> date:
        return self._today()

    # ===== COMMANDS =====

    def create(self, name: str, color: Optional[str] = None) -> Optional[Habit]:
        """Создать привычку и сразу выбрать её"""
        habit = self.store.create(name, color, today=self.today())
        if habit is not None:
            self.selected_id = habit.id
        return habit

    def delete(self, habit_id: str) -> bool:
        """Удалить привычку; выбор переходит к первой оставшейся"""
        removed = self.store.delete(habit_id)
        if removed and self.selected_id == habit_id:
            first = self.store.first()
            self.selected_id = first.id if first else None
            logger.debug(f"Selection moved to {self.selected_id}")
        return removed

    def toggle(self, habit_id: str, day: Union[date, str, None] = None) -> Optional[bool]:
        """Переключить отметку за день (по умолчанию - сегодня)"""
        return self.store.toggle_completion(habit_id, day if day is not None else self.today())

    def select(self, habit_id: Optional[str]) -> Optional[Habit]:
        """Выбрать привычку; неизвестный id игнорируется"""
        if habit_id is None:
            self.selected_id = None
            return None

        habit = self.store.get(habit_id)
        if habit is None:
            logger.debug(f"Select ignored, no habit with ID {habit_id}")
            return self.selected

        self.selected_id = habit.id
        return habit

    # ===== VIEWS =====

    def stats(self, today: Optional[date] = None) -> HabitStats:
        return calculate_stats(self.selected, today or self.today(), self.rate_window_days)

    def calendar(self, today: Optional[date] = None) -> Optional[CalendarGrid]:
        habit = self.selected
        if habit is None:
            return None
        return build_calendar_grid(habit.completions, today or self.today(), self.window_days)

    def view(self, today: Optional[date] = None) -> HabitView:
        """Всё, что нужно слою представления, одним снимком"""
        today = today or self.today()
        habit = self.selected
        return HabitView(
            habits=self.habits,
            selected=habit,
            stats=calculate_stats(habit, today, self.rate_window_days),
            grid=build_calendar_grid(habit.completions, today, self.window_days) if habit else None,
            today=today
        )

__all__ = ['HabitTracker']
