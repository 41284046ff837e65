#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Habit Store
Коллекция привычек в памяти; каждая мутация сразу сохраняется провайдером.

Версия: 1.0.0
"""

import logging
from datetime import date
from typing import Callable, List, Optional, Union

from habitgrid.core.models import Habit, ValidationError, generate_habit_id, validate_day
from habitgrid.database.storage import HabitStorage
from habitgrid.ui.themes import resolve_color
from habitgrid.utils.datetime_utils import format_day, to_day
from habitgrid.utils.validators import is_valid_color

logger = logging.getLogger(__name__)

class HabitStore:
    """Хранилище привычек с сохранением после каждой мутации"""

    def __init__(self, storage: HabitStorage, today: Callable[[], date],
                 default_color: str = "#40c463"):
        self.storage = storage
        self._today = today
        self.default_color = default_color
        self._habits: List[Habit] = list(storage.load())
        logger.info(f"Habit store initialized with {len(self._habits)} habits")

    # ===== QUERIES =====

    def list(self) -> List[Habit]:
        """Снимок коллекции в порядке создания"""
        return [h.copy() for h in self._habits]

    def get(self, habit_id: str) -> Optional[Habit]:
        habit = self._find(habit_id)
        return habit.copy() if habit else None

    def first(self) -> Optional[Habit]:
        return self._habits[0].copy() if self._habits else None

    def __len__(self) -> int:
        return len(self._habits)

    def __contains__(self, habit_id: object) -> bool:
        return any(h.id == habit_id for h in self._habits)

    # ===== MUTATIONS =====

    def create(self, name: str, color: Optional[str] = None,
               today: Optional[date] = None) -> Optional[Habit]:
        """Создать привычку; пустое название молча отклоняется"""
        if not isinstance(name, str) or not name.strip():
            logger.debug("Rejected habit with blank name")
            return None

        # имя пресета ("green") превращается в hex
        color = resolve_color((color or "").strip()) or self.default_color
        if not is_valid_color(color):
            raise ValidationError(f"Цвет должен быть в формате #RGB или #RRGGBB: {color!r}")

        habit = Habit.create(
            name=name,
            color=color,
            today=today or self._today(),
            habit_id=self._new_id()
        )

        self._habits.append(habit)
        self._persist()

        logger.info(f"Created habit {habit.name!r} (ID: {habit.id})")
        return habit.copy()

    def delete(self, habit_id: str) -> bool:
        """Удалить привычку; неизвестный id - не ошибка"""
        remaining = [h for h in self._habits if h.id != habit_id]
        if len(remaining) == len(self._habits):
            logger.debug(f"Delete ignored, no habit with ID {habit_id}")
            return False

        self._habits = remaining
        self._persist()

        logger.info(f"Deleted habit {habit_id}")
        return True

    def toggle_completion(self, habit_id: str, day: Union[date, str]) -> Optional[bool]:
        """Переключить отметку за день; возвращает новое значение или None"""
        try:
            day_key = format_day(to_day(day))
        except (TypeError, ValueError):
            raise ValidationError(f"Неверный формат даты: {day!r}")
        validate_day(day_key)

        habit = self._find(habit_id)
        if habit is None:
            logger.debug(f"Toggle ignored, no habit with ID {habit_id}")
            return None

        completed = not habit.completions.get(day_key, False)
        habit.completions[day_key] = completed
        self._persist()

        logger.debug(f"Habit {habit_id}: {day_key} -> {completed}")
        return completed

    # ===== INTERNALS =====

    def _find(self, habit_id: str) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def _new_id(self) -> str:
        habit_id = generate_habit_id()
        while habit_id in self:
            habit_id = generate_habit_id()
        return habit_id

    def _persist(self) -> None:
        self.storage.save(self._habits)

__all__ = ['HabitStore']
