#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Core Data Models
Модели данных с валидацией и типизацией

Версия: 1.0.0
"""

import time
import random
import string
from datetime import date
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

from habitgrid.utils.datetime_utils import format_day, parse_day, is_valid_day

# ===== VALIDATION HELPERS =====

class ValidationError(Exception):
    """Ошибка валидации данных"""
    pass

def validate_text(text: str, min_length: int = 1, max_length: Optional[int] = None,
                  field_name: str = "text") -> str:
    """Валидация текстовых полей"""
    if not isinstance(text, str):
        raise ValidationError(f"{field_name} должен быть строкой")

    text = text.strip()
    if len(text) < min_length:
        raise ValidationError(f"{field_name} должен содержать минимум {min_length} символов")

    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field_name} должен содержать максимум {max_length} символов")

    return text

def validate_day(value: str, field_name: str = "date") -> str:
    """Проверка календарного дня в формате YYYY-MM-DD"""
    if not is_valid_day(value):
        raise ValidationError(f"Неверный формат даты в поле {field_name}: {value!r}")
    return value

# ===== ID GENERATION =====

_BASE36 = string.digits + string.ascii_lowercase

def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))

def generate_habit_id() -> str:
    """Временной префикс (мс, base36) + случайный суффикс"""
    return _to_base36(int(time.time() * 1000)) + _to_base36(random.getrandbits(52))

# ===== CORE MODELS =====

@dataclass
class Habit:
    """Привычка и история её выполнения"""
    id: str
    name: str
    color: str
    created_date: str  # YYYY-MM-DD
    completions: Dict[str, bool] = field(default_factory=dict)

    def __post_init__(self):
        """Валидация после создания объекта"""
        if not isinstance(self.id, str) or not self.id:
            raise ValidationError("id должен быть непустой строкой")

        self.name = validate_text(self.name, field_name="name")

        if not isinstance(self.color, str):
            raise ValidationError("color должен быть строкой")

        validate_day(self.created_date, "createdDate")

        for day, completed in self.completions.items():
            validate_day(day, "completions")
            if not isinstance(completed, bool):
                raise ValidationError(f"Отметка за {day} должна быть bool")

    @property
    def created_on(self) -> date:
        """Дата создания как объект date"""
        return parse_day(self.created_date)

    def is_completed_on(self, day: date) -> bool:
        """Проверка выполнения привычки в определенную дату"""
        return self.completions.get(format_day(day), False)

    def completed_days(self) -> List[date]:
        """Отмеченные дни по возрастанию"""
        return sorted(parse_day(d) for d, done in self.completions.items() if done)

    def copy(self) -> "Habit":
        return Habit(
            id=self.id,
            name=self.name,
            color=self.color,
            created_date=self.created_date,
            completions=dict(self.completions)
        )

    # ===== SERIALIZATION =====

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь (формат хранилища)"""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "createdDate": self.created_date,
            "completions": dict(self.completions)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Habit":
        """Десериализация из словаря"""
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                color=data.get("color", ""),
                created_date=data["createdDate"],
                completions=dict(data.get("completions") or {})
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValidationError(f"Не удалось загрузить привычку: {e}")

    @classmethod
    def create(cls, name: str, color: str, today: date, habit_id: Optional[str] = None) -> "Habit":
        """Создание новой привычки"""
        return cls(
            id=habit_id or generate_habit_id(),
            name=name,
            color=color,
            created_date=format_day(today)
        )

# ===== DERIVED DATA =====

@dataclass(frozen=True)
class HabitStats:
    """Статистика привычки, всегда вычисляется заново"""
    current_streak: int = 0
    longest_streak: int = 0
    completion_rate: int = 0  # проценты, 0..100

    @classmethod
    def empty(cls) -> "HabitStats":
        return cls()

    def to_dict(self) -> Dict[str, int]:
        return {
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "completion_rate": self.completion_rate
        }

@dataclass(frozen=True)
class CalendarCell:
    """Ячейка тепловой карты"""
    date: date
    completed: bool
    level: int  # 0 - нет отметки, 4 - выполнено
    future: bool = False  # дни после today, добивающие последнюю неделю

    @property
    def day(self) -> str:
        return format_day(self.date)

    @property
    def title(self) -> str:
        return f"{self.day} - Completed" if self.completed else self.day

@dataclass(frozen=True)
class MonthLabel:
    column_index: int
    label: str
    year: int
    month: int

@dataclass
class CalendarGrid:
    """Сетка недель (воскресенье первым) с подписями месяцев"""
    start: date
    end: date
    weeks: List[List[CalendarCell]]
    month_labels: List[MonthLabel]
    day_labels: List[str]

    @property
    def column_count(self) -> int:
        return len(self.weeks)

    def cells(self) -> List[CalendarCell]:
        return [cell for week in self.weeks for cell in week]

    def cell_for(self, day: date) -> Optional[CalendarCell]:
        offset = (day - self.start).days
        if offset < 0 or offset >= len(self.weeks) * 7:
            return None
        return self.weeks[offset // 7][offset % 7]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": format_day(self.start),
            "end": format_day(self.end),
            "weeks": [
                [
                    {"date": c.day, "completed": c.completed, "level": c.level, "future": c.future}
                    for c in week
                ]
                for week in self.weeks
            ],
            "month_labels": [
                {"column_index": m.column_index, "label": m.label} for m in self.month_labels
            ],
            "day_labels": list(self.day_labels)
        }

@dataclass
class HabitView:
    """Снимок состояния для слоя представления"""
    habits: List[Habit]
    selected: Optional[Habit]
    stats: HabitStats
    grid: Optional[CalendarGrid]
    today: date

    @property
    def title(self) -> str:
        return self.selected.name if self.selected else "Select a habit to view"

__all__ = [
    'ValidationError',
    'validate_text',
    'validate_day',
    'generate_habit_id',
    'Habit',
    'HabitStats',
    'CalendarCell',
    'MonthLabel',
    'CalendarGrid',
    'HabitView'
]
