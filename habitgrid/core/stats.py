#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Statistics Engine
Текущая и максимальная серии, процент выполнения за последние N дней.

Все функции чистые: "сегодня" передается явно, системные часы не читаются.
Дни считаются календарными датами (date), а не 24-часовыми интервалами.
"""

from datetime import date, timedelta
from typing import Mapping, Optional

from habitgrid.core.models import Habit, HabitStats
from habitgrid.utils.datetime_utils import format_day, parse_day

RATE_WINDOW_DAYS = 30

def _completed_keys(completions: Mapping[str, bool]) -> set:
    return {day for day, done in completions.items() if done}

def current_streak(completions: Mapping[str, bool], today: date) -> int:
    """Серия подряд выполненных дней, считая назад от today включительно"""
    completed = _completed_keys(completions)

    streak = 0
    day = today
    # Каждый шаг потребляет одну отмеченную дату, поэтому цикл ограничен их числом
    for _ in range(len(completed)):
        if format_day(day) not in completed:
            break
        streak += 1
        day -= timedelta(days=1)

    return streak

def longest_streak(completions: Mapping[str, bool]) -> int:
    """Самая длинная серия выполнения"""
    completed_dates = sorted(parse_day(day) for day in _completed_keys(completions))

    if not completed_dates:
        return 0

    max_streak = 1
    streak = 1

    for prev, curr in zip(completed_dates, completed_dates[1:]):
        if (curr - prev).days == 1:
            streak += 1
            max_streak = max(max_streak, streak)
        else:
            streak = 1

    return max_streak

def completion_rate(completions: Mapping[str, bool], today: date, window_days: int = RATE_WINDOW_DAYS) -> int:
    """Процент выполненных дней из window_days, заканчивающихся today (включительно)"""
    if window_days <= 0:
        return 0

    completed = _completed_keys(completions)
    done = sum(
        1 for offset in range(window_days)
        if format_day(today - timedelta(days=offset)) in completed
    )
    # Округление половины вверх, как Math.round
    return (200 * done + window_days) // (2 * window_days)

def calculate_stats(habit: Optional[Habit], today: date, window_days: int = RATE_WINDOW_DAYS) -> HabitStats:
    """Статистика привычки; для отсутствующей привычки - нули"""
    if habit is None:
        return HabitStats.empty()

    return HabitStats(
        current_streak=current_streak(habit.completions, today),
        longest_streak=longest_streak(habit.completions),
        completion_rate=completion_rate(habit.completions, today, window_days)
    )

__all__ = [
    'RATE_WINDOW_DAYS',
    'current_streak',
    'longest_streak',
    'completion_rate',
    'calculate_stats'
]
