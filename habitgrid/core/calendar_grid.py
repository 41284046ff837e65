#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Calendar Grid Builder
Годовая тепловая карта: колонки-недели (воскресенье первым) и подписи месяцев.
"""

from datetime import date, timedelta
from typing import List, Mapping, Tuple

from habitgrid.core.models import CalendarCell, CalendarGrid, MonthLabel
from habitgrid.utils.datetime_utils import format_day, last_sunday

WINDOW_DAYS = 365
DAYS_PER_WEEK = 7

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Подписи строк: только понедельник, среда и пятница
DAY_LABELS = ["", "Mon", "", "Wed", "", "Fri", ""]

LEVEL_NONE = 0
LEVEL_COMPLETED = 4

def intensity_level(completed: bool) -> int:
    return LEVEL_COMPLETED if completed else LEVEL_NONE

def window_bounds(today: date, window_days: int = WINDOW_DAYS) -> Tuple[date, date]:
    """Начало сетки (воскресенье) и конец окна (today)"""
    start = today - timedelta(days=window_days - 1)
    return last_sunday(start), today

def build_calendar_grid(completions: Mapping[str, bool], today: date,
                        window_days: int = WINDOW_DAYS) -> CalendarGrid:
    """
    Строит сетку недель для окна из window_days дней, заканчивающегося today.

    Последняя колонка добивается днями после today до субботы (future=True),
    поэтому в каждой колонке ровно 7 ячеек. Для 365 дней колонок всегда 53.
    """
    start, end = window_bounds(today, window_days)
    total_days = (end - start).days + 1
    column_count = -(-total_days // DAYS_PER_WEEK)

    weeks: List[List[CalendarCell]] = []
    month_labels: List[MonthLabel] = []
    labelled = set()
    current_month = None

    for column in range(column_count):
        # месяц колонки определяется её воскресеньем
        sunday = start + timedelta(days=column * DAYS_PER_WEEK)
        month_key = (sunday.year, sunday.month)
        if sunday <= end and month_key != current_month:
            current_month = month_key
            if month_key not in labelled:
                labelled.add(month_key)
                month_labels.append(MonthLabel(
                    column_index=column,
                    label=MONTH_NAMES[sunday.month - 1],
                    year=sunday.year,
                    month=sunday.month
                ))

        week = []
        for row in range(DAYS_PER_WEEK):
            day = start + timedelta(days=column * DAYS_PER_WEEK + row)
            future = day > end

            completed = bool(completions.get(format_day(day), False))
            week.append(CalendarCell(
                date=day,
                completed=completed,
                level=intensity_level(completed),
                future=future
            ))
        weeks.append(week)

    return CalendarGrid(
        start=start,
        end=end,
        weeks=weeks,
        month_labels=month_labels,
        day_labels=list(DAY_LABELS)
    )

__all__ = [
    'WINDOW_DAYS',
    'MONTH_NAMES',
    'DAY_LABELS',
    'LEVEL_NONE',
    'LEVEL_COMPLETED',
    'intensity_level',
    'window_bounds',
    'build_calendar_grid'
]
