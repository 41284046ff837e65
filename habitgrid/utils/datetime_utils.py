#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Date Utilities
Локальный "сегодня" в зоне pytz, формат дня YYYY-MM-DD, выравнивание на воскресенье
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

import pytz

DAY_FORMAT = "%Y-%m-%d"

def get_timezone(tz_name: str = "UTC"):
    return pytz.timezone(tz_name)

def now_local(tz_name: str = "UTC") -> datetime:
    return datetime.now(get_timezone(tz_name))

def today_local(tz_name: str = "UTC") -> date:
    """Календарный день по локальному времени указанной зоны"""
    return now_local(tz_name).date()

def format_day(day: date) -> str:
    return day.strftime(DAY_FORMAT)

def parse_day(day_str: str) -> date:
    return datetime.strptime(day_str, DAY_FORMAT).date()

def to_day(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_day(value)

def last_sunday(day: date) -> date:
    # date.weekday(): понедельник = 0, воскресенье = 6
    return day - timedelta(days=(day.weekday() + 1) % 7)

def is_valid_day(day_str: Optional[str]) -> bool:
    if not isinstance(day_str, str) or len(day_str) != 10:
        return False
    try:
        parse_day(day_str)
    except ValueError:
        return False
    return True
