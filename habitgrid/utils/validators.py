#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Validators
Проверка цвета и ключа дня
"""

import re

from habitgrid.utils.datetime_utils import is_valid_day

HEX_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")

def is_valid_color(color: str) -> bool:
    return isinstance(color, str) and bool(HEX_COLOR_RE.fullmatch(color))

def is_valid_day_key(day_str: str) -> bool:
    return is_valid_day(day_str)
