#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Storage Schemas
Pydantic схема записи привычки в формате хранилища (ключ createdDate)
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from habitgrid.core.models import Habit
from habitgrid.utils.validators import is_valid_day_key

# Запись привычки в том виде, в каком она лежит в хранилище
class HabitRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    color: str = ""
    created_date: str = Field(..., alias="createdDate")
    completions: Dict[str, StrictBool] = Field(default_factory=dict)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Название привычки не может быть пустым')
        return v.strip()

    @field_validator('created_date')
    @classmethod
    def validate_created_date(cls, v):
        if not is_valid_day_key(v):
            raise ValueError(f'createdDate должен быть в формате YYYY-MM-DD: {v!r}')
        return v

    @field_validator('completions')
    @classmethod
    def validate_completions(cls, v):
        bad_keys = [key for key in v if not is_valid_day_key(key)]
        if bad_keys:
            raise ValueError(f'Неверные даты в completions: {bad_keys[:3]}')
        return v

    def to_habit(self) -> Habit:
        return Habit(
            id=self.id,
            name=self.name,
            color=self.color,
            created_date=self.created_date,
            completions=dict(self.completions)
        )

    @classmethod
    def from_habit(cls, habit: Habit) -> "HabitRecord":
        return cls.model_validate(habit.to_dict())
