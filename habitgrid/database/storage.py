#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Habit Storage
Провайдеры хранения коллекции привычек: JSON файл и key-value хранилище

Весь список привычек хранится одним JSON документом (массив объектов),
как значение habitTrackerData в localStorage исходного виджета.

Версия: 1.0.0
"""

import json
import shutil
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, MutableMapping, Optional, Sequence

from pydantic import ValidationError as SchemaValidationError

from habitgrid.core.models import Habit
from habitgrid.shared.schemas import HabitRecord

logger = logging.getLogger(__name__)

# ===== EXCEPTIONS =====

class StorageError(Exception):
    """Базовая ошибка хранилища"""
    pass

# ===== SERIALIZATION =====

def habits_from_data(data: Any) -> List[Habit]:
    """Разбор уже декодированного документа; битые записи пропускаются"""
    if not isinstance(data, list):
        logger.error(f"Stored habits document must be a list, got {type(data).__name__}")
        return []

    habits: List[Habit] = []
    seen_ids = set()

    for index, item in enumerate(data):
        try:
            habit = HabitRecord.model_validate(item).to_habit()
        except SchemaValidationError as e:
            logger.warning(f"Skipping invalid habit record #{index}: {e.error_count()} error(s)")
            continue

        if habit.id in seen_ids:
            logger.warning(f"Skipping duplicate habit id {habit.id!r} (record #{index})")
            continue

        seen_ids.add(habit.id)
        habits.append(habit)

    return habits

def parse_habits(raw: Optional[str]) -> List[Habit]:
    """Разбор JSON документа; пустые или нечитаемые данные дают пустой список"""
    if not raw:
        return []

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error(f"Stored habits are corrupted, starting empty: {e}")
        return []

    return habits_from_data(data)

def dump_habits(habits: Sequence[Habit], indent: Optional[int] = None) -> str:
    """Сериализация коллекции в один JSON документ"""
    records = [HabitRecord.from_habit(h).model_dump(by_alias=True) for h in habits]
    if indent is None:
        return json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(records, ensure_ascii=False, indent=indent)

# ===== PROVIDERS =====

class HabitStorage(ABC):
    """Провайдер хранения: load() и save() всей коллекции"""

    @abstractmethod
    def load(self) -> List[Habit]:
        ...

    @abstractmethod
    def save(self, habits: Sequence[Habit]) -> None:
        ...

class KeyValueStorage(HabitStorage):
    """Хранение под одним ключом в key-value хранилище (аналог localStorage)"""

    def __init__(self, backend: Optional[MutableMapping[str, str]] = None,
                 key: str = "habitTrackerData"):
        self.backend = backend if backend is not None else {}
        self.key = key

    def load(self) -> List[Habit]:
        habits = parse_habits(self.backend.get(self.key))
        logger.debug(f"Loaded {len(habits)} habits from key {self.key!r}")
        return habits

    def save(self, habits: Sequence[Habit]) -> None:
        self.backend[self.key] = dump_habits(habits)
        logger.debug(f"Saved {len(habits)} habits under key {self.key!r}")

class JsonFileStorage(HabitStorage):
    """Хранение в JSON файле с атомарной записью"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Habit]:
        if not self.path.exists():
            logger.info(f"Habits file {self.path} does not exist, starting with empty collection")
            return []

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read habits file {self.path}: {e}")
            return []

        try:
            data = json.loads(raw) if raw.strip() else []
        except json.JSONDecodeError as e:
            logger.error(f"Habits file is corrupted: {e}")
            self._keep_corrupted_copy()
            return []

        habits = habits_from_data(data)
        logger.info(f"Loaded {len(habits)} habits from {self.path}")
        return habits

    def save(self, habits: Sequence[Habit]) -> None:
        payload = dump_habits(habits, indent=2)
        # Атомарное сохранение через временный файл
        temp_file = self.path.with_suffix('.tmp')

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_file.write_text(payload, encoding="utf-8")

            # Проверяем целостность записанного файла
            json.loads(temp_file.read_text(encoding="utf-8"))

            temp_file.replace(self.path)
        except (OSError, ValueError) as e:
            # Очищаем временный файл в случае ошибки
            if temp_file.exists():
                temp_file.unlink()
            logger.error(f"Failed to save habits to {self.path}: {e}")
            raise StorageError(f"Failed to save habits: {e}") from e

        logger.debug(f"Saved {len(habits)} habits to {self.path}")

    def _keep_corrupted_copy(self) -> None:
        """Сохраняет копию битого файла, чтобы следующая запись её не затёрла"""
        corrupt_file = self.path.with_suffix('.corrupt')
        try:
            shutil.copy2(self.path, corrupt_file)
            logger.warning(f"Corrupted habits file copied to {corrupt_file}")
        except OSError as e:
            logger.warning(f"Could not keep a copy of the corrupted file: {e}")

__all__ = [
    'StorageError',
    'habits_from_data',
    'parse_habits',
    'dump_habits',
    'HabitStorage',
    'KeyValueStorage',
    'JsonFileStorage'
]
