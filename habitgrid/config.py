#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Configuration
Централизованная конфигурация с валидацией

Версия: 1.0.0
"""

import os
import re
import sys
from pathlib import Path
from typing import Dict, Any
from dataclasses import dataclass
from enum import Enum

import pytz

class Environment(Enum):
    """Среды выполнения"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Уровни логирования"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class StorageConfig:
    """Конфигурация хранилища привычек"""
    path: Path
    storage_key: str = "habitTrackerData"

@dataclass
class TrackerConfig:
    """Параметры трекера и календаря"""
    timezone: str = "UTC"
    default_color: str = "#40c463"
    window_days: int = 365
    rate_window_days: int = 30

class HabitGridConfig:
    """Главный класс конфигурации"""

    def __init__(self):
        self.environment = Environment(os.getenv('HABITGRID_ENV', 'development'))
        self._load_config()
        self._validate_config()

    def _load_config(self):
        """Загрузка конфигурации из переменных окружения"""

        # Директории
        self.data_dir = Path(os.getenv('HABITGRID_DATA_DIR', 'data'))
        self.log_dir = Path(os.getenv('HABITGRID_LOG_DIR', 'logs'))

        # Хранилище
        self.storage = StorageConfig(
            path=self.data_dir / os.getenv('HABITGRID_DATA_FILE', 'habits.json'),
            storage_key=os.getenv('HABITGRID_STORAGE_KEY', 'habitTrackerData')
        )

        # Трекер
        self.tracker = TrackerConfig(
            timezone=os.getenv('HABITGRID_TIMEZONE', 'UTC'),
            default_color=os.getenv('HABITGRID_DEFAULT_COLOR', '#40c463'),
            window_days=int(os.getenv('HABITGRID_WINDOW_DAYS', 365)),
            rate_window_days=int(os.getenv('HABITGRID_RATE_WINDOW_DAYS', 30))
        )

        # Логирование
        self.log_level = LogLevel(os.getenv('HABITGRID_LOG_LEVEL', 'INFO'))
        self.log_to_file = os.getenv('HABITGRID_LOG_TO_FILE', 'false').lower() == 'true'
        self.log_format = os.getenv(
            'HABITGRID_LOG_FORMAT',
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        )

    def _validate_config(self):
        """Валидация конфигурации"""
        errors = []

        if self.tracker.timezone not in pytz.all_timezones_set:
            errors.append(f"Неизвестная временная зона: {self.tracker.timezone}")

        if not re.fullmatch(r"#[0-9a-fA-F]{6}", self.tracker.default_color):
            errors.append(f"Цвет по умолчанию должен быть в формате #RRGGBB: {self.tracker.default_color}")

        if self.tracker.window_days < 7:
            errors.append("HABITGRID_WINDOW_DAYS должен быть не меньше 7")

        if self.tracker.rate_window_days <= 0:
            errors.append("HABITGRID_RATE_WINDOW_DAYS должен быть положительным числом")

        if not self.storage.storage_key:
            errors.append("HABITGRID_STORAGE_KEY не может быть пустым")

        if errors:
            raise ValueError("Ошибки конфигурации:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        """Создание необходимых директорий"""
        directories = [self.data_dir]
        if self.log_to_file:
            directories.append(self.log_dir)

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    def get_logging_config(self) -> Dict[str, Any]:
        """Получение конфигурации логирования"""
        handlers = ['console']
        if self.log_to_file:
            handlers.append('file')

        logging_config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.log_format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.log_level.value,
                    'formatter': 'default',
                    'stream': sys.stdout
                }
            },
            'loggers': {
                'habitgrid': {
                    'level': self.log_level.value,
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }

        if self.log_to_file:
            logging_config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.log_level.value,
                'formatter': 'default',
                'filename': str(self.log_dir / f"habitgrid_{self.environment.value}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }

        return logging_config

    def is_development(self) -> bool:
        """Проверка режима разработки"""
        return self.environment == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        """Проверка продакшн режима"""
        return self.environment == Environment.PRODUCTION

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация конфигурации в словарь"""
        return {
            'environment': self.environment.value,
            'storage': {
                'path': str(self.storage.path),
                'storage_key': self.storage.storage_key
            },
            'tracker': {
                'timezone': self.tracker.timezone,
                'default_color': self.tracker.default_color,
                'window_days': self.tracker.window_days,
                'rate_window_days': self.tracker.rate_window_days
            },
            'log_level': self.log_level.value,
            'log_to_file': self.log_to_file
        }

# Экземпляр конфигурации по умолчанию
config = HabitGridConfig()

__all__ = [
    'config',
    'HabitGridConfig',
    'Environment',
    'LogLevel',
    'StorageConfig',
    'TrackerConfig'
]
