#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Application bootstrap
Сборка трекера из конфигурации: логирование, хранилище, источник "сегодня".
"""

import logging
from functools import partial
from typing import MutableMapping, Optional

from habitgrid.config import HabitGridConfig, config as default_config
from habitgrid.core.store import HabitStore
from habitgrid.core.tracker import HabitTracker
from habitgrid.database.storage import HabitStorage, JsonFileStorage, KeyValueStorage
from habitgrid.utils.datetime_utils import today_local
from habitgrid.utils.logger import setup_logger

logger = logging.getLogger(__name__)

def create_tracker(cfg: Optional[HabitGridConfig] = None,
                   storage: Optional[HabitStorage] = None,
                   backend: Optional[MutableMapping[str, str]] = None,
                   configure_logging: bool = True) -> HabitTracker:
    """
    Создать трекер.

    backend - key-value хранилище (dict, shelve и т.п.), документ лежит под
    ключом storage_key из конфигурации. Без storage и backend данные
    хранятся в JSON файле из конфигурации.
    """
    cfg = cfg or default_config

    if configure_logging:
        setup_logger(cfg)

    if storage is None and backend is not None:
        storage = KeyValueStorage(backend, key=cfg.storage.storage_key)
    elif storage is None:
        cfg.ensure_directories()
        storage = JsonFileStorage(cfg.storage.path)

    today = partial(today_local, cfg.tracker.timezone)
    store = HabitStore(storage, today=today, default_color=cfg.tracker.default_color)
    tracker = HabitTracker(
        store,
        today=today,
        window_days=cfg.tracker.window_days,
        rate_window_days=cfg.tracker.rate_window_days
    )

    logger.info(f"HabitGrid started ({cfg.environment.value}), {len(store)} habits loaded")
    return tracker

__all__ = ['create_tracker']
