#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitGrid v1.0 - Logger Setup
Настройка логирования через dictConfig из конфигурации
"""

import logging
import logging.config
from typing import Optional

from habitgrid.config import HabitGridConfig, config as default_config

def setup_logger(cfg: Optional[HabitGridConfig] = None) -> logging.Logger:
    """Применяет dictConfig из конфигурации; файл логов пишется RotatingFileHandler'ом"""
    cfg = cfg or default_config
    if cfg.log_to_file:
        cfg.log_dir.mkdir(exist_ok=True, parents=True)
    logging.config.dictConfig(cfg.get_logging_config())
    return logging.getLogger("habitgrid")
