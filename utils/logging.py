"""
Настройка логирования для приложения
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from settings import settings


def setup_logging(level: Optional[str] = None):
    """Настраивает логирование для всего приложения

    Args:
        level: Уровень логирования, по умолчанию settings.LOG_LEVEL
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    # Получаем корневой logger
    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Очищаем существующие handlers
    logger.handlers.clear()

    # Логи идут в stderr, stdout занят выводом таблиц
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    # Формат логов
    if settings.ENVIRONMENT == 'production':
        # JSON формат для production
        formatter = JsonFormatter(
            '%(asctime)s %(name)s %(levelname)s %(message)s',
            timestamp=True
        )
    else:
        # Читаемый формат для development
        formatter = logging.Formatter(
            settings.LOG_FORMAT,
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # chardet очень многословен на DEBUG
    logging.getLogger('chardet').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Получить logger для модуля"""
    return logging.getLogger(name)
