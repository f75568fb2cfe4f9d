#!/usr/bin/env python3
"""
Encoding Detector - определение кодировки XER файлов

P6 часто выгружает XER в однобайтовой кодировке (windows-1252,
windows-1251). Определение запускается только явно (XER_ENCODING="auto"),
сам сканер получает уже декодированные строки.
"""

from typing import Optional

import chardet

from settings import settings
from utils.logging import get_logger

logger = get_logger("xer.parser.encoding_detector")

# Нормализация названий кодировок
ENCODING_MAP = {
    'windows-1251': 'cp1251',
    'cp1251': 'cp1251',
    'windows-1252': 'cp1252',
    'cp1252': 'cp1252',
    'utf-8': 'utf-8',
    'utf8': 'utf-8',
    'utf-8-sig': 'utf-8-sig',
    'ascii': 'utf-8',  # ascii - подмножество utf-8
    'iso-8859-1': 'latin-1',
    'latin-1': 'latin-1',
}


def normalize_encoding(encoding: str) -> str:
    """Привести название кодировки к каноническому виду."""
    return ENCODING_MAP.get(encoding.lower(), encoding.lower())


def detect_encoding(file_path: str, sample_size: Optional[int] = None) -> str:
    """
    Автоопределение кодировки файла

    Args:
        file_path: Путь к файлу
        sample_size: Сколько байт читать (по умолчанию из settings)

    Returns:
        Название кодировки (utf-8, cp1252, etc.)
    """
    sample_size = sample_size or settings.XER_DETECT_SAMPLE_SIZE

    with open(file_path, 'rb') as f:
        raw_data = f.read(sample_size)

    if not raw_data:
        return 'utf-8'

    detected = chardet.detect(raw_data)
    encoding = detected.get('encoding')
    confidence = detected.get('confidence') or 0.0

    logger.debug(f"Encoding detection | encoding={encoding} confidence={confidence:.2f}")

    # Если уверенность низкая, считаем файл выгрузкой в legacy кодировке
    if not encoding or confidence < settings.XER_DETECT_MIN_CONFIDENCE:
        logger.warning(
            f"Low confidence in encoding detection | confidence={confidence:.2f} "
            f"fallback={settings.XER_FALLBACK_ENCODING}"
        )
        return settings.XER_FALLBACK_ENCODING

    return normalize_encoding(encoding)
