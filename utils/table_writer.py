#!/usr/bin/env python3
"""
Table Writer

Вывод прочитанных таблиц: строка сводки для консоли и
экспорт таблицы в CSV (один файл на таблицу).
"""

import csv
import re
from pathlib import Path
from typing import Union

from contracts import Table
from utils.logging import get_logger

logger = get_logger("xer.table_writer")

_UNSAFE_CHARS = re.compile(r'[^\w.-]+')


def format_summary(table: Table) -> str:
    """Строка сводки: имя, число колонок и строк."""
    return f"{table.name:>15} {table.column_count:>3} columns {table.row_count:>6} rows"


def csv_filename(table: Table) -> str:
    """Безопасное имя CSV файла для таблицы."""
    safe_name = _UNSAFE_CHARS.sub('_', table.name).strip('._') or "table"
    return f"{safe_name}.csv"


def write_csv(table: Table, output_dir: Union[str, Path]) -> Path:
    """
    Сохранение таблицы в CSV

    Первая строка - шапка, дальше строки как есть (без выравнивания
    по ширине шапки).

    Args:
        table: Таблица
        output_dir: Директория для .csv файлов (создаётся при необходимости)

    Returns:
        Путь к записанному файлу
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / csv_filename(table)

    with open(csv_path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(table.header)
        writer.writerows(table.rows)

    logger.debug(f"CSV saved | table={table.name} rows={table.row_count} path={csv_path}")
    return csv_path
