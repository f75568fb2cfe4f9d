"""
XER Parser — модуль для выгрузок Primavera P6.

=== НАЗНАЧЕНИЕ ===
Потоковый разбор .xer файлов в последовательность таблиц
(имя, шапка, строки) за один проход.

=== СТЕК ТЕХНОЛОГИЙ ===
- chardet — определение кодировки (только при XER_ENCODING="auto")

=== ЭКСПОРТЫ ===
- TableScanner — разбор любого источника строк
- LineCursor — курсор только вперёд поверх источника строк
- XERReader — чтение файла с диска
- parse_export_header — разбор строки ERMHDR
- detect_encoding — определение кодировки файла
- исключения: XERError, FormatError, MissingNameError, MissingHeaderError,
  OrphanRowError, UnexpectedLineError, SourceError

=== ИСПОЛЬЗОВАНИЕ ===

    reader = XERReader(encoding="auto")
    for table in reader.iter_tables("schedule.xer"):
        print(table.name, table.column_count, table.row_count)

    # Или поверх уже декодированных строк
    scanner = TableScanner(io.StringIO(text))
    tables = list(scanner)
"""

from .cursor import LineCursor
from .encoding_detector import detect_encoding
from .errors import (
    XERError,
    FormatError,
    MissingNameError,
    MissingHeaderError,
    OrphanRowError,
    UnexpectedLineError,
    SourceError,
)
from .reader import XERReader, parse_export_header
from .scanner import ScanState, TableScanner

__all__ = [
    "LineCursor",
    "ScanState",
    "TableScanner",
    "XERReader",
    "parse_export_header",
    "detect_encoding",
    "XERError",
    "FormatError",
    "MissingNameError",
    "MissingHeaderError",
    "OrphanRowError",
    "UnexpectedLineError",
    "SourceError",
]
