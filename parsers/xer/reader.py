#!/usr/bin/env python3
"""
XER Reader

Чтение XER файла с диска: выбор кодировки, разбор информационной
строки ERMHDR и передача остальных строк в TableScanner.

Pipeline:
    .xer → Encoding (settings / chardet) → ERMHDR → TableScanner → Table...
"""

from pathlib import Path
from typing import Iterator, Optional, Union

from contracts import ExportHeader, Table, XERDocument
from settings import settings
from utils.logging import get_logger

from .cursor import LineCursor
from .encoding_detector import detect_encoding, normalize_encoding
from .errors import SourceError, XERError
from .scanner import TableScanner, split_fields

EXPORT_HEADER_TAG = "ERMHDR"

EXPORT_HEADER_FIELDS = (
    "version",
    "export_date",
    "context",
    "user",
    "user_name",
    "database",
    "module",
    "currency",
)


def parse_export_header(line: str) -> Optional[ExportHeader]:
    """
    Разбор информационной строки ERMHDR

    Args:
        line: Первая строка файла

    Returns:
        ExportHeader или None, если строка не ERMHDR
    """
    tag, fields = split_fields(line.rstrip("\r\n"))
    if tag != EXPORT_HEADER_TAG:
        return None

    padded = fields + [""] * (len(EXPORT_HEADER_FIELDS) - len(fields))
    values = dict(zip(EXPORT_HEADER_FIELDS, padded))
    return ExportHeader(fields=fields, **values)


class XERReader:
    """
    Читатель XER файлов

    Файл открывается на время итерации и закрывается, как только
    итерация закончилась (в том числе по ошибке или если потребитель
    бросил генератор).
    """

    def __init__(self, encoding: Optional[str] = None, stray_line_policy: Optional[str] = None):
        """
        Args:
            encoding: Кодировка файла или "auto" (по умолчанию settings.XER_ENCODING)
            stray_line_policy: "skip" | "error" (по умолчанию из settings)
        """
        self.encoding = encoding or settings.XER_ENCODING
        self.stray_line_policy = stray_line_policy
        self.header: Optional[ExportHeader] = None
        self.logger = get_logger("xer.parser.reader")

    def resolve_encoding(self, file_path: Union[str, Path]) -> str:
        """Кодировка, с которой будет открыт файл."""
        if self.encoding.lower() == "auto":
            encoding = detect_encoding(str(file_path))
            self.logger.info(f"Detected encoding | file={file_path} encoding={encoding}")
        else:
            encoding = normalize_encoding(self.encoding)

        # utf-8-sig читает и файлы без BOM, а BOM не попадёт в первую строку
        if encoding == "utf-8":
            encoding = "utf-8-sig"
        return encoding

    def iter_tables(self, file_path: Union[str, Path]) -> Iterator[Table]:
        """
        Лениво читать таблицы из файла

        Args:
            file_path: Путь к .xer файлу

        Yields:
            Table в порядке файла

        Raises:
            SourceError: файл не открывается или не декодируется
            FormatError: нарушена структура файла
        """
        self.header = None
        try:
            encoding = self.resolve_encoding(file_path)
            f = open(file_path, 'r', encoding=encoding, errors='strict')
        except (OSError, LookupError) as e:
            self.logger.error(f"Cannot open XER file | file={file_path} error={e}")
            raise SourceError(f"Cannot open XER file | file={file_path} error={e}") from e

        self.logger.info(f"Parsing XER file | file={file_path} encoding={encoding}")
        tables_count = 0

        try:
            with f:
                cursor = LineCursor(f)
                self.header = self._read_export_header(cursor)
                scanner = TableScanner(cursor, stray_line_policy=self.stray_line_policy)

                for table in scanner:
                    tables_count += 1
                    yield table
        except XERError as e:
            self.logger.error(
                f"XER parsing failed | file={file_path} tables_before_error={tables_count} "
                f"error={type(e).__name__}: {e}"
            )
            raise

        self.logger.info(f"XER parsed successfully | file={file_path} tables={tables_count}")

    def read(self, file_path: Union[str, Path]) -> XERDocument:
        """Прочитать файл целиком в XERDocument."""
        tables = list(self.iter_tables(file_path))
        return XERDocument(header=self.header, tables=tables)

    def _read_export_header(self, cursor: LineCursor) -> Optional[ExportHeader]:
        """ERMHDR потребляется только если он есть, иначе строку увидит сканер."""
        line = cursor.peek()
        if line is None:
            return None

        header = parse_export_header(line)
        if header is None:
            self.logger.debug("No ERMHDR line at the top of the file")
            return None

        cursor.advance()
        self.logger.debug(
            f"Export header | version={header.version} date={header.export_date} "
            f"fields={len(header.fields)}"
        )
        return header
