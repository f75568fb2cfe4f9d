#!/usr/bin/env python3
"""
Table Scanner для XER файлов

Однопроходный разбор строк XER в последовательность таблиц.

Структура файла:
    ERMHDR\t19.12\t...          - информационная строка (преамбула)
    %T\tTABLE1                  - начало таблицы, поле 1 = имя
    %F\tcolumn_1\tcolumn_2      - шапка, поля 1..n = имена колонок
    %R\t1\t2                    - строка данных (0 и более)
    %E                          - конец данных

Сканер тянет строки по требованию: за один вызов next_table()
читается ровно одна таблица, строка, на которой остановилось
чтение строк %R, остаётся в курсоре для следующего вызова.
"""

from enum import Enum
from typing import List, Optional, Tuple, Union

from contracts import LineSource, Row, Table
from settings import settings, STRAY_LINE_POLICIES
from utils.logging import get_logger

from .cursor import LineCursor
from .errors import (
    XERError,
    MissingHeaderError,
    MissingNameError,
    OrphanRowError,
    UnexpectedLineError,
)

logger = get_logger("xer.parser.scanner")

TABLE_TAG = "%T"
FIELDS_TAG = "%F"
ROW_TAG = "%R"
END_TAG = "%E"

FIELD_SEPARATOR = "\t"


class ScanState(str, Enum):
    """Состояния сканера."""
    SEEK_TABLE_START = "seek_table_start"
    READ_HEADER = "read_header"
    READ_ROWS = "read_rows"
    DONE = "done"


def split_fields(line: str) -> Tuple[str, List[str]]:
    """Разбить строку на тег и остальные поля."""
    tag, *fields = line.split(FIELD_SEPARATOR)
    return tag, fields


class TableScanner:
    """
    Сканер таблиц поверх источника строк

    Используется как итератор:

        with open("schedule.xer", encoding="utf-8") as f:
            for table in TableScanner(f):
                print(table.name, len(table.rows))

    Один источник - один сканер: курсор двигается только вперёд.
    """

    def __init__(
        self,
        source: Union[LineSource, LineCursor],
        stray_line_policy: Optional[str] = None
    ):
        """
        Args:
            source: Любой итерируемый источник строк или готовый LineCursor
            stray_line_policy: "skip" или "error" для посторонних строк
                между таблицами (по умолчанию из settings)
        """
        self.cursor = source if isinstance(source, LineCursor) else LineCursor(source)
        self.stray_line_policy = stray_line_policy or settings.XER_STRAY_LINE_POLICY
        if self.stray_line_policy not in STRAY_LINE_POLICIES:
            raise ValueError(f"Unknown stray line policy: {self.stray_line_policy!r}")

        self.state = ScanState.SEEK_TABLE_START
        self.tables_read = 0

    def __iter__(self) -> "TableScanner":
        return self

    def __next__(self) -> Table:
        table = self.next_table()
        if table is None:
            raise StopIteration
        return table

    def next_table(self) -> Optional[Table]:
        """Прочитать следующую таблицу.

        Returns:
            Table или None, если таблиц больше нет (%E или конец источника)

        Raises:
            FormatError: нарушена структура; после ошибки сканер закрыт
            SourceError: ошибка чтения источника
        """
        if self.state is ScanState.DONE:
            return None

        self.state = ScanState.SEEK_TABLE_START
        name: Optional[str] = None
        header: List[str] = []

        try:
            while True:
                if self.state is ScanState.SEEK_TABLE_START:
                    name = self._seek_table_start()
                    if name is None:
                        self.state = ScanState.DONE
                        return None
                    self.state = ScanState.READ_HEADER

                elif self.state is ScanState.READ_HEADER:
                    header = self._read_header(name)
                    self.state = ScanState.READ_ROWS

                elif self.state is ScanState.READ_ROWS:
                    table = Table(name=name, header=header, rows=self._read_rows())
                    self.tables_read += 1
                    self.state = ScanState.SEEK_TABLE_START
                    logger.debug(
                        f"Table parsed | table={table.name} columns={table.column_count} rows={table.row_count}"
                    )
                    return table
        except XERError:
            self.state = ScanState.DONE
            raise

    def _seek_table_start(self) -> Optional[str]:
        """Пропустить строки до %T и вернуть имя таблицы (None - данных больше нет)."""
        while True:
            line = self.cursor.advance()
            if line is None:
                return None

            tag, fields = split_fields(line)

            if tag == TABLE_TAG:
                if not fields or not fields[0]:
                    raise MissingNameError(
                        "Table start without a name",
                        line_number=self.cursor.line_number,
                        line=line,
                    )
                return fields[0]

            if tag == END_TAG:
                logger.debug(f"End of data | line={self.cursor.line_number}")
                return None

            if tag == ROW_TAG:
                raise OrphanRowError(
                    "Row before any table start",
                    line_number=self.cursor.line_number,
                    line=line,
                )

            if self.tables_read == 0:
                logger.debug(f"Skipping preamble line | line={self.cursor.line_number}")
                continue

            if self.stray_line_policy == "error":
                raise UnexpectedLineError(
                    f"Unexpected line between tables: tag={tag!r}",
                    line_number=self.cursor.line_number,
                    line=line,
                )
            logger.warning(f"Skipping stray line between tables | line={self.cursor.line_number} tag={tag!r}")

    def _read_header(self, table_name: str) -> List[str]:
        """Строка сразу после %T обязана быть %F."""
        line = self.cursor.peek()
        if line is None:
            raise MissingHeaderError(
                f"Table {table_name} has no header: unexpected end of input",
                line_number=self.cursor.line_number,
            )

        tag, fields = split_fields(line)
        if tag != FIELDS_TAG:
            raise MissingHeaderError(
                f"Table {table_name} has no header: expected {FIELDS_TAG}, got {tag!r}",
                line_number=self.cursor.line_number,
                line=line,
            )

        self.cursor.advance()
        return fields

    def _read_rows(self) -> List[Row]:
        """Читать строки %R, пока они идут подряд. Первая другая строка не потребляется."""
        rows: List[Row] = []
        while True:
            line = self.cursor.peek()
            if line is None:
                break

            tag, values = split_fields(line)
            if tag != ROW_TAG:
                break

            self.cursor.advance()
            rows.append(values)
        return rows
