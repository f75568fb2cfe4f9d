"""
Контракты XER Reader.

Модели данных, которые парсер отдаёт потребителю, и type aliases
для источника строк.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Dict, Optional


# === Type aliases ===

# Источник строк: открытый файл, список, io.StringIO, генератор и т.п.
LineSource = Iterable[str]

# Строка таблицы: значения полей как есть, без приведения типов
Row = List[str]


@dataclass
class Table:
    """Одна таблица XER: имя, шапка и строки в порядке файла.

    Ширина строки может не совпадать с шапкой: в XER хвостовые
    колонки разрешено опускать.
    """

    name: str
    header: List[str]
    rows: List[Row] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def records(self) -> List[Dict[str, str]]:
        """Строки в виде словарей {колонка: значение}.

        Лишние значения сверх шапки отбрасываются, отсутствующие
        колонки просто не попадают в словарь.
        """
        return [dict(zip(self.header, row)) for row in self.rows]


@dataclass
class ExportHeader:
    """Информационная строка ERMHDR в начале файла."""

    version: str = ""
    export_date: str = ""
    context: str = ""
    user: str = ""
    user_name: str = ""
    database: str = ""
    module: str = ""
    currency: str = ""
    fields: List[str] = field(default_factory=list)


@dataclass
class XERDocument:
    """Полностью прочитанный файл: заголовок выгрузки и все таблицы."""

    header: Optional[ExportHeader]
    tables: List[Table] = field(default_factory=list)

    def table_names(self) -> List[str]:
        return [table.name for table in self.tables]

    def get_table(self, name: str) -> Optional[Table]:
        """Найти таблицу по имени (None если такой нет)."""
        for table in self.tables:
            if table.name == name:
                return table
        return None
