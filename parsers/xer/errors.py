"""
Исключения XER парсера.

Чистое окончание данных исключением не является: сканер просто
возвращает None.
"""

from typing import Optional


class XERError(Exception):
    """Базовое исключение XER Reader."""


class FormatError(XERError, ValueError):
    """Нарушена структура файла. Текущая таблица не выдаётся."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"{message} | line={line_number}"
        super().__init__(message)


class MissingNameError(FormatError):
    """Строка %T без имени таблицы."""


class MissingHeaderError(FormatError):
    """После %T нет строки %F."""


class OrphanRowError(FormatError):
    """Строка %R до того, как открыта таблица."""


class UnexpectedLineError(FormatError):
    """Посторонняя строка между таблицами (только при политике "error")."""


class SourceError(XERError):
    """Ошибка источника строк: I/O или декодирование."""
