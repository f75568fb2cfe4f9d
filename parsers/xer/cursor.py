"""
LineCursor - курсор только вперёд поверх источника строк.

Держит не больше одной прочитанной, но ещё не обработанной строки
(look-ahead), весь файл в память не читается. Перемотки нет.
"""

from typing import Iterator, Optional

from contracts import LineSource
from .errors import SourceError

_LINE_TERMINATORS = "\r\n"


class LineCursor:
    """Курсор по строкам с просмотром одной строки вперёд."""

    def __init__(self, source: LineSource):
        self._lines: Iterator[str] = iter(source)
        self._pending: Optional[str] = None
        self._exhausted = False
        # Номер последней прочитанной из источника строки (с 1)
        self.line_number = 0

    @property
    def exhausted(self) -> bool:
        """Источник закончился и отложенной строки нет."""
        return self._pending is None and self._exhausted

    def peek(self) -> Optional[str]:
        """Текущая строка без продвижения курсора (None - конец источника)."""
        if self._pending is None and not self._exhausted:
            self._pending = self._read()
        return self._pending

    def advance(self) -> Optional[str]:
        """Вернуть текущую строку и сдвинуть курсор."""
        line = self.peek()
        self._pending = None
        return line

    def _read(self) -> Optional[str]:
        try:
            line = next(self._lines)
        except StopIteration:
            self._exhausted = True
            return None
        except (OSError, UnicodeDecodeError) as e:
            self._exhausted = True
            raise SourceError(
                f"Failed to read line source | line={self.line_number + 1} error={type(e).__name__}: {e}"
            ) from e

        self.line_number += 1
        return line.rstrip(_LINE_TERMINATORS)
