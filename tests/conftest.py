"""
Pytest fixtures для тестирования XER Reader
"""
import logging
from pathlib import Path
from typing import Callable, List

import pytest


# Пример из документации формата: ERMHDR, три таблицы, %E
SAMPLE_XER_LINES = [
    "ERMHDR\t19.12\t2024-03-15\tProject\tuser\tuser_name\tdbxDatabaseNoName\tProject Management\tEUR",
    "%T\tTABLE1",
    "%F\tcolumn_1\tcolumn_2\tcolumn_3",
    "%R\t1\t2\t€",
    "%R\t10\t2\t$",
    "%R\t11\t2\tA$",
    "%R\t13\t2\tR$",
    "%T\tTABLE2",
    "%F\tcolumn_1\tcolumn_2\tcolumn_3\tcolumn_4",
    "%R\t11\t20005\tVAC\tVacation",
    "%R\t12\t4\tJURY\tJury Duty",
    "%R\t13\t3\tHOL\tHoliday",
    "%T\tTABLE3",
    "%F\tcolumn_1\tcolumn_2\tcolumn_3\tcolumn_4\tcolumn_5",
    "%R\t565\t\t\t0\tEnterprise",
    "%E",
]


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Настройка логирования для тестов - показываем только ошибки"""
    root_logger = logging.getLogger()

    # Очищаем все существующие handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    formatter = logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s')
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.ERROR)

    yield


@pytest.fixture
def sample_lines() -> List[str]:
    """Строки примера XER (без переводов строк)"""
    return list(SAMPLE_XER_LINES)


@pytest.fixture
def sample_xer_text() -> str:
    """Пример XER одним текстом, как он лежит в файле"""
    return "\n".join(SAMPLE_XER_LINES) + "\n"


@pytest.fixture
def write_xer(tmp_path) -> Callable[..., Path]:
    """Фабрика временных .xer файлов: текст или байты"""
    def _write(content, name: str = "schedule.xer", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            with open(path, "w", encoding=encoding, newline="") as f:
                f.write(content)
        return path

    return _write


@pytest.fixture
def sample_xer_file(write_xer, sample_xer_text) -> Path:
    """Пример XER на диске в UTF-8"""
    return write_xer(sample_xer_text)
