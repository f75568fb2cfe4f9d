"""
Тесты для XERReader и разбора ERMHDR
"""
import builtins

import pytest

from contracts import ExportHeader
from parsers.xer import (
    MissingHeaderError,
    MissingNameError,
    SourceError,
    UnexpectedLineError,
    XERReader,
    parse_export_header,
)
from parsers.xer import reader as reader_module


class TestParseExportHeader:
    """Тесты разбора информационной строки"""

    def test_full_header(self, sample_lines):
        header = parse_export_header(sample_lines[0])

        assert header.version == "19.12"
        assert header.export_date == "2024-03-15"
        assert header.context == "Project"
        assert header.user == "user"
        assert header.user_name == "user_name"
        assert header.database == "dbxDatabaseNoName"
        assert header.module == "Project Management"
        assert header.currency == "EUR"
        assert len(header.fields) == 8

    def test_short_header_is_padded(self):
        header = parse_export_header("ERMHDR\t8.0\n")

        assert header == ExportHeader(version="8.0", fields=["8.0"])

    def test_not_a_header(self):
        assert parse_export_header("%T\tTASK") is None


class TestXERReader:
    """Тесты чтения файлов с диска"""

    def test_iter_tables(self, sample_xer_file):
        reader = XERReader()

        tables = list(reader.iter_tables(sample_xer_file))

        assert [t.name for t in tables] == ["TABLE1", "TABLE2", "TABLE3"]
        assert tables[0].rows[0] == ["1", "2", "€"]
        assert reader.header.version == "19.12"

    def test_read_document(self, sample_xer_file):
        document = XERReader().read(str(sample_xer_file))

        assert document.header.currency == "EUR"
        assert document.table_names() == ["TABLE1", "TABLE2", "TABLE3"]
        assert document.get_table("TABLE2").records()[0] == {
            "column_1": "11",
            "column_2": "20005",
            "column_3": "VAC",
            "column_4": "Vacation",
        }
        assert document.get_table("MISSING") is None

    def test_file_without_header_line(self, write_xer):
        path = write_xer("%T\tA\n%F\tx\n%R\t1\n%E\n")
        reader = XERReader()

        tables = list(reader.iter_tables(path))

        assert reader.header is None
        assert [(t.name, t.rows) for t in tables] == [("A", [["1"]])]

    def test_utf8_bom(self, write_xer):
        """BOM в начале файла не попадает в первый тег"""
        path = write_xer("\ufeff%T\tA\n%F\tx\n%E\n".encode("utf-8"))

        tables = list(XERReader(encoding="utf-8").iter_tables(path))

        assert [t.name for t in tables] == ["A"]

    def test_legacy_encoding(self, write_xer):
        path = write_xer(
            "ERMHDR\t19.12\n%T\tCALENDAR\n%F\tname\n%R\tОтпуск\n%E\n",
            encoding="cp1251",
        )

        tables = list(XERReader(encoding="windows-1251").iter_tables(path))

        assert tables[0].rows == [["Отпуск"]]

    def test_undecodable_file_fails_clearly(self, write_xer):
        """cp1251 байты, прочитанные как UTF-8, дают SourceError, а не мусор"""
        path = write_xer("%T\tA\n%F\tname\n%R\tОтпуск\n%E\n", encoding="cp1251")

        with pytest.raises(SourceError) as exc_info:
            list(XERReader(encoding="utf-8").iter_tables(path))

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_auto_encoding(self, write_xer, monkeypatch):
        monkeypatch.setattr(reader_module, "detect_encoding", lambda path: "cp1251")
        path = write_xer("%T\tA\n%F\tname\n%R\tПраздник\n%E\n", encoding="cp1251")

        reader = XERReader(encoding="auto")

        assert reader.resolve_encoding(path) == "cp1251"
        assert list(reader.iter_tables(path))[0].rows == [["Праздник"]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceError) as exc_info:
            list(XERReader().iter_tables(tmp_path / "nope.xer"))

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_unknown_encoding(self, sample_xer_file):
        with pytest.raises(SourceError):
            list(XERReader(encoding="no-such-encoding").iter_tables(sample_xer_file))

    def test_format_error_after_some_tables(self, write_xer):
        path = write_xer("ERMHDR\n%T\tA\n%F\tx\n%T\tB\n%R\t1\n%E\n")
        seen = []

        with pytest.raises(MissingHeaderError):
            for table in XERReader().iter_tables(path):
                seen.append(table.name)

        assert seen == ["A"]

    def test_strict_policy(self, write_xer):
        path = write_xer("ERMHDR\n%T\tA\n%F\tx\nstray\n%E\n")

        with pytest.raises(UnexpectedLineError):
            list(XERReader(stray_line_policy="error").iter_tables(path))

    def test_file_closed_when_consumer_stops(self, sample_xer_file, monkeypatch):
        """Файл закрывается, даже если потребитель не дочитал таблицы"""
        opened = []

        def spy_open(*args, **kwargs):
            f = builtins.open(*args, **kwargs)
            opened.append(f)
            return f

        monkeypatch.setattr(reader_module, "open", spy_open, raising=False)

        tables = XERReader().iter_tables(sample_xer_file)
        assert next(tables).name == "TABLE1"
        assert not opened[0].closed

        tables.close()

        assert opened[0].closed

    def test_file_closed_after_error(self, write_xer, monkeypatch):
        opened = []

        def spy_open(*args, **kwargs):
            f = builtins.open(*args, **kwargs)
            opened.append(f)
            return f

        monkeypatch.setattr(reader_module, "open", spy_open, raising=False)
        path = write_xer("%T\n%E\n")

        with pytest.raises(MissingNameError):
            list(XERReader().iter_tables(path))

        assert opened[0].closed
