"""
Тесты для XER Reader.

=== НАЗНАЧЕНИЕ ===
Pytest-набор тестов:
- test_cursor.py — курсор по строкам
- test_scanner.py — разбор таблиц, ошибки формата, посторонние строки
- test_reader.py — чтение файлов, ERMHDR, кодировки
- test_encoding_detector.py — определение кодировки (chardet)
- test_table_writer.py — сводка и экспорт в CSV
- test_main.py — CLI
- test_settings.py — валидация настроек

=== ЗАПУСК ===

    pytest tests/ -v
"""
