"""
XER Reader - точка входа.

Читает .xer файл и печатает сводку по каждой таблице:

    python main.py ./data/schedule.xer
    python main.py ./data/schedule.xer --encoding auto --csv-dir ./out

Если файл выгружен в однобайтовой кодировке, либо укажите её явно
(--encoding cp1251), либо перекодируйте заранее:

    iconv -f cp1251 -t utf-8 input.xer -o schedule.xer
"""

import argparse
import sys
from typing import List, Optional

from parsers.xer import XERError, XERReader
from settings import settings
from utils.logging import setup_logging, get_logger
from utils.table_writer import format_summary, write_csv

logger = get_logger("xer.main")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize tables of a Primavera P6 XER file")
    parser.add_argument("file", help="Path to XER file")
    parser.add_argument(
        "--encoding", "-e",
        help=f"File encoding or 'auto' (default: {settings.XER_ENCODING})"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unexpected lines between tables instead of skipping them"
    )
    parser.add_argument("--csv-dir", help="Write every table to <dir>/<TABLE>.csv")
    parser.add_argument("--log-level", help=f"Log level (default: {settings.LOG_LEVEL})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция. Возвращает код выхода."""
    args = build_arg_parser().parse_args(argv)

    setup_logging(args.log_level)

    reader = XERReader(
        encoding=args.encoding,
        stray_line_policy="error" if args.strict else None,
    )

    try:
        for table in reader.iter_tables(args.file):
            print(format_summary(table))
            if args.csv_dir:
                write_csv(table, args.csv_dir)
    except XERError as e:
        logger.error(f"❌ Failed to read XER file | file={args.file} error={e}")
        return 1

    if reader.header is not None:
        logger.info(
            f"Export header | version={reader.header.version} date={reader.header.export_date} "
            f"user={reader.header.user}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
