"""Utility functions"""
from .logging import setup_logging, get_logger
from .table_writer import format_summary, write_csv

__all__ = ['setup_logging', 'get_logger', 'format_summary', 'write_csv']
