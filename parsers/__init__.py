"""
Коллекция парсеров.

=== ПАРСЕРЫ ===
- xer — выгрузки Primavera P6 (.xer)
"""

from .xer import XERReader, TableScanner

__all__ = ["XERReader", "TableScanner"]
