"""Parsing of Russian Wikipedia day articles."""

from .parser import DayArticleParser, parse_article, parse_file
from .report import EmptyInputError, ReligiousHolidayEntry, Report

__all__ = [
    "DayArticleParser",
    "EmptyInputError",
    "ReligiousHolidayEntry",
    "Report",
    "parse_article",
    "parse_file",
]
