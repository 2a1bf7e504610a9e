"""Utility exports."""

from .date_format import UNKNOWN_DATE, format_month_year, parse_stored_date
from .helpers import extract_json_object, format_salary_range, strip_code_fences
from .logger import get_logger

__all__ = [
    "get_logger",
    "format_month_year",
    "parse_stored_date",
    "UNKNOWN_DATE",
    "extract_json_object",
    "strip_code_fences",
    "format_salary_range",
]
