"""Output formatting modules."""

from .formatters import format_table, format_json, format_scale, format_summary
from .csv_export import export_to_csv, export_single_to_csv

__all__ = [
    "format_table",
    "format_json",
    "format_scale",
    "format_summary",
    "export_to_csv",
    "export_single_to_csv",
]
