from .csv_export import CSV_HEADERS, export_csv, write_csv
from .report import format_currency, render_report, render_result

__all__ = [
    "CSV_HEADERS",
    "export_csv",
    "format_currency",
    "render_report",
    "render_result",
    "write_csv",
]
