from .csv_writer import rows_to_csv_bytes, write_rows_to_csv
from .excel_writer import rows_to_xlsx_bytes, write_rows_to_xlsx

__all__ = [
    "rows_to_csv_bytes",
    "rows_to_xlsx_bytes",
    "write_rows_to_csv",
    "write_rows_to_xlsx",
]
