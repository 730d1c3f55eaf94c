from .excel_writer import write_result_xlsx, write_rows_to_xlsx, write_template_xlsx
from .sample_csv import TALLY_EXPORT_HEADERS, generate_sample_csv, generate_tally_csv, sample_rows

__all__ = [
    "TALLY_EXPORT_HEADERS",
    "generate_sample_csv",
    "generate_tally_csv",
    "sample_rows",
    "write_result_xlsx",
    "write_rows_to_xlsx",
    "write_template_xlsx",
]
