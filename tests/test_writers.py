import csv
import io

from openpyxl import load_workbook

from extraction import parse_matrix
from writers import (
    TALLY_EXPORT_HEADERS,
    generate_sample_csv,
    generate_tally_csv,
    sample_rows,
    write_result_xlsx,
    write_template_xlsx,
)


def test_sample_csv_quotes_every_cell():
    text = generate_sample_csv("products")
    first_line = text.splitlines()[0]

    assert first_line.startswith('"Item Name","SKU"')
    assert not text.endswith("\n")
    assert list(csv.reader(io.StringIO(text))) == sample_rows("products")


def test_tally_export_layout():
    records = [{"itemName": "Bolt M8", "currentStock": 150.0, "rate": 2.5, "gstRate": 18.0}]
    rows = list(csv.reader(io.StringIO(generate_tally_csv(records))))

    assert rows[0] == list(TALLY_EXPORT_HEADERS)
    exported = dict(zip(rows[0], rows[1]))
    assert exported["Stock Item"] == "Bolt M8"
    assert exported["Current Stock"] == "150"
    assert exported["Opening Stock"] == "0"
    assert exported["Sale Rate"] == "2.5"
    assert exported["GST Rate"] == "18"
    assert exported["MRP"] == ""


def test_template_xlsx(tmp_path):
    out = write_template_xlsx(tmp_path / "templates" / "suppliers.xlsx", "suppliers")

    assert out.exists()
    ws = load_workbook(out).active
    assert ws.title == "SUPPLIERS"
    assert ws["A1"].value == "Company Name"
    assert ws["A1"].font.bold
    assert ws.freeze_panes == "A2"
    assert ws.max_row == 4


def test_result_xlsx(tmp_path):
    result = parse_matrix([["Item Name", "Qty"], ["Bolt", "x"], ["", "3"]], "products")
    out = write_result_xlsx(tmp_path / "result.xlsx", result)

    wb = load_workbook(out)
    assert wb.sheetnames == ["Records", "Issues"]

    records = wb["Records"]
    headers = [c.value for c in records[1]]
    assert "name" in headers
    assert records.cell(row=2, column=headers.index("name") + 1).value == "Bolt"

    issues = list(wb["Issues"].iter_rows(min_row=2, values_only=True))
    assert issues == [
        (2, "warning", "Invalid quantity for currentStock: x"),
        (3, "error", "Missing name field"),
    ]
