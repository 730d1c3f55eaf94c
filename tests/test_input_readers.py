from datetime import date, datetime

import pytest

import config
import input_readers
from input_readers import (
    FileFormat,
    UnreadableFileError,
    describe_format,
    detect_format,
    read_csv_matrix,
    read_excel_matrix,
    read_json_matrix,
    read_matrix,
)

XLSX_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.mark.parametrize(
    "name, ctype, expected",
    [
        ("items.json", "", FileFormat.JSON),
        ("upload", "application/json", FileFormat.JSON),
        ("STOCK.XLSX", None, FileFormat.SPREADSHEET),
        ("legacy.xls", "", FileFormat.SPREADSHEET),
        ("blob", XLSX_TYPE, FileFormat.SPREADSHEET),
        ("blob", "application/vnd.ms-excel", FileFormat.SPREADSHEET),
        ("items.csv", "text/csv", FileFormat.CSV),
        ("items.txt", "text/plain", FileFormat.CSV),
        ("", None, FileFormat.CSV),
    ],
)
def test_detect_format(name, ctype, expected):
    assert detect_format(name, ctype) is expected


def test_json_wins_over_spreadsheet_content_type():
    assert detect_format("data.json", XLSX_TYPE) is FileFormat.JSON


def test_describe_format():
    assert describe_format("a.xlsx") == "Excel (XLSX)"
    assert describe_format("a.xls") == "Excel (XLS)"
    assert describe_format("a.csv") == "CSV"
    assert describe_format("a.dat") == "Unknown"


def test_csv_quotes_and_blank_lines(csv_bytes):
    payload = csv_bytes(
        'Item Name,Description,Rate',
        '',
        '"Steel, 12mm","He said ""hi""", 65.5 ',
        '   ',
        'Cement,OPC',
    )
    rows = read_csv_matrix(payload)

    assert rows == [
        ["Item Name", "Description", "Rate"],
        ["Steel, 12mm", 'He said "hi"', "65.5"],
        ["Cement", "OPC"],
    ]


def test_csv_strips_bom():
    rows = read_csv_matrix("\ufeffName,Qty\nA,1\n".encode("utf-8"))
    assert rows[0] == ["Name", "Qty"]


def test_csv_without_data_gives_empty_matrix():
    assert read_csv_matrix(b"") == []
    assert read_csv_matrix(b"\n  \n") == []


def test_csv_invalid_utf8_is_unreadable():
    with pytest.raises(UnreadableFileError):
        read_csv_matrix(b"\xff\xfe\x00bad")


def test_json_array_of_objects():
    payload = '[{"Name": "Rice", "Qty": 5, "Meta": {"a": 1}}, {"Name": "Salt", "Qty": null}]'
    rows = read_json_matrix(payload)

    assert rows[0] == ["Name", "Qty", "Meta"]
    assert rows[1] == ["Rice", "5", '{"a": 1}']
    assert rows[2] == ["Salt", "", ""]


@pytest.mark.parametrize("wrapper", ["data", "products", "suppliers", "anything"])
def test_json_wrapped_arrays(wrapper):
    payload = '{"%s": [{"Name": "Rice"}]}' % wrapper
    assert read_json_matrix(payload) == [["Name"], ["Rice"]]


@pytest.mark.parametrize("payload", ['{"count": 3}', "not json", '"text"'])
def test_json_unreadable(payload):
    with pytest.raises(UnreadableFileError):
        read_json_matrix(payload)


def test_json_empty_array_gives_empty_matrix():
    assert read_json_matrix("[]") == []
    assert read_json_matrix('{"products": []}') == []


def test_excel_cells_rendered_as_text(make_xlsx):
    payload = make_xlsx([
        ["Item Name", "Qty", "Rate", "Expiry"],
        ["Rice", 1000, 65.5, datetime(2025, 3, 1)],
        [None, None, None, None],
        ["Salt", 2.0, None, date(2025, 4, 2)],
    ])
    rows = read_excel_matrix(payload, "stock.xlsx")

    assert rows == [
        ["Item Name", "Qty", "Rate", "Expiry"],
        ["Rice", "1000", "65.5", "2025-03-01"],
        ["Salt", "2", "", "2025-04-02"],
    ]


def test_excel_garbage_is_unreadable():
    with pytest.raises(UnreadableFileError):
        read_excel_matrix(b"definitely not a zip", "stock.xlsx")


def test_read_matrix_dispatches(make_xlsx):
    payload = make_xlsx([["Name"], ["Rice"]])
    assert read_matrix(payload, "upload.bin", XLSX_TYPE) == [["Name"], ["Rice"]]
    assert read_matrix(b"Name\nRice\n", "upload.bin", None) == [["Name"], ["Rice"]]


def test_read_matrix_rejects_text_for_spreadsheets():
    with pytest.raises(UnreadableFileError):
        read_matrix("Name\nRice", "stock.xlsx")


def test_read_matrix_size_limit(monkeypatch):
    monkeypatch.setattr(input_readers, "MAX_FILE_SIZE_MB", 0)
    with pytest.raises(UnreadableFileError, match="limit"):
        read_matrix(b"Name\nRice\n", "items.csv")


def test_row_limit_applies_to_every_format(monkeypatch, make_xlsx):
    monkeypatch.setattr(config, "MAX_SHEET_ROWS", 2)

    read_csv_matrix(b"Name\nA\nB\n")
    with pytest.raises(UnreadableFileError, match="more than 2 data rows"):
        read_csv_matrix(b"Name\nA\nB\nC\n")
    with pytest.raises(UnreadableFileError, match="more than 2 data rows"):
        read_json_matrix('[{"Name": "A"}, {"Name": "B"}, {"Name": "C"}]')
    with pytest.raises(UnreadableFileError, match="more than 2 data rows"):
        read_excel_matrix(make_xlsx([["Name"], ["A"], ["B"], ["C"]]), "big.xlsx")
