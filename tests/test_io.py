from pathlib import Path

import pytest
from openpyxl import Workbook, load_workbook

from input_readers import UnsupportedFileTypeError, read_csv, read_excel, read_table
from writers import rows_to_csv_bytes, rows_to_xlsx_bytes, write_rows_to_csv, write_rows_to_xlsx


def _write_xlsx(path: Path, rows):
    wb = Workbook()
    ws = wb.active
    for r in rows:
        ws.append(r)
    wb.save(path)
    return path


def test_read_csv_keeps_text_and_blanks(tmp_path):
    path = tmp_path / "de.csv"
    path.write_text("SKU,Price,Description 1\nB34A1V1,10,\n\nB34B2,0012,hello\n", encoding="utf-8")

    rows = read_csv(path)

    assert rows == [
        {"SKU": "B34A1V1", "Price": "10", "Description 1": ""},
        {"SKU": "B34B2", "Price": "0012", "Description 1": "hello"},
    ]


def test_read_excel_keeps_numbers_and_skips_empty_rows(tmp_path):
    path = _write_xlsx(
        tmp_path / "barcodes.xlsx",
        [["SKU", "Barcode", None], ["B34A1", 1680710000000, None], [None, None, None], ["B2", "123", "x"]],
    )

    rows = read_excel(path)

    assert len(rows) == 2
    assert rows[0]["SKU"] == "B34A1"
    assert rows[0]["Barcode"] == 1680710000000
    assert rows[1]["col_3"] == "x"


def test_read_table_dispatches_on_extension(tmp_path):
    path = tmp_path / "product.CSV"
    path.write_text("SKU,Name\nA,Acme Thing\n", encoding="utf-8")

    assert read_table(path) == [{"SKU": "A", "Name": "Acme Thing"}]


def test_read_table_rejects_unknown_extension(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hi", encoding="utf-8")

    with pytest.raises(UnsupportedFileTypeError):
        read_table(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "missing.xlsx")


def test_read_corrupt_excel(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"not a zip")

    with pytest.raises(ValueError):
        read_excel(path)


def test_write_xlsx_uses_first_appearance_headers(tmp_path):
    rows = [{"SKU": "A", "Price": 10}, {"SKU": "B", "Barcode": "123"}]

    out = write_rows_to_xlsx(tmp_path / "out" / "merged.xlsx", rows)

    wb = load_workbook(out)
    ws = wb.active
    assert ws.title == "MergedData"
    assert [c.value for c in ws[1]] == ["SKU", "Price", "Barcode"]
    assert [c.value for c in ws[2]] == ["A", 10, None]
    assert [c.value for c in ws[3]] == ["B", None, "123"]


def test_write_csv_round_trips_through_reader(tmp_path):
    rows = [{"SKU": "A", "Description": "one\n\ntwo"}, {"SKU": "B", "Description": ""}]

    out = write_rows_to_csv(tmp_path / "merged.csv", rows)

    assert read_csv(out) == rows


def test_bytes_writers():
    rows = [{"SKU": "A", "Barcode": "1680710000000"}]

    assert rows_to_csv_bytes(rows).decode("utf-8").splitlines() == ["SKU,Barcode", "A,1680710000000"]
    assert rows_to_xlsx_bytes(rows)[:2] == b"PK"
