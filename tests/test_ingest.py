import pytest

from compat.model_codes import ModelCodeExtractor
from ingest import aggregate_inventory, normalize_printers, parse_qty, read_rows, rows_to_dicts


@pytest.fixture()
def extractor():
    return ModelCodeExtractor([("AltaLink C8145", "C8145"), ("VersaLink B620", "B620")])


def test_printer_rows_are_normalized(extractor):
    rows = [
        {"Asset Number": "A100", "Model Name": "Xerox AltaLink C8145 MFP", "Floor": 3,
         "Room": "3-120", "Site Name": "HQ"},
        {"Asset Number": "A101", "Model Name": "Xerox VersaLink B620", "Floor": 2.0,
         "Room": "2-010", "Site Name": None},
        {"Asset Number": "A102", "Model Name": None, "Floor": None, "Room": None, "Site Name": None},
    ]
    printers = normalize_printers(rows, extractor, default_site="Default Site")

    assert [p["model_code"] for p in printers] == ["C8145", "B620", "UNKNOWN"]
    assert [p["floor"] for p in printers] == ["3", "2", ""]
    assert printers[0]["site"] == "HQ"
    assert printers[1]["site"] == "Default Site"


def test_printer_rows_without_asset_are_skipped(extractor):
    rows = [{"Asset Number": None, "Model Name": "x"}, {"Asset Number": " A1 ", "Model Name": "Ricoh MP"}]
    printers = normalize_printers(rows, extractor)
    assert [(p["asset_number"], p["model_code"]) for p in printers] == [("A1", "Ricoh")]


def test_rows_to_dicts_finds_header_below_banner():
    rows = [
        ("All Assets report", None, None),
        ("Asset Number", "Model Name", "Floor"),
        ("A1", "Xerox AltaLink C8145", 4),
    ]
    assert list(rows_to_dicts(rows)) == [
        {"Asset Number": "A1", "Model Name": "Xerox AltaLink C8145", "Floor": 4}
    ]


def test_rows_to_dicts_without_header_is_empty():
    assert list(rows_to_dicts([("a", "b"), ("c", "d")])) == []


@pytest.mark.parametrize("value, qty", [
    (5, 5), ("7", 7), (" 12 ", 12), (3.0, 3), ("2.0", 2), ("1,200", 1200),
    (None, 0), ("", 0), ("n/a", 0), (-4, 0), (float("nan"), 0),
    ("inf", 0), ("-inf", 0), ("1e400", 0), (float("inf"), 0),
])
def test_parse_qty(value, qty):
    assert parse_qty(value) == qty


def test_inventory_is_aggregated_by_sku():
    rows = [
        ("Stock count export", None, None, None, None),
        ("Stock Item #", "Description", "Category", "Location", "Qty"),
        ("106R03946", "Toner (B600, B605)", "Toner", "Cage A", 4),
        ("106R03946", "", "", "Cage B", "3"),
        ("101R00582", "Drum (B605)", "Drum", "Cage A", "oops"),
        ("Stock Item #", "Description", "Category", "Location", "Qty"),
        (None, "blank sku", "Misc", "Cage C", 9),
        ("CM995A", "400ml Grey", "Ink", "Cage C", 2),
    ]
    parts = {p["sku"]: p for p in aggregate_inventory(rows)}

    assert set(parts) == {"106R03946", "101R00582", "CM995A"}
    assert parts["106R03946"]["total_qty"] == 7
    assert parts["106R03946"]["description"] == "Toner (B600, B605)"
    assert parts["101R00582"]["total_qty"] == 0
    assert parts["CM995A"]["category"] == "Ink"


def test_inventory_without_header_keeps_all_rows():
    parts = aggregate_inventory([("S1", "d", "c", "loc", 1), ("S1", "d", "c", "loc", 2)])
    assert parts == [{"sku": "S1", "description": "d", "category": "c", "total_qty": 3}]


def test_inventory_overflowing_quantity_counts_as_zero():
    parts = aggregate_inventory([("S1", "d", "c", "loc", "1e400"), ("S2", "d", "c", "loc", 2)])
    assert [(p["sku"], p["total_qty"]) for p in parts] == [("S1", 0), ("S2", 2)]


def test_rows_before_label_row_are_kept():
    rows = [
        ("S1", "Toner (B620)", "Toner", "Cage A", 3),
        ("Stock Item #", "Description", "Category", "Location", "Qty"),
        ("S2", "Drum (B620)", "Drum", "Cage A", 1),
    ]
    assert [p["sku"] for p in aggregate_inventory(rows)] == ["S1", "S2"]


def test_banner_rows_are_dropped_by_value():
    rows = [
        ("Stock count export", None, None, None, None),
        ("S1", "Toner (B620)", "Toner", "Cage A", 3),
        ("Printed 2024-05-01", "", "", "", ""),
    ]
    assert [p["sku"] for p in aggregate_inventory(rows)] == ["S1"]


def test_short_rows_default_to_zero():
    assert aggregate_inventory([("S1", "only description")]) == [
        {"sku": "S1", "description": "only description", "category": "", "total_qty": 0}
    ]


def test_read_rows_csv(tmp_path):
    path = tmp_path / "stock.csv"
    path.write_text("Stock Item #,Description,Category,Location,Qty\nS1,Toner (C400),Toner,A,2\n")
    assert read_rows(str(path)) == [
        ("Stock Item #", "Description", "Category", "Location", "Qty"),
        ("S1", "Toner (C400)", "Toner", "A", "2"),
    ]


def test_read_rows_xlsx(tmp_path):
    from openpyxl import Workbook

    wb = Workbook()
    ws = wb.active
    ws.append(["Asset Number", "Model Name", "Floor"])
    ws.append(["A1", "Xerox VersaLink B620", 2])
    path = tmp_path / "assets.xlsx"
    wb.save(path)

    rows = read_rows(str(path))
    assert rows[1] == ("A1", "Xerox VersaLink B620", 2)


def test_read_rows_rejects_other_formats(tmp_path):
    with pytest.raises(ValueError, match="Unsupported"):
        read_rows(str(tmp_path / "assets.xls"))
