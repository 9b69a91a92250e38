"""
Normalization of spreadsheet exports into printer and part records.

Printers come from the asset export (one row per asset, named columns).
Parts come from the stock-count export: one row per bin, positional columns,
aggregated by SKU. Bad cells degrade to defaults instead of failing the batch.
"""

import csv
import logging
import os
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from openpyxl import load_workbook

from compat.model_codes import ModelCodeExtractor
from utils import allowed_file, to_int

logger = logging.getLogger(__name__)

# asset export column titles
ASSET_COL = "Asset Number"
MODEL_COL = "Model Name"
FLOOR_COL = "Floor"
ROOM_COL = "Room"
SITE_COL = "Site Name"

# stock-count export column positions
SKU_IDX, DESC_IDX, CATEGORY_IDX, QTY_IDX = 0, 1, 2, 4

# label cells that exports repeat where a SKU would be
HEADER_LABELS = {"Stock Item #", "Stock Item", "SKU"}


def _cell_str(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


# ---------- readers ----------
def read_rows(path: str) -> List[tuple]:
    """All rows of the first sheet (.xlsx) or of a .csv, as tuples."""
    if not allowed_file(path):
        raise ValueError(f"Unsupported file type: {os.path.basename(path)} (use .xlsx or .csv)")

    if path.lower().endswith(".csv"):
        with open(path, newline="", encoding="utf-8-sig") as fh:
            return [tuple(row) for row in csv.reader(fh)]

    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        return [tuple(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def rows_to_dicts(rows: Sequence[Sequence], header_title: str = ASSET_COL) -> Iterator[Dict[str, object]]:
    """Key rows by the header row, i.e. the first row containing ``header_title``."""
    for i, row in enumerate(rows):
        header = [_cell_str(h) for h in row]
        if header_title in header:
            break
    else:
        return
    for row in rows[i + 1:]:
        yield {h: (row[j] if j < len(row) else None) for j, h in enumerate(header) if h}


# ---------- printers ----------
def normalize_floor(value) -> str:
    return _cell_str(value)


def normalize_printer(row: Mapping, extractor: ModelCodeExtractor,
                      default_site: Optional[str] = None) -> Optional[dict]:
    asset = _cell_str(row.get(ASSET_COL))
    if not asset:
        return None
    model_name = _cell_str(row.get(MODEL_COL)) or None
    return {
        "asset_number": asset,
        "model_name": model_name,
        "model_code": extractor.extract(model_name),
        "floor": normalize_floor(row.get(FLOOR_COL)),
        "room": _cell_str(row.get(ROOM_COL)) or None,
        "site": _cell_str(row.get(SITE_COL)) or default_site,
    }


def normalize_printers(rows: Iterable[Mapping], extractor: ModelCodeExtractor,
                       default_site: Optional[str] = None) -> List[dict]:
    printers = []
    skipped = 0
    for row in rows:
        rec = normalize_printer(row, extractor, default_site)
        if rec is None:
            skipped += 1
            continue
        printers.append(rec)
    if skipped:
        logger.info("Skipped %d printer rows without an asset number", skipped)
    return printers


# ---------- parts ----------
def parse_qty(value) -> int:
    """Whole quantity; unparseable or negative counts are 0."""
    return max(to_int(value, 0), 0)


def _is_banner(row: Sequence) -> bool:
    """A title line: text in the SKU column and nothing in the rest."""
    return all(_cell_str(cell) == "" for cell in row[SKU_IDX + 1:])


def aggregate_inventory(rows: Iterable[Sequence]) -> List[dict]:
    """
    Sum stock-count rows by SKU.

    Rows are judged by their values, never by position: label rows
    (``Stock Item #``) and report banners with nothing beside the title are
    dropped wherever they appear; every other row with a SKU is data.
    """
    by_sku: Dict[str, dict] = {}
    for row in rows:
        row = tuple(row)
        if len(row) <= SKU_IDX:
            continue
        sku = _cell_str(row[SKU_IDX])
        if not sku or sku in HEADER_LABELS or _is_banner(row):
            continue

        description = _cell_str(row[DESC_IDX]) if len(row) > DESC_IDX else ""
        category = _cell_str(row[CATEGORY_IDX]) if len(row) > CATEGORY_IDX else ""
        qty = parse_qty(row[QTY_IDX]) if len(row) > QTY_IDX else 0

        item = by_sku.get(sku)
        if item is None:
            item = by_sku[sku] = {"sku": sku, "description": "", "category": "", "total_qty": 0}
        if not item["description"]:
            item["description"] = description
        if not item["category"]:
            item["category"] = category
        item["total_qty"] += qty

    return list(by_sku.values())
