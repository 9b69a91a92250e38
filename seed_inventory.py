# -*- coding: utf-8 -*-
"""
seed_inventory.py: load the printer and stock exports and build model/part pairs.

Modes:
- python seed_inventory.py --create --printers assets.xlsx --inventory stock.xlsx
      create missing tables, upsert printers and parts, rebuild pairs
- python seed_inventory.py --reset ...
      drop printers/inventory/model_parts first (users are kept)
- python seed_inventory.py --create
      with no files: only (re)apply description pairs and the manual overlay

Running it twice over the same files changes nothing.
"""

import argparse
import logging

from sqlalchemy import text

from app import create_app
from compat import get_tables
from compat.mapping import build_base_mappings, materialize_manual_mappings
from compat.stores import ModelPartStore, PartStore, PrinterStore
from extensions import db
from ingest import aggregate_inventory, normalize_printers, read_rows, rows_to_dicts

logger = logging.getLogger(__name__)


def drop_catalog_tables():
    """Drop the catalog tables; users are left alone."""
    for stmt in (
        "DROP TABLE IF EXISTS model_parts",
        "DROP TABLE IF EXISTS inventory",
        "DROP TABLE IF EXISTS printers",
    ):
        db.session.execute(text(stmt))
    db.session.commit()


def create_missing_tables():
    db.create_all()
    db.session.commit()


def seed_printers(path: str, default_site: str | None = None) -> int:
    tables = get_tables()
    records = normalize_printers(rows_to_dicts(read_rows(path)), tables.extractor, default_site)
    count = PrinterStore(db.session).upsert(records)
    logger.info("Upserted %d printers from %s", count, path)
    return count


def seed_parts(path: str) -> int:
    records = aggregate_inventory(read_rows(path))
    count = PartStore(db.session).upsert(records)
    logger.info("Upserted %d unique SKUs from %s", count, path)
    return count


def build_mappings() -> dict:
    """Description pairs first, then the manual overlay; both insert-if-absent."""
    parts = PartStore(db.session)
    model_parts = ModelPartStore(db.session)

    catalog = parts.list_all()
    auto_added = model_parts.add_pairs(build_base_mappings(catalog))
    manual_added = model_parts.add_pairs(
        materialize_manual_mappings(get_tables().overlay, parts.known_skus())
    )
    total = model_parts.count()
    logger.info("Model/part pairs: %d from descriptions, %d manual, %d total",
                auto_added, manual_added, total)
    return {"auto": auto_added, "manual": manual_added, "total": total}


def main():
    parser = argparse.ArgumentParser(description="Seed printers, inventory and model/part pairs")
    grp = parser.add_mutually_exclusive_group(required=True)
    grp.add_argument("--create", action="store_true", help="create missing tables and upsert data")
    grp.add_argument("--reset", action="store_true", help="drop catalog tables first (data is lost)")
    parser.add_argument("--printers", help="asset export (.xlsx or .csv)")
    parser.add_argument("--inventory", help="stock-count export (.xlsx or .csv)")

    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        if args.reset:
            logger.info("Dropping catalog tables")
            drop_catalog_tables()
        create_missing_tables()

        try:
            if args.printers:
                seed_printers(args.printers, app.config.get("DEFAULT_SITE"))
            if args.inventory:
                seed_parts(args.inventory)
            counts = build_mappings()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        print(f"✔ Done: {counts['total']} model/part pairs "
              f"(+{counts['auto']} from descriptions, +{counts['manual']} manual).")


if __name__ == "__main__":
    main()
