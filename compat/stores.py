"""SQLAlchemy-backed stores handed to the resolver and the seeding script.

Each store wraps a session and owns one table. Reads never commit; the
write helpers only add/flush so the caller decides when to commit.
"""

from typing import Iterable, List, Optional, Set, Tuple

from sqlalchemy.orm import Session

from modules.parts.models import ModelPart, Part
from modules.printers.models import Printer


class PrinterStore:
    def __init__(self, session: Session):
        self.session = session

    def get_by_asset(self, asset_number: str) -> Optional[Printer]:
        return self.session.query(Printer).filter_by(asset_number=asset_number).one_or_none()

    def list_all(self) -> List[Printer]:
        return self.session.query(Printer).order_by(Printer.room, Printer.id).all()

    def list_by_model_codes(self, codes: Iterable[str]) -> List[Printer]:
        codes = set(codes)
        if not codes:
            return []
        return (self.session.query(Printer)
                .filter(Printer.model_code.in_(codes))
                .order_by(Printer.id)
                .all())

    def upsert(self, records: Iterable[dict]) -> int:
        """Insert or replace by asset number. An existing status is kept."""
        count = 0
        for rec in records:
            printer = self.get_by_asset(rec["asset_number"])
            if printer is None:
                printer = Printer(asset_number=rec["asset_number"], status=rec.get("status") or "Active")
                self.session.add(printer)
            printer.model_name = rec.get("model_name")
            printer.model_code = rec["model_code"]
            printer.floor = rec.get("floor", "")
            printer.room = rec.get("room")
            printer.site = rec.get("site")
            count += 1
        self.session.flush()
        return count


class PartStore:
    def __init__(self, session: Session):
        self.session = session

    def get_by_sku(self, sku: str) -> Optional[Part]:
        return self.session.query(Part).filter_by(sku=sku).one_or_none()

    def list_all(self) -> List[Part]:
        return self.session.query(Part).order_by(Part.sku).all()

    def list_by_skus(self, skus: Iterable[str]) -> List[Part]:
        skus = set(skus)
        if not skus:
            return []
        return self.session.query(Part).filter(Part.sku.in_(skus)).order_by(Part.sku).all()

    def known_skus(self) -> Set[str]:
        return {sku for (sku,) in self.session.query(Part.sku).all()}

    def upsert(self, records: Iterable[dict]) -> int:
        """Insert or replace by SKU."""
        count = 0
        for rec in records:
            part = self.get_by_sku(rec["sku"])
            if part is None:
                part = Part(sku=rec["sku"])
                self.session.add(part)
            part.description = rec.get("description")
            part.category = rec.get("category")
            part.total_qty = rec.get("total_qty", 0)
            count += 1
        self.session.flush()
        return count


class ModelPartStore:
    def __init__(self, session: Session):
        self.session = session

    def get_skus_for_codes(self, codes: Iterable[str]) -> List[str]:
        codes = set(codes)
        if not codes:
            return []
        rows = (self.session.query(ModelPart.sku)
                .filter(ModelPart.model_code.in_(codes))
                .distinct()
                .order_by(ModelPart.sku)
                .all())
        return [sku for (sku,) in rows]

    def get_codes_for_sku(self, sku: str) -> List[str]:
        rows = (self.session.query(ModelPart.model_code)
                .filter(ModelPart.sku == sku)
                .distinct()
                .order_by(ModelPart.model_code)
                .all())
        return [code for (code,) in rows]

    def add_pairs(self, pairs: Iterable[Tuple[str, str]]) -> int:
        """Insert-if-absent. Returns how many pairs were new."""
        existing = {(code, sku) for code, sku in
                    self.session.query(ModelPart.model_code, ModelPart.sku).all()}
        added = 0
        for code, sku in pairs:
            if (code, sku) in existing:
                continue
            self.session.add(ModelPart(model_code=code, sku=sku))
            existing.add((code, sku))
            added += 1
        self.session.flush()
        return added

    def count(self) -> int:
        return self.session.query(ModelPart).count()
