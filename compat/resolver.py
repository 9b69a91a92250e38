"""Bidirectional printer <-> part compatibility resolution."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .aliases import AliasTable
from .errors import NotFound, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class PrinterParts:
    printer: object
    parts: List = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "printer": self.printer.to_dict(),
            "parts": [p.to_dict() for p in self.parts],
        }


def _require(value, name: str) -> str:
    value = "" if value is None else str(value).strip()
    if not value:
        raise ValidationError(f"{name} required")
    return value


class CompatibilityResolver:
    """
    Answers "which parts fit this printer" and "which printers use this part".

    Stores and the alias table are injected; the resolver itself holds no
    state and only reads.

    - Printer -> parts: the printer's code plus its direct aliases (one hop).
    - Part -> printers: every code the SKU is mapped to, each expanded by the
      codes that list it as an alias.
    """

    def __init__(self, printers, parts, model_parts, aliases: AliasTable):
        self.printers = printers
        self.parts = parts
        self.model_parts = model_parts
        self.aliases = aliases

    def resolve_parts_for_printer(self, asset_number) -> PrinterParts:
        asset_number = _require(asset_number, "Asset number")

        printer = self.printers.get_by_asset(asset_number)
        if printer is None:
            logger.info("Printer %s not found", asset_number)
            raise NotFound("Printer not found")

        codes = self.aliases.expand(printer.model_code)
        skus = self.model_parts.get_skus_for_codes(codes)
        logger.debug("Printer %s codes=%s skus=%d", asset_number, sorted(codes), len(skus))

        # list_by_skus is distinct and SKU-ordered
        parts = self.parts.list_by_skus(skus)
        return PrinterParts(printer=printer, parts=parts)

    def resolve_printers_for_part(self, sku) -> List:
        sku = _require(sku, "SKU")

        base_codes = self.model_parts.get_codes_for_sku(sku)
        if not base_codes:
            return []

        printer_codes = self.aliases.expand_reverse_all(base_codes)
        logger.debug("Part %s base=%s expanded=%s", sku, base_codes, sorted(printer_codes))

        found: Dict[str, object] = {}
        for printer in self.printers.list_by_model_codes(printer_codes):
            found.setdefault(printer.asset_number, printer)
        return list(found.values())
