"""HTTP routes for the parts catalog."""

from flask import jsonify, request
from flask_login import login_required

from compat import NotFound, ValidationError, get_resolver, get_stores

from . import bp


@bp.route("/inventory")
@login_required
def inventory():
    parts = get_stores().parts.list_all()
    return jsonify([p.to_dict() for p in parts])


@bp.route("/parts/search")
@login_required
def search():
    sku = (request.args.get("sku") or "").strip()
    if not sku:
        raise ValidationError("SKU required")

    part = get_stores().parts.get_by_sku(sku.upper())
    if part is None:
        raise NotFound("Part not found")
    return jsonify(part.to_dict())


@bp.route("/parts/<sku>/printers")
@login_required
def printers_for_part(sku: str):
    """Every printer that can use ``sku``; empty list when none are mapped."""
    printers = get_resolver().resolve_printers_for_part(sku)
    return jsonify([p.to_dict() for p in printers])
