"""HTTP routes for the printer registry."""

import logging

from flask import jsonify, request
from flask_login import current_user, login_required

from compat import NotFound, ValidationError, get_resolver, get_stores
from extensions import db
from permissions import role_required

from . import bp

logger = logging.getLogger(__name__)

MAX_STATUS_LEN = 32


@bp.route("", strict_slashes=False)
@login_required
def list_printers():
    printers = get_stores().printers.list_all()
    return jsonify([p.to_dict() for p in printers])


@bp.route("/search")
@login_required
def search():
    """Printer by asset number, with every part compatible with its model."""
    result = get_resolver().resolve_parts_for_printer(request.args.get("assetNumber"))
    return jsonify(result.to_dict())


@bp.route("/<asset_number>/status", methods=["PATCH"])
@role_required(["admin"])
def update_status(asset_number: str):
    data = request.get_json(silent=True) or {}
    status = str(data.get("status") or "").strip()
    if not status:
        raise ValidationError("Status required")
    if len(status) > MAX_STATUS_LEN:
        raise ValidationError(f"Status longer than {MAX_STATUS_LEN} characters")

    printer = get_stores().printers.get_by_asset(asset_number)
    if printer is None:
        raise NotFound("Printer not found")

    printer.status = status
    db.session.commit()
    logger.info("Printer %s status -> %s by %s", asset_number, status,
                getattr(current_user, "username", "system"))
    return jsonify(printer.to_dict())
