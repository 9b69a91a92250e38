# ui_routes.py: dashboard counters and liveness probe
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify
from flask_login import login_required
from sqlalchemy import func

from extensions import db
from modules.parts.models import Part
from modules.printers.models import Printer

ui = Blueprint("ui", __name__)


@ui.route("/health")
def health():
    return jsonify(status="ok", timestamp=datetime.now(timezone.utc).isoformat())


@ui.route("/api/dashboard/stats")
@login_required
def dashboard_stats():
    threshold = current_app.config.get("LOW_STOCK_THRESHOLD", 5)

    total_printers = db.session.query(Printer).count()
    total_parts = db.session.query(Part).count()
    total_stock = db.session.query(func.coalesce(func.sum(Part.total_qty), 0)).scalar()
    low_stock = db.session.query(Part).filter(Part.total_qty > 0, Part.total_qty < threshold).count()
    out_of_stock = db.session.query(Part).filter(Part.total_qty == 0).count()

    return jsonify(
        totalPrinters=total_printers,
        totalParts=total_parts,
        totalStock=int(total_stock),
        lowStock=low_stock,
        outOfStock=out_of_stock,
    )
