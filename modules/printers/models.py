"""SQLAlchemy models for the printer registry."""

from datetime import datetime

from extensions import db


class Printer(db.Model):
    """One physical printer asset, keyed by asset number."""

    __tablename__ = "printers"

    id = db.Column(db.Integer, primary_key=True)
    asset_number = db.Column(db.String(64), unique=True, nullable=False)
    model_name = db.Column(db.String(255))
    model_code = db.Column(db.String(64), nullable=False, index=True)
    floor = db.Column(db.String(32), default="")
    room = db.Column(db.String(64))
    site = db.Column(db.String(128))
    status = db.Column(db.String(32), nullable=False, default="Active")
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "assetNumber": self.asset_number,
            "modelName": self.model_name,
            "modelCode": self.model_code,
            "floor": self.floor,
            "room": self.room,
            "site": self.site,
            "status": self.status,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Printer {self.asset_number}: {self.model_code}>"
