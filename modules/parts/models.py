"""SQLAlchemy models for the parts catalog and the model/part mapping."""

from sqlalchemy import UniqueConstraint

from extensions import db


class Part(db.Model):
    """A consumable stock item; quantity is aggregated over all stock rows."""

    __tablename__ = "inventory"

    id = db.Column(db.Integer, primary_key=True)
    sku = db.Column(db.String(64), unique=True, nullable=False)
    description = db.Column(db.Text)
    category = db.Column(db.String(100))
    total_qty = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sku": self.sku,
            "description": self.description,
            "category": self.category,
            "totalQty": self.total_qty,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Part {self.sku}>"


class ModelPart(db.Model):
    """Base compatibility pair: ``sku`` fits printers of ``model_code``."""

    __tablename__ = "model_parts"

    id = db.Column(db.Integer, primary_key=True)
    model_code = db.Column(db.String(64), nullable=False, index=True)
    sku = db.Column(db.String(64), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("model_code", "sku", name="uq_model_parts_code_sku"),
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<ModelPart {self.model_code} -> {self.sku}>"
