# tests/conftest.py
import os
import sys
import pytest

# so that `from app import create_app` works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from extensions import db
from modules.parts.models import ModelPart, Part
from modules.printers.models import Printer

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "SECRET_KEY": "test-secret",
    "LOG_LEVEL": "WARNING",
}


@pytest.fixture()
def app():
    app = create_app({**TEST_CONFIG, "LOGIN_DISABLED": True})  # login off in API tests
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def auth_app():
    app = create_app({**TEST_CONFIG, "LOGIN_DISABLED": False})
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def root_user():
    class U:
        id = 1
        username = "root"
        role = "root"
    return U()


class Catalog:
    """Shortcuts for putting printers, parts and pairs in the test database."""

    def printer(self, asset, code, room="101", **kw):
        p = Printer(asset_number=asset, model_code=code, model_name=kw.pop("model_name", code),
                    room=room, floor=kw.pop("floor", "1"), site=kw.pop("site", "HQ"), **kw)
        db.session.add(p)
        db.session.commit()
        return p

    def part(self, sku, qty=1, description="", category="Toner"):
        p = Part(sku=sku, total_qty=qty, description=description, category=category)
        db.session.add(p)
        db.session.commit()
        return p

    def pair(self, code, sku):
        db.session.add(ModelPart(model_code=code, sku=sku))
        db.session.commit()


@pytest.fixture()
def catalog(app):
    return Catalog()
