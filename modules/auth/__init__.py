"""Session authentication for the API."""

from flask import Blueprint

bp = Blueprint("auth", __name__, url_prefix="/api")

from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "routes"]
