"""Login, logout and session probe endpoints."""

import logging

from flask import current_app, jsonify, request
from flask_login import UserMixin, current_user, login_user, logout_user
from werkzeug.security import check_password_hash

from extensions import db, login_manager
from models import User

from . import bp

logger = logging.getLogger(__name__)


@login_manager.user_loader
def load_user(user_id: str | None) -> User | UserMixin | None:
    """Resolve a ``User`` instance for Flask-Login sessions."""

    if not user_id:
        return None

    user = db.session.get(User, int(user_id))
    if user is not None:
        return user

    if current_app.config.get("LOGIN_DISABLED"):
        class _TestingUser(UserMixin):
            """Fallback principal used when authentication is disabled."""

            def __init__(self, test_user_id: int) -> None:
                self.id = test_user_id
                self.username = "test-user"
                self.role = "root"

        return _TestingUser(int(user_id))

    return None


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify(error="Unauthorized"), 401


@bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or request.form
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""

    user = User.query.filter_by(username=username).first() if username else None
    if user is None or not check_password_hash(user.password, password):
        logger.info("Failed login for %r", username)
        return jsonify(error="Invalid credentials"), 401

    login_user(user)
    return jsonify(success=True, username=user.username)


@bp.route("/logout", methods=["POST"])
def logout():
    logout_user()
    return jsonify(success=True)


@bp.route("/check-auth")
def check_auth():
    if current_user.is_authenticated:
        return jsonify(authenticated=True, username=current_user.username)
    return jsonify(authenticated=False)
