# permissions.py
"""
Role checks for the JSON API.

role_required([...]) guards a route; root always passes.

Roles:
- user  : read access: searches, listings, dashboard
- admin : user + printer status changes
- root  : everything
"""

from functools import wraps
from typing import Iterable, Set

from flask import jsonify
from flask_login import current_user, login_required


def role_required(allowed_roles: Iterable[str]):
    """
    Restrict a view to the given roles.

        @role_required(["admin"])
        def view(): ...

    - not logged in → 401 (from login_required / unauthorized handler)
    - root always passes
    - wrong role → 403 {"error": "Forbidden"}
    """
    if isinstance(allowed_roles, str):
        allowed: Set[str] = {allowed_roles}
    else:
        allowed = set(allowed_roles or [])

    def decorator(view_func):
        @wraps(view_func)
        @login_required
        def wrapped(*args, **kwargs):
            role = getattr(current_user, "role", None)

            if role == "root" or role in allowed:
                return view_func(*args, **kwargs)

            return jsonify(error="Forbidden"), 403

        return wrapped
    return decorator
