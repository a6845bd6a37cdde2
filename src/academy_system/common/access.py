from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError


def roles_required(*roles: Role):
    """Allow the view only for a signed-in user whose session role is one of `roles`."""
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"message": "Authentication required"}), 401

            if session.get("role") not in allowed:
                raise AuthorizationError("Access denied")

            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_user_id() -> int:
    return int(session["user_id"])
