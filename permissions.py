"""
Access control for the admin panel.

There is a single role, ``admin``.  ``admin_required`` protects views:
anonymous visitors go through Flask-Login's unauthorized handler (login
redirect or 401), signed-in users without the role get 403.
"""

from functools import wraps

from flask import abort
from flask_login import current_user, login_required

ADMIN_ROLE = "admin"


def admin_required(view_func):
    @wraps(view_func)
    @login_required
    def wrapped(*args, **kwargs):
        if getattr(current_user, "role", None) != ADMIN_ROLE:
            abort(403)
        return view_func(*args, **kwargs)

    return wrapped


def is_admin() -> bool:
    """Template helper: is the current visitor the signed-in admin."""
    return bool(current_user.is_authenticated and getattr(current_user, "role", None) == ADMIN_ROLE)
