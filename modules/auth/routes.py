"""Login / logout for the admin panel and the Flask-Login hooks."""

import logging

from flask import abort, flash, redirect, render_template, request, session, url_for
from flask_login import current_user, login_user, logout_user

from errors import ValidationError
from extensions import db, login_manager
from models import User
from modules.auth.forms import validate_login
from utils import is_safe_redirect, wants_json

from . import bp

logger = logging.getLogger(__name__)

INCORRECT_CREDENTIALS = "Email or password are incorrect"


@login_manager.user_loader
def load_user(user_id: str | None) -> User | None:
    """Resolve a ``User`` instance for Flask-Login sessions."""

    if not user_id:
        return None
    try:
        return db.session.get(User, int(user_id))
    except ValueError:
        return None


@login_manager.unauthorized_handler
def unauthorized():
    if wants_json(request):
        abort(401)
    flash("Please log in to access the admin panel.", "warning")
    return redirect(url_for("auth.login", next=request.full_path.rstrip("?")))


def _redirect_target(next_url):
    if is_safe_redirect(next_url):
        return next_url
    return url_for("admin.index")


@bp.route("/login", methods=["GET", "POST"])
def login():
    next_url = request.values.get("next")

    if request.method == "POST":
        try:
            credentials = validate_login(request.form)
        except ValidationError as exc:
            return render_template(
                "auth/login.html", form=request.form, errors=exc.errors, next=next_url,
            ), 400

        user = User.query.filter_by(email=credentials.email).first()
        if user is None or not user.check_password(credentials.password):
            logger.warning("Failed login attempt for %s", credentials.email)
            return render_template(
                "auth/login.html", form=request.form, errors={},
                form_errors=[INCORRECT_CREDENTIALS], next=next_url,
            ), 400

        session.permanent = True
        login_user(user)
        logger.info("User %s logged in", user.email)
        return redirect(_redirect_target(next_url))

    if current_user.is_authenticated:
        return redirect(_redirect_target(next_url))
    return render_template("auth/login.html", form={}, errors={}, next=next_url)


@bp.route("/logout", methods=["POST"])
def logout():
    logout_user()
    session.clear()
    return redirect(url_for("directory.index"))
