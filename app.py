from flask import Flask, jsonify, render_template, request
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from errors import RateLimited, RecordNotFound  # noqa: E402
from extensions import db, login_manager, rate_limiter  # noqa: E402
from logging_config import setup_logging  # noqa: E402
from utils import wants_json  # noqa: E402


def create_app(test_config=None) -> Flask:
    """Application factory for the Argentinians Who Code site."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    if not app.testing:
        setup_logging(app.config["LOG_LEVEL"])

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = "auth.login"
    rate_limiter.init_app(app)

    # blueprints
    from modules.directory import bp as directory_bp
    from modules.nominations import bp as nominations_bp
    from modules.auth import bp as auth_bp
    from modules.admin import bp as admin_bp

    app.register_blueprint(directory_bp)
    app.register_blueprint(nominations_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401
        from modules.nominations import models as nomination_models  # noqa: F401

        db.create_all()

    register_error_handlers(app)

    from modules.nominations.models import EXPERTISE_LABELS, PROVINCES
    from permissions import is_admin

    @app.context_processor
    def inject_globals():
        return dict(
            is_admin=is_admin,
            expertise_labels=EXPERTISE_LABELS,
            provinces=PROVINCES,
        )

    return app


def _error_response(status: int, title: str, message: str):
    if wants_json(request):
        return jsonify(error=message, status=status), status
    return render_template("errors/error.html", status=status, title=title, message=message), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(RecordNotFound)
    def handle_record_not_found(exc):
        return _error_response(404, "Not found", str(exc))

    @app.errorhandler(RateLimited)
    def handle_rate_limited(exc):
        return _error_response(429, "Too many requests", "You made too many submissions. Try again later!")

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        # routing redirects are HTTPExceptions too
        if exc.code is None or exc.code < 400:
            return exc
        if exc.code >= 500:
            return _error_response(exc.code, "Something went wrong",
                                   "Something went wrong. Please try again later.")
        return _error_response(exc.code, exc.name, exc.description)


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
