import logging

from flask import Flask, jsonify
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)
import compat  # noqa: E402


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(compat.CompatError)
    def handle_compat_error(e: compat.CompatError):
        return jsonify(error=e.message), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify(error=e.name), e.code


def create_app(test_config: dict | None = None) -> Flask:
    """Application factory for the printer parts API."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    _configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)
    compat.init_app(app)

    # blueprints
    from modules.auth import bp as auth_bp
    from modules.printers import bp as printers_bp
    from modules.parts import bp as parts_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(printers_bp)
    app.register_blueprint(parts_bp)

    from ui_routes import ui
    app.register_blueprint(ui)  # /health and dashboard counters

    _register_error_handlers(app)

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401
        from modules.printers import models as printer_models  # noqa: F401
        from modules.parts import models as parts_models  # noqa: F401

        db.create_all()

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
