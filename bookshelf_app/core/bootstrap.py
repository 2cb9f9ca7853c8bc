"""Steps ``create_app`` runs, in order, to assemble the application."""

from __future__ import annotations

from flask import Flask, redirect, url_for
from flask_login import current_user

from .error_handlers import register_error_handlers
from .extensions import csrf_protect, db, login_manager, migrate
from .logging_config import setup_logging
from .module_registry import register_modules


def configure_logging(app: Flask) -> None:
    """Route the Flask app logger through the package handlers."""

    package_logger = setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )
    app.logger.handlers = list(package_logger.handlers)
    app.logger.setLevel(package_logger.level)
    app.logger.propagate = False


def register_extensions(app: Flask) -> None:
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf_protect.init_app(app)
    register_error_handlers(app)


def register_context_processors(app: Flask) -> None:
    """Session user loading and the template globals every page needs."""

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..models import User

        return db.session.get(User, int(user_id))

    @app.context_processor
    def inject_app_name() -> dict[str, object]:
        return {"app_name": app.config.get("APP_NAME", "Bookshelf")}


def register_blueprints(app: Flask) -> None:
    register_modules(app)

    @app.route("/")
    def index():
        endpoint = "goals.overview" if current_user.is_authenticated else "auth.login"
        return redirect(url_for(endpoint))


def register_event_listeners(app: Flask) -> None:
    from ..modules.goals.services.goal_listener import init_listener

    init_listener()
    app.logger.debug("Reading goal listener connected to book_finished")


def initialize_database(app: Flask) -> None:
    """Create any missing tables. Schema changes go through Flask-Migrate."""

    from .. import models  # noqa: F401

    db.create_all()
    app.logger.info("Database ready at %s", app.config["SQLALCHEMY_DATABASE_URI"])
