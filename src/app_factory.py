import os
from typing import Mapping, Optional

import click
from flask import Flask

from extensions import db, migrate
from config import DevConfig, ProdConfig
from logging_setup import setup_logger


def create_app(config_object=None, overrides: Optional[Mapping] = None) -> Flask:
    """Initialize Flask app with DB, scheduling engine, auth and routes."""
    app = Flask(__name__)

    if config_object is not None:
        app.config.from_object(config_object)
    elif os.getenv("FLASK_ENV") == "production":
        app.config.from_object(ProdConfig)
    else:
        app.config.from_object(DevConfig)
    if overrides:
        app.config.update(overrides)

    setup_logger(
        log_dir=app.config.get("LOG_DIR"),
        filename=app.config.get("LOG_FILE", "clinic_api.log"),
        level=app.config.get("LOG_LEVEL", "INFO"),
    )

    db.init_app(app)
    migrate.init_app(app, db)

    from src.services.scheduling_service import init_scheduling
    from src.services.token_service import TokenService

    init_scheduling(app)
    app.extensions["token_service"] = TokenService.from_config(app.config)

    # Import models so SQLAlchemy registers tables.
    with app.app_context():
        from src.models import Patient, Physician, Appointment, User  # noqa: F401
        # Ensure tables exist (useful for SQLite/dev). For production, prefer migrations.
        db.create_all()

    # Register HTTP blueprints
    from src.routes.auth import auth_bp
    from src.routes.appointments import appointments_bp
    from src.routes.physicians import physicians_bp
    from src.routes.patients import patients_bp
    from src.routes.errors import register_error_handlers

    app.register_blueprint(auth_bp)
    app.register_blueprint(appointments_bp)
    app.register_blueprint(physicians_bp)
    app.register_blueprint(patients_bp)
    register_error_handlers(app)

    register_cli(app)
    return app


def register_cli(app: Flask):
    @app.cli.command("create-user")
    @click.argument("login")
    @click.password_option()
    def create_user(login, password):
        """Create an API user able to request bearer tokens."""
        from src.models import User

        if db.session.scalars(db.select(User).filter_by(login=login)).first():
            raise click.ClickException(f"User {login!r} already exists")

        user = User(login=login)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        click.echo(f"Created user {login}")
