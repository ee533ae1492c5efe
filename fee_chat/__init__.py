"""
Fee Chat Application Factory
"""
import os
from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from config import get_config

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


def create_app(config_name='default', storage=None, completer=None, extractor=None):
    """Build the app. Collaborators left as None get their real adapters."""
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        origins=[app.config["CORS_ORIGIN"]],
        methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    from fee_chat.services import OpenAICompleter, PyPDF2Extractor, SQLAlchemyStorage, Services

    app.extensions["fee_chat"] = Services(
        storage=storage if storage is not None else SQLAlchemyStorage(),
        completer=completer if completer is not None else OpenAICompleter.from_config(app.config),
        extractor=extractor if extractor is not None else PyPDF2Extractor(),
    )

    # Register blueprints
    from fee_chat.api import api_bp

    app.register_blueprint(api_bp)  # No prefix - paths match the browser client

    # Health check endpoint
    @app.route('/healthz')
    def healthz():
        """Health check for load balancers and monitoring"""
        try:
            from sqlalchemy import text
            db.session.execute(text('SELECT 1'))
            db_status = "ok"
        except SQLAlchemyError as e:
            db.session.rollback()
            db_status = f"error: {e}"

        completer_ready = getattr(app.extensions["fee_chat"].completer, "ready", None)
        openai_ok, openai_msg = completer_ready() if completer_ready else (True, "")

        return jsonify({
            "status": "ok" if db_status == "ok" else "degraded",
            "version": app.config["APP_VERSION"],
            "database": db_status,
            "openai_ready": openai_ok,
            "openai_message": openai_msg,
            "model": app.config["OPENAI_MODEL"],
            "timestamp": datetime.now(timezone.utc).isoformat()
        })

    # Version endpoint
    @app.route('/version')
    def version():
        """Version and build info"""
        return jsonify({
            "version": app.config["APP_VERSION"],
            "build_time": app.config["BUILD_TIME"],
            "git_commit": app.config["GIT_COMMIT"],
        })

    # Handle database initialization
    with app.app_context():
        from fee_chat import models  # noqa: F401  registers tables on db.metadata

        if os.getenv('RESET_DB', '').strip() in ('1', 'true', 'yes'):
            app.logger.warning('RESET_DB is set - dropping all tables...')
            db.drop_all()
            db.create_all()
            app.logger.warning('Fresh tables created')
        else:
            # create_all only creates tables that don't exist yet
            db.create_all()

        app.logger.info('Fee Chat ready (database: %s)', db.engine.url.render_as_string(hide_password=True))
    return app
