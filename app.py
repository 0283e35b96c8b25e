# app.py
import os

from flask import Flask, jsonify, send_from_directory
from sqlalchemy import text
from flask_cors import CORS

from config.config import Config
from db.database import make_engine, make_session_factory, init_db, auto_migrate
from routes.auth import bp as auth_bp
from routes.ads import bp as ads_bp


def create_app(config_class=Config):
    app = Flask(__name__)

    # Load config values from Config (or a test subclass)
    app.config.from_object(config_class)
    app.config["UPLOAD_FOLDER"] = os.path.abspath(app.config["UPLOAD_FOLDER"])
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    # CORS
    CORS(
        app,
        origins=app.config["ALLOWED_ORIGINS"],
        methods=["GET", "POST", "DELETE"],
        supports_credentials=True,
    )

    # Persistence handle: built here and handed to controllers, no module globals
    engine = make_engine(app.config["DATABASE_URL"])
    session_factory = make_session_factory(engine)
    app.extensions["db_engine"] = engine
    app.extensions["session_factory"] = session_factory

    @app.teardown_appcontext
    def remove_session(_exc=None):
        session_factory.remove()

    # Ensure DB schema exists and apply safe auto-migrations (adds missing tables/columns)
    if app.config.get("AUTO_MIGRATE", True):
        try:
            added = auto_migrate(engine)
            if added:
                app.logger.info("auto_migrate added columns: %s", ", ".join(added))
        except Exception:
            # Fallback to init_db if auto_migrate fails for some reason
            app.logger.exception("auto_migrate failed, falling back to init_db()")
            init_db(engine)
    else:
        init_db(engine)

    # register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(ads_bp)

    @app.route("/uploads/<path:filename>", methods=["GET"])
    def uploaded_file(filename):
        return send_from_directory(app.config["UPLOAD_FOLDER"], filename, as_attachment=False)

    @app.route("/", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/health/db", methods=["GET"])
    def health_db():
        """Simple DB health check endpoint.
        Returns 200 if DB is reachable and a basic select 1 works, otherwise returns 503.
        """
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return jsonify({"db": "ok"})
        except Exception as e:
            app.logger.exception("DB health check failed: %s", e)
            return jsonify({"db": "error", "error": str(e)}), 503

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host=Config.APP_HOST, port=Config.APP_PORT, debug=Config.DEBUG)
