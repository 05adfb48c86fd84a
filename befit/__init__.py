from pathlib import Path
from flask import Flask, render_template
from sqlalchemy import text


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)

    # Basis-Konfiguration
    app.config.from_object("befit.config")
    app.config.from_mapping(
        SQLALCHEMY_DATABASE_URI="sqlite:///" + str(Path(app.instance_path) / "befit.db").replace("\\", "/"),
    )

    # Test-Config überschreibt alles (z. B. für Tests)
    if test_config:
        app.config.update(test_config)
    else:
        app.config.from_pyfile("config.py", silent=True)
        app.config.from_prefixed_env()

    # Instance-Ordner sicherstellen
    Path(app.instance_path).mkdir(parents=True, exist_ok=True)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    from .db import db, register_cli
    db.init_app(app)
    register_cli(app)

    # Healthcheck
    @app.get("/health")
    def health():
        db.session.execute(text("SELECT 1"))
        return {"status": "ok"}

    # Startseite
    @app.get("/")
    def index():
        return render_template("index.html")

    # Blueprints registrieren
    from .blueprints.auth import bp as auth_bp
    app.register_blueprint(auth_bp)

    from .blueprints.sessions import bp as sessions_bp
    app.register_blueprint(sessions_bp)

    from .blueprints.entries import bp as entries_bp
    app.register_blueprint(entries_bp)

    from befit.routes.stats import stats_bp
    app.register_blueprint(stats_bp)

    app.logger.debug("BeFit gestartet mit Datenbank %s", app.config["SQLALCHEMY_DATABASE_URI"])
    return app
