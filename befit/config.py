"""
BeFit – Standardkonfiguration
-----------------------------
Wird von `create_app` per `app.config.from_object("befit.config")` geladen.

Lokale bzw. sensible Einstellungen gehören in `instance/config.py`
(wird danach per `app.config.from_pyfile("config.py", silent=True)` gelesen)
oder in Umgebungsvariablen mit Präfix `FLASK_`, z. B.
`FLASK_SECRET_KEY=...` oder `FLASK_STATS_DAYS_BACK=14`.
"""

# ⚙️ Flask-Grundeinstellungen
SECRET_KEY = "dev"                  # Bitte ändern für Produktivbetrieb!
TESTING = False

# 💾 Datenbank
# SQLALCHEMY_DATABASE_URI setzt create_app auf instance/befit.db, falls nicht überschrieben
SQLALCHEMY_TRACK_MODIFICATIONS = False

# 📈 Statistik: Standard-Zeitfenster in Tagen
STATS_DAYS_BACK = 28

# 📝 Logging
LOG_LEVEL = "INFO"
