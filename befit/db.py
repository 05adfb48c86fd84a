# befit/db.py
from __future__ import annotations

import click
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()

# SQLite INTEGER ist ein vorzeichenbehafteter 64-Bit-Wert
MAX_INTEGER_ID = 2**63 - 1


def fits_integer_id(value: int) -> bool:
    """True, wenn value als INTEGER-Primärschlüssel abgefragt werden kann."""
    return -MAX_INTEGER_ID - 1 <= value <= MAX_INTEGER_ID


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    """SQLite erzwingt Fremdschlüssel nur mit PRAGMA foreign_keys = ON."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON;")
        cursor.close()


def init_db() -> None:
    """Erzeugt die Datenbanktabellen, falls sie nicht existieren."""
    from . import models  # noqa: F401  (registriert alle Tabellen)
    db.create_all()


def register_cli(app: Flask) -> None:
    """Registers `flask init-db` and `flask seed-exercises`."""

    @app.cli.command("init-db")
    def init_db_command() -> None:
        init_db()
        click.echo("Datenbank initialisiert.")

    @app.cli.command("seed-exercises")
    def seed_exercises_command() -> None:
        from .seed import seed_exercise_types

        init_db()
        added = seed_exercise_types()
        click.echo(f"{added} Übungen hinzugefügt.")
