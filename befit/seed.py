from __future__ import annotations

"""
Seed für BeFit.

Fügt typische Fitnessstudio-Übungen in die Tabelle `exercise_types` ein.

Ausführung:
    flask --app befit seed-exercises
"""

from flask import current_app

from .db import db
from .models import ExerciseType

# Typische Studio-Übungen
EXERCISE_TYPES: list[str] = [
    "Bench Press",
    "Incline Bench Press",
    "Squat",
    "Leg Press",
    "Deadlift",
    "Bent-Over Row",
    "Lat Pulldown",
    "Seated Cable Row",
    "Overhead Press",
    "Lateral Raise",
    "Biceps Curl",
    "Triceps Pushdown",
    "Plank",
    "Crunches",
]


def seed_exercise_types(names: list[str] | None = None) -> int:
    """Fügt Übungsarten ein (idempotent) und gibt die Anzahl neuer Zeilen zurück."""
    existing = set(db.session.execute(db.select(ExerciseType.name)).scalars())

    added = 0
    for name in names or EXERCISE_TYPES:
        if name in existing:
            continue
        db.session.add(ExerciseType(name=name))
        existing.add(name)
        added += 1

    db.session.commit()
    count = db.session.execute(db.select(db.func.count(ExerciseType.id))).scalar_one()
    current_app.logger.info("Tabelle `exercise_types` enthält jetzt %s Übungen.", count)
    return added
