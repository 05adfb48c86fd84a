from ..db import db


class ExerciseType(db.Model):
    """Globale Übungsart (z. B. Bankdrücken), gehört keinem Benutzer."""
    __tablename__ = "exercise_types"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, unique=True)

    entries = db.relationship("TrainingEntry", back_populates="exercise_type")

    def __repr__(self):
        return f"<ExerciseType {self.name}>"


def list_exercise_types() -> list[ExerciseType]:
    """Alle Übungsarten, alphabetisch (für Dropdowns)."""
    return db.session.execute(db.select(ExerciseType).order_by(ExerciseType.name)).scalars().all()
