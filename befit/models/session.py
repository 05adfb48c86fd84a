from ..db import db


class TrainingSession(db.Model):
    """
    Eine Trainingseinheit eines Benutzers (Start/Ende).
    Einträge werden beim Löschen der Session mitgelöscht.
    """
    __tablename__ = "training_sessions"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=False)

    entries = db.relationship(
        "TrainingEntry",
        back_populates="training_session",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<TrainingSession {self.id} user={self.user_id} {self.start_time:%Y-%m-%d %H:%M}>"


class TrainingEntry(db.Model):
    """
    Ein geloggter Eintrag: Übung, Gewicht, Sätze, Wiederholungen.
    user_id muss dem Besitzer der Session entsprechen (prüft der Entry-Service).
    """
    __tablename__ = "training_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    training_session_id = db.Column(
        db.Integer,
        db.ForeignKey("training_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exercise_type_id = db.Column(db.Integer, db.ForeignKey("exercise_types.id"), nullable=False)

    weight = db.Column(db.Float, nullable=False)
    sets = db.Column(db.Integer, nullable=False)
    repetitions = db.Column(db.Integer, nullable=False)

    training_session = db.relationship("TrainingSession", back_populates="entries")
    exercise_type = db.relationship("ExerciseType", back_populates="entries")

    def __repr__(self):
        return f"<TrainingEntry {self.id} {self.weight} kg {self.sets}x{self.repetitions}>"
