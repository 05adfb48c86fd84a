# -*- coding: utf-8 -*-
"""
Service: Training Entries

Jeder Schreibzugriff prüft zwei Besitzverhältnisse:
  - der Eintrag selbst gehört dem Benutzer (update/delete)
  - die referenzierte Session gehört dem Benutzer (create/update)
Übungsart (joinedload) und Session (contains_eager) werden explizit mitgeladen.
"""

from __future__ import annotations

from typing import List, Optional

from flask import current_app
from sqlalchemy.orm import contains_eager, joinedload

from ..db import db, fits_integer_id
from ..models import ExerciseType, TrainingEntry, TrainingSession
from .errors import EntryError, EntryResult
from .forms import EntryInput
from .sessions import get_session


def _entries_query(user_id: str):
    return (
        db.select(TrainingEntry)
        .join(TrainingEntry.training_session)
        .options(
            joinedload(TrainingEntry.exercise_type),
            contains_eager(TrainingEntry.training_session),
        )
        .where(TrainingEntry.user_id == user_id)
    )


def _resolve_references(data: EntryInput, user_id: str):
    """Liefert (session, exercise_type, error); error ist None, wenn beide gültig sind."""
    session = get_session(data.training_session_id, user_id)
    if session is None:
        return None, None, EntryError.SESSION_NOT_OWNED
    exercise_type = None
    if fits_integer_id(data.exercise_type_id):
        exercise_type = db.session.get(ExerciseType, data.exercise_type_id)
    if exercise_type is None:
        return session, None, EntryError.EXERCISE_TYPE_NOT_FOUND
    return session, exercise_type, None


def list_entries(user_id: str, session_id: Optional[int] = None) -> List[TrainingEntry]:
    """Einträge des Benutzers, optional auf eine Session eingeschränkt."""
    stmt = _entries_query(user_id)
    if session_id is not None:
        stmt = stmt.where(TrainingEntry.training_session_id == session_id)
    stmt = stmt.order_by(TrainingSession.start_time.desc(), TrainingEntry.id)
    return db.session.execute(stmt).unique().scalars().all()


def get_entry(entry_id: int, user_id: str) -> Optional[TrainingEntry]:
    if not fits_integer_id(entry_id):
        return None
    stmt = _entries_query(user_id).where(TrainingEntry.id == entry_id)
    return db.session.execute(stmt).unique().scalar_one_or_none()


def create_entry(data: EntryInput, user_id: str) -> EntryResult:
    session, exercise_type, error = _resolve_references(data, user_id)
    if error is not None:
        current_app.logger.warning(
            "Eintrag für Session %s abgelehnt (%s, Benutzer %s)",
            data.training_session_id, error.value, user_id,
        )
        return EntryResult(error=error)

    entry = TrainingEntry(
        user_id=user_id,
        training_session=session,
        exercise_type=exercise_type,
        weight=data.weight,
        sets=data.sets,
        repetitions=data.repetitions,
    )
    db.session.add(entry)
    db.session.commit()
    current_app.logger.info("Eintrag %s in Session %s angelegt", entry.id, entry.training_session_id)
    return EntryResult(entry=entry)


def update_entry(entry_id: int, data: EntryInput, user_id: str) -> bool:
    """
    Überschreibt alle Felder. Auch beim Update muss die (evtl. neue)
    Session dem Benutzer gehören, sonst False ohne Änderung.
    """
    entry = get_entry(entry_id, user_id)
    if entry is None:
        current_app.logger.warning("Update von Eintrag %s abgelehnt (Benutzer %s)", entry_id, user_id)
        return False

    session, exercise_type, error = _resolve_references(data, user_id)
    if error is not None:
        current_app.logger.warning("Update von Eintrag %s abgelehnt (%s)", entry_id, error.value)
        return False

    entry.training_session = session
    entry.exercise_type = exercise_type
    entry.weight = data.weight
    entry.sets = data.sets
    entry.repetitions = data.repetitions
    db.session.commit()
    return True


def delete_entry(entry_id: int, user_id: str) -> bool:
    entry = get_entry(entry_id, user_id)
    if entry is None:
        current_app.logger.warning("Löschen von Eintrag %s abgelehnt (Benutzer %s)", entry_id, user_id)
        return False

    db.session.delete(entry)
    db.session.commit()
    return True
