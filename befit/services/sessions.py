# -*- coding: utf-8 -*-
"""
Service: Training Sessions
CRUD über TrainingSession, immer auf einen Benutzer eingeschränkt.
Fremde und nicht existierende Sessions sind für den Aufrufer gleich (None/False).
"""

from __future__ import annotations

from typing import List, Optional

from flask import current_app

from ..db import db, fits_integer_id
from ..models import TrainingSession
from .forms import SessionInput


def list_sessions(user_id: str) -> List[TrainingSession]:
    """Alle Sessions des Benutzers, neueste zuerst."""
    stmt = (
        db.select(TrainingSession)
        .where(TrainingSession.user_id == user_id)
        .order_by(TrainingSession.start_time.desc(), TrainingSession.id.desc())
    )
    return db.session.execute(stmt).scalars().all()


def get_session(session_id: int, user_id: str) -> Optional[TrainingSession]:
    if not fits_integer_id(session_id):
        return None
    stmt = db.select(TrainingSession).where(
        TrainingSession.id == session_id,
        TrainingSession.user_id == user_id,
    )
    return db.session.execute(stmt).scalar_one_or_none()


def create_session(data: SessionInput, user_id: str) -> TrainingSession:
    session = TrainingSession(
        user_id=user_id,
        start_time=data.start_time,
        end_time=data.end_time,
    )
    db.session.add(session)
    db.session.commit()
    current_app.logger.info("Session %s für Benutzer %s angelegt", session.id, user_id)
    return session


def update_session(session_id: int, data: SessionInput, user_id: str) -> bool:
    """Überschreibt Start und Ende komplett."""
    session = get_session(session_id, user_id)
    if session is None:
        current_app.logger.warning("Update von Session %s abgelehnt (Benutzer %s)", session_id, user_id)
        return False

    session.start_time = data.start_time
    session.end_time = data.end_time
    db.session.commit()
    return True


def delete_session(session_id: int, user_id: str) -> bool:
    """Löscht die Session inkl. aller zugehörigen Einträge."""
    session = get_session(session_id, user_id)
    if session is None:
        current_app.logger.warning("Löschen von Session %s abgelehnt (Benutzer %s)", session_id, user_id)
        return False

    db.session.delete(session)
    db.session.commit()
    current_app.logger.info("Session %s gelöscht", session_id)
    return True
