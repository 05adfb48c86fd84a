"""
Utilities for parsing the session and entry forms into plain input objects.

The objects only carry what a client may supply; the owner (user_id) is
always assigned by the services.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..db import fits_integer_id
from .errors import ValidationError

DATETIME_FORMATS = ("%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M")


@dataclass
class SessionInput:
    start_time: datetime
    end_time: datetime


@dataclass
class EntryInput:
    training_session_id: int
    exercise_type_id: int
    weight: float
    sets: int
    repetitions: int


def _parse_dt(val: Optional[str], field: str) -> datetime:
    raw = (val or "").strip()
    if not raw:
        raise ValidationError("Bitte ein Datum angeben.", field)
    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    raise ValidationError(f"Ungültiges Datum: {raw}", field)


def _to_int(val: Any, field: str) -> int:
    raw = str(val if val is not None else "").strip()
    if not raw:
        raise ValidationError(f"Feld '{field}' fehlt.", field)
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"Feld '{field}' muss eine ganze Zahl sein.", field) from None
    if not fits_integer_id(value):
        raise ValidationError(f"Feld '{field}' ist zu groß.", field)
    return value


def _to_float(val: Any, field: str) -> float:
    # Komma als Dezimaltrenner erlauben (z. B. "82,5")
    raw = str(val if val is not None else "").replace(",", ".").strip()
    if not raw:
        raise ValidationError(f"Feld '{field}' fehlt.", field)
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"Feld '{field}' muss eine Zahl sein.", field) from None


def parse_session_form(form: Mapping[str, Any]) -> SessionInput:
    """
    Expects `start_time` and `end_time` (HTML datetime-local).
    Raises ValidationError if either is missing or the end lies before the start.
    """
    start = _parse_dt(form.get("start_time"), "start_time")
    end = _parse_dt(form.get("end_time"), "end_time")
    if end < start:
        raise ValidationError("Das Ende darf nicht vor dem Start liegen.", "end_time")
    return SessionInput(start_time=start, end_time=end)


def parse_entry_form(form: Mapping[str, Any]) -> EntryInput:
    """
    Expects `training_session_id`, `exercise_type_id`, `weight`, `sets`, `repetitions`.

    Weight may be 0 (bodyweight exercises) but not negative; sets and
    repetitions must be at least 1.
    """
    data = EntryInput(
        training_session_id=_to_int(form.get("training_session_id"), "training_session_id"),
        exercise_type_id=_to_int(form.get("exercise_type_id"), "exercise_type_id"),
        weight=_to_float(form.get("weight"), "weight"),
        sets=_to_int(form.get("sets"), "sets"),
        repetitions=_to_int(form.get("repetitions"), "repetitions"),
    )
    if data.weight < 0:
        raise ValidationError("Das Gewicht darf nicht negativ sein.", "weight")
    if data.sets < 1:
        raise ValidationError("Mindestens ein Satz.", "sets")
    if data.repetitions < 1:
        raise ValidationError("Mindestens eine Wiederholung.", "repetitions")
    return data
