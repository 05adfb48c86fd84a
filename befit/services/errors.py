"""
Fehlertypen des Service-Layers.

NotFound wird bewusst nicht als Exception modelliert: Services liefern
`None` bzw. `False`, wenn ein Datensatz fehlt ODER einem anderen Benutzer
gehört. Beides ist für den Aufrufer nicht unterscheidbar.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..models import TrainingEntry


class ValidationError(ValueError):
    """Ungültige Formulardaten (fehlende Felder, negative Werte, Ende vor Start)."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class EntryError(enum.Enum):
    SESSION_NOT_OWNED = "session_not_owned"
    EXERCISE_TYPE_NOT_FOUND = "exercise_type_not_found"


@dataclass
class EntryResult:
    """Ergebnis von `create_entry`: entweder ein Eintrag oder ein Fehler."""

    entry: Optional[TrainingEntry] = None
    error: Optional[EntryError] = None

    @property
    def success(self) -> bool:
        return self.error is None and self.entry is not None
