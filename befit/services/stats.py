"""
Service: Statistiken pro Übungsart über ein rückwärtiges Zeitfenster.

Reiner Lesezugriff. Gruppiert die Einträge eines Benutzers nach Übungsart und
berechnet Anzahl, Gesamtwiederholungen (Sätze * Wdh), Durchschnitts- und
Maximalgewicht. Nur Einträge aus Sessions mit start_time >= now - days_back.
"""

from __future__ import annotations

import io
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

# Matplotlib im Headless-Mode
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from sqlalchemy import func  # noqa: E402

from ..db import db  # noqa: E402
from ..models import ExerciseType, TrainingEntry, TrainingSession  # noqa: E402

DEFAULT_DAYS_BACK = 28


@dataclass
class ExerciseStat:
    exercise_type_name: str
    times_performed: int
    total_repetitions: int
    average_weight: float
    max_weight: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_user_stats(
    user_id: str,
    days_back: int = DEFAULT_DAYS_BACK,
    now: Optional[datetime] = None,
) -> List[ExerciseStat]:
    """
    Aggregiert die Einträge des Benutzers pro Übungsart.

    Sortierung: Übungsname aufsteigend (binäre Kollation der DB,
    d. h. Groß-/Kleinschreibung wird unterschieden).
    """
    if days_back < 0:
        raise ValueError("days_back must not be negative")

    now = now or datetime.now()
    try:
        cutoff = now - timedelta(days=days_back)
    except OverflowError:
        # Fenster reicht vor Jahr 1 zurück: alle Sessions zählen
        cutoff = datetime.min

    stmt = (
        db.select(
            ExerciseType.name,
            func.count(TrainingEntry.id),
            func.sum(TrainingEntry.sets * TrainingEntry.repetitions),
            func.avg(TrainingEntry.weight),
            func.max(TrainingEntry.weight),
        )
        .select_from(TrainingEntry)
        .join(TrainingEntry.training_session)
        .join(TrainingEntry.exercise_type)
        .where(
            TrainingEntry.user_id == user_id,
            TrainingSession.start_time >= cutoff,
        )
        .group_by(ExerciseType.id, ExerciseType.name)
        .order_by(ExerciseType.name)
    )

    return [
        ExerciseStat(
            exercise_type_name=name,
            times_performed=int(count),
            total_repetitions=int(total_reps or 0),
            average_weight=float(avg_weight or 0.0),
            max_weight=float(max_weight or 0.0),
        )
        for name, count, total_reps, avg_weight, max_weight in db.session.execute(stmt)
    ]


def render_stats_chart(stats: List[ExerciseStat], days_back: int) -> bytes:
    """
    PNG: Balkendiagramm Maximalgewicht je Übungsart.
    Ohne Daten wird ein Hinweis gezeichnet.
    """
    labels = [s.exercise_type_name for s in stats]
    values = [s.max_weight for s in stats]

    fig, ax = plt.subplots(figsize=(7.5, 3.8), dpi=140)
    if values:
        ax.bar(labels, values)
        plt.setp(ax.get_xticklabels(), rotation=18, ha="right")
    else:
        ax.text(
            0.5, 0.5,
            "No data yet",
            ha="center", va="center", transform=ax.transAxes
        )
    ax.set_title(f"Max weight per exercise – last {days_back} days")
    ax.set_ylabel("Weight (kg)")
    ax.set_xlabel("Exercise")
    ax.grid(axis="y", linestyle=":", alpha=0.4)
    plt.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format="png")
    plt.close(fig)
    return buf.getvalue()
