# befit/routes/stats.py
from __future__ import annotations

from flask import (
    Blueprint, Response, abort, current_app, g, jsonify, render_template, request
)

from befit.blueprints.auth import login_required
from befit.services.stats import get_user_stats, render_stats_chart

stats_bp = Blueprint("stats", __name__, url_prefix="/stats")


def _days_back() -> int:
    """?days=N, Standard aus STATS_DAYS_BACK. Negativ oder keine Zahl -> 400."""
    raw = request.args.get("days")
    if raw is None or raw == "":
        return int(current_app.config["STATS_DAYS_BACK"])
    try:
        days = int(raw)
    except ValueError:
        abort(400, "days must be an integer")
    if days < 0:
        abort(400, "days must not be negative")
    return days


# ---------------------------
# HTML-Seite
# ---------------------------

@stats_bp.get("/")
@login_required
def stats_view():
    """HTML: Tabelle pro Übungsart + Diagramm (PNG separat)."""
    days = _days_back()
    stats = get_user_stats(g.user_id, days_back=days)
    return render_template("stats/index.html", stats=stats, days=days)


@stats_bp.get("/json")
@login_required
def stats_json():
    days = _days_back()
    stats = get_user_stats(g.user_id, days_back=days)
    return jsonify([s.to_dict() for s in stats])


# ---------------------------
# PNG-Endpoint
# ---------------------------

@stats_bp.get("/png")
@login_required
def stats_png():
    """
    Balkendiagramm: Maximalgewicht je Übungsart im Zeitfenster.
    Optional: ?download=1 setzt Attachment-Header.
    """
    days = _days_back()
    png = render_stats_chart(get_user_stats(g.user_id, days_back=days), days)

    headers = {}
    if request.args.get("download", type=int) == 1:
        headers["Content-Disposition"] = f'attachment; filename="stats_{days}d.png"'
    return Response(png, mimetype="image/png", headers=headers)
