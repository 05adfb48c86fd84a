from __future__ import annotations

from flask import (
    Blueprint, abort, flash, g, redirect, render_template, request, url_for
)

from ..models.exercise import list_exercise_types
from ..services import entries as entry_service
from ..services import sessions as session_service
from ..services.errors import ValidationError
from ..services.forms import parse_entry_form
from .auth import login_required

bp = Blueprint("entries", __name__, url_prefix="/entries")


def _render_form(entry=None, form=None, status: int = 200):
    """Formular mit Dropdowns (eigene Sessions + alle Übungsarten)."""
    return render_template(
        "entries/form.html",
        entry=entry,
        form=form or {},
        sessions=session_service.list_sessions(g.user_id),
        exercise_types=list_exercise_types(),
    ), status


@bp.get("/")
@login_required
def list_entries():
    items = entry_service.list_entries(g.user_id)
    return render_template("entries/list.html", entries=items)


@bp.route("/new", methods=["GET", "POST"])
@login_required
def create_entry():
    if request.method == "GET":
        # ?session_id=... wählt die Session im Dropdown vor
        return _render_form(form={"training_session_id": request.args.get("session_id", "")})

    try:
        data = parse_entry_form(request.form)
    except ValidationError as exc:
        flash(exc.message, "error")
        return _render_form(form=request.form, status=400)

    result = entry_service.create_entry(data, g.user_id)
    if not result.success:
        # fremde oder unbekannte Session -> 404, nicht 403
        abort(404)

    flash("Eintrag gespeichert.", "success")
    return redirect(url_for("sessions.session_detail", session_id=result.entry.training_session_id))


@bp.get("/<int:entry_id>")
@login_required
def entry_detail(entry_id: int):
    entry = entry_service.get_entry(entry_id, g.user_id)
    if entry is None:
        abort(404)
    return render_template("entries/detail.html", entry=entry)


@bp.route("/<int:entry_id>/edit", methods=["GET", "POST"])
@login_required
def edit_entry(entry_id: int):
    entry = entry_service.get_entry(entry_id, g.user_id)
    if entry is None:
        abort(404)

    if request.method == "GET":
        form = {
            "training_session_id": entry.training_session_id,
            "exercise_type_id": entry.exercise_type_id,
            "weight": entry.weight,
            "sets": entry.sets,
            "repetitions": entry.repetitions,
        }
        return _render_form(entry=entry, form=form)

    try:
        data = parse_entry_form(request.form)
    except ValidationError as exc:
        flash(exc.message, "error")
        return _render_form(entry=entry, form=request.form, status=400)

    if not entry_service.update_entry(entry_id, data, g.user_id):
        abort(404)
    flash("Eintrag gespeichert.", "success")
    return redirect(url_for("entries.entry_detail", entry_id=entry_id))


@bp.post("/<int:entry_id>/delete")
@login_required
def delete_entry(entry_id: int):
    entry = entry_service.get_entry(entry_id, g.user_id)
    if entry is None:
        abort(404)
    session_id = entry.training_session_id

    if not entry_service.delete_entry(entry_id, g.user_id):
        abort(404)
    flash("Eintrag gelöscht.", "info")
    return redirect(url_for("sessions.session_detail", session_id=session_id))
