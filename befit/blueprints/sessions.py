from __future__ import annotations

from flask import (
    Blueprint, abort, flash, g, redirect, render_template, request, url_for
)

from ..services import entries as entry_service
from ..services import sessions as session_service
from ..services.errors import ValidationError
from ..services.forms import parse_session_form
from .auth import login_required

bp = Blueprint("sessions", __name__, url_prefix="/sessions")


@bp.get("/")
@login_required
def list_sessions():
    """HTML: eigene Trainingseinheiten, neueste zuerst."""
    sessions = session_service.list_sessions(g.user_id)
    return render_template("sessions/list.html", sessions=sessions)


@bp.route("/new", methods=["GET", "POST"])
@login_required
def create_session():
    if request.method == "GET":
        return render_template("sessions/form.html", sess=None, form={})

    try:
        data = parse_session_form(request.form)
    except ValidationError as exc:
        flash(exc.message, "error")
        return render_template("sessions/form.html", sess=None, form=request.form), 400

    sess = session_service.create_session(data, g.user_id)
    flash("Training angelegt.", "success")
    return redirect(url_for("sessions.session_detail", session_id=sess.id))


@bp.get("/<int:session_id>")
@login_required
def session_detail(session_id: int):
    sess = session_service.get_session(session_id, g.user_id)
    if sess is None:
        abort(404)
    items = entry_service.list_entries(g.user_id, session_id=session_id)
    return render_template("sessions/detail.html", sess=sess, entries=items)


@bp.route("/<int:session_id>/edit", methods=["GET", "POST"])
@login_required
def edit_session(session_id: int):
    sess = session_service.get_session(session_id, g.user_id)
    if sess is None:
        abort(404)

    if request.method == "GET":
        form = {
            "start_time": sess.start_time.strftime("%Y-%m-%dT%H:%M"),
            "end_time": sess.end_time.strftime("%Y-%m-%dT%H:%M"),
        }
        return render_template("sessions/form.html", sess=sess, form=form)

    try:
        data = parse_session_form(request.form)
    except ValidationError as exc:
        flash(exc.message, "error")
        return render_template("sessions/form.html", sess=sess, form=request.form), 400

    if not session_service.update_session(session_id, data, g.user_id):
        abort(404)
    flash("Training gespeichert.", "success")
    return redirect(url_for("sessions.session_detail", session_id=session_id))


@bp.post("/<int:session_id>/delete")
@login_required
def delete_session(session_id: int):
    """Löscht die Session und alle Einträge."""
    if not session_service.delete_session(session_id, g.user_id):
        abort(404)
    flash("Training gelöscht.", "info")
    return redirect(url_for("sessions.list_sessions"))
