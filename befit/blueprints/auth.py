from __future__ import annotations

import re
from functools import wraps

from flask import (
    Blueprint, current_app, flash, g, redirect, render_template,
    request, session, url_for
)

from ..db import db
from ..models import User
from ..models.user import get_user_by_email

bp = Blueprint("auth", __name__, url_prefix="/auth")

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PASSWORD_MIN_LENGTH = 8


def login_required(view):
    """
    Setzt g.user_id aus der signierten Flask-Session.
    Nicht angemeldete Benutzer werden zur Login-Seite umgeleitet.
    """
    @wraps(view)
    def wrapper(*args, **kwargs):
        user_id = session.get("user_id")
        if not user_id:
            return redirect(url_for("auth.login", next=request.path))
        g.user_id = user_id
        return view(*args, **kwargs)
    return wrapper


@bp.app_context_processor
def inject_user():
    return {"current_user_id": session.get("user_id")}


@bp.route("/register", methods=["GET", "POST"])
def register():
    if request.method == "GET":
        return render_template("auth/register.html")

    email = (request.form.get("email") or "").strip().lower()
    password = request.form.get("password") or ""

    error = None
    if not EMAIL_RE.match(email):
        error = "Bitte eine gültige E-Mail-Adresse angeben."
    elif len(password) < PASSWORD_MIN_LENGTH:
        error = f"Das Passwort muss mindestens {PASSWORD_MIN_LENGTH} Zeichen lang sein."
    elif get_user_by_email(email) is not None:
        error = "Registrierung fehlgeschlagen."

    if error:
        flash(error, "error")
        return render_template("auth/register.html", email=email), 400

    user = User(email=email)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    current_app.logger.info("Neuer Benutzer %s registriert", user.id)

    session.clear()
    session["user_id"] = user.id
    return redirect(url_for("sessions.list_sessions"))


@bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "GET":
        return render_template("auth/login.html")

    email = (request.form.get("email") or "").strip().lower()
    password = request.form.get("password") or ""

    user = get_user_by_email(email) if email else None
    if user is None or not user.check_password(password):
        current_app.logger.info("Login fehlgeschlagen für %s", email)
        flash("Ungültige Anmeldedaten.", "error")
        return render_template("auth/login.html", email=email), 401

    session.clear()
    session["user_id"] = user.id

    next_url = request.args.get("next") or ""
    # nur relative Pfade zulassen
    if not next_url.startswith("/") or next_url.startswith("//"):
        next_url = url_for("sessions.list_sessions")
    return redirect(next_url)


@bp.post("/logout")
def logout():
    session.clear()
    flash("Abgemeldet.", "info")
    return redirect(url_for("index"))
