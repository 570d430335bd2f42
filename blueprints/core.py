"""Core routes — landing page, language switch, health checks, unknown-path redirect."""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, session, url_for

from reference_data import check_data_files

bp = Blueprint("core", __name__)


@bp.route("/")
def index():
    return render_template("index.html")


@bp.route("/lang/<code>")
def set_language(code: str):
    if code in current_app.config.get("LANGUAGES", ["en"]):
        session["locale"] = code
    target = request.args.get("next", "")
    # Only same-site relative paths
    if not target.startswith("/") or target.startswith("//"):
        target = url_for("core.index")
    return redirect(target)


# ── Health checks ─────────────────────────────────────────

_start_time = time.time()


@bp.route("/health")
def health():
    uptime = int(time.time() - _start_time)
    return jsonify({"status": "ok", "uptime_seconds": uptime})


@bp.route("/ready")
def ready():
    files = check_data_files()
    if all(state == "ok" for state in files.values()):
        return jsonify({"status": "ready", "files": files}), 200
    logger.error("Readiness check failed: %s", files)
    return jsonify({"status": "not_ready", "files": files}), 503


# ── Fallback ──────────────────────────────────────────────

@bp.app_errorhandler(404)
@bp.app_errorhandler(405)
def redirect_home(error):
    return redirect(url_for("core.index"))
