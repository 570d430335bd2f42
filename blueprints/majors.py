"""Field-of-study pages."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, render_template, request

from field_lookup import FieldNotFound, FieldView, get_field_info

logger = logging.getLogger(__name__)

bp = Blueprint("majors", __name__)


@bp.route("/majors")
def majors():
    title = request.args.get("place") or current_app.config.get("DEFAULT_MAJOR", "Computer Science")
    try:
        result = get_field_info(title)
    except Exception as e:
        logger.error("Majors route error for %r: %s", title, e, exc_info=True)
        return render_template("majors_error.html", title=title), 500

    if isinstance(result, FieldView):
        return render_template("majors.html", field=result)
    if isinstance(result, FieldNotFound):
        logger.info("Unknown field requested: %r", title)
        return render_template("majors_error.html", title=title), 404
    return render_template("majors_error.html", title=title), 500
