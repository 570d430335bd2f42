"""Quiz routes: quiz page, submission scoring, recommendations page."""

from __future__ import annotations

import logging
import re
from typing import Any

from flask import Blueprint, current_app, redirect, render_template, request, url_for
from flask_babel import get_locale

from extensions import limiter
from field_lookup import get_descriptions
from localization import progress_items
from reference_data import DataFileError, read_test_data
from scoring import InvalidSubmissionError, compute_scores, recommend_majors, scores_from_query

logger = logging.getLogger(__name__)

bp = Blueprint("quiz", __name__)

# Form field names like answers[3][e]
_INDEXED_ANSWER = re.compile(r"^answers\[(\d+)\]\[e\]$")


def _submitted_answers() -> Any:
    """Collect answers from a JSON body or from the quiz form."""
    if request.is_json:
        body = request.get_json(silent=True)
        return body.get("answers") if isinstance(body, dict) else None

    indexed: list[tuple[int, str]] = []
    for key, value in request.form.items(multi=True):
        match = _INDEXED_ANSWER.match(key)
        if match:
            indexed.append((int(match.group(1)), value))
    indexed.sort(key=lambda pair: pair[0])

    answers = [{"e": value} for _, value in indexed]
    answers.extend({"e": value} for value in request.form.getlist("answers"))
    return answers


def _submit_limit() -> str:
    return current_app.config.get("QUIZ_SUBMIT_LIMIT", "30 per minute")


@bp.route("/test")
def test_page():
    try:
        test_data = read_test_data()
    except DataFileError as e:
        logger.error("Test page load error: %s", e, exc_info=True)
        return render_template("test_error.html", message="something went wrong"), 500
    return render_template("test.html", test=test_data)


@bp.route("/test", methods=["POST"])
@limiter.limit(_submit_limit)
def test_submit():
    try:
        scores = compute_scores(_submitted_answers())
    except InvalidSubmissionError:
        return render_template("test_error.html", message="invalid test submission"), 400
    except Exception as e:
        logger.error("Test processing error: %s", e, exc_info=True)
        return render_template("test_error.html", message="something went wrong"), 500

    logger.info("Quiz scored: %s", scores)
    return redirect(url_for("quiz.test_ans", **scores))


@bp.route("/test_ans")
def test_ans():
    scores = scores_from_query(request.args)
    limit = current_app.config.get("RECOMMENDATION_LIMIT", 15)
    try:
        ranked = recommend_majors(scores)
        titles = [r.major for r in ranked[:limit]]
        suggested_majors = get_descriptions(titles)
    except Exception as e:
        logger.error("Test result processing error: %s", e, exc_info=True)
        return render_template("test_error.html", message="something went wrong"), 500

    locale = str(get_locale() or current_app.config.get("DEFAULT_LOCALE", "en"))
    return render_template(
        "test_ans.html",
        progressItems=progress_items(scores, locale),
        suggestedMajors=suggested_majors,
    )
