"""
Major Finder — Flask Web Application

Field-of-study pages, a short aptitude quiz, and ranked major
recommendations in English and Persian.
"""

from __future__ import annotations

import os
from typing import Any

from flask import Flask, Response
from flask_babel import get_locale
from whitenoise import WhiteNoise

from blueprints import register_blueprints
from extensions import babel, compress, csrf, limiter
from localization import is_rtl, select_locale


def create_app(test_config: dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__)

    # Load config
    from config import config_by_name
    if test_config is not None:
        app.config.from_object(config_by_name["testing"])
        app.config.update(test_config)
    else:
        env = os.environ.get("FLASK_ENV", "development")
        cfg = config_by_name.get(env, config_by_name["development"])
        app.config.from_object(cfg)
        if hasattr(cfg, "validate"):
            cfg.validate()

    # Structured logging
    from logging_config import init_logging
    init_logging(app)

    # CSRF protection (the quiz form posts csrf_token())
    csrf.init_app(app)

    # i18n with Flask-Babel
    babel.init_app(app, locale_selector=select_locale)

    # Response compression
    compress.init_app(app)

    # Static files with long cache headers
    app.wsgi_app = WhiteNoise(
        app.wsgi_app,
        root=os.path.join(app.root_path, "static"),
        prefix="static/",
        max_age=31536000 if not app.debug else 0,
    )

    # Rate limiter (RATELIMIT_ENABLED is off in TestingConfig)
    limiter.init_app(app)

    register_blueprints(app)

    @app.context_processor
    def locale_helpers() -> dict[str, Any]:
        locale = str(get_locale() or app.config.get("DEFAULT_LOCALE", "en"))
        return {
            "current_locale": locale,
            "text_direction": "rtl" if is_rtl(locale) else "ltr",
            "languages": app.config.get("LANGUAGES", ["en"]),
        }

    # Security headers
    @app.after_request
    def set_security_headers(response: Response) -> Response:
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:"
        )
        if not app.debug:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    app.logger.info("Reference data directory: %s", app.config.get("DATA_DIR"))
    return app


if __name__ == "__main__":
    create_app().run(debug=True, port=int(os.environ.get("PORT", "3003")))
