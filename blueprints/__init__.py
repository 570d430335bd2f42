"""
Blueprint registration for Major Finder.

All blueprints are registered without URL prefixes to keep the public URLs
(/majors, /test, /test_ans) stable.
"""

from __future__ import annotations


def register_blueprints(app):
    from blueprints.core import bp as core_bp
    from blueprints.majors import bp as majors_bp
    from blueprints.quiz import bp as quiz_bp

    app.register_blueprint(core_bp)
    app.register_blueprint(majors_bp)
    app.register_blueprint(quiz_bp)
