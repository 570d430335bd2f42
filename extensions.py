"""
Flask extension singletons, bound to the app in create_app().

Kept out of app.py so blueprints can import them without a circular import.
"""

from __future__ import annotations

from flask_babel import Babel
from flask_compress import Compress
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect

limiter = Limiter(key_func=get_remote_address, default_limits=["200 per hour"])
csrf = CSRFProtect()
babel = Babel()
compress = Compress()
