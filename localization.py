"""
Locale selection and localized category labels (English / Persian).

Locale resolution order: explicit ``?lang=`` → session → Accept-Language →
DEFAULT_LOCALE.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import current_app, request, session

from scoring import Category

RTL_LOCALES = {"fa"}

CATEGORY_LABELS: dict[str, dict[Category, str]] = {
    "en": {
        Category.ANALYTICAL: "Analytical thinking",
        Category.DATA: "Data",
        Category.AI: "Artificial intelligence",
        Category.SOFTWARE_DEV: "Software development",
        Category.HARDWARE: "Hardware",
        Category.SECURITY: "Security",
        Category.CREATIVE: "Creativity",
    },
    "fa": {
        Category.ANALYTICAL: "تفکر تحلیلی",
        Category.DATA: "داده",
        Category.AI: "هوش مصنوعی",
        Category.SOFTWARE_DEV: "توسعه نرم‌افزار",
        Category.HARDWARE: "سخت‌افزار",
        Category.SECURITY: "امنیت",
        Category.CREATIVE: "خلاقیت",
    },
}


def supported_locales() -> list[str]:
    return list(current_app.config.get("LANGUAGES", ["en"]))


def select_locale() -> str:
    """Locale selector for Flask-Babel."""
    languages = supported_locales()
    default = current_app.config.get("DEFAULT_LOCALE", "en")

    requested = request.args.get("lang")
    if requested in languages:
        return requested

    stored = session.get("locale")
    if stored in languages:
        return stored

    return request.accept_languages.best_match(languages, default=default)


def is_rtl(locale: str) -> bool:
    return locale in RTL_LOCALES


def category_label(category: Category | str, locale: str) -> str:
    """Localized label for a category, falling back to English, then the raw name."""
    if not isinstance(category, Category):
        found = Category.lookup(category)
        if found is None:
            return str(category)
        category = found
    labels = CATEGORY_LABELS.get(locale) or CATEGORY_LABELS["en"]
    return labels.get(category, category.value)


def progress_items(scores: Mapping[str, Any], locale: str) -> list[dict[str, Any]]:
    """Score bars for the results page, in category order."""
    return [
        {"key": c.value, "label": category_label(c, locale), "value": scores.get(c.value, 0)}
        for c in Category
    ]
