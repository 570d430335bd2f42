"""Field lookup: major pages, subfield summaries and description joins."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Union

from reference_data import DataFileError, load_subfields

logger = logging.getLogger(__name__)

MISSING_SUBFIELD_TEXT = "(No information found)"


@dataclass
class SubfieldSummary:
    title: str
    shortIntroduction: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "shortIntroduction": self.shortIntroduction}


@dataclass
class FieldView:
    title: str
    introduction: str
    topSubfield: str | None
    subfields: list[SubfieldSummary] = field(default_factory=list)
    success: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "introduction": self.introduction,
            "topSubfield": self.topSubfield,
            "subfields": [s.to_dict() for s in self.subfields],
        }


@dataclass
class FieldNotFound:
    title: str
    success: bool = False

    @property
    def message(self) -> str:
        return f'Title "{self.title}" was not found'

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "message": self.message, "title": self.title}


@dataclass
class FieldLookupFailed:
    error: str
    message: str = "Error while reading or processing data file"
    success: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "message": self.message, "error": self.error}


FieldLookupResult = Union[FieldView, FieldNotFound, FieldLookupFailed]


def _find(records: list[dict], title: str) -> dict | None:
    for item in records:
        if item.get("title") == title:
            return item
    return None


def parent_in_path(way2place: Any) -> str | None:
    """Breadcrumb parent: second-to-last path entry, or the only entry."""
    if not isinstance(way2place, list) or not way2place:
        return None
    return way2place[-2] if len(way2place) >= 2 else way2place[0]


def get_field_info(title: str) -> FieldLookupResult:
    """Build the view data for one major page."""
    try:
        records = load_subfields()
    except DataFileError as e:
        logger.error("Field lookup for %r failed: %s", title, e, exc_info=True)
        return FieldLookupFailed(error=str(e))

    item = _find(records, title)
    if item is None:
        return FieldNotFound(title=title)

    subfields: list[SubfieldSummary] = []
    sub_titles = item.get("subfields")
    if isinstance(sub_titles, list):
        for sub_title in sub_titles:
            sub_item = _find(records, sub_title)
            if sub_item is not None:
                subfields.append(SubfieldSummary(
                    title=sub_item["title"],
                    shortIntroduction=sub_item.get("shortIntroduction") or "",
                ))
            else:
                subfields.append(SubfieldSummary(
                    title=sub_title,
                    shortIntroduction=MISSING_SUBFIELD_TEXT,
                ))

    return FieldView(
        title=item["title"],
        introduction=item.get("introduction") or "",
        topSubfield=parent_in_path(item.get("way2place")),
        subfields=subfields,
    )


def get_descriptions(titles: list[str]) -> list[dict[str, str]]:
    """Return {title, description} for each known title, in the given order.

    Unknown titles are left out. Read failures raise DataFileError.
    """
    records = load_subfields()
    descriptions = []
    for title in titles:
        item = _find(records, title)
        if item is not None:
            descriptions.append({
                "title": item["title"],
                "description": item.get("introduction") or "",
            })
    return descriptions
