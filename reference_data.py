"""
Reference data store: read-only access to the static JSON files.

Every call re-reads its file from DATA_DIR. The files are small and nothing
here is cached, so edits to the data show up on the next request.

Files:
  1. subfield_datas.json: list of field/subfield records
  2. test_datas.json    : quiz definition, passed through untouched
  3. majors_scores.json : {major: {category: weight}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from flask import current_app, has_app_context

import config

logger = logging.getLogger(__name__)

SUBFIELD_DATA_FILE = "subfield_datas.json"
TEST_DATA_FILE = "test_datas.json"
MAJORS_SCORES_FILE = "majors_scores.json"

ALL_DATA_FILES = (SUBFIELD_DATA_FILE, TEST_DATA_FILE, MAJORS_SCORES_FILE)


class DataFileError(Exception):
    """A reference data file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def data_dir() -> Path:
    """Return the active data directory (app config first, then module default)."""
    if has_app_context():
        return Path(current_app.config.get("DATA_DIR", config.DATA_DIR))
    return config.DATA_DIR


def _load_json(filename: str, directory: Path | None = None) -> Any:
    path = (directory or data_dir()) / filename
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataFileError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise DataFileError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e


def load_subfields(directory: Path | None = None) -> list[dict]:
    """Return every SubfieldRecord. Non-dict entries are dropped."""
    raw = _load_json(SUBFIELD_DATA_FILE, directory)
    if not isinstance(raw, list):
        raise DataFileError((directory or data_dir()) / SUBFIELD_DATA_FILE,
                            "expected a JSON array of records")
    return [item for item in raw if isinstance(item, dict)]


def read_test_data(directory: Path | None = None) -> Any:
    return _load_json(TEST_DATA_FILE, directory)


def load_major_weights(directory: Path | None = None) -> dict[str, dict[str, float]]:
    """Return the major -> category -> weight table, in file order."""
    raw = _load_json(MAJORS_SCORES_FILE, directory)
    if not isinstance(raw, dict):
        raise DataFileError((directory or data_dir()) / MAJORS_SCORES_FILE,
                            "expected a JSON object keyed by major")
    weights: dict[str, dict[str, float]] = {}
    for major, row in raw.items():
        weights[major] = row if isinstance(row, dict) else {}
    return weights


def check_data_files(directory: Path | None = None) -> dict[str, str]:
    """Parse every data file and report {filename: "ok" | error}."""
    status: dict[str, str] = {}
    for filename in ALL_DATA_FILES:
        try:
            _load_json(filename, directory)
            status[filename] = "ok"
        except DataFileError as e:
            logger.warning("Data file check failed: %s", e)
            status[filename] = e.reason
    return status
