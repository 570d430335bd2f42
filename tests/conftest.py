"""
Test fixtures for Major Finder.

Provides data_dir (a small reference dataset under tmp_path), app and client.
"""

from __future__ import annotations

import json
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))


SUBFIELDS = [
    {
        "title": "Engineering",
        "introduction": "Engineering intro.",
        "shortIntroduction": "Engineering short.",
        "subfields": ["Computer Science"],
        "way2place": ["Engineering"],
    },
    {
        "title": "Computer Science",
        "introduction": "Computer Science intro.",
        "shortIntroduction": "CS short.",
        "subfields": ["Artificial Intelligence", "Quantum Computing", "Data Science"],
        "way2place": ["Engineering", "Computer Science"],
    },
    {
        "title": "Artificial Intelligence",
        "introduction": "AI intro.",
        "shortIntroduction": "AI short.",
        "subfields": [],
        "way2place": ["Engineering", "Computer Science", "Artificial Intelligence"],
    },
    {
        "title": "Data Science",
        "introduction": "Data Science intro.",
        "subfields": [],
        "way2place": [],
    },
    {
        "title": "Data Science",
        "introduction": "Duplicate Data Science record.",
        "shortIntroduction": "Duplicate.",
        "subfields": [],
        "way2place": [],
    },
]

MAJOR_WEIGHTS = {
    "Artificial Intelligence": {"Analytical": 0.8, "Data": 0.7, "AI": 1.0},
    "Data Science": {"Analytical": 0.8, "Data": 1.0, "AI": 0.6},
    "Cybersecurity": {"Security": 1.0, "Analytical": 0.5},
    "Game Development": {"Creative": 1.0, "SoftwareDev": 0.8},
    "Hardware Design": {"Hardware": 1.0},
}

TEST_DATA = {
    "title": "Sample quiz",
    "questions": [
        {
            "question": "Pick one",
            "options": [
                {"text": "Numbers", "e": "[\"Data\", 500]"},
                {"text": "Models", "e": "[\"AI\", 410]"},
            ],
        },
    ],
}


def write_dataset(directory: Path, subfields=SUBFIELDS, weights=MAJOR_WEIGHTS, test_data=TEST_DATA) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "subfield_datas.json").write_text(json.dumps(subfields), encoding="utf-8")
    (directory / "majors_scores.json").write_text(json.dumps(weights), encoding="utf-8")
    (directory / "test_datas.json").write_text(json.dumps(test_data), encoding="utf-8")
    return directory


@pytest.fixture
def data_dir(tmp_path):
    """Reference data files for one test."""
    return write_dataset(tmp_path / "datas")


@pytest.fixture
def app(data_dir):
    """Create app pointed at the temporary dataset."""
    from app import create_app

    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
        "WTF_CSRF_ENABLED": False,
        "DATA_DIR": data_dir,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
