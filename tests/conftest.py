import json

import pytest

PUBLICATIONS = [
    {
        "id": 1,
        "author": "Beatriz Solórzano",
        "department": "Scientometrics",
        "publication": {
            "title": "Data Integration in Higher Education",
            "year": 2023,
            "journal": "Journal of Research Analytics",
        },
        "keywords": ["Java", "JSON", "CSV", "Automation"],
        "citations": 15,
    },
    {
        "id": 2,
        "author": "Juan Pérez",
        "department": "Scientometrics",
        "publication": {
            "title": "Automation of Scientific Reports",
            "year": 2024,
            "journal": "University Science Review",
        },
        "keywords": ["Scrum", "Software Engineering"],
        "citations": 8,
    },
]


@pytest.fixture
def publications():
    return json.loads(json.dumps(PUBLICATIONS))


@pytest.fixture
def write_json(tmp_path):
    """Write a document (or raw text) to a .json file under tmp_path."""
    def _write(content, name="input.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
