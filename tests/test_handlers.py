import os

import pytest

from json_csv_converter import config, handlers
from json_csv_converter.handlers import convert_handler, is_downloadable, load_json_with_preview


@pytest.fixture
def served_from(monkeypatch):
    def _serve(*roots):
        monkeypatch.setattr(handlers, "download_roots", lambda: [str(root) for root in roots])
    return _serve


def test_upload_shows_preview_and_suggests_output(write_json, publications, monkeypatch):
    monkeypatch.setattr(config, "EXPORT_DIR", "exports")
    source = write_json(publications + publications, name="pubs.json")

    status, count, preview, output_update = load_json_with_preview(str(source), "")

    assert status == "Successfully loaded. Found 8 columns."
    assert count == "Documents: 4"
    assert len(preview) == config.PREVIEW_LIMIT
    assert preview[0]["publication.title"] == "Data Integration in Higher Education"
    assert output_update["value"] == os.path.join("exports", "pubs.csv")


def test_upload_keeps_existing_output(write_json):
    source = write_json({"a": 1})
    _, _, _, output_update = load_json_with_preview(str(source), "mine.csv")
    assert "value" not in output_update


def test_upload_reports_errors(write_json):
    source = write_json("[1, 2]")
    status, count, preview, _ = load_json_with_preview(str(source))
    assert status.startswith("Error loading JSON")
    assert count == ""
    assert preview is None


def test_upload_without_file():
    status, _, preview, _ = load_json_with_preview(None)
    assert status == "No file uploaded."
    assert preview is None


def test_convert_from_form(write_json, tmp_path, served_from):
    served_from(tmp_path)
    source = write_json([{"a": 1}, {"a": 2}])
    out = tmp_path / "form.csv"

    path, log = convert_handler(str(source), str(out), ";", False, "")

    assert path == str(out)
    assert "Rows processed: 2" in log
    assert out.read_text(encoding="utf-8") == "a\n1\n2\n"


def test_convert_requires_fields(write_json):
    path, log = convert_handler(None, "out.csv", ",", False)
    assert path is None
    assert "input JSON file" in log

    path, log = convert_handler(str(write_json({"a": 1})), "  ", ",", False)
    assert path is None
    assert "output CSV path" in log


def test_existing_output_needs_overwrite(write_json, tmp_path, served_from):
    served_from(tmp_path)
    source = write_json({"a": 1})
    out = tmp_path / "form.csv"
    out.write_text("old", encoding="utf-8")

    path, log = convert_handler(str(source), str(out), ",", False, "earlier line")
    assert path is None
    assert log.startswith("earlier line\n")
    assert "already exists" in log
    assert out.read_text(encoding="utf-8") == "old"

    path, log = convert_handler(str(source), str(out), ",", True, log)
    assert path == str(out)
    assert "Removed existing output" in log
    assert out.read_text(encoding="utf-8") == "a\n1\n"


def test_convert_reports_validation_failure(tmp_path):
    bad = tmp_path / "data.txt"
    bad.write_text("{}", encoding="utf-8")
    path, log = convert_handler(str(bad), str(tmp_path / "out.csv"), ",", False)
    assert path is None
    assert "Validation failed" in log


def test_convert_reports_conversion_errors(write_json, tmp_path):
    source = write_json([])
    out = tmp_path / "out.csv"
    path, log = convert_handler(str(source), str(out), "\\t", False)
    assert path is None
    assert "Error during conversion" in log
    assert not out.exists()


def test_output_outside_served_folders_is_not_offered(write_json, tmp_path, served_from):
    served_from(tmp_path / "served")
    source = write_json({"a": 1})
    out = tmp_path / "elsewhere" / "form.csv"

    path, log = convert_handler(str(source), str(out), ",", False)

    assert path is None
    assert "Conversion complete" in log
    assert "Download unavailable" in log
    assert out.exists()


def test_is_downloadable(tmp_path, served_from):
    served_from(tmp_path / "served")
    assert is_downloadable(tmp_path / "served" / "a.csv")
    assert is_downloadable(tmp_path / "served" / "nested" / ".." / "b.csv")
    assert not is_downloadable(tmp_path / "served-other" / "a.csv")
    assert not is_downloadable(tmp_path / "a.csv")


def test_broken_json_with_json_extension_is_reported(write_json, tmp_path):
    source = write_json("{broken")
    out = tmp_path / "out.csv"
    path, log = convert_handler(str(source), str(out), ",", False)
    assert path is None
    assert "Error during conversion" in log
    assert "Invalid JSON" in log
    assert not out.exists()
