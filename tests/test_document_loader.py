"""
Tests for the gig document file adapter.
"""

import json
from datetime import date, datetime
from pathlib import Path

import pytest

from gigschedule.adapters.document_loader import GigDocumentLoader
from gigschedule.domain.exceptions import DocumentLoadError, GigScheduleError


class TestGigDocumentLoader:
    """Tests for GigDocumentLoader."""

    def test_load_json_document(self, tmp_path: Path):
        path = tmp_path / "gig.json"
        document = {"title": "Sales", "availability": {"schedule": []}}
        path.write_text(json.dumps(document), encoding="utf-8")

        assert GigDocumentLoader().load(path) == document

    def test_load_yaml_list_is_wrapped(self, tmp_path: Path):
        """A bare list of rows becomes the availability schedule."""
        path = tmp_path / "schedule.yml"
        path.write_text(
            "- day: Monday\n"
            "  hours: {start: '09:00', end: '17:00'}\n",
            encoding="utf-8",
        )

        document = GigDocumentLoader().load(path)

        assert document == {
            "availability": {
                "schedule": [{"day": "Monday", "hours": {"start": "09:00", "end": "17:00"}}]
            }
        }

    def test_empty_yaml_is_empty_document(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert GigDocumentLoader().load(path) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DocumentLoadError, match="Document not found"):
            GigDocumentLoader().load(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "gig.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="Invalid JSON"):
            GigDocumentLoader().load(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "gig.yaml"
        path.write_text("availability: [\n", encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="Invalid YAML"):
            GigDocumentLoader().load(path)

    def test_scalar_root_rejected(self, tmp_path: Path):
        """Errors are part of the application hierarchy."""
        path = tmp_path / "gig.json"
        path.write_text("42", encoding="utf-8")

        with pytest.raises(GigScheduleError, match="mapping or a list"):
            GigDocumentLoader().load(path)

    def test_dump_writes_readable_json(self, tmp_path: Path):
        """Dumped documents keep non-ASCII text and load back."""
        path = tmp_path / "out.json"
        document = {"title": "Télévendeur", "availability": {"schedule": []}}

        loader = GigDocumentLoader()
        loader.dump(document, path)

        assert "Télévendeur" in path.read_text(encoding="utf-8")
        assert loader.load(path) == document

    def test_dumps_dates_as_iso_strings(self):
        """Dates and datetimes from YAML timestamps become ISO strings."""
        document = {"createdAt": date(2025, 6, 23), "updatedAt": datetime(2025, 6, 23, 7, 18, 40)}

        rendered = json.loads(GigDocumentLoader().dumps(document))

        assert rendered == {"createdAt": "2025-06-23", "updatedAt": "2025-06-23T07:18:40"}

    def test_unserializable_document_leaves_target_untouched(self, tmp_path: Path):
        """A document JSON cannot represent is reported before the file is opened."""
        path = tmp_path / "out.json"
        path.write_text("previous content", encoding="utf-8")

        with pytest.raises(DocumentLoadError, match="cannot be written as JSON"):
            GigDocumentLoader().dump({"blob": object()}, path)

        assert path.read_text(encoding="utf-8") == "previous content"
