"""
File adapter for gig documents exported from the gig API.
"""

import json
import logging
from datetime import date, time
from pathlib import Path
from typing import Any, Dict

import yaml

from ..domain.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> str:
    """Serialize the dates and times PyYAML reads from unquoted timestamps."""
    if isinstance(value, (date, time)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class GigDocumentLoader:
    """
    Loads gig documents from JSON or YAML files.

    A file may hold a full gig document or just a list of schedule rows;
    a bare list is wrapped as ``{"availability": {"schedule": [...]}}``.
    """

    YAML_SUFFIXES = {".yaml", ".yml"}

    def load(self, path: Path) -> Dict[str, Any]:
        """
        Load a gig document.

        Args:
            path: Path to a .json, .yaml or .yml file

        Returns:
            The gig document as a dict

        Raises:
            DocumentLoadError: If the file is missing, unreadable or invalid
        """
        if not path.exists():
            raise DocumentLoadError(f"Document not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in self.YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Could not read {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Invalid YAML in {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc

        if data is None:
            logger.debug("Document %s is empty", path)
            return {}

        if isinstance(data, list):
            return {"availability": {"schedule": data}}

        if not isinstance(data, dict):
            raise DocumentLoadError(
                f"Document {path} must contain a mapping or a list at the root level."
            )

        return data

    def dumps(self, document: Dict[str, Any]) -> str:
        """
        Render a document as indented JSON.

        Raises:
            DocumentLoadError: If the document holds values JSON cannot represent
        """
        try:
            return json.dumps(document, indent=2, ensure_ascii=False, default=_json_default)
        except (TypeError, ValueError) as exc:
            raise DocumentLoadError(f"Document cannot be written as JSON: {exc}") from exc

    def dump(self, document: Dict[str, Any], path: Path) -> None:
        """Write a document as indented UTF-8 JSON."""
        # render first so a bad document never truncates the target
        text = self.dumps(document)
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
                f.write("\n")
        except OSError as exc:
            raise DocumentLoadError(f"Could not write {path}: {exc}") from exc

        logger.info("Wrote normalized document to %s", path)
