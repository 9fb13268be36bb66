"""Load API description documents (JSON or YAML) and recognize OpenAPI ones."""

from pathlib import Path

import yaml

from openapi_typegen.errors import DocumentError


def load_document(file_path: Path) -> dict:
    """Read an OpenAPI document from disk.

    JSON is a subset of YAML, so both go through ``yaml.safe_load``.
    """
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(f"{file_path}: not valid JSON/YAML ({e})") from e

    if not isinstance(doc, dict):
        raise DocumentError(f"{file_path}: expected a mapping at the document root")
    return doc


def is_openapi(doc: dict) -> bool:
    """True when a loaded document carries an ``openapi`` or ``swagger`` version key."""
    return "openapi" in doc or "swagger" in doc
