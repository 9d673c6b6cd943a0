"""Shared fixtures for the schema validator tests."""

import json
import logging
from pathlib import Path

import pytest
import yaml

from mongo_schema_validator.file_io.document_loader import DocumentLoader
from mongo_schema_validator.utils.logging_utils import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so captured streams do not leak between tests."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def person_schema():
    """A schema exercising most object keywords."""
    return {
        "bsonType": "object",
        "title": "Person",
        "required": ["name", "age"],
        "minProperties": 2,
        "maxProperties": 6,
        "properties": {
            "name": {"bsonType": "string", "minLength": 1, "maxLength": 40},
            "age": {"bsonType": "int", "minimum": 0, "maximum": 150},
            "score": {"bsonType": ["double", "int"]},
            "tags": {"bsonType": "array", "items": {"bsonType": "string"}, "uniqueItems": True},
            "address": {
                "bsonType": "object",
                "required": ["city"],
                "properties": {"city": {"bsonType": "string"}},
            },
        },
        "patternProperties": {"^x_": {"bsonType": "string"}},
        "additionalProperties": False,
        "dependencies": {"score": ["tags"]},
    }


@pytest.fixture
def loader():
    return DocumentLoader(cache_enabled=False)


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_yaml(tmp_path: Path):
    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
