"""Shared pytest fixtures for json2ts tests."""

import pytest
import tempfile
from pathlib import Path

from json2ts.config.loader import ConversionConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def default_config():
    """Interfaces, no prefix, nulls rendered as optional `any`."""
    return ConversionConfig()


@pytest.fixture
def union_null_config():
    return ConversionConfig(union_null=True)


@pytest.fixture
def sample_json():
    """Return a representative API response."""
    return """{
  "id": 42,
  "name": "Acme Corp",
  "verified": true,
  "logo": null,
  "tags": ["b2b", "saas"],
  "billing_address": {"street": "1 Main St", "city": "Springfield"},
  "employees": [
    {"name": "John", "age": 25},
    {"name": "Jane", "age": 24, "manager": true}
  ]
}"""


@pytest.fixture
def sample_json_file(temp_dir, sample_json):
    """Create a JSON file with the sample response."""
    json_file = temp_dir / "response.json"
    json_file.write_text(sample_json)
    return json_file
