"""Shared test fixtures for lincol."""

from __future__ import annotations

from pathlib import Path

import pytest

from lincol import Positions, from_path, from_str

FIXTURES_DIR = Path(__file__).parent / "fixtures"
EXAMPLE_YAML = FIXTURES_DIR / "example.yml"
EXAMPLE_JSON = FIXTURES_DIR / "example.json"

NESTED_YAML = """\
foo:
    - bar: baz
      boom: true
"""


@pytest.fixture
def nested_positions() -> Positions:
    return from_str(NESTED_YAML)


@pytest.fixture
def example_yaml_positions() -> Positions:
    return from_path(EXAMPLE_YAML)


@pytest.fixture
def example_json_positions() -> Positions:
    return from_path(EXAMPLE_JSON)
