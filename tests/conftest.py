"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from valrules.schema import SchemaDef, build_rules, load_schema


@pytest.fixture
def fixtures_path() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def chores_schema_path(fixtures_path: Path) -> Path:
    """Schema for the add-chore form."""
    return fixtures_path / "chores.toml"


@pytest.fixture
def chores_schema(chores_schema_path: Path) -> SchemaDef:
    return load_schema(chores_schema_path)


@pytest.fixture
def chores_rules(chores_schema: SchemaDef):
    return build_rules(chores_schema)
