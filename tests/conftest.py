"""Shared pytest fixtures for displaykit tests."""

from __future__ import annotations

import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

SAMPLE_MODELS = '''\
from datetime import date, datetime

from pydantic import BaseModel, Field


class Person(BaseModel):
    PersonId: int
    FirstName: str
    LastName: str
    EmailAddress: str
    BirthDate: date | None = None
    IsActive: bool = True
    LastLogin: datetime | None = None
    Nickname: str = Field(default="", title="Known As")


class Customer(Person):
    LoyaltyPoints: int = 0


VERSION = "1"
'''


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with a pyproject.toml, used as CWD."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'sample'\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DISPLAYKIT_CONFIG", raising=False)
    monkeypatch.delenv("DISPLAYKIT_ENVIRONMENT", raising=False)
    return tmp_path


@pytest.fixture
def sample_models(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[str]:
    """Importable ``sample_models`` module inside the temp project.

    Yields the module name.
    """
    (project_root / "sample_models.py").write_text(SAMPLE_MODELS)
    monkeypatch.syspath_prepend(str(project_root))
    yield "sample_models"
    sys.modules.pop("sample_models", None)
