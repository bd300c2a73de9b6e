"""Shared test fixtures: fixture template files, in-memory fakes."""

from pathlib import Path

import pytest

from deployparams.fakes import FakeDeclarationSource, FakeFileSystem

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "template"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Writable copy of the fixture template files."""
    target = tmp_path / "template"
    target.mkdir()
    for path in FIXTURES_DIR.iterdir():
        (target / path.name).write_text(
            path.read_text(encoding="utf-8"), encoding="utf-8"
        )
    return target


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def fake_declarations() -> FakeDeclarationSource:
    return FakeDeclarationSource()
