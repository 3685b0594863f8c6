"""Shared fixtures: an isolated typstgen config directory and option builders."""

from pathlib import Path

import pytest
from loguru import logger

from typstgen.contexts.configuration.config_resolver import ResolvedOptions
from typstgen.contexts.templating.template_source import BuiltinReport

TEST_ORCID = "0000-0002-1825-0097"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by setup_logger so later tests never write to closed streams."""
    yield
    logger.remove()


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch) -> Path:
    """Empty typstgen config directory, selected through TYPSTGEN_CONFIG_DIR."""
    directory = tmp_path / "config" / "typstgen"
    directory.mkdir(parents=True)
    monkeypatch.setenv("TYPSTGEN_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def templates_dir(config_dir: Path) -> Path:
    directory = config_dir / "templates"
    directory.mkdir()
    return directory


@pytest.fixture
def make_options():
    """Build ResolvedOptions with test values, overriding selected fields."""

    def _make(**overrides) -> ResolvedOptions:
        values = {
            "output_name": "output",
            "template": BuiltinReport(),
            "author": "John Doe",
            "orcid": TEST_ORCID,
            "lang": "en",
            "email": "john.doe@example.com",
            "lib_file_path": "lib.typ",
            "debug": False,
        }
        values.update(overrides)
        return ResolvedOptions(**values)

    return _make
