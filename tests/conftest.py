"""Shared test fixtures for checksync tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def values() -> dict:
    """A task value bag with no progress recorded yet."""
    return {"description": None, "status": None, "percent_complete": None}


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file and point CHECKSYNC_CONFIG at it."""
    path = tmp_path / "checksync.yaml"
    config = {
        "text_key": "description",
        "status_key": "status",
        "percent_key": "percent_complete",
    }
    path.write_text(yaml.dump(config, default_flow_style=False), encoding="utf-8")

    os.environ["CHECKSYNC_CONFIG"] = str(path)
    yield path
    # Cleanup
    if "CHECKSYNC_CONFIG" in os.environ:
        del os.environ["CHECKSYNC_CONFIG"]
