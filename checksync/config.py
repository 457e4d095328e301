"""Field-key configuration for checksync.

Configured via a YAML file (CHECKSYNC_CONFIG, default ~/.checksync.yaml):

    text_key: description
    status_key: status              # null disables status updates
    percent_key: percent_complete   # null disables percent updates
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from checksync.fields import IntegerField, StatusField, TextField
from checksync.fileio import read_yaml
from checksync.progress import ChecklistConstraint

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"text_key", "status_key", "percent_key"}


@dataclass
class SyncConfig:
    text_key: str = "description"
    status_key: str | None = "status"
    percent_key: str | None = "percent_complete"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> SyncConfig:
        if not d or not isinstance(d, dict):
            return cls()
        defaults = cls()
        return cls(
            text_key=str(d.get("text_key", defaults.text_key)),
            status_key=d.get("status_key", defaults.status_key) or None,
            percent_key=d.get("percent_key", defaults.percent_key) or None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "text_key": self.text_key,
            "status_key": self.status_key,
            "percent_key": self.percent_key,
        }


def validate_config(d: dict[str, Any]) -> list[str]:
    """Validate a config mapping and return list of errors (empty if valid)."""
    if not isinstance(d, dict):
        return ["Config must be a mapping"]
    errors = []
    if "text_key" in d and (not isinstance(d["text_key"], str) or not d["text_key"].strip()):
        errors.append("text_key must be a non-empty string")
    for key in ("status_key", "percent_key"):
        if key in d and d[key] is not None and not isinstance(d[key], str):
            errors.append(f"{key} must be a string or null")
    if errors:
        return errors

    cfg = SyncConfig.from_dict(d)
    used = [k for k in (cfg.text_key, cfg.status_key, cfg.percent_key) if k]
    if len(used) != len(set(used)):
        errors.append("text_key, status_key and percent_key must be distinct")
    return errors


def config_path() -> Path:
    return Path(os.environ.get("CHECKSYNC_CONFIG", str(Path.home() / ".checksync.yaml"))).expanduser()


def load_config(path: Path | None = None) -> SyncConfig:
    """Load config from YAML; a missing or empty file yields defaults."""
    if path is None:
        path = config_path()
    data = read_yaml(path)
    errors = validate_config(data)
    if errors:
        raise ValueError(f"Invalid config {path}: " + "; ".join(errors))
    for key in sorted(set(data) - KNOWN_KEYS):
        logger.warning("Ignoring unknown config key %r in %s", key, path)
    cfg = SyncConfig.from_dict(data)
    logger.info("Loaded config from %s: %s", path, cfg.to_dict())
    return cfg


def build_constraint(cfg: SyncConfig) -> ChecklistConstraint:
    return ChecklistConstraint(
        status_field=StatusField(cfg.status_key) if cfg.status_key else None,
        percent_field=IntegerField(cfg.percent_key) if cfg.percent_key else None,
    )


def build_text_field(cfg: SyncConfig) -> TextField:
    return TextField(cfg.text_key, constraints=[build_constraint(cfg)])
