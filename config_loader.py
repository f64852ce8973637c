"""Utilities for loading grader configuration overrides from JSON or YAML files."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from grader_config import GraderConfig

logger = logging.getLogger(__name__)

_DELAY_FIELDS = {"grade_delay_seconds", "regrade_delay_seconds"}


def _load_raw(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in config file {path}: {exc}") from exc
    raise ValueError(f"Unsupported config file type: {path.suffix}")


def _coerce_delay(key: str, value: Any) -> float:
    try:
        delay = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Config key {key!r} must be a number of seconds, got {value!r}") from None
    if not math.isfinite(delay) or delay < 0:
        raise ValueError(f"Config key {key!r} must be a finite, non-negative number")
    return delay


def _coerce_overrides(raw: Mapping[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(GraderConfig)}
    overrides: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            raise ValueError(f"Unknown config key: {key!r}")
        if key in _DELAY_FIELDS:
            overrides[key] = _coerce_delay(key, value)
        elif value is None:
            raise ValueError(f"Config key {key!r} must not be empty")
        else:
            overrides[key] = str(value)
    return overrides


def load_config(path: str | Path | None = None) -> GraderConfig:
    if path is None:
        return GraderConfig()

    path = Path(path)
    raw = _load_raw(path)
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("Config file must contain a mapping of settings")

    overrides = _coerce_overrides(raw)
    logger.info("loaded grader config from %s (%d overrides)", path, len(overrides))
    return replace(GraderConfig(), **overrides)
