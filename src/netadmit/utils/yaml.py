from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML at {path} is not parseable: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must be a mapping")
    return data
