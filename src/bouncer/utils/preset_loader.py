# src/bouncer/utils/preset_loader.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from bouncer.core.errors import ConfigError


def _read_mapping(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Preset root must be a mapping: {path}")
    return data


def load_preset(path: str | Path, _chain: Tuple[Path, ...] = ()) -> Dict[str, Any]:
    """
    Read a game preset into a flat mapping of GameConfig keys. A preset may
    start from other presets, resolved relative to its own directory:

      include:
        - default.yaml
      interval_between_balls: 500

    Includes are applied in order, each one resolving its own includes
    first, then the preset's keys override them.
    """
    path = Path(path).expanduser().resolve()
    if path in _chain:
        cycle = " -> ".join(p.name for p in (*_chain, path))
        raise ConfigError(f"Preset include cycle: {cycle}")

    data = _read_mapping(path)
    includes = data.pop("include", None) or []
    if not isinstance(includes, list):
        raise ConfigError(f"'include' must be a list in {path}")

    values: Dict[str, Any] = {}
    for rel in includes:
        if not isinstance(rel, str):
            raise ConfigError(f"include entries must be file names, got {rel!r} in {path}")
        values.update(load_preset(path.parent / rel, (*_chain, path)))
    values.update(data)
    return values
