from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List

import yaml

from src.models.configs import IndexConfig


def _load_structured_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    elif ext == ".toml":
        data = tomllib.loads(text)
    elif ext == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported config format '{ext}' for {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return data


def load_index_config(path: Path) -> IndexConfig:
    raw = _load_structured_file(path)
    return IndexConfig.model_validate(raw)


def load_records(path: Path) -> List[Any]:
    """Read the records to index from a JSON array, JSONL or YAML list file."""

    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext == ".jsonl":
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    if ext in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    elif ext == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported records format '{ext}' for {path}")

    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Records file {path} must contain a list at the top level")
    return data


__all__ = ["load_index_config", "load_records"]
