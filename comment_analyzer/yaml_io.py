# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""YAML/JSON document I/O helpers.

Batch and result files are written as YAML unless the file name ends in
`.json`. YAML is a superset of JSON, so reading always goes through PyYAML.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from comment_analyzer.config import ConfigError


def read_yaml_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML (or JSON) file into a dictionary.

    Args:
        path:
            Document path.

    Returns:
        Parsed mapping.

    Raises:
        ConfigError:
            If the file cannot be read or does not contain a mapping.
    """

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML file '{path}': {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"YAML file must contain a mapping: {path}")

    return raw


def write_document(path: Path, payload: dict[str, Any]) -> None:
    """Write a mapping as JSON (`.json` suffix) or YAML (anything else)."""

    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() == ".json":
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    else:
        text = yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)

    path.write_text(text, encoding="utf-8")
