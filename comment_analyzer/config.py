# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `comments.yaml`, validating required keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


ENDPOINT_ENV_VAR = "COMMENT_ANALYZER_ENDPOINT"


@dataclass(frozen=True)
class ParsingConfig:
    """
    Configuration for the comment-line parser.

    Attributes:
        platforms:
            Ordered platform catalog used for detection and stripping. None
            means the built-in catalog.
        platform_match:
            Which catalog entry wins when a line mentions several platforms:
                - `first`: earliest entry in catalog order
                - `last`: latest entry in catalog order
    """

    platforms: tuple[str, ...] | None = None
    platform_match: str = "first"


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Configuration for the external analysis service.

    Attributes:
        endpoint:
            URL that accepts `POST {"comments": [...]}`.
        timeout:
            Request timeout in seconds.
        results:
            Optional file that receives the service response.
    """

    endpoint: str = "http://localhost:5000/analyze"
    timeout: float = 30.0
    results: Path | None = None


@dataclass(frozen=True)
class CommentsConfig:
    """
    Parsed configuration for a comment analyzer run.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths and glob patterns are resolved against.
        include:
            Glob patterns for comment source files to include.
        exclude:
            Glob patterns for comment source files to exclude.
        outfile:
            Target path (.yaml/.yml/.json) for the parsed comment batch.
        parsing:
            Settings used by the line parser.
        analysis:
            Settings used by the `submit` step.
    """

    config_path: Path
    base_dir: Path
    include: list[str]
    exclude: list[str]
    outfile: Path
    parsing: ParsingConfig
    analysis: AnalysisConfig


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    return Path.cwd() / "comments.yaml"


def _parse_patterns(value: Any, *, key: str, required: bool) -> list[str]:
    """
    Parse a glob pattern option that may be a string or a list of strings.

    Raises:
        ConfigError:
            If the value has the wrong type or contains empty patterns.
    """

    if value is None:
        if required:
            raise ConfigError(f"'{key}' must be a non-empty string or list of strings")
        return []

    if isinstance(value, str):
        value = [value]

    if not isinstance(value, list) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string or list of strings")

    patterns: list[str] = []
    for idx, item in enumerate(value, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"'{key}' entries must be non-empty strings (problem at index {idx})")
        patterns.append(item.strip())

    return patterns


def _parse_platforms(value: Any) -> tuple[str, ...] | None:
    """
    Parse and validate the optional `platforms` catalog.

    Args:
        value:
            Raw YAML value.

    Returns:
        The ordered catalog, or None if the section is missing.

    Raises:
        ConfigError:
            If the catalog is not a non-empty list of unique, non-empty strings.
    """

    if value is None:
        return None

    if not isinstance(value, list) or not value:
        raise ConfigError("'platforms' must be a non-empty list if provided")

    platforms: list[str] = []
    for idx, item in enumerate(value, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"Platform name must be a non-empty string (problem at index {idx})")
        name = item.strip()
        if name in platforms:
            raise ConfigError(f"Duplicate platform name '{name}' (problem at index {idx})")
        platforms.append(name)

    return tuple(platforms)


def _parse_parsing(value: Any, platforms: tuple[str, ...] | None) -> ParsingConfig:
    """
    Parse and validate the optional `parsing` section.

    Args:
        value:
            Raw YAML value for the `parsing` key.
        platforms:
            Already validated platform catalog.

    Returns:
        A ParsingConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return ParsingConfig(platforms=platforms)

    if not isinstance(value, dict):
        raise ConfigError("'parsing' must be a mapping if provided")

    platform_match = value.get("platform_match", ParsingConfig.platform_match)
    if not isinstance(platform_match, str) or not platform_match.strip():
        raise ConfigError("parsing.platform_match must be a non-empty string")

    platform_match_norm = platform_match.strip().lower()
    if platform_match_norm not in {"first", "last"}:
        raise ConfigError("parsing.platform_match must be either 'first' or 'last'")

    return ParsingConfig(platforms=platforms, platform_match=platform_match_norm)


def _parse_analysis(value: Any, *, base_dir: Path) -> AnalysisConfig:
    """
    Parse and validate the optional `analysis` section.

    The endpoint can be overridden by the `COMMENT_ANALYZER_ENDPOINT`
    environment variable (e.g. from a `.env` file).

    Args:
        value:
            Raw YAML value for the `analysis` key.
        base_dir:
            Directory the `results` path is resolved against.

    Returns:
        An AnalysisConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        value = {}

    if not isinstance(value, dict):
        raise ConfigError("'analysis' must be a mapping if provided")

    endpoint = os.environ.get(ENDPOINT_ENV_VAR) or value.get("endpoint", AnalysisConfig.endpoint)
    timeout = value.get("timeout", AnalysisConfig.timeout)
    results = value.get("results")

    if not isinstance(endpoint, str) or not endpoint.strip():
        raise ConfigError("analysis.endpoint must be a non-empty string")
    if not endpoint.strip().lower().startswith(("http://", "https://")):
        raise ConfigError("analysis.endpoint must be an http(s) URL")

    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ConfigError("analysis.timeout must be a number")
    if timeout <= 0:
        raise ConfigError("analysis.timeout must be > 0")

    if results is not None and (not isinstance(results, str) or not results.strip()):
        raise ConfigError("analysis.results must be a non-empty string if provided")

    return AnalysisConfig(
        endpoint=endpoint.strip(),
        timeout=float(timeout),
        results=(base_dir / results.strip()).resolve() if isinstance(results, str) else None,
    )


def load_config(path: Path) -> CommentsConfig:
    """
    Load and validate a `comments.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated CommentsConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            "No comments.yaml found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("include", "outfile") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    include = _parse_patterns(raw.get("include"), key="include", required=True)
    exclude = _parse_patterns(raw.get("exclude"), key="exclude", required=False)

    outfile = raw.get("outfile")
    if not isinstance(outfile, str) or not outfile.strip():
        raise ConfigError("'outfile' must be a non-empty string")
    if Path(outfile.strip()).suffix.lower() not in {".yaml", ".yml", ".json"}:
        raise ConfigError("'outfile' must end in .yaml, .yml or .json")

    platforms = _parse_platforms(raw.get("platforms"))
    parsing = _parse_parsing(raw.get("parsing"), platforms)

    # Interpret outfile and glob patterns relative to config file location.
    base_dir = path.parent.resolve()
    analysis = _parse_analysis(raw.get("analysis"), base_dir=base_dir)

    return CommentsConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        include=include,
        exclude=exclude,
        outfile=(base_dir / outfile.strip()).resolve(),
        parsing=parsing,
        analysis=analysis,
    )
