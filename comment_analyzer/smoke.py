# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Smoke-test helpers.

Run via:

    poetry run python -m comment_analyzer.smoke --line "TikTok Sarah too pricey"

This only validates config loading and line parsing (no service calls).
"""

import argparse
import json
from pathlib import Path

from comment_analyzer.comments.registry import make_line_parser
from comment_analyzer.config import ConfigError, load_config


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Comment Analyzer smoke test")
    parser.add_argument(
        "--config",
        default="comments.yaml",
        help="Path to comments.yaml (default: ./comments.yaml)",
    )
    parser.add_argument(
        "--line",
        action="append",
        default=[],
        help="Comment line to parse and print as JSON (repeatable)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config_path = Path(str(args.config))

    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        print(f"CONFIG ERROR: {exc}")
        return 2

    line_parser = make_line_parser(cfg.parsing)

    print(f"Config: {cfg.config_path}")
    print(f"Base dir: {cfg.base_dir}")
    print(f"Include: {', '.join(cfg.include)}")
    print(f"Outfile: {cfg.outfile}")
    print(f"Platforms: {', '.join(line_parser.platforms)} (match: {line_parser.platform_match})")
    print(f"Analysis endpoint: {cfg.analysis.endpoint}")

    for line in args.line:
        print(json.dumps(line_parser.parse(line).to_dict(), ensure_ascii=False))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
