# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `comments.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from comment_analyzer.config import ConfigError, CommentsConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template comments.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Recursive glob patterns for comment source files to include/exclude",
            "# Supported formats: .txt, .md, .json, .docx, .pdf, .odt",
            "# 'include' can be a string or a list of strings.",
            'include: ["comments/**/*.txt", "comments/**/*.json", "comments/**/*.docx", "comments/**/*.pdf"]',
            "# 'exclude' is optional and can be a string or a list of strings.",
            '# exclude: "private/**"',
            "",
            "# Parsed comment batch (.yaml, .yml or .json)",
            "outfile: parsed.yaml",
            "",
            "# Platform catalog (optional; defaults shown)",
            "# Names are matched case-sensitively. Every name is stripped from the",
            "# comment text, whether or not it was chosen as the platform.",
            "# platforms: [Facebook, TikTok, X, Instagram, YouTube, LinkedIn]",
            "",
            "# Parsing options (optional; defaults shown)",
            "# parsing:",
            "#   # Which catalog entry wins when a line mentions several platforms:",
            "#   #   first: earliest entry in catalog order",
            "#   #   last: latest entry in catalog order",
            "#   platform_match: first",
            "",
            "# Analysis service (optional; defaults shown)",
            "# The endpoint can also be set via COMMENT_ANALYZER_ENDPOINT (e.g. in .env).",
            "analysis:",
            "  endpoint: http://localhost:5000/analyze",
            "  timeout: 30",
            "  # Optional: store the service response",
            "  # results: results.yaml",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="comments.yaml",
            help="Destination path for the template (default: ./comments.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: CommentsConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        self._write_template(dest, force=bool(args.force))
        print(f"Wrote template config to: {dest}")

    def _write_template(self, dest: Path, *, force: bool) -> None:
        if dest.exists() and not force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
