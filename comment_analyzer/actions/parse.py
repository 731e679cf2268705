# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Comment parsing action.

This action reads comment sources (pasted text on stdin, or files matched by the
configured include/exclude patterns), decomposes every line into
`{platform, username, text}` and writes the resulting batch to `outfile`.

Records without text are dropped. Source order and line order are preserved.
"""

import argparse
import fnmatch
import glob
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from comment_analyzer.cli_io import confirm_overwrite
from comment_analyzer.comments.line_parser import LineCommentParser, ParsedComment, parse_comment_block
from comment_analyzer.comments.registry import COMMENT_PARSING_VERSION, make_line_parser, read_comment_source
from comment_analyzer.config import ConfigError, CommentsConfig
from comment_analyzer.hash_utils import comment_fingerprint, md5_file
from comment_analyzer.yaml_io import write_document


STDIN_SOURCE = "<stdin>"


@dataclass(frozen=True)
class ParseAction:
    """
    `parse` subcommand.

    Turns raw comment sources into a normalized comment batch.
    """

    name: str = "parse"
    help: str = "Parse comment sources into a comment batch"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `parse` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "inputs",
            nargs="*",
            help="Comment source files (default: files matched by 'include'/'exclude')",
        )
        parser.add_argument(
            "--stdin",
            action="store_true",
            help="Read pasted comments from standard input instead of files",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Overwrite an existing outfile without prompting",
        )

    def run(self, args: argparse.Namespace, config: CommentsConfig | None) -> None:
        """
        Execute comment parsing.

        Raises:
            ConfigError:
                If no input can be found, explicit inputs are missing, or the
                outfile may not be overwritten.
        """

        if config is None:
            raise RuntimeError("ParseAction requires a config, but none was provided")

        line_parser = make_line_parser(config.parsing)

        sources: list[dict[str, Any]] = []
        comments: list[dict[str, Any]] = []

        if args.stdin:
            records = parse_comment_block(sys.stdin.read(), line_parser)
            sources.append({"path": STDIN_SOURCE, "status": "ok", "comments": len(records)})
            comments.extend(self._comment_entries(records, STDIN_SOURCE))
        else:
            input_files = self._resolve_inputs(config, list(args.inputs or []))
            if not input_files:
                print("No comment source files found.")
                return

            for input_path in input_files:
                source, records = self._parse_one_file(config, input_path, line_parser)
                sources.append(source)
                comments.extend(self._comment_entries(records, source["path"]))

        if not confirm_overwrite(config.outfile, force=bool(args.force)):
            print("Aborted.")
            return

        payload: dict[str, Any] = {
            "schema_version": 1,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "comment_parsing_version": COMMENT_PARSING_VERSION,
            "config": {
                "path": self._rel_posix(config.base_dir, config.config_path),
            },
            "parsing": {
                "platforms": list(line_parser.platforms),
                "platform_match": line_parser.platform_match,
            },
            "sources": sources,
            "comments": comments,
        }
        write_document(config.outfile, payload)

        failed = sum(1 for s in sources if s.get("status") == "failed")
        print(
            f"Parsed {len(comments)} comment(s) from {len(sources)} source(s), failed {failed}. "
            f"Wrote batch: {config.outfile}"
        )

    def _resolve_inputs(self, config: CommentsConfig, explicit: list[str]) -> list[Path]:
        """
        Determine the source files to parse.

        Explicit paths are taken as given (relative to the current directory) and
        must exist. Otherwise the configured patterns are used.
        """

        if not explicit:
            return self._discover_input_files(config)

        paths: list[Path] = []
        for raw in explicit:
            p = Path(raw)
            if not p.is_file():
                raise ConfigError(f"Comment source not found: {p}")
            paths.append(p.resolve())
        return paths

    def _discover_input_files(self, config: CommentsConfig) -> list[Path]:
        """
        Find comment source files based on include/exclude patterns.

        Patterns are resolved relative to the directory containing the YAML
        configuration.

        Returns:
            Sorted list of paths to comment source files.
        """

        base_dir = config.base_dir

        paths: list[Path] = []
        for pat in config.include:
            include = self._normalize_glob_pattern(pat)
            include_glob = str((base_dir / include).as_posix())
            matches = glob.glob(include_glob, recursive=True)
            paths.extend(Path(p) for p in matches)

        if config.exclude:
            exclude_norms = [self._normalize_glob_pattern(p) for p in config.exclude]
            paths = [
                p
                for p in paths
                if not any(
                    fnmatch.fnmatch(self._rel_posix(base_dir, p), ex)
                    for ex in exclude_norms
                )
            ]

        # Never read our own outputs back in as sources.
        generated = {config.outfile.resolve()}
        if config.analysis.results is not None:
            generated.add(config.analysis.results.resolve())
        paths = [p for p in paths if p.is_file() and p.resolve() not in generated]
        return sorted({p.resolve() for p in paths})

    def _parse_one_file(
        self,
        config: CommentsConfig,
        input_path: Path,
        line_parser: LineCommentParser,
    ) -> tuple[dict[str, Any], list[ParsedComment]]:
        """
        Parse one source file.

        Returns:
            A source entry for the batch file and the parsed records. Sources
            that fail to parse are reported with `status: failed` and no records.
        """

        rel_path = self._rel_posix(config.base_dir, input_path)
        source: dict[str, Any] = {"path": rel_path, "md5": md5_file(input_path)}

        try:
            records = read_comment_source(input_path, line_parser)
        except ConfigError as exc:
            print(f"WARNING: Skipping comment source due to parse error: {rel_path}\n{exc}")
            source.update({"status": "failed", "error": str(exc), "comments": 0})
            return source, []

        print(f"Parsed: {rel_path} ({len(records)} comment(s))")
        source.update({"status": "ok", "comments": len(records)})
        return source, records

    def _comment_entries(self, records: list[ParsedComment], source: str) -> list[dict[str, Any]]:
        return [
            {"id": comment_fingerprint(r), "source": source, **r.to_dict()}
            for r in records
        ]

    def _normalize_glob_pattern(self, pattern: str) -> str:
        p = pattern.strip().replace("\\", "/")
        while p.startswith("./"):
            p = p[2:]
        return p

    def _rel_posix(self, base_dir: Path, path: Path) -> str:
        """Return `path` relative to `base_dir` (POSIX style) when possible."""

        try:
            return path.resolve().relative_to(base_dir.resolve()).as_posix()
        except ValueError:
            return path.resolve().as_posix()
