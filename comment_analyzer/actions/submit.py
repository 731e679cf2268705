# Comment Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Batch submission action.

Loads the comment batch written by `parse`, posts it to the configured analysis
service and prints per-platform sentiment counts. The raw results can be kept
in `analysis.results`.
"""

import argparse
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from comment_analyzer.analysis_client import AnalysisResult, submit_comments, summarize_by_platform
from comment_analyzer.comments.line_parser import ParsedComment, comment_from_mapping
from comment_analyzer.config import ConfigError, CommentsConfig
from comment_analyzer.yaml_io import read_yaml_mapping, write_document


@dataclass(frozen=True)
class SubmitAction:
    """
    `submit` subcommand.

    Sends the parsed comment batch to the external analysis service.
    """

    name: str = "submit"
    help: str = "Send the parsed comment batch to the analysis service"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `submit` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "--input",
            "-i",
            help="Comment batch to submit (default: the configured outfile)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only validate and count the batch, do not call the service",
        )

    def run(self, args: argparse.Namespace, config: CommentsConfig | None) -> None:
        """
        Execute the submission.

        Raises:
            ConfigError:
                If the batch file is missing or malformed.
            AnalysisServiceError:
                If the service call fails.
        """

        if config is None:
            raise RuntimeError("SubmitAction requires a config, but none was provided")

        batch_path = Path(args.input) if args.input else config.outfile
        comments = self._load_batch(batch_path)
        if not comments:
            print(f"No comments in batch: {batch_path}. Nothing to submit.")
            return

        if args.dry_run:
            print(f"Dry run: {len(comments)} comment(s) would be sent to {config.analysis.endpoint}")
            return

        print(f"Submitting {len(comments)} comment(s) to {config.analysis.endpoint}")
        results = submit_comments(
            comments,
            endpoint=config.analysis.endpoint,
            timeout=config.analysis.timeout,
        )

        if config.analysis.results is not None:
            self._write_results(config.analysis.results, batch_path, results)
            print(f"Wrote analysis results: {config.analysis.results}")

        self._print_summary(results)

    def _load_batch(self, path: Path) -> list[ParsedComment]:
        """
        Read comment records from a batch file.

        Entries without text are skipped.

        Raises:
            ConfigError:
                If the file is missing or has no `comments` list.
        """

        if not path.is_file():
            raise ConfigError(f"Comment batch not found: {path}. Run the 'parse' command first.")

        raw = read_yaml_mapping(path)
        entries = raw.get("comments")
        if not isinstance(entries, list):
            raise ConfigError(f"Comment batch has no 'comments' list: {path}")

        comments: list[ParsedComment] = []
        for entry in entries:
            record = comment_from_mapping(entry)
            if record is not None:
                comments.append(record)
        return comments

    def _write_results(self, path: Path, batch_path: Path, results: list[AnalysisResult]) -> None:
        payload: dict[str, Any] = {
            "schema_version": 1,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "batch": batch_path.as_posix(),
            "results": [r.to_dict() for r in results],
        }
        write_document(path, payload)

    def _print_summary(self, results: list[AnalysisResult]) -> None:
        summaries = summarize_by_platform(results)
        if not summaries:
            print("The analysis service returned no results.")
            return

        print(f"Analyzed {len(results)} comment(s):")
        for s in summaries:
            print(f"  - {s.platform}: {s.total} total, {s.positive} positive, {s.negative} negative")

        buyers = sum(1 for r in results if r.purchase_intent.lower() == "yes")
        print(f"  Purchase intent: {buyers} of {len(results)}")
