# SPDX-License-Identifier: MIT
"""Stylegate entry point — walks a directory, scans every file, prints the report.

Usage:
    python -m stylegate [TARGET_DIR] [--fix-suggestions] [--format text|json]

Environment variables:
    STYLEGATE_TARGET_DIR       — directory to scan when no positional argument is given
    STYLEGATE_FIX_SUGGESTIONS  — "1"/"true" to print fix suggestions after the report
    STYLEGATE_FORMAT           — "text" (default) or "json"
    STYLEGATE_LOG_LEVEL        — logging level for stderr diagnostics (default: WARNING)
    GITHUB_OUTPUT              — if set, step outputs are appended to this file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from stylegate.config import LOG_LEVELS, OUTPUT_FORMATS, Settings, load_settings
from stylegate.fixes import build_fix_suggestions, format_fix_suggestions
from stylegate.report import build_report, format_report, format_start_notice
from stylegate.rules import FileReadError, Issue, RunResult, classify_issues, scan_file
from stylegate.walker import DEFAULT_EXTENSIONS, list_files

log = logging.getLogger(__name__)


def run_validation(
    target_dir: str | Path,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
) -> RunResult:
    """Scan every matching file under *target_dir* and classify the issues.

    Files are processed one at a time in walk order: all files of the first
    extension, then the next. The first unreadable file aborts the run.

    Raises:
        FileReadError: If any file cannot be read as UTF-8 text.
        NotADirectoryError: If *target_dir* is not a directory.
    """
    root = Path(target_dir)
    issues: list[Issue] = []
    files_scanned = 0
    for extension in extensions:
        for relative in list_files(root, extension):
            issues.extend(scan_file(root / relative, display_path=relative))
            files_scanned += 1

    result = classify_issues(issues, RunResult(files_scanned=files_scanned))
    log.info(
        "Scanned %d file(s) in %s: %d error(s), %d warning(s)",
        files_scanned,
        root,
        len(result.errors),
        len(result.warnings),
    )
    return result


def write_github_output(path: str, result: RunResult) -> None:
    """Append step outputs for GitHub Actions."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"errors-count={len(result.errors)}\n")
        f.write(f"warnings-count={len(result.warnings)}\n")
        f.write(f"files-scanned={result.files_scanned}\n")
        f.write(f"passed={str(result.passed).lower()}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stylegate",
        description="Check HTML and CSS files for discouraged styling patterns",
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=None,
        help="Directory to scan (default: STYLEGATE_TARGET_DIR or the current directory)",
    )
    parser.add_argument(
        "--fix-suggestions",
        action="store_true",
        default=None,
        help="Print replacement suggestions after the report",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (overrides STYLEGATE_FORMAT env var)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Diagnostics level on stderr (overrides STYLEGATE_LOG_LEVEL env var)",
    )
    return parser


def _emit(settings: Settings, result: RunResult) -> None:
    report = build_report(result, settings.target_dir)
    fixes = build_fix_suggestions(result.all_issues) if settings.fix_suggestions else None

    if settings.output_format == "json":
        payload = report.model_dump(mode="json")
        if fixes is not None:
            payload["fixes"] = {
                file: [
                    {"line": fix.line, "from": fix.from_text, "to": fix.to_text}
                    for fix in file_fixes
                ]
                for file, file_fixes in fixes.items()
            }
        print(json.dumps(payload, indent=2))
        return

    print(format_report(report))
    if fixes is not None:
        print(format_fix_suggestions(fixes))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point — returns 0 when no error-severity issue was found."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(
            args.target_dir,
            cli_fix_suggestions=args.fix_suggestions,
            cli_format=args.format,
            cli_log_level=args.log_level,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # stdout carries only the JSON document in json mode
    json_mode = settings.output_format == "json"
    error_stream = sys.stderr if json_mode else sys.stdout
    if not json_mode:
        print(format_start_notice(settings.target_dir))

    try:
        result = run_validation(settings.target_dir)
    except FileReadError as exc:
        print(f"::error::Style validation aborted: {exc}", file=error_stream)
        return 1
    except NotADirectoryError as exc:
        print(f"::error::{exc}", file=error_stream)
        return 1

    _emit(settings, result)

    if settings.github_output:
        write_github_output(settings.github_output, result)

    return 0 if result.passed else 1


def cli() -> None:
    """Console-script wrapper around main()."""
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
