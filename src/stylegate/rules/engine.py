# SPDX-License-Identifier: MIT
"""Rule engine — applies every rule to every line of a file and classifies the matches."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from stylegate.rules.base import Issue, Rule, RuleSeverity, RunResult
from stylegate.rules.registry import RULE_REGISTRY

log = logging.getLogger(__name__)


class StylegateError(Exception):
    """Base class for errors raised by stylegate."""


class FileReadError(StylegateError):
    """Raised when a target file cannot be opened or decoded as UTF-8 text."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


def scan_line(
    line: str,
    line_number: int,
    file: str,
    rules: Sequence[Rule] = RULE_REGISTRY,
) -> list[Issue]:
    """Apply each rule to one line, recording the first match of each."""
    issues: list[Issue] = []
    for rule in rules:
        match = rule.pattern.search(line)
        if match is None:
            continue
        issues.append(
            Issue(
                file=file,
                line=line_number,
                message=rule.message,
                matched=match.group(0),
                severity=rule.severity,
                rule_id=rule.id,
            )
        )
    return issues


def scan_text(text: str, file: str, rules: Sequence[Rule] = RULE_REGISTRY) -> list[Issue]:
    """Scan already-loaded file content. Lines are split on "\\n" and numbered from 1."""
    issues: list[Issue] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        issues.extend(scan_line(line, line_number, file, rules))
    return issues


def scan_file(
    path: str | Path,
    *,
    display_path: str | None = None,
    rules: Sequence[Rule] = RULE_REGISTRY,
) -> list[Issue]:
    """Read a file as UTF-8 and scan every line.

    Args:
        path: File to read.
        display_path: Path recorded on each Issue (defaults to ``str(path)``).
        rules: Rules to apply, in evaluation order.

    Raises:
        FileReadError: If the file cannot be opened or decoded.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FileReadError(file_path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise FileReadError(file_path, exc.strerror or str(exc)) from exc

    issues = scan_text(text, display_path or str(path), rules)
    log.debug("Scanned %s: %d issue(s)", file_path, len(issues))
    return issues


def classify_issue(result: RunResult, issue: Issue) -> RunResult:
    """Return a new RunResult with *issue* appended to its severity bucket."""
    if issue.severity == RuleSeverity.ERROR:
        return dataclasses.replace(result, errors=(*result.errors, issue))
    return dataclasses.replace(result, warnings=(*result.warnings, issue))


def classify_issues(issues: Iterable[Issue], result: RunResult | None = None) -> RunResult:
    """Partition issues into a RunResult in one pass, preserving order.

    Issues are appended after those already in *result*; exactly one new
    RunResult is built regardless of how many issues are classified.
    """
    base = result if result is not None else RunResult()
    errors: list[Issue] = []
    warnings: list[Issue] = []
    for issue in issues:
        if issue.severity == RuleSeverity.ERROR:
            errors.append(issue)
        else:
            warnings.append(issue)
    return RunResult(
        errors=(*base.errors, *errors),
        warnings=(*base.warnings, *warnings),
        files_scanned=base.files_scanned,
    )
