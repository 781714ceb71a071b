# SPDX-License-Identifier: MIT
"""Validation report — structured summary model and human-readable rendering."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stylegate.rules.base import Issue, RuleSeverity, RunResult


class IssueEntry(BaseModel):
    """Serializable view of a single Issue."""

    file: str
    line: int = Field(ge=1)
    message: str
    matched: str
    severity: RuleSeverity
    rule_id: str = ""

    @classmethod
    def from_issue(cls, issue: Issue) -> IssueEntry:
        return cls(
            file=issue.file,
            line=issue.line,
            message=issue.message,
            matched=issue.matched,
            severity=issue.severity,
            rule_id=issue.rule_id,
        )


class ValidationReport(BaseModel):
    """Summary of a validation run. ``passed`` is false iff any error was found."""

    target_dir: str
    passed: bool
    files_scanned: int = 0
    error_count: int
    warning_count: int
    errors: list[IssueEntry]
    warnings: list[IssueEntry]


def build_report(result: RunResult, target_dir: str) -> ValidationReport:
    """Summarize a RunResult. Pure: reads already-collected data only."""
    return ValidationReport(
        target_dir=target_dir,
        passed=result.passed,
        files_scanned=result.files_scanned,
        error_count=len(result.errors),
        warning_count=len(result.warnings),
        errors=[IssueEntry.from_issue(i) for i in result.errors],
        warnings=[IssueEntry.from_issue(i) for i in result.warnings],
    )


def _format_section(title: str, entries: list[IssueEntry]) -> list[str]:
    lines = ["", f"{title} ({len(entries)}):"]
    for entry in entries:
        lines.append(f"  {entry.file}:{entry.line}")
        lines.append(f"    {entry.message}")
        lines.append(f'    Found: "{entry.matched}"')
        lines.append("")
    return lines


def format_start_notice(target_dir: str) -> str:
    """Notice printed before scanning begins."""
    return f"\U0001f50d Validating styles in: {target_dir}"


def format_report(report: ValidationReport) -> str:
    """Render a ValidationReport as the console report block.

    The start notice is not included; it is printed before the scan runs.
    """
    lines: list[str] = [
        "",
        "\U0001f4ca Style Validation Report",
        "=" * 50,
    ]

    if not report.errors and not report.warnings:
        lines.append("\u2705 No style violations found!")
        return "\n".join(lines)

    if report.errors:
        lines.extend(_format_section("\u274c Errors", report.errors))
    if report.warnings:
        lines.extend(_format_section("\u26a0\ufe0f  Warnings", report.warnings))

    lines.append("")
    lines.append("\U0001f4c8 Summary:")
    lines.append(f"   Errors: {report.error_count}")
    lines.append(f"   Warnings: {report.warning_count}")
    return "\n".join(lines)
