"""Stylegate — line-based style linter for HTML and CSS files."""

from stylegate.fixes import FixSuggestion, build_fix_suggestions, suggest_fix
from stylegate.report import (
    IssueEntry,
    ValidationReport,
    build_report,
    format_report,
    format_start_notice,
)
from stylegate.rules import FileReadError, Issue, RuleSeverity, RunResult
from stylegate.validate import main, run_validation
from stylegate.walker import list_files

__all__ = [
    "FileReadError",
    "FixSuggestion",
    "Issue",
    "IssueEntry",
    "RuleSeverity",
    "RunResult",
    "ValidationReport",
    "build_fix_suggestions",
    "build_report",
    "format_report",
    "format_start_notice",
    "list_files",
    "main",
    "run_validation",
    "suggest_fix",
]
