# SPDX-License-Identifier: MIT
"""Style rule engine — hardcoded line rules for markup and stylesheets."""

from stylegate.rules.base import Issue, Rule, RuleGroup, RuleSeverity, RunResult
from stylegate.rules.engine import (
    FileReadError,
    StylegateError,
    classify_issue,
    classify_issues,
    scan_file,
    scan_line,
    scan_text,
)
from stylegate.rules.registry import FORBIDDEN_RULES, RULE_REGISTRY, SUGGESTION_RULES, get_rule

__all__ = [
    "FORBIDDEN_RULES",
    "RULE_REGISTRY",
    "SUGGESTION_RULES",
    "FileReadError",
    "Issue",
    "Rule",
    "RuleGroup",
    "RuleSeverity",
    "RunResult",
    "StylegateError",
    "classify_issue",
    "classify_issues",
    "get_rule",
    "scan_file",
    "scan_line",
    "scan_text",
]


def check_text(text: str, file: str = "<text>") -> RunResult:
    """Convenience: scan a string with all rules and classify the matches."""
    return classify_issues(scan_text(text, file))
