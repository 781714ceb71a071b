# SPDX-License-Identifier: MIT
"""Rule severity, rule record, issue and run-result dataclasses for the style rule engine."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum


class RuleSeverity(StrEnum):
    """Severity levels for rule matches. Only ERROR fails a run."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class RuleGroup(StrEnum):
    """Organizational grouping. Forbidden rules are evaluated before suggestions."""

    FORBIDDEN = "forbidden"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class Rule:
    """A single pattern -> message -> severity mapping applied to every line."""

    id: str
    pattern: re.Pattern[str]
    message: str
    severity: RuleSeverity
    group: RuleGroup


@dataclass(frozen=True)
class Issue:
    """One concrete rule match found at a specific file and line."""

    file: str
    line: int  # 1-based
    message: str
    matched: str  # first matched substring on the line
    severity: RuleSeverity
    rule_id: str = ""


@dataclass(frozen=True)
class RunResult:
    """Issues collected over a run, partitioned by severity.

    ``errors`` holds ERROR issues; WARNING and INFO issues share ``warnings``.
    """

    errors: tuple[Issue, ...] = ()
    warnings: tuple[Issue, ...] = ()
    files_scanned: int = field(default=0)

    @property
    def passed(self) -> bool:
        """True iff no error-severity issue was collected."""
        return not self.errors

    @property
    def all_issues(self) -> list[Issue]:
        """Errors followed by warnings, each in collection order."""
        return [*self.errors, *self.warnings]
