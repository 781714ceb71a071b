# SPDX-License-Identifier: MIT
"""Fix advisor — advisory replacement text for collected issues, grouped by file.

Suggestions are derived from the matched text alone and are never applied
to the source files.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from stylegate.rules.base import Issue

# Ordered: first substring found in the matched text wins
_FIX_HEURISTICS: tuple[tuple[str, str], ...] = (
    ('style="', 'Replace with appropriate CSS class (e.g., class="text-muted")'),
    ("text-gray-", 'Replace with class="text-muted"'),
    ("rgba(0,0,0,0.6)", "Replace with var(--text-muted-color)"),
)


@dataclass(frozen=True)
class FixSuggestion:
    """Suggested replacement for one issue."""

    file: str
    line: int
    from_text: str
    to_text: str


def suggest_fix(matched: str) -> str:
    """Return the replacement suggestion for matched text, or "" if none applies."""
    for needle, suggestion in _FIX_HEURISTICS:
        if needle in matched:
            return suggestion
    return ""


def build_fix_suggestions(issues: Iterable[Issue]) -> dict[str, list[FixSuggestion]]:
    """Group fix suggestions by file, preserving issue order within each file."""
    fixes: dict[str, list[FixSuggestion]] = {}
    for issue in issues:
        fixes.setdefault(issue.file, []).append(
            FixSuggestion(
                file=issue.file,
                line=issue.line,
                from_text=issue.matched,
                to_text=suggest_fix(issue.matched),
            )
        )
    return fixes


def format_fix_suggestions(fixes: dict[str, list[FixSuggestion]]) -> str:
    """Render grouped fix suggestions as plain text."""
    lines: list[str] = ["", "\U0001f527 Auto-fix suggestions:", "=" * 30]
    for file, file_fixes in fixes.items():
        lines.append("")
        lines.append(f"\U0001f4c4 {file}:")
        for fix in file_fixes:
            lines.append(f"  Line {fix.line}: {fix.from_text} → {fix.to_text}")
    return "\n".join(lines)
