# SPDX-License-Identifier: MIT
"""Rule registry — explicit, ordered list of all style rules."""

from __future__ import annotations

import re

from stylegate.rules.base import Rule, RuleGroup, RuleSeverity

# Patterns that should not exist
FORBIDDEN_RULES: tuple[Rule, ...] = (
    Rule(
        id="inline-color-style",
        pattern=re.compile(r'style="[^"]*color:[^"]*"', re.IGNORECASE),
        message="Inline color styles are not allowed. Use CSS classes instead.",
        severity=RuleSeverity.ERROR,
        group=RuleGroup.FORBIDDEN,
    ),
    Rule(
        id="hardcoded-muted-rgba",
        pattern=re.compile(r"rgba\(0,0,0,0\.6\)", re.IGNORECASE),
        message=(
            "Use var(--text-muted-color) or .text-muted class instead of "
            "hardcoded rgba(0,0,0,0.6)"
        ),
        severity=RuleSeverity.ERROR,
        group=RuleGroup.FORBIDDEN,
    ),
    Rule(
        id="complex-button-utilities",
        pattern=re.compile(
            r"btn btn-sm text-sm px-3 py-1\.5 bg-gray-100 hover:bg-gray-200 text-gray-700",
            re.IGNORECASE,
        ),
        message="Use .btn .btn-light instead of complex utility classes",
        severity=RuleSeverity.WARNING,
        group=RuleGroup.FORBIDDEN,
    ),
)

# Patterns that suggest better alternatives
SUGGESTION_RULES: tuple[Rule, ...] = (
    Rule(
        id="secondary-text-gray",
        pattern=re.compile(r"text-gray-[56]00", re.IGNORECASE),
        message="Consider using .text-muted for secondary text",
        severity=RuleSeverity.WARNING,
        group=RuleGroup.SUGGESTION,
    ),
    Rule(
        id="default-text-gray",
        pattern=re.compile(r"text-gray-900", re.IGNORECASE),
        message="text-gray-900 may be unnecessary - default color might suffice",
        severity=RuleSeverity.INFO,
        group=RuleGroup.SUGGESTION,
    ),
)

RULE_REGISTRY: tuple[Rule, ...] = FORBIDDEN_RULES + SUGGESTION_RULES


def get_rule(rule_id: str) -> Rule:
    """Look up a registered rule by id.

    Raises:
        KeyError: If no rule has that id.
    """
    for rule in RULE_REGISTRY:
        if rule.id == rule_id:
            return rule
    msg = f"Unknown rule: {rule_id!r}. Valid rules: {[r.id for r in RULE_REGISTRY]}"
    raise KeyError(msg)
