# SPDX-License-Identifier: MIT
"""Tests for stylegate.rules.registry — the hardcoded rule set."""

from __future__ import annotations

import pytest

from stylegate.rules.base import RuleGroup, RuleSeverity
from stylegate.rules.registry import FORBIDDEN_RULES, RULE_REGISTRY, SUGGESTION_RULES, get_rule


class TestRuleOrder:
    def test_forbidden_before_suggestions(self) -> None:
        assert RULE_REGISTRY == FORBIDDEN_RULES + SUGGESTION_RULES
        groups = [r.group for r in RULE_REGISTRY]
        assert groups == [RuleGroup.FORBIDDEN] * 3 + [RuleGroup.SUGGESTION] * 2

    def test_declared_order(self) -> None:
        assert [r.id for r in RULE_REGISTRY] == [
            "inline-color-style",
            "hardcoded-muted-rgba",
            "complex-button-utilities",
            "secondary-text-gray",
            "default-text-gray",
        ]

    def test_severities(self) -> None:
        assert [r.severity for r in RULE_REGISTRY] == [
            RuleSeverity.ERROR,
            RuleSeverity.ERROR,
            RuleSeverity.WARNING,
            RuleSeverity.WARNING,
            RuleSeverity.INFO,
        ]

    def test_ids_unique(self) -> None:
        ids = [r.id for r in RULE_REGISTRY]
        assert len(ids) == len(set(ids))


class TestRulePatterns:
    def test_inline_color_style(self) -> None:
        rule = get_rule("inline-color-style")
        assert rule.message == "Inline color styles are not allowed. Use CSS classes instead."
        match = rule.pattern.search('<div style="color:red">')
        assert match is not None
        assert match.group(0) == 'style="color:red"'

    def test_inline_color_style_case_insensitive(self) -> None:
        rule = get_rule("inline-color-style")
        assert rule.pattern.search('<p STYLE="margin:0; COLOR: blue">') is not None

    def test_inline_style_without_color_ignored(self) -> None:
        rule = get_rule("inline-color-style")
        assert rule.pattern.search('<div style="margin:0">') is None

    def test_hardcoded_rgba(self) -> None:
        rule = get_rule("hardcoded-muted-rgba")
        assert rule.message == (
            "Use var(--text-muted-color) or .text-muted class instead of "
            "hardcoded rgba(0,0,0,0.6)"
        )
        assert rule.pattern.search("color: RGBA(0,0,0,0.6);") is not None
        assert rule.pattern.search("color: rgba(0, 0, 0, 0.6);") is None
        assert rule.pattern.search("color: rgba(0,0,0,0x6);") is None

    def test_complex_button_utilities(self) -> None:
        rule = get_rule("complex-button-utilities")
        line = (
            '<button class="btn btn-sm text-sm px-3 py-1.5 bg-gray-100 '
            'hover:bg-gray-200 text-gray-700">'
        )
        assert rule.pattern.search(line) is not None
        assert rule.message == "Use .btn .btn-light instead of complex utility classes"

    @pytest.mark.parametrize("cls", ["text-gray-500", "text-gray-600", "TEXT-GRAY-600"])
    def test_secondary_text_gray(self, cls: str) -> None:
        assert get_rule("secondary-text-gray").pattern.search(f'class="{cls}"') is not None

    @pytest.mark.parametrize("cls", ["text-gray-400", "text-gray-700", "text-gray-50"])
    def test_secondary_text_gray_other_shades(self, cls: str) -> None:
        assert get_rule("secondary-text-gray").pattern.search(f'class="{cls}"') is None

    def test_default_text_gray(self) -> None:
        rule = get_rule("default-text-gray")
        assert rule.severity == RuleSeverity.INFO
        assert rule.pattern.search('<h1 class="Text-Gray-900">') is not None


class TestGetRule:
    def test_unknown_rule_raises(self) -> None:
        with pytest.raises(KeyError, match="Unknown rule"):
            get_rule("nonexistent")
