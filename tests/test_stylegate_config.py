# SPDX-License-Identifier: MIT
"""Tests for stylegate.config — settings resolution."""

from __future__ import annotations

import pytest

from stylegate.config import load_settings

_ENV_VARS = (
    "STYLEGATE_TARGET_DIR",
    "STYLEGATE_FIX_SUGGESTIONS",
    "STYLEGATE_FORMAT",
    "STYLEGATE_LOG_LEVEL",
    "GITHUB_OUTPUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self) -> None:
        s = load_settings()
        assert s.target_dir == "."
        assert s.fix_suggestions is False
        assert s.output_format == "text"
        assert s.log_level == "WARNING"
        assert s.github_output is None


class TestTargetDir:
    def test_cli_override_highest_priority(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLEGATE_TARGET_DIR", "from-env")
        assert load_settings("from-cli").target_dir == "from-cli"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLEGATE_TARGET_DIR", "web/templates")
        assert load_settings().target_dir == "web/templates"


class TestFixSuggestions:
    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_env_truthy(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("STYLEGATE_FIX_SUGGESTIONS", value)
        assert load_settings().fix_suggestions is True

    @pytest.mark.parametrize("value", ["0", "false", "", "nope"])
    def test_env_falsy(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("STYLEGATE_FIX_SUGGESTIONS", value)
        assert load_settings().fix_suggestions is False

    def test_cli_flag_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLEGATE_FIX_SUGGESTIONS", "0")
        assert load_settings(cli_fix_suggestions=True).fix_suggestions is True


class TestFormatAndLogLevel:
    def test_env_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLEGATE_FORMAT", "JSON")
        assert load_settings().output_format == "json"

    def test_cli_format_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLEGATE_FORMAT", "json")
        assert load_settings(cli_format="text").output_format == "text"

    def test_invalid_format_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown format"):
            load_settings(cli_format="xml")

    def test_env_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLEGATE_LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_invalid_log_level_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLEGATE_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="Unknown log level"):
            load_settings()

    def test_github_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_OUTPUT", "/tmp/out.txt")
        assert load_settings().github_output == "/tmp/out.txt"
