# SPDX-License-Identifier: MIT
"""Run settings for stylegate — CLI > env > default resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Resolved options for a single validation run."""

    target_dir: str
    fix_suggestions: bool
    output_format: str
    log_level: str
    github_output: str | None = None


def load_settings(
    cli_target_dir: str | None = None,
    *,
    cli_fix_suggestions: bool | None = None,
    cli_format: str | None = None,
    cli_log_level: str | None = None,
) -> Settings:
    """Load run settings with CLI > env > default priority.

    Args:
        cli_target_dir: Positional directory argument (highest priority).
        cli_fix_suggestions: True when --fix-suggestions was given, None otherwise.
        cli_format: Value of --format, if given.
        cli_log_level: Value of --log-level, if given.

    Returns:
        Settings for the run.

    Raises:
        ValueError: If the output format or log level is not recognized.
    """
    target_dir = cli_target_dir or os.environ.get("STYLEGATE_TARGET_DIR") or "."

    if cli_fix_suggestions is None:
        env_fix = os.environ.get("STYLEGATE_FIX_SUGGESTIONS", "")
        fix_suggestions = env_fix.strip().lower() in _TRUTHY
    else:
        fix_suggestions = cli_fix_suggestions

    output_format = (cli_format or os.environ.get("STYLEGATE_FORMAT") or "text").lower()
    if output_format not in OUTPUT_FORMATS:
        msg = f"Unknown format: {output_format!r}. Valid formats: {list(OUTPUT_FORMATS)}"
        raise ValueError(msg)

    log_level = (cli_log_level or os.environ.get("STYLEGATE_LOG_LEVEL") or "WARNING").upper()
    if log_level not in LOG_LEVELS:
        msg = f"Unknown log level: {log_level!r}. Valid levels: {list(LOG_LEVELS)}"
        raise ValueError(msg)

    return Settings(
        target_dir=target_dir,
        fix_suggestions=fix_suggestions,
        output_format=output_format,
        log_level=log_level,
        github_output=os.environ.get("GITHUB_OUTPUT") or None,
    )
