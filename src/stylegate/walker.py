# SPDX-License-Identifier: MIT
"""Directory walker — enumerate markup and stylesheet files under a root."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

log = logging.getLogger(__name__)

# Markup first, then stylesheets
DEFAULT_EXTENSIONS: tuple[str, ...] = (".html", ".css")


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def list_files(root: str | Path, extension: str) -> Iterator[str]:
    """Yield POSIX paths, relative to *root*, of files ending in *extension*.

    The suffix must match exactly (".HTML" is not ".html"). Recurses into
    subdirectories, skips hidden files and directories, and yields in sorted
    order so repeated walks over the same tree agree.

    Raises:
        NotADirectoryError: If *root* does not exist or is not a directory.
    """
    base = Path(root)
    if not base.is_dir():
        msg = f"Target must be an existing directory: {base}"
        raise NotADirectoryError(msg)

    matches = sorted(
        path.relative_to(base)
        for path in base.rglob("*")
        if path.suffix == extension
        and not _is_hidden(path.relative_to(base))
        and path.is_file()
    )
    log.debug("Found %d %s file(s) under %s", len(matches), extension, base)
    for relative in matches:
        yield relative.as_posix()
