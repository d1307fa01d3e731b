"""
Module Directory Locator
========================
Resolves the absolute path of the directory holding runnable modules.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Optional

from config.settings import Settings

logger = logging.getLogger(__name__)


def running_program_path() -> Optional[Path]:
    """Return the file of the program currently executing, if known."""
    main_module = sys.modules.get("__main__")
    main_file = getattr(main_module, "__file__", None)
    if not main_file:
        return None
    return Path(main_file)


def _invocation_path(program_path: str) -> Optional[Path]:
    """Turn argv[0] into a path, searching PATH for bare command names."""
    if not program_path:
        return None
    if os.sep not in program_path:
        found = shutil.which(program_path)
        if found:
            return Path(found)
    return Path(program_path)


def _canonical_dir(candidate: Path) -> Optional[Path]:
    try:
        resolved = candidate.resolve(strict=True)
    except (OSError, RuntimeError):
        return None
    return resolved if resolved.is_dir() else None


def resolve_module_directory(
    program_path: str,
    settings: Settings,
    executable: Optional[Path] = None,
) -> Path:
    """
    Locate the module directory for this process.

    Tries, in order: an explicit override from settings, ``<module_subpath>``
    beside the running program, ``../<module_subpath>`` one level above it,
    and finally ``<module_subpath>`` under the current working directory.

    Args:
        program_path: The program invocation argument (argv[0]).
        settings: Active settings.
        executable: Location of the running program; discovered when None.

    Returns:
        Absolute path. It is not guaranteed to exist.
    """
    if settings.module_dir is not None:
        override = Path(settings.module_dir).expanduser().absolute()
        logger.debug("Using module directory override %s", override)
        return override

    anchor = executable if executable is not None else running_program_path()
    if anchor is None:
        anchor = _invocation_path(program_path)

    if anchor is not None:
        program_dir = anchor.absolute().parent
        # a launcher in the install root first, then one inside <root>/bin
        for candidate in (program_dir / settings.module_subpath, program_dir / ".." / settings.module_subpath):
            resolved = _canonical_dir(candidate)
            if resolved is not None:
                logger.debug("Resolved module directory %s from %s", resolved, anchor)
                return resolved
            logger.debug("No module directory at %s", candidate)

    fallback = (Path.cwd() / settings.module_subpath).absolute()
    logger.debug("Falling back to module directory %s", fallback)
    return fallback
