"""
Module Catalog
==============
Lists the modules in a module directory and resolves requested names.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

MENU_LETTERS = string.ascii_lowercase


@dataclass(frozen=True)
class ModuleEntry:
    """A runnable script found directly inside the module directory."""
    file_name: str
    path: Path
    suffix: str = ".sh"

    @property
    def display_name(self) -> str:
        """File name without the script suffix, as shown in the menu."""
        if self.suffix and self.file_name.endswith(self.suffix):
            return self.file_name[: -len(self.suffix)]
        return self.file_name


def list_modules(module_dir: Path, suffix: str = ".sh") -> List[ModuleEntry]:
    """
    List modules in a directory, sorted by file name.

    Only regular files whose name ends with ``suffix`` (case-sensitive) are
    included; subdirectories are not searched. Any error reading the
    directory yields an empty list.

    Args:
        module_dir: Directory to scan.
        suffix: Recognized script suffix.

    Returns:
        Entries sorted lexicographically by file name.
    """
    module_dir = Path(module_dir)
    try:
        names = sorted(
            child.name
            for child in module_dir.iterdir()
            if child.name.endswith(suffix) and child.is_file()
        )
    except OSError as e:
        logger.debug("Cannot read module directory %s: %s", module_dir, e)
        return []

    return [ModuleEntry(file_name=name, path=module_dir / name, suffix=suffix) for name in names]


def find_script(module_dir: Path, name: str) -> Optional[Path]:
    """
    Return ``module_dir / name`` if it is an existing regular file.

    Only plain file names are accepted; absolute paths and names with
    directory parts never leave the module directory.
    """
    if not name or name in (".", "..") or Path(name).name != name:
        return None
    script_path = Path(module_dir) / name
    if script_path.is_file():
        return script_path
    return None


def menu_letter(index: int) -> str:
    """Menu letter for a catalog position (0 -> 'a')."""
    return MENU_LETTERS[index]


def index_for_letter(choice: str, count: int) -> Optional[int]:
    """
    Map a menu choice back to a catalog position.

    Returns None unless ``choice`` is a single lowercase letter whose
    position is below ``count``.
    """
    if len(choice) != 1 or choice not in MENU_LETTERS:
        return None
    index = MENU_LETTERS.index(choice)
    if index >= count:
        return None
    return index
