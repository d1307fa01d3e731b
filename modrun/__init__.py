"""
modrun
======
Discovers shell scripts in a module directory and runs them by name or
from an interactive lettered menu.

Key Components:
    - resolve_module_directory: Locate the module directory
    - list_modules / find_script: Catalog and lookup
    - run_script: Execute one module with the configured shell
"""

from .catalog import ModuleEntry, find_script, index_for_letter, list_modules, menu_letter
from .errors import ErrorCode, InterpreterLaunchError, ModrunError, ScriptNotFoundError
from .paths import resolve_module_directory
from .runner import RunOutcome, run_script

__all__ = [
    "ModuleEntry",
    "find_script",
    "index_for_letter",
    "list_modules",
    "menu_letter",
    "ErrorCode",
    "InterpreterLaunchError",
    "ModrunError",
    "ScriptNotFoundError",
    "resolve_module_directory",
    "RunOutcome",
    "run_script",
]
