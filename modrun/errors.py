"""
Error Handling Module
=====================
Custom exceptions for modrun.
Provides consistent error codes and messages for user-visible failures.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorCode(Enum):
    """Error codes for modrun."""
    # Lookup errors (E001-E099)
    E001 = "Script not found"

    # Execution errors (E100-E199)
    E100 = "Interpreter launch failed"


@dataclass
class ModrunError(Exception):
    """Base exception for modrun with error codes."""
    code: ErrorCode
    message: str
    details: Optional[str] = None
    file_path: Optional[Path] = None

    def __str__(self) -> str:
        base = f"[{self.code.name}] {self.code.value}: {self.message}"
        if self.details:
            base += f" ({self.details})"
        if self.file_path:
            base += f" - File: {self.file_path}"
        return base


class ScriptNotFoundError(ModrunError):
    """Requested module is not a regular file inside the module directory."""
    def __init__(self, name: str, module_dir: Path):
        super().__init__(
            code=ErrorCode.E001,
            message=f"Script '{name}' not found in {module_dir}",
        )


class InterpreterLaunchError(ModrunError):
    """The shell interpreter could not be started at all."""
    def __init__(self, interpreter: str, details: str = None, file_path: Path = None):
        super().__init__(
            code=ErrorCode.E100,
            message=f"could not start '{interpreter}'",
            details=details,
            file_path=file_path,
        )
