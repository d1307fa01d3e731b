"""
Script Runner
=============
Executes a module with the configured shell and reports its exit status.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import InterpreterLaunchError

logger = logging.getLogger(__name__)

GENERIC_FAILURE = 1


@dataclass
class RunOutcome:
    """Result of one finished module run."""
    script_path: Path
    returncode: int

    @property
    def exit_code(self) -> int:
        """Exit status to propagate; signals and out-of-range codes map to 1."""
        if 0 <= self.returncode <= 255:
            return self.returncode
        return GENERIC_FAILURE

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def run_script(script_path: Path, shell: str = "bash") -> RunOutcome:
    """
    Run a script with ``shell`` and block until it exits.

    The child inherits standard streams and the environment.

    Args:
        script_path: Script to pass as the interpreter's only argument.
        shell: Interpreter binary name or path.

    Returns:
        RunOutcome with the child's return code.

    Raises:
        InterpreterLaunchError: If the interpreter cannot be started.
    """
    command = [shell, str(script_path)]
    logger.info("Running %s", " ".join(command))
    try:
        completed = subprocess.run(command)
    except OSError as e:
        raise InterpreterLaunchError(shell, details=str(e), file_path=Path(script_path)) from e

    outcome = RunOutcome(script_path=Path(script_path), returncode=completed.returncode)
    logger.info("%s exited with %d", script_path, outcome.returncode)
    return outcome
