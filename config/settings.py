"""
Application Settings
====================
Central configuration for modrun.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional


ENV_MODULE_DIR = "MODRUN_MODULE_DIR"
ENV_SHELL = "MODRUN_SHELL"
ENV_LOG_LEVEL = "MODRUN_LOG_LEVEL"


@dataclass
class Settings:
    """Application configuration settings."""

    app_name: str = "modrun"

    # Modules
    script_suffix: str = ".sh"
    module_subpath: Path = field(default_factory=lambda: Path("src") / "modules")
    module_dir: Optional[Path] = None

    # Execution
    shell: str = "bash"

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from MODRUN_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            Settings with any non-empty overrides applied.
        """
        env = os.environ if environ is None else environ
        overrides = {}

        module_dir = env.get(ENV_MODULE_DIR, "").strip()
        if module_dir:
            overrides["module_dir"] = Path(module_dir).expanduser()

        shell = env.get(ENV_SHELL, "").strip()
        if shell:
            overrides["shell"] = shell

        log_level = env.get(ENV_LOG_LEVEL, "").strip()
        if log_level:
            overrides["log_level"] = log_level.upper()

        return cls(**overrides)
