"""
modrun CLI
==========
Terminal command surface: help, about, run-by-name and the interactive menu.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from config.settings import Settings
from modrun.catalog import MENU_LETTERS, ModuleEntry, find_script, index_for_letter, list_modules, menu_letter
from modrun.errors import ModrunError, ScriptNotFoundError
from modrun.paths import resolve_module_directory
from modrun.runner import GENERIC_FAILURE, RunOutcome, run_script

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}
RULE = "═" * 79
INTERRUPTED = 130


@dataclass
class CliContext:
    """Everything a handler needs for one process invocation."""
    settings: Settings
    module_dir: Path
    stdin: TextIO
    out: TextIO
    err: TextIO

    def modules(self) -> List[ModuleEntry]:
        return list_modules(self.module_dir, self.settings.script_suffix)


def _print(msg: str, out: TextIO) -> None:
    out.write(msg + "\n")
    out.flush()


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def handle_help(ctx: CliContext) -> int:
    """Print the usage banner followed by the module catalog."""
    name = ctx.settings.app_name
    _print("", ctx.out)
    _print(f"Usage: {name} [script_name]", ctx.out)
    _print(RULE, ctx.out)
    _print("", ctx.out)
    _print("▶ GENERAL OPTIONS:", ctx.out)
    _print(f"  -a, --about          Show information about {name}", ctx.out)
    _print("  -h, --help           Show help information", ctx.out)
    _print("", ctx.out)
    _print(RULE, ctx.out)
    _print("", ctx.out)

    modules = ctx.modules()
    _print(f"▶ AVAILABLE MODULES ({len(modules)} found):", ctx.out)
    if not modules:
        _print("    (no modules found)", ctx.out)
    for entry in modules:
        _print(f"    • {entry.file_name}", ctx.out)
    _print("", ctx.out)
    return 0


def handle_about(ctx: CliContext) -> int:
    _print(f"{ctx.settings.app_name} - A simple script runner for shell scripts", ctx.out)
    return 0


def launch_module(name: str, ctx: CliContext) -> Optional[RunOutcome]:
    """
    Find and run one module by file name.

    Args:
        name: File name inside the module directory, suffix included.
        ctx: Invocation context.

    Returns:
        The finished run, or None when the module is missing or the
        interpreter cannot be started (a diagnostic has been printed).
    """
    script_path = find_script(ctx.module_dir, name)
    if script_path is None:
        _print(f"error: {ScriptNotFoundError(name, ctx.module_dir)}", ctx.err)
        return None

    try:
        return run_script(script_path, shell=ctx.settings.shell)
    except ModrunError as exc:
        _print(f"error: {exc}", ctx.err)
        return None


def run_module(name: str, ctx: CliContext) -> int:
    """Run a module by name and return the exit code to propagate."""
    outcome = launch_module(name, ctx)
    if outcome is None:
        return GENERIC_FAILURE
    return outcome.exit_code


def render_menu(modules: List[ModuleEntry], ctx: CliContext) -> None:
    _print("", ctx.out)
    _print(f"▶ {ctx.settings.app_name.upper()} MODULES", ctx.out)
    if not modules:
        _print("    (no modules found)", ctx.out)
    for index, entry in enumerate(modules[: len(MENU_LETTERS)]):
        _print(f"  {menu_letter(index)}) {entry.display_name}", ctx.out)
    _print("  q) quit", ctx.out)
    ctx.out.write("Select an option: ")
    ctx.out.flush()


def handle_interactive(ctx: CliContext) -> int:
    """
    Present the catalog as a lettered menu until the user quits.

    The catalog is re-read on every pass so modules added or removed while
    the menu is open show up on the next redraw.
    """
    if not ctx.modules():
        _print(f"No modules found in {ctx.module_dir}", ctx.err)
        return 1

    while True:
        modules = ctx.modules()
        if len(modules) > len(MENU_LETTERS):
            logger.warning(
                "Only the first %d of %d modules are shown in the menu",
                len(MENU_LETTERS),
                len(modules),
            )
        render_menu(modules, ctx)

        try:
            line = ctx.stdin.readline()
        except KeyboardInterrupt:
            _print("", ctx.out)
            return INTERRUPTED

        if not line:
            # end of input
            _print("", ctx.out)
            _print("Goodbye!", ctx.out)
            return 0

        choice = line.strip().lower()
        if choice in QUIT_WORDS:
            _print("Goodbye!", ctx.out)
            return 0

        index = index_for_letter(choice, min(len(modules), len(MENU_LETTERS)))
        if index is None:
            _print("Invalid option", ctx.out)
            continue

        entry = modules[index]
        _print(f"\n--- {entry.display_name} ---", ctx.out)
        try:
            outcome = launch_module(entry.file_name, ctx)
        except KeyboardInterrupt:
            _print(f"\n{entry.display_name} interrupted", ctx.err)
            continue

        if outcome is None:
            continue
        if outcome.succeeded:
            _print(f"✓ {entry.display_name} completed successfully", ctx.out)
        else:
            _print(f"{entry.display_name} exited with code {outcome.exit_code}", ctx.err)


COMMANDS: Dict[str, Callable[[CliContext], int]] = {
    "-h": handle_help,
    "--help": handle_help,
    "-a": handle_about,
    "--about": handle_about,
}


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
    stdin: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
    program: Optional[str] = None,
) -> int:
    """
    CLI entrypoint.

    Args:
        argv: Optional argv override for testing (without the program name).
        settings: Settings override; read from the environment when None.
        stdin: Input stream for the interactive menu.
        out: Output stream.
        err: Diagnostic stream.
        program: Invocation path used to locate the module directory.

    Returns:
        Process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = Settings.from_env()
    if program is None:
        program = sys.argv[0] if sys.argv else ""

    module_dir = resolve_module_directory(program, settings)
    ctx = CliContext(settings=settings, module_dir=module_dir, stdin=stdin, out=out, err=err)

    if not argv:
        return handle_interactive(ctx)

    first, rest = argv[0], argv[1:]
    if rest:
        logger.debug("Ignoring extra arguments: %s", rest)

    handler = COMMANDS.get(first)
    if handler is not None:
        return handler(ctx)
    return run_module(first, ctx)


def run() -> None:
    """Console-script wrapper."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    try:
        code = main(settings=settings)
    except KeyboardInterrupt:
        code = INTERRUPTED
    sys.exit(code)


if __name__ == "__main__":
    run()
