#!/usr/bin/env python3
"""
Project-level CLI launcher.

Usage:
    python modrun_cli.py [script_name]
"""

from modrun.cli.main import run


if __name__ == "__main__":
    run()
