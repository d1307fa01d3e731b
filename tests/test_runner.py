"""
Script Runner Tests
===================
Tests for running modules and mapping their exit status.
"""

import subprocess
from pathlib import Path

import pytest

from modrun.errors import ErrorCode, InterpreterLaunchError
from modrun.runner import RunOutcome, run_script

from conftest import write_script


class TestRunOutcome:
    """Tests for RunOutcome exit-code mapping."""

    def test_success(self):
        outcome = RunOutcome(script_path=Path("x.sh"), returncode=0)
        assert outcome.succeeded
        assert outcome.exit_code == 0

    def test_plain_failure_code_propagates(self):
        outcome = RunOutcome(script_path=Path("x.sh"), returncode=42)
        assert not outcome.succeeded
        assert outcome.exit_code == 42

    def test_signal_maps_to_generic_failure(self):
        assert RunOutcome(script_path=Path("x.sh"), returncode=-9).exit_code == 1

    def test_out_of_range_maps_to_generic_failure(self):
        assert RunOutcome(script_path=Path("x.sh"), returncode=256).exit_code == 1


class TestRunScript:
    """Tests for run_script() against a real shell."""

    def test_exit_status_reported(self, tmp_path):
        script = write_script(tmp_path, "seven.sh", "exit 7\n")
        outcome = run_script(script, shell="sh")
        assert outcome.returncode == 7
        assert outcome.exit_code == 7
        assert outcome.script_path == script

    def test_script_runs(self, tmp_path):
        marker = tmp_path / "ran"
        script = write_script(tmp_path, "touch.sh", f'touch "{marker}"\n')
        outcome = run_script(script, shell="sh")
        assert outcome.succeeded
        assert marker.exists()

    def test_killed_by_signal(self, tmp_path):
        script = write_script(tmp_path, "die.sh", "kill -TERM $$\n")
        outcome = run_script(script, shell="sh")
        assert outcome.returncode < 0
        assert outcome.exit_code == 1

    def test_missing_interpreter(self, tmp_path):
        script = write_script(tmp_path, "ok.sh")
        with pytest.raises(InterpreterLaunchError) as excinfo:
            run_script(script, shell=str(tmp_path / "no-such-shell"))
        assert excinfo.value.code == ErrorCode.E100
        assert "Interpreter launch failed" in str(excinfo.value)


class TestRunScriptInvocation:
    """Tests for the command line handed to subprocess."""

    def test_script_is_sole_argument(self, mocker, tmp_path):
        script = tmp_path / "x.sh"
        run = mocker.patch(
            "modrun.runner.subprocess.run",
            return_value=subprocess.CompletedProcess(args=[], returncode=3),
        )
        outcome = run_script(script, shell="bash")
        run.assert_called_once_with(["bash", str(script)])
        assert outcome.exit_code == 3

    def test_permission_error_wrapped(self, mocker, tmp_path):
        mocker.patch("modrun.runner.subprocess.run", side_effect=PermissionError("denied"))
        with pytest.raises(InterpreterLaunchError) as excinfo:
            run_script(tmp_path / "x.sh", shell="bash")
        assert isinstance(excinfo.value.__cause__, PermissionError)
