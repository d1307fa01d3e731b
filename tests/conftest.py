import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import Settings


def write_script(directory: Path, name: str, body: str = "exit 0\n") -> Path:
    """Create a shell script inside ``directory``."""
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


@pytest.fixture
def module_dir(tmp_path):
    """Module directory with three modules, one non-module file and a subdirectory."""
    path = tmp_path / "modules"
    path.mkdir()
    write_script(path, "deploy.sh")
    write_script(path, "backup.sh")
    write_script(path, "cleanup.sh", 'touch "$(dirname "$0")/cleanup.ran"\n')
    (path / "notes.txt").write_text("not a module")
    (path / "nested.sh").mkdir()
    return path


@pytest.fixture
def empty_module_dir(tmp_path):
    path = tmp_path / "empty"
    path.mkdir()
    return path


@pytest.fixture
def settings(module_dir):
    """Settings pointing at the module_dir fixture, using the POSIX sh binary."""
    return Settings(module_dir=module_dir, shell="sh")
