"""Pytest configuration for sourceloader tests."""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from sourceloader.activation import DryRunActivator  # noqa: E402


def _write(path: Path, content: str = "") -> Path:
    """Create ``path`` (and its parents) with ``content``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """
    Build a small source tree:

        root/
          Fixture1.py
          Fixture2.py
          Sub/Fixture3.py
          ImportSub/ImportFixture2.py
          ImportSub/ImportFixture3.py
          ImportSub/README.txt
          vendor/Fixture4.py
          lib/Fixture4.py
          lib/Fixture5.py
    """
    root = tmp_path / "root"
    _write(root / "Fixture1.py", "VALUE = 1\n")
    _write(root / "Fixture2.py", "VALUE = 2\n")
    _write(root / "Sub" / "Fixture3.py", "VALUE = 3\n")
    _write(root / "ImportSub" / "ImportFixture2.py", "VALUE = 'import2'\n")
    _write(root / "ImportSub" / "ImportFixture3.py", "VALUE = 'import3'\n")
    _write(root / "ImportSub" / "README.txt", "not source\n")
    _write(root / "vendor" / "Fixture4.py", "ORIGIN = 'vendor'\n")
    _write(root / "lib" / "Fixture4.py", "ORIGIN = 'lib'\n")
    _write(root / "lib" / "Fixture5.py", "ORIGIN = 'lib'\n")
    return root


@pytest.fixture
def recorder() -> DryRunActivator:
    """Activator that records paths instead of executing them."""
    return DryRunActivator()


@pytest.fixture
def write():
    """Helper creating a file and its parent directories."""
    return _write
