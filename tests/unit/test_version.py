"""tests/unit/test_version.py"""

import re
from pathlib import Path

import urlhelper
from urlhelper import version

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def test_version_reexported():
    """Verify that the package exports the version module's string."""
    assert urlhelper.__version__ == version.__version__
    assert "__version__" in urlhelper.__all__


def test_version_matches_pyproject():
    """Verify that the version agrees with the project metadata."""
    match = re.search(r'^version = "([^"]+)"$', PYPROJECT.read_text(), re.MULTILINE)
    assert match is not None
    assert match.group(1) == urlhelper.__version__
