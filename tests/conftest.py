import sys
import os

# Put the repository root on the path so the 'cachesim' namespace package
# resolves without an install.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest


@pytest.fixture
def write_trace(tmp_path):
    """Writes trace lines to a file and returns its path as a string."""
    def _write(lines, name="test.trace"):
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines))
        return str(path)
    return _write
