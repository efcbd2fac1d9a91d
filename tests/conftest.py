"""
Pytest configuration for calculator tests.

Adds the repository root to the Python path so tests can import
'biginteger' and 'bigint_calc' without installing the package.
"""
import sys
from pathlib import Path

import pytest

root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))


@pytest.fixture
def config_file(tmp_path):
    """Write a bigint.yaml with file logging disabled and return its path."""
    path = tmp_path / "bigint.yaml"
    path.write_text(
        "logging:\n"
        f"  file: \"{tmp_path / 'logs' / 'calc.log'}\"\n"
        "  level: INFO\n"
        "  enabled: false\n"
        "calculator:\n"
        "  sqrt_iterations: 15\n"
        "  show_banner: true\n"
        "  quiet: false\n"
    )
    return path
