from pathlib import Path

import pytest


@pytest.fixture
def number_file(tmp_path: Path):
    """Write the given lines to a number file and return its path"""

    def _write(*lines: str, name: str = "numbers.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
