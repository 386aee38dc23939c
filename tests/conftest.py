import sys
from collections.abc import Callable
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    src_path = Path(__file__).resolve().parents[1] / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture
def write_lines() -> Callable[..., Path]:
    """Return a helper writing raw lines with a chosen terminator."""

    def _write(path: Path, lines: list[str], terminator: str = "\n") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes((terminator.join(lines) + terminator).encode("utf-8"))
        return path

    return _write
