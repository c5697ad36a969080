import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def isolated_highscore(monkeypatch, tmp_path):
    """Keep every test away from the real per-user high score file."""
    monkeypatch.setenv("TINYROGUE_HIGHSCORE_FILE", str(tmp_path / "highscore.txt"))
    monkeypatch.delenv("TINYROGUE_LOG_LEVEL", raising=False)
    return tmp_path / "highscore.txt"
