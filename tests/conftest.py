import sys
import types
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def log_records(monkeypatch):
    """
    Prevent tests from importing the real 'akinus' package, which has
    optional dependencies like newspaper3k, and record every log() call
    as (level, component, message).
    """
    records = []

    fake_utils_logger = types.ModuleType("akinus.utils.logger")
    fake_utils_logger.log = lambda level, component, message, **kwargs: records.append(
        (level, component, message)
    )

    fake_utils = types.ModuleType("akinus.utils")
    fake_utils.logger = fake_utils_logger

    fake_akinus = types.ModuleType("akinus")
    fake_akinus.utils = fake_utils

    # ---- Inject into sys.modules ----
    monkeypatch.setitem(sys.modules, "akinus", fake_akinus)
    monkeypatch.setitem(sys.modules, "akinus.utils", fake_utils)
    monkeypatch.setitem(sys.modules, "akinus.utils.logger", fake_utils_logger)

    return records


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    d/
      a.txt    "hello"
      b.txt    "world"
      sub/
        c.bin  b"\\x00\\x01\\x02"
        deeper/
          e.txt  "deep"
    """
    root = tmp_path / "d"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hello")
    (root / "b.txt").write_bytes(b"world")
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "sub" / "c.bin").write_bytes(b"\x00\x01\x02")
    (root / "sub" / "deeper" / "e.txt").write_bytes(b"deep")
    return root
