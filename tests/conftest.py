import os
import sys
from pathlib import Path

import pytest

# Ensure the 'src' directory is on sys.path for imports in tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Known-answer tests are sha256 vectors; pin it before settings load
os.environ["HASHTREE_HASH_ALGORITHM"] = "sha256"
os.environ.setdefault("HASHTREE_LOG_LEVEL", "DEBUG")


@pytest.fixture
def blocks():
    return [
        bytes([1, 2, 3, 4]),
        bytes([8, 6, 7, 9]),
        bytes([5, 2, 9, 4]),
        bytes([3, 1, 2, 5]),
    ]
