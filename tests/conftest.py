from __future__ import annotations

import os
from pathlib import Path

# Dynamically ensure the src/ tree and the test helpers are importable
TESTS_ROOT = Path(__file__).resolve().parent
SRC_ROOT = TESTS_ROOT.parent / "src"
for _p in (SRC_ROOT, TESTS_ROOT):
    if str(_p) not in os.sys.path:
        os.sys.path.insert(0, str(_p))
