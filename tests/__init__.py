"""Test package initialisation.

The project source lives one directory above this package and uses the
flat ``modules``/``utils`` layout, so the repository root is appended to
``sys.path`` here rather than in every test module.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Project root, so ``import modules.certificates`` and ``import utils`` resolve
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
