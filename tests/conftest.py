"""Test configuration for ensuring direct module imports succeed."""
from __future__ import annotations

import sys
from pathlib import Path

# The planner modules (`calc`, `models`, `services`, `state`) live at the repository root.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)
if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)
