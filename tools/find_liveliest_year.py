from __future__ import annotations

import sys
from pathlib import Path

# Ensure repo root is on sys.path when running `python tools/find_liveliest_year.py ...`
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from people_synth.cli import liveliest_main

if __name__ == "__main__":
    # Usage: python tools/find_liveliest_year.py <people.json>
    liveliest_main()
