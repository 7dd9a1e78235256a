#!/usr/bin/env python3
"""Top-level runner for synthetic admissions.

Run:
  python patient_console_generate.py --n 10 --seed 7 --out out/bills.ndjson
"""

from __future__ import annotations

import os
import sys

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from patient_console.run_pipeline import main

if __name__ == "__main__":
    raise SystemExit(main())
