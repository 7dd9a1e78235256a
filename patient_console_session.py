#!/usr/bin/env python3
"""Top-level runner for the interactive console.

Run:
  python patient_console_session.py

Assumes this file is at repo root and `patient_console/` is a package directory.
"""

from __future__ import annotations

import os
import sys

# Ensure repo root is on sys.path so `patient_console` and `lib` are importable
ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from patient_console.session import main

if __name__ == "__main__":
    raise SystemExit(main())
