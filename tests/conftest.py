"""
Test session setup.

The engine in ``domain.models.database`` is built at import time, so the
SQLite URL has to be in the environment before anything from the project is
imported.
"""

import os
import sys
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "testing")

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
