"""Shared test configuration.

Keeps the HTTP app from writing log files while the suite runs.
"""

import os

os.environ.setdefault("FACTORIAL_LOG_DIR", "")
