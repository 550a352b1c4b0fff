"""Test configuration and fixtures."""

import os

# Settings are read from the environment; keep tests off the background
# reaper and away from production-only checks.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("REAPER__ENABLED", "false")
