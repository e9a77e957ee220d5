"""Shared test setup: skip the simulated delay unless a test asks for it."""

import os

os.environ.setdefault("PROCESSING_DELAY_MS", "0")
os.environ.setdefault("TRACING_ENABLED", "false")
