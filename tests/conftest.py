"""Test configuration shared by unit and integration tests."""

import os
from pathlib import Path

# Must be set before any src module loads the configuration
os.environ["APP_ENVIRONMENT"] = "test"
os.environ.setdefault(
    "APP_CONFIG_FILE", str(Path(__file__).resolve().parent.parent / "config.yaml")
)

from tests.fixtures import *  # noqa: E402,F401,F403
