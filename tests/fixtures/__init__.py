"""Shared pytest fixtures for contact form tests."""

from .core import *  # noqa: F401,F403
from .http import *  # noqa: F401,F403
