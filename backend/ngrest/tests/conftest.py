"""Test configuration and fixtures."""

import os

import pytest

# Pin the settings the hash and url assertions depend on
os.environ["REST_URL_PREFIX"] = "admin/"
os.environ.setdefault("ENVIRONMENT", "testing")

from ngrest.config import Config  # noqa: E402 - must set env vars before importing
from ngrest.plugins.registry import PluginRegistry, register_builtin_plugins  # noqa: E402


class UserHistorySummaryWindow:
    """Stand-in active window."""

    def __init__(self, limit: int = 10):
        self.limit = limit


class ChangePasswordWindow:
    """Second stand-in active window."""


@pytest.fixture
def config():
    """A fresh builder for the user model endpoint."""
    return Config("api-admin-user", "id")


@pytest.fixture
def summary_window():
    return UserHistorySummaryWindow()


@pytest.fixture
def password_window():
    return ChangePasswordWindow()


@pytest.fixture
def registry():
    """An isolated registry holding only the built-in plugins."""
    return register_builtin_plugins(PluginRegistry())
