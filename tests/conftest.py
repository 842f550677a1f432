"""Pytest configuration.

Settings are read from the environment when first requested, so the
required variables are set here, before any test module imports the
application.
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes")
os.environ.setdefault("CRON_SECRET", "test-cron-secret")
os.environ.setdefault("QBO_PRODUCTION_CLIENT_ID", "test-client-id")
os.environ.setdefault("QBO_PRODUCTION_CLIENT_SECRET", "test-client-secret")

import pytest  # noqa: E402


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)
