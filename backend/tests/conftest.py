"""Root conftest: shared test configuration."""

import os

# Settings are cached on first import, so the test database must be set before any app import
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
