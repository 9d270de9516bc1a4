"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch the developer's showcase.db
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "text")
