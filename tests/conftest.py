"""Root conftest: shared test configuration."""

import os

# Keep test logs readable and settings deterministic
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
