"""Root conftest: shared test configuration."""

import os

# Pin settings that main.py reads at import time
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("CORS_ORIGINS", '["http://localhost:5173"]')
os.environ.setdefault("LOG_FORMAT", "text")
