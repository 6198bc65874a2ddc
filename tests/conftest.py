import logging
import os

import pytest

# Set test environment variables
os.environ["RECENCY_CACHE_LOG_LEVEL"] = "WARNING"
os.environ["RECENCY_CACHE_LOG_TO_FILE"] = "false"


@pytest.fixture(autouse=True)
def _strip_file_handlers():
    """Remove file handlers from root logger so tests never write to logs/."""
    root = logging.getLogger()
    saved = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    for h in saved:
        root.removeHandler(h)
    yield
    # Restore any that were removed (and strip any new ones tests may have added)
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler):
            root.removeHandler(h)
    for h in saved:
        root.addHandler(h)


@pytest.fixture
def clean_settings_cache():
    """Drop the cached Settings instance before and after a test."""
    from recency_cache.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
