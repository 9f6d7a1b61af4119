"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up real upstream credentials from the environment
for _name in ("HF_TOKEN", "GENIUS_TOKEN", "REMOVE_BG_KEY", "UNSPLASH_ACCESS_KEY"):
    os.environ.pop(_name, None)
os.environ.setdefault("LOG_FORMAT", "text")
