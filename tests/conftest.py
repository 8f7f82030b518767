# tests/conftest.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
import os

import pytest  # noqa: F401

# Keep the suite independent of a developer's shell. This must run before
# config.py is imported, which happens as soon as test_utils is loaded.
for _name in ("TELEGRAM_BOT_TOKEN", "RELAY_TEMP_DIR", "RELAY_PROGRESS_QUEUE_SIZE", "DEBUG"):
    os.environ.pop(_name, None)


# Register fixtures from test_utils without an "unused import".
pytest_plugins = ["test_utils"]
