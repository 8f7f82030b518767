# tests/test_config.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

"""
Tests for environment parsing in config.py to verify invalid values fall back to defaults.
"""

import logging
import os
from unittest.mock import patch


_real_get = os.environ.get


def _env(overrides):
    return lambda key, default=None: overrides.get(key, _real_get(key, default))


def test_progress_queue_size_default_and_valid():
    from config import _parse_progress_queue_size

    with patch("config.os.environ.get", side_effect=_env({})):
        assert _parse_progress_queue_size() == 16
    with patch("config.os.environ.get", side_effect=_env({"RELAY_PROGRESS_QUEUE_SIZE": "4"})):
        assert _parse_progress_queue_size() == 4


def test_progress_queue_size_rejects_invalid_values():
    from config import _parse_progress_queue_size

    for raw in ("0", "-3", "lots"):
        with patch("config.os.environ.get", side_effect=_env({"RELAY_PROGRESS_QUEUE_SIZE": raw})):
            assert _parse_progress_queue_size() == 16, raw


def test_reconnect_delay_rejects_invalid_values():
    from config import _parse_reconnect_delay

    with patch("config.os.environ.get", side_effect=_env({"RELAY_RECONNECT_DELAY": "2.5"})):
        assert _parse_reconnect_delay() == 2.5
    for raw in ("-1", "soon"):
        with patch("config.os.environ.get", side_effect=_env({"RELAY_RECONNECT_DELAY": raw})):
            assert _parse_reconnect_delay() == 10.0, raw


def test_debug_flag_forces_debug_level():
    from config import _parse_log_level

    with patch("config.os.environ.get", side_effect=_env({"DEBUG": "true", "RELAY_LOG_LEVEL": "ERROR"})):
        assert _parse_log_level() == logging.DEBUG


def test_log_level_from_env():
    from config import _parse_log_level

    with patch("config.os.environ.get", side_effect=_env({"DEBUG": "", "RELAY_LOG_LEVEL": "warning"})):
        assert _parse_log_level() == logging.WARNING
    with patch("config.os.environ.get", side_effect=_env({"DEBUG": "", "RELAY_LOG_LEVEL": "chatty"})):
        assert _parse_log_level() == logging.INFO


def test_optional_strings_are_stripped():
    from config import _get_optional_str

    with patch("config.os.environ.get", side_effect=_env({"TELEGRAM_BOT_TOKEN": "  123:abc  "})):
        assert _get_optional_str("TELEGRAM_BOT_TOKEN") == "123:abc"
    with patch("config.os.environ.get", side_effect=_env({"TELEGRAM_BOT_TOKEN": "   "})):
        assert _get_optional_str("TELEGRAM_BOT_TOKEN") is None
