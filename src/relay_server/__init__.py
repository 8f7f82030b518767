# relay_server/__init__.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Relay server: wires the Telethon bot client to the document conversion handler.

This package runs the Telegram event loop, including:
- Configuration validation and client construction
- Registration of the new message / new channel message entry points
- Reconnection after client errors and graceful shutdown
"""
from .loop import register_handlers, run_relay_loop
from .main import main

__all__ = [
    "main",
    "register_handlers",
    "run_relay_loop",
]
