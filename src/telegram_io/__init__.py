# telegram_io/__init__.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Telethon-facing helpers: peer resolution, update adaptation, activity indicators."""
