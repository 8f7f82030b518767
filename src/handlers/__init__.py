# handlers/__init__.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

from .conversion import ConversionHandler

__all__ = ["ConversionHandler"]
