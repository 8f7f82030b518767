# utils/__init__.py
#
# Shared utility functions package.

from utils.formatting import format_caption_for_logging, format_log_prefix

__all__ = [
    "format_caption_for_logging",
    "format_log_prefix",
]
