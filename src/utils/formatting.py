# src/utils/formatting.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#

RELAY_LOG_NAME = "relay"


def format_log_prefix(target=None, *, name: str = RELAY_LOG_NAME) -> str:
    """
    Format a log prefix as [relay->user:123] or [relay].

    Args:
        target: Optional resolved Target (anything with describe()) or a plain string.
        name: Leading component of the prefix.

    Examples:
        >>> format_log_prefix()
        "[relay]"
        >>> format_log_prefix(target)
        "[relay->channel:1001]"
    """
    if target is None:
        return f"[{name}]"
    describe = getattr(target, "describe", None)
    label = describe() if callable(describe) else str(target)
    if len(label) > 25:
        label = label[:25] + "…"
    return f"[{name}->{label}]"


def format_caption_for_logging(text: str | None, limit: int = 60) -> str:
    """
    Shorten a message caption for log lines.

    Examples:
    - Empty caption: "‹no caption›"
    - Long caption: "first sixty characters…"
    """
    text = (text or "").strip()
    if not text:
        return "‹no caption›"
    if len(text) > limit:
        return text[:limit] + "…"
    return text
