# media/mime_utils.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

"""
MIME type classification for the document-to-media relay.

Classification is purely by declared content type. File bytes are never
sniffed, so a mislabeled file is relayed as declared or rejected.
"""

from media.media_types import MediaKind

VIDEO_MIME_TYPES = frozenset({"video/mp4", "video/quicktime"})

# Animated GIFs are sent as photos too; Telegram handles the animation.
PHOTO_MIME_TYPES = frozenset({"image/jpg", "image/jpeg", "image/png", "image/gif"})


def normalize_mime_type(mime_type: str | None) -> str:
    """
    Normalize a declared MIME type for comparison.
    MIME types are case-insensitive; surrounding whitespace is dropped.
    """
    if not mime_type:
        return ""
    return mime_type.strip().lower()


def classify(content_type: str | None) -> MediaKind:
    """
    Map a declared content type to the kind of media it is re-uploaded as.
    Anything outside the whitelist is MediaKind.UNKNOWN.
    """
    mime = normalize_mime_type(content_type)
    if mime in VIDEO_MIME_TYPES:
        return MediaKind.VIDEO
    if mime in PHOTO_MIME_TYPES:
        return MediaKind.PHOTO
    return MediaKind.UNKNOWN
