# media/media_types.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MediaKind(Enum):
    """Semantic classification of an attachment for re-upload purposes."""

    UNKNOWN = "unknown"
    PHOTO = "photo"
    VIDEO = "video"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Attachment:
    content_type: str
    file_name: str = ""  # declared name; empty when the document carries none
    file_ref: Any | None = None  # opaque handle passed to client.download_media
    size: int | None = None
