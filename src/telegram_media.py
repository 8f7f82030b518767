# telegram_media.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

import logging
from pathlib import PurePath
from typing import Any

from telethon.tl.types import (  # pyright: ignore[reportMissingImports]
    Document,
    DocumentAttributeFilename,
    DocumentAttributeVideo,
    InputMediaUploadedDocument,
    InputMediaUploadedPhoto,
    MessageMediaDocument,
)

from exceptions import NamingError
from media.media_types import Attachment, MediaKind

logger = logging.getLogger(__name__)


def extract_attachment(msg: Any) -> Attachment | None:
    """
    Return the document attachment of a Telegram message, or None when the
    message carries no document (text, photos, polls, empty documents, ...).
    """
    media = getattr(msg, "media", None)
    if not isinstance(media, MessageMediaDocument):
        return None

    doc = getattr(media, "document", None)
    if not isinstance(doc, Document):
        return None

    return Attachment(
        content_type=doc.mime_type or "",
        file_name=get_document_file_name(doc),
        file_ref=doc,
        size=getattr(doc, "size", None),
    )


# ---------- helpers ----------


def get_document_file_name(doc: Any) -> str:
    """Return the declared file name of a document, or "" when it has none."""
    attrs = getattr(doc, "attributes", None)
    if not isinstance(attrs, (list, tuple)):
        return ""
    for a in attrs:
        if isinstance(a, DocumentAttributeFilename):
            return a.file_name or ""
    return ""


def local_file_name(declared: str) -> str:
    """
    Turn a declared file name into a bare name that is safe to join onto a
    scratch directory. Directory components are dropped.
    """
    # Both separators count; senders are not necessarily on POSIX.
    name = PurePath((declared or "").replace("\\", "/")).name.strip()
    if name in ("", ".", ".."):
        raise NamingError("file name is empty")
    return name


def build_media(kind: MediaKind, handle: Any, attachment: Attachment):
    """
    Build the outgoing InputMedia for an uploaded file handle.

    Photos (including GIFs) go out as uploaded photos. Videos go out as
    streamable video documents that keep the original name and content type.
    """
    if kind is MediaKind.PHOTO:
        return InputMediaUploadedPhoto(file=handle)
    if kind is MediaKind.VIDEO:
        attributes = [DocumentAttributeVideo(duration=0, w=0, h=0, supports_streaming=True)]
        if attachment.file_name:
            attributes.append(
                DocumentAttributeFilename(file_name=local_file_name(attachment.file_name))
            )
        return InputMediaUploadedDocument(
            file=handle,
            mime_type=attachment.content_type,
            attributes=attributes,
        )
    raise ValueError(f"cannot build media for kind '{kind}'")
