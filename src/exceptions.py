# exceptions.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Exception types for document-to-media conversion failures.

Every failure that should be reported back to the sender is a RelayError.
Ignorable conditions (outgoing messages, non-document media, unresolvable
peers) are not exceptions at all; the handler simply returns.
"""


class RelayError(Exception):
    """
    Base class for conversion failures that are reported to the user.

    Args:
        message: Error message (this is what ends up in the reply)
        original_exception: The exception that caused this one (optional)
    """

    def __init__(self, message: str, original_exception: Exception | None = None):
        super().__init__(message)
        self.original_exception = original_exception


class ClassificationError(RelayError):
    """The attachment's declared content type is not in the whitelist."""

    def __init__(self, content_type: str):
        super().__init__(f"unsupported content type '{content_type}'")
        self.content_type = content_type


class NamingError(RelayError):
    """The attachment has no usable file name."""


class StorageError(RelayError):
    """A scoped temp directory or file could not be created."""


class DownloadError(RelayError):
    pass


class UploadError(RelayError):
    pass


class PostError(RelayError):
    pass


class RevokeError(RelayError):
    """
    The replacement media was posted but the original message could not be
    revoked. Both messages stay visible; nothing is rolled back.
    """


class InternalError(RelayError):
    """An unexpected exception escaped the conversion body."""
