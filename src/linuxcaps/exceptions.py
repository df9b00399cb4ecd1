"""linuxcaps exception hierarchy.

All library exceptions inherit from LinuxCapsError, giving callers a single
base class to catch when they want to handle any linuxcaps-specific failure
without swallowing unrelated errors.

Operating-system failures (permission denied, bad file descriptor, wrong
path type, ...) are not wrapped: they surface as the built-in ``OSError``
subclasses with their ``errno`` intact.
"""

from __future__ import annotations

import errno


class LinuxCapsError(Exception):
    """Base exception for all linuxcaps errors."""


class MalformedCapsError(LinuxCapsError, ValueError):
    """Raised when file capability data cannot be decoded.

    Covers buffers that are too short to hold the magic word, unknown
    format revisions, and revisions whose payload length does not match
    exactly. No partial result is ever attached.

    The ``errno`` attribute is always ``EINVAL``, mirroring the kernel's
    answer for the same data.
    """

    errno = errno.EINVAL

    def __init__(self, message: str = "Invalid file capability data") -> None:
        super().__init__(message)
