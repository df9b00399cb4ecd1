"""Read, write and remove the ``security.capability`` extended attribute.

Thin wrappers over ``os.getxattr`` / ``os.setxattr`` / ``os.removexattr``.
A target is either a path (``str``, ``bytes`` or ``os.PathLike``) or an
open file descriptor (``int``); the ``os`` functions accept both.

Each call makes exactly one attempt. Failures other than a missing
attribute propagate as the original ``OSError``.
"""

from __future__ import annotations

import errno
import logging
import os
from typing import Union

from linuxcaps.core.filecaps.codec import XATTR_NAME_CAPS

logger = logging.getLogger(__name__)

Target = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]", int]


def read_attribute(target: Target) -> bytes | None:
    """Return the raw attribute value, or None if the file has none.

    The value is read whatever its size. An oversized attribute is therefore
    returned as is and rejected later by the codec (``MalformedCapsError``)
    rather than failing here with ``ERANGE``.

    Raises:
        OSError: For any failure other than the attribute being absent
            (e.g. ``ENOTDIR``, ``EBADF``, ``EACCES``), unchanged.
    """
    try:
        data = os.getxattr(target, XATTR_NAME_CAPS)
    except OSError as exc:
        if exc.errno == errno.ENODATA:
            logger.debug("No %s on %r", XATTR_NAME_CAPS, target)
            return None
        raise
    logger.debug("Read %d bytes of %s from %r", len(data), XATTR_NAME_CAPS, target)
    return data


def write_attribute(target: Target, data: bytes) -> None:
    """Set the raw attribute value, creating or replacing it.

    Raises:
        OSError: On any failure (``EPERM`` without CAP_SETFCAP, ...).
    """
    os.setxattr(target, XATTR_NAME_CAPS, data, 0)
    logger.debug("Wrote %d bytes of %s to %r", len(data), XATTR_NAME_CAPS, target)


def remove_attribute(target: Target) -> None:
    """Remove the attribute.

    Raises:
        OSError: On any failure, including ``ENODATA`` if it was absent.
    """
    os.removexattr(target, XATTR_NAME_CAPS)
    logger.debug("Removed %s from %r", XATTR_NAME_CAPS, target)
