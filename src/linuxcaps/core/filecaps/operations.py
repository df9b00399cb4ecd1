"""FileCaps operations --- get, set and remove capabilities on files.

This module extends the ``FileCaps`` class (defined in ``models.py``) with
classmethods and instance methods that combine the codec with the
extended-attribute adapter:

- **Get:** ``get_for_file``, ``get_for_fd``.
- **Set:** ``set_for_file``, ``set_for_fd``.
- **Remove:** ``remove_for_file``, ``remove_for_fd``.

These are attached to the ``FileCaps`` class at import time (in
``__init__.py``) so callers see a single unified API.

A missing attribute is reported as ``None`` by the getters. OS failures
propagate unchanged as ``OSError``; undecodable attribute data raises
``MalformedCapsError``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Union

from linuxcaps.core.filecaps import xattr
from linuxcaps.core.filecaps.codec import pack_attrs, unpack_attrs
from linuxcaps.core.filecaps.models import FileCaps
from linuxcaps.exceptions import MalformedCapsError

logger = logging.getLogger(__name__)

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _load(target: xattr.Target) -> FileCaps | None:
    data = xattr.read_attribute(target)
    if data is None:
        return None
    try:
        return unpack_attrs(data)
    except MalformedCapsError:
        logger.debug("Undecodable file capabilities on %r: %s", target, data.hex())
        raise


def _get_for_file(cls: type, path: PathArg) -> Any:
    """Get the file capabilities attached to the file at ``path``.

    Returns:
        The decoded FileCaps, or None if the file has no capabilities.

    Raises:
        OSError: If the attribute cannot be read (``ENOENT``, ``ENOTDIR``,
            ``EACCES``, ...).
        MalformedCapsError: If the attribute holds invalid data.
    """
    return _load(os.fspath(path))


def _get_for_fd(cls: type, fd: int) -> Any:
    """Get the file capabilities of the open file ``fd``.

    See ``get_for_file`` for return value and errors.
    """
    return _load(fd)


def _set_for_file(self: FileCaps, path: PathArg) -> None:
    """Replace the capabilities on the file at ``path`` with this state."""
    xattr.write_attribute(os.fspath(path), pack_attrs(self))


def _set_for_fd(self: FileCaps, fd: int) -> None:
    """Replace the capabilities on the open file ``fd`` with this state."""
    xattr.write_attribute(fd, pack_attrs(self))


def _remove_for_file(cls: type, path: PathArg) -> None:
    """Remove the capabilities attached to the file at ``path``."""
    xattr.remove_attribute(os.fspath(path))


def _remove_for_fd(cls: type, fd: int) -> None:
    """Remove the capabilities attached to the open file ``fd``."""
    xattr.remove_attribute(fd)


def _unpack_attrs(cls: type, data: bytes) -> Any:
    """Decode raw attribute bytes. See ``codec.unpack_attrs``."""
    return unpack_attrs(data)


def _pack_attrs(self: FileCaps) -> bytes:
    """Encode this state as raw attribute bytes. See ``codec.pack_attrs``."""
    return pack_attrs(self)
