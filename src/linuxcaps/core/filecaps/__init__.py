"""File capabilities --- the ``security.capability`` extended attribute.

The package is split into focused submodules:

- ``models``: the ``FileCaps`` dataclass.
- ``codec``: kernel constants plus ``unpack_attrs`` / ``pack_attrs``, the
  conversion between ``FileCaps`` and the raw attribute bytes.
- ``xattr``: one-shot read/write/remove of the raw attribute for a path
  or file descriptor.
- ``operations``: get/set/remove helpers combining codec and xattr.

All public names are re-exported here, and the codec and file operations
are attached to ``FileCaps``::

    from linuxcaps.core.filecaps import FileCaps

    fcaps = FileCaps.get_for_file("/usr/bin/ping")
    data = fcaps.pack_attrs()
"""

from linuxcaps.core.filecaps.models import FileCaps
from linuxcaps.core.filecaps.codec import (
    XATTR_CAPS_MAX_SIZE,
    XATTR_NAME_CAPS,
    pack_attrs,
    unpack_attrs,
)
from linuxcaps.core.filecaps.xattr import (
    read_attribute,
    remove_attribute,
    write_attribute,
)

# Attach codec and operations to FileCaps as methods/classmethods
from linuxcaps.core.filecaps import operations as _ops

FileCaps.unpack_attrs = classmethod(_ops._unpack_attrs)
FileCaps.pack_attrs = _ops._pack_attrs
FileCaps.get_for_file = classmethod(_ops._get_for_file)
FileCaps.get_for_fd = classmethod(_ops._get_for_fd)
FileCaps.set_for_file = _ops._set_for_file
FileCaps.set_for_fd = _ops._set_for_fd
FileCaps.remove_for_file = classmethod(_ops._remove_for_file)
FileCaps.remove_for_fd = classmethod(_ops._remove_for_fd)

__all__ = [
    "FileCaps",
    "XATTR_CAPS_MAX_SIZE",
    "XATTR_NAME_CAPS",
    "pack_attrs",
    "read_attribute",
    "remove_attribute",
    "unpack_attrs",
    "write_attribute",
]
