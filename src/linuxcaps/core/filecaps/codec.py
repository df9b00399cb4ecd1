"""Binary codec for the ``security.capability`` extended attribute.

The attribute holds a ``struct vfs_cap_data`` (or ``vfs_ns_cap_data``)
from ``linux/capability.h``: a sequence of little-endian 32-bit words.

====  ======  =========================================================
Rev   Bytes   Words
====  ======  =========================================================
1     12      magic, permitted[0:32], inheritable[0:32]
2     20      magic, permitted[0:32], inheritable[0:32],
              permitted[32:64], inheritable[32:64]
3     24      revision 2 layout followed by rootid
====  ======  =========================================================

The magic word carries the revision in its top byte and flags in the
remaining bits; the only defined flag is "effective".

Decoding dispatches on the revision AND the exact byte length. Any other
combination is rejected with ``MalformedCapsError``; there is no
best-effort decode. Encoding always produces revision 3 when a root ID is
present and revision 2 otherwise. Revision 1 is read-only, so a revision 1
attribute re-encodes to different (revision 2) bytes with the same
capabilities.
"""

from __future__ import annotations

import struct

from linuxcaps.core.caps import CapSet
from linuxcaps.core.filecaps.models import FileCaps
from linuxcaps.exceptions import MalformedCapsError

# ---------------------------------------------------------------------------
# Kernel constants (linux/capability.h, linux/xattr.h)
# ---------------------------------------------------------------------------

XATTR_NAME_CAPS = "security.capability"

VFS_CAP_REVISION_MASK = 0xFF000000
VFS_CAP_FLAGS_MASK = ~VFS_CAP_REVISION_MASK & 0xFFFFFFFF
VFS_CAP_FLAGS_EFFECTIVE = 0x000001

VFS_CAP_REVISION_1 = 0x01000000
VFS_CAP_REVISION_2 = 0x02000000
VFS_CAP_REVISION_3 = 0x03000000

XATTR_CAPS_SZ_1 = 12
XATTR_CAPS_SZ_2 = 20
XATTR_CAPS_SZ_3 = 24
XATTR_CAPS_MAX_SIZE = XATTR_CAPS_SZ_3

_MAGIC = struct.Struct("<I")
_V1 = struct.Struct("<3I")
_V2 = struct.Struct("<5I")
_V3 = struct.Struct("<6I")

_U32_MAX = 0xFFFFFFFF


def unpack_attrs(data: bytes) -> FileCaps:
    """Decode raw ``security.capability`` bytes into a FileCaps.

    Args:
        data: The attribute value exactly as read from the file.

    Returns:
        A new FileCaps. Capability bits this build does not know are
        dropped.

    Raises:
        MalformedCapsError: If the data is shorter than the magic word,
            names an unknown revision, or has the wrong length for its
            revision.
    """
    data = bytes(data)
    length = len(data)
    if length < _MAGIC.size:
        raise MalformedCapsError(
            f"File capability data too short ({length} bytes)"
        )

    (magic,) = _MAGIC.unpack_from(data)
    version = magic & VFS_CAP_REVISION_MASK
    flags = magic & VFS_CAP_FLAGS_MASK
    effective = bool(flags & VFS_CAP_FLAGS_EFFECTIVE)

    if version == VFS_CAP_REVISION_2 and length == XATTR_CAPS_SZ_2:
        _, p_lo, i_lo, p_hi, i_hi = _V2.unpack(data)
        rootid = None
    elif version == VFS_CAP_REVISION_3 and length == XATTR_CAPS_SZ_3:
        _, p_lo, i_lo, p_hi, i_hi, rootid = _V3.unpack(data)
    elif version == VFS_CAP_REVISION_1 and length == XATTR_CAPS_SZ_1:
        _, p_lo, i_lo = _V1.unpack(data)
        p_hi = i_hi = 0
        rootid = None
    else:
        raise MalformedCapsError(
            f"Unsupported file capability revision {version >> 24:#x} "
            f"with length {length}"
        )

    return FileCaps(
        effective=effective,
        permitted=CapSet.from_bitmasks_u32(p_lo, p_hi),
        inheritable=CapSet.from_bitmasks_u32(i_lo, i_hi),
        rootid=rootid,
    )


def pack_attrs(fcaps: FileCaps) -> bytes:
    """Encode a FileCaps into ``security.capability`` bytes.

    Produces revision 3 (24 bytes) when ``fcaps.rootid`` is set, otherwise
    revision 2 (20 bytes).

    Raises:
        ValueError: If ``rootid`` does not fit in an unsigned 32-bit field.
    """
    magic = VFS_CAP_REVISION_2 if fcaps.rootid is None else VFS_CAP_REVISION_3
    if fcaps.effective:
        magic |= VFS_CAP_FLAGS_EFFECTIVE

    permitted = fcaps.permitted.bits
    inheritable = fcaps.inheritable.bits
    words = (
        magic,
        permitted & _U32_MAX,
        inheritable & _U32_MAX,
        permitted >> 32,
        inheritable >> 32,
    )

    if fcaps.rootid is None:
        return _V2.pack(*words)
    if not 0 <= fcaps.rootid <= _U32_MAX:
        raise ValueError(f"rootid out of range: {fcaps.rootid}")
    return _V3.pack(*words, fcaps.rootid)
