"""Linux capabilities and capability sets.

Submodules
----------
- ``enumeration``: the ``Cap`` catalog, ``NUM_CAPS`` and ``CAP_BITMASK``.
- ``models``: ``CapSet`` (bitmask-backed set) and the ``capset()`` builder.
- ``iterator``: ``CapSetIterator``.

All public names are re-exported here::

    from linuxcaps.core.caps import Cap, CapSet, capset
"""

from linuxcaps.core.caps.enumeration import CAP_BITMASK, NUM_CAPS, Cap
from linuxcaps.core.caps.iterator import CapSetIterator
from linuxcaps.core.caps.models import CapSet, capset

__all__ = [
    "CAP_BITMASK",
    "Cap",
    "CapSet",
    "CapSetIterator",
    "NUM_CAPS",
    "capset",
]
