"""linuxcaps: Linux capability sets and file capability (xattr) encoding."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
