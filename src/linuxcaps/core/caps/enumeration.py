"""The catalog of Linux capabilities and their bit positions.

Each capability is identified by a small integer which is also its bit
position in every kernel capability mask (process sets, bounding set,
file capability attribute). These numbers are an ABI contract with the
kernel: new capabilities are only ever appended, and existing ones are
never renumbered.

See capabilities(7) for the meaning of each capability.
"""

from __future__ import annotations

from enum import IntEnum


class Cap(IntEnum):
    """A Linux capability. The integer value is its bit position."""

    CHOWN = 0
    DAC_OVERRIDE = 1
    DAC_READ_SEARCH = 2
    FOWNER = 3
    FSETID = 4
    KILL = 5
    SETGID = 6
    SETUID = 7
    SETPCAP = 8
    LINUX_IMMUTABLE = 9
    NET_BIND_SERVICE = 10
    NET_BROADCAST = 11
    NET_ADMIN = 12
    NET_RAW = 13
    IPC_LOCK = 14
    IPC_OWNER = 15
    SYS_MODULE = 16
    SYS_RAWIO = 17
    SYS_CHROOT = 18
    SYS_PTRACE = 19
    SYS_PACCT = 20
    SYS_ADMIN = 21
    SYS_BOOT = 22
    SYS_NICE = 23
    SYS_RESOURCE = 24
    SYS_TIME = 25
    SYS_TTY_CONFIG = 26
    MKNOD = 27
    LEASE = 28
    AUDIT_WRITE = 29
    AUDIT_CONTROL = 30
    SETFCAP = 31
    MAC_OVERRIDE = 32
    MAC_ADMIN = 33
    SYSLOG = 34
    WAKE_ALARM = 35
    BLOCK_SUSPEND = 36
    AUDIT_READ = 37
    PERFMON = 38
    BPF = 39
    CHECKPOINT_RESTORE = 40
    # Append new capabilities here only.

    @property
    def bitmask(self) -> int:
        """The mask with only this capability's bit set."""
        return 1 << self.value

    @property
    def cap_name(self) -> str:
        """The libcap textual name, e.g. ``cap_net_raw``."""
        return "cap_" + self.name.lower()

    @classmethod
    def from_bit(cls, bit: int) -> Cap | None:
        """Return the capability at bit position ``bit``.

        Returns None for positions this catalog does not know about,
        including negative values.
        """
        if 0 <= bit < NUM_CAPS:
            return _BY_BIT[bit]
        return None

    @classmethod
    def from_name(cls, name: str) -> Cap:
        """Look up a capability by name.

        Matching is case-insensitive and the ``cap_`` prefix is optional,
        so ``"CAP_CHOWN"``, ``"cap_chown"`` and ``"chown"`` all resolve to
        ``Cap.CHOWN``.

        Raises:
            ValueError: If the name does not denote a known capability.
        """
        key = name.strip().upper()
        if key.startswith("CAP_"):
            key = key[4:]
        member = cls.__members__.get(key)
        if member is None:
            raise ValueError(f"Unknown capability {name!r}")
        return member


_BY_BIT: tuple[Cap, ...] = tuple(sorted(Cap, key=lambda c: c.value))

NUM_CAPS: int = len(_BY_BIT)
"""Number of capabilities known to this build (bits 0..NUM_CAPS-1)."""

CAP_BITMASK: int = (1 << NUM_CAPS) - 1
"""Union of every valid capability bit."""
