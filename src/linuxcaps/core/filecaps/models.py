"""FileCaps: the capabilities attached to an executable file.

A pure data holder with no I/O, so it is safe to import from the codec and
the file operations without circular-import concerns. Packing, unpacking
and the filesystem methods are attached in ``linuxcaps.core.filecaps``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from linuxcaps.core.caps import CapSet


@dataclass
class FileCaps:
    """The capability state stored in a file's ``security.capability`` attribute.

    Attributes:
        effective: The "effective" bit. When set, ``execve()`` raises every
            capability of the new permitted set into the effective set, so
            the program need not raise them itself.
        permitted: Capabilities added to the process's new permitted set.
        inheritable: Capabilities ANDed with the process's inheritable set
            to contribute to the new permitted set.
        rootid: The root user ID of the user namespace in which the
            capabilities were attached. Only version 3 attributes carry it,
            and a non-None value makes ``pack_attrs()`` emit version 3.

    The constructor copies both sets, so an instance never shares them with
    the caller or with another FileCaps; ``copy.copy`` yields independent
    sets too.
    """

    effective: bool = False
    permitted: CapSet = field(default_factory=CapSet.empty)
    inheritable: CapSet = field(default_factory=CapSet.empty)
    rootid: int | None = None

    def __post_init__(self) -> None:
        # Never alias a caller's sets.
        self.permitted = self.permitted.copy()
        self.inheritable = self.inheritable.copy()

    def __copy__(self) -> FileCaps:
        return FileCaps(
            effective=self.effective,
            permitted=self.permitted,
            inheritable=self.inheritable,
            rootid=self.rootid,
        )

    @classmethod
    def empty(cls) -> FileCaps:
        """Construct a FileCaps with no capabilities and no root ID."""
        return cls()

    @property
    def version(self) -> int:
        """The attribute revision ``pack_attrs()`` will produce (2 or 3)."""
        return 3 if self.rootid is not None else 2

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict using ``cap_xxx`` names."""
        return {
            "effective": self.effective,
            "permitted": [cap.cap_name for cap in self.permitted],
            "inheritable": [cap.cap_name for cap in self.inheritable],
            "rootid": self.rootid,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileCaps:
        """Deserialize the mapping produced by ``to_dict()``.

        Missing keys fall back to the empty defaults.

        Raises:
            ValueError: If a capability name is unknown, or a set is not
                given as a list of names.
        """
        rootid = data.get("rootid")
        return cls(
            effective=bool(data.get("effective", False)),
            permitted=CapSet.from_names(_names(data, "permitted")),
            inheritable=CapSet.from_names(_names(data, "inheritable")),
            rootid=int(rootid) if rootid is not None else None,
        )


def _names(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, (list, tuple)):
        raise ValueError(
            f"{key!r} must be a list of capability names, got {type(value).__name__}"
        )
    return list(value)
