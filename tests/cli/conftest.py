"""Shared fixtures for CLI tests.

Provides a Click runner, a target file, and an in-memory replacement for
the ``os`` extended-attribute calls so commands that read or write
``security.capability`` run without CAP_SETFCAP.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def target_file(tmp_path: Path) -> Path:
    """A regular file to attach capabilities to."""
    path = tmp_path / "dumpcap"
    path.write_bytes(b"\x7fELF")
    return path


@pytest.fixture
def xattr_store(monkeypatch: pytest.MonkeyPatch) -> dict[str, bytes]:
    """Route os.getxattr/setxattr/removexattr through a dict keyed by path."""
    store: dict[str, bytes] = {}

    def getxattr(target: Any, name: str, *args: Any, **kwargs: Any) -> bytes:
        key = os.fspath(target)
        if key not in store:
            raise OSError(errno.ENODATA, os.strerror(errno.ENODATA))
        return store[key]

    def setxattr(target: Any, name: str, value: bytes, *args: Any, **kwargs: Any) -> None:
        store[os.fspath(target)] = bytes(value)

    def removexattr(target: Any, name: str, *args: Any, **kwargs: Any) -> None:
        key = os.fspath(target)
        if key not in store:
            raise OSError(errno.ENODATA, os.strerror(errno.ENODATA))
        del store[key]

    monkeypatch.setattr(os, "getxattr", getxattr)
    monkeypatch.setattr(os, "setxattr", setxattr)
    monkeypatch.setattr(os, "removexattr", removexattr)
    return store
