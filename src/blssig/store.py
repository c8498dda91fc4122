"""Two-slot persistence for armored key files.

Writes truncate and overwrite in place: no atomic rename, no backup,
no locking. Concurrent writers to one slot get last-writer-wins.
"""
from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Dict, Mapping, Union

from .config import StoreSettings
from .errors import StorageError

logger = logging.getLogger(__name__)

PRIVATE_SLOT = "private"
PUBLIC_SLOT = "public"
SLOTS = (PRIVATE_SLOT, PUBLIC_SLOT)

PathLike = Union[str, os.PathLike]


def _check_slot(slot: str) -> None:
    if slot not in SLOTS:
        raise StorageError(f"unknown slot {slot!r} (expected one of {SLOTS})")


class FileSlotStore:
    """Slot store backed by one file per slot; locations are injected."""

    def __init__(self, paths: Mapping[str, PathLike]):
        missing = [s for s in SLOTS if s not in paths]
        if missing:
            raise StorageError(f"no location configured for slot(s) {missing}")
        self.paths: Dict[str, Path] = {s: Path(paths[s]) for s in SLOTS}

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "FileSlotStore":
        return cls({
            PRIVATE_SLOT: settings.private_key_path,
            PUBLIC_SLOT: settings.public_key_path,
        })

    def write(self, slot: str, data: bytes) -> None:
        _check_slot(slot)
        path = self.paths[slot]
        try:
            with open(path, "wb") as f:
                f.write(bytes(data))
        except OSError as exc:
            raise StorageError(f"cannot write slot {slot!r} at {path}: {exc}") from exc
        if slot == PRIVATE_SLOT:
            try:  # lock down private key permissions on POSIX
                os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)  # 0o600
            except OSError as exc:
                logger.warning("Could not restrict permissions on %s: %s", path, exc)
        logger.debug("Wrote %d bytes to slot %r (%s)", len(data), slot, path)

    def read(self, slot: str) -> bytes:
        _check_slot(slot)
        path = self.paths[slot]
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as exc:
            raise StorageError(f"cannot read slot {slot!r} at {path}: {exc}") from exc
        logger.debug("Read %d bytes from slot %r (%s)", len(data), slot, path)
        return data


class MemorySlotStore:
    """In-process slot store with the same contract as FileSlotStore."""

    def __init__(self) -> None:
        self._slots: Dict[str, bytes] = {}

    def write(self, slot: str, data: bytes) -> None:
        _check_slot(slot)
        self._slots[slot] = bytes(data)

    def read(self, slot: str) -> bytes:
        _check_slot(slot)
        try:
            return self._slots[slot]
        except KeyError:
            raise StorageError(f"slot {slot!r} is empty") from None
