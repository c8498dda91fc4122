"""Interface definitions for blssig components."""

from __future__ import annotations

from typing import Protocol


class SlotStore(Protocol):
    """Durable byte sink with named slots ("private", "public")."""

    def write(self, slot: str, data: bytes) -> None:
        ...

    def read(self, slot: str) -> bytes:
        ...
