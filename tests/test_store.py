from __future__ import annotations

import os
import stat

import pytest

from blssig.config import StoreSettings
from blssig.errors import StorageError
from blssig.store import PRIVATE_SLOT, PUBLIC_SLOT, FileSlotStore, MemorySlotStore


@pytest.fixture()
def file_store(tmp_path) -> FileSlotStore:
    return FileSlotStore({
        PRIVATE_SLOT: tmp_path / "sk.pem",
        PUBLIC_SLOT: tmp_path / "pk.pem",
    })


def test_write_then_read(file_store):
    file_store.write(PUBLIC_SLOT, b"hello")
    assert file_store.read(PUBLIC_SLOT) == b"hello"


def test_write_overwrites_previous_content(file_store):
    file_store.write(PRIVATE_SLOT, b"a much longer first value")
    file_store.write(PRIVATE_SLOT, b"short")
    assert file_store.read(PRIVATE_SLOT) == b"short"


def test_slots_are_independent(file_store):
    file_store.write(PRIVATE_SLOT, b"sk")
    file_store.write(PUBLIC_SLOT, b"pk")
    assert file_store.read(PRIVATE_SLOT) == b"sk"
    assert file_store.read(PUBLIC_SLOT) == b"pk"


def test_missing_slot_file_is_storage_error(file_store):
    with pytest.raises(StorageError) as excinfo:
        file_store.read(PUBLIC_SLOT)
    assert isinstance(excinfo.value, OSError)


def test_unwritable_location_is_storage_error(tmp_path):
    store = FileSlotStore({
        PRIVATE_SLOT: tmp_path / "missing-dir" / "sk.pem",
        PUBLIC_SLOT: tmp_path / "pk.pem",
    })
    with pytest.raises(StorageError):
        store.write(PRIVATE_SLOT, b"sk")


def test_unknown_slot_is_storage_error(file_store):
    with pytest.raises(StorageError):
        file_store.write("backup", b"x")


def test_every_slot_needs_a_location(tmp_path):
    with pytest.raises(StorageError):
        FileSlotStore({PRIVATE_SLOT: tmp_path / "sk.pem"})


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
def test_private_slot_is_owner_only(file_store):
    file_store.write(PRIVATE_SLOT, b"sk")
    mode = stat.S_IMODE(os.stat(file_store.paths[PRIVATE_SLOT]).st_mode)
    assert mode == 0o600


def test_from_settings(tmp_path):
    settings = StoreSettings(
        private_key_path=str(tmp_path / "a.pem"),
        public_key_path=str(tmp_path / "b.pem"),
    )
    store = FileSlotStore.from_settings(settings)
    assert store.paths[PRIVATE_SLOT] == tmp_path / "a.pem"
    assert store.paths[PUBLIC_SLOT] == tmp_path / "b.pem"


def test_memory_store_contract():
    store = MemorySlotStore()
    with pytest.raises(StorageError):
        store.read(PRIVATE_SLOT)
    store.write(PRIVATE_SLOT, b"one")
    store.write(PRIVATE_SLOT, b"two")
    assert store.read(PRIVATE_SLOT) == b"two"
