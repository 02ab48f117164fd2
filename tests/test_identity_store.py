from __future__ import annotations

import pytest
from PySide6.QtCore import QSettings

from quiz_player.core.models import PlayerIdentity
from quiz_player.core.services.identity_store import (
    DEFAULT_PLAYER_NAME,
    PLAYER_ID_KEY,
    ROOM_CODE_KEY,
    IdentityStore,
)


@pytest.fixture
def settings(tmp_path):
    return QSettings(str(tmp_path / "identity.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def store(settings):
    return IdentityStore(settings)


def test_empty_store_has_no_identity(store):
    assert store.load() is None


def test_saved_identity_is_loaded_back(store):
    store.save(PlayerIdentity(player_id=7, player_name="Ada", room_code="ABC123"))

    assert store.load() == PlayerIdentity(player_id=7, player_name="Ada", room_code="ABC123")


def test_saving_without_room_drops_previous_room(store, settings):
    store.save(PlayerIdentity(player_id=7, player_name="Ada", room_code="ABC123"))
    store.save(PlayerIdentity(player_id=7, player_name="Ada"))

    assert not settings.contains(ROOM_CODE_KEY)
    assert store.load().room_code is None


def test_missing_name_falls_back_to_default(store, settings):
    settings.setValue(PLAYER_ID_KEY, "12")

    assert store.load() == PlayerIdentity(player_id=12, player_name=DEFAULT_PLAYER_NAME)


def test_malformed_player_id_is_ignored(store, settings):
    settings.setValue(PLAYER_ID_KEY, "not-a-number")

    assert store.load() is None


def test_clear_forgets_the_player(store):
    store.save(PlayerIdentity(player_id=7, player_name="Ada", room_code="ABC123"))

    store.clear()

    assert store.load() is None
