"""Tests for core.deck.persistence: stores, codec and PreferencesAdapter."""

import json

import pytest
from core.deck import (
    PREFERENCES_KEY,
    InMemoryStore,
    KeyValueStore,
    DeckSession,
    PersistenceDecodeError,
    PersistenceReadError,
    PersistenceWriteError,
    PreferencesAdapter,
    SqlKeyValueStore,
    decode_selection,
    encode_selection,
    get_engine,
)


class FailingStore(KeyValueStore):
    """Store whose writes always fail."""

    def __init__(self, value=None):
        self.value = value

    def get(self, key):
        return self.value

    def set(self, key, value):
        raise PersistenceWriteError("disk full")


class BrokenReadStore(KeyValueStore):
    """Store whose reads fail with a plain I/O error."""

    def get(self, key):
        raise OSError("disk unreadable")

    def set(self, key, value):
        pass


@pytest.fixture
def sql_store(tmp_path):
    return SqlKeyValueStore(get_engine(f"sqlite:///{tmp_path / 'prefs.db'}"))


class TestDecodeSelection:
    def test_decodes_list_of_ids(self):
        assert decode_selection('["starter", "deep"]') == ["starter", "deep"]

    @pytest.mark.parametrize("raw", [
        "not json {{{",
        "",
        '{"starter": true}',
        '"starter"',
        "[]",
        "[1, 2]",
        '["starter", null]',
        '["starter", ""]',
    ])
    def test_rejects_malformed_values(self, raw):
        with pytest.raises(PersistenceDecodeError):
            decode_selection(raw)

    def test_encode_is_json_list(self):
        assert json.loads(encode_selection(("deep", "fun"))) == ["deep", "fun"]


class TestPreferencesAdapter:
    def test_load_absent_returns_none(self, preferences):
        assert preferences.load() is None

    def test_round_trip(self, preferences):
        assert preferences.save(["deep", "starter"]) is True
        assert set(preferences.load()) == {"deep", "starter"}

    def test_uses_fixed_namespace_key(self, store, preferences):
        preferences.save(["deep"])
        assert json.loads(store.data[PREFERENCES_KEY]) == ["deep"]
        assert PREFERENCES_KEY == "nextcard-categories"

    @pytest.mark.parametrize("raw", ["garbage", "[]", '{"a": 1}', "[3]"])
    def test_corrupt_value_loads_as_absent(self, raw):
        adapter = PreferencesAdapter(InMemoryStore({PREFERENCES_KEY: raw}))
        assert adapter.load() is None

    def test_corrupt_value_is_logged(self, caplog):
        adapter = PreferencesAdapter(InMemoryStore({PREFERENCES_KEY: "garbage"}))
        adapter.load()
        assert "Failed to parse saved categories" in caplog.text

    def test_write_failure_is_absorbed(self, caplog):
        adapter = PreferencesAdapter(FailingStore())
        assert adapter.save(["deep"]) is False
        assert "Failed to save categories" in caplog.text

    def test_read_failure_loads_as_absent(self):
        assert PreferencesAdapter(BrokenReadStore()).load() is None

    def test_deck_read_error_loads_as_absent(self):
        class DeckErrorStore(BrokenReadStore):
            def get(self, key):
                raise PersistenceReadError("timeout")

        assert PreferencesAdapter(DeckErrorStore()).load() is None

    def test_io_error_on_write_is_absorbed(self):
        class FullDiskStore(InMemoryStore):
            def set(self, key, value):
                raise OSError("no space left")

        assert PreferencesAdapter(FullDiskStore()).save(["deep"]) is False

    def test_unreadable_store_starts_with_starter(self, catalog):
        session = DeckSession(catalog, PreferencesAdapter(BrokenReadStore()))
        assert session.get_selection() == ["starter"]
        assert session.get_current_card().source_category_id == "starter"


class TestSqlKeyValueStore:
    def test_missing_key_returns_none(self, sql_store):
        assert sql_store.get("nothing") is None

    def test_set_then_get(self, sql_store):
        sql_store.set("k", "v1")
        sql_store.set("k", "v2")
        assert sql_store.get("k") == "v2"

    def test_survives_reopen(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'prefs.db'}"
        PreferencesAdapter(SqlKeyValueStore(get_engine(url))).save(["fun", "deep"])

        reopened = PreferencesAdapter(SqlKeyValueStore(get_engine(url)))
        assert reopened.load() == ["fun", "deep"]

    def test_unreachable_database_does_not_raise_on_open(self, tmp_path):
        store = SqlKeyValueStore(get_engine(f"sqlite:///{tmp_path / 'missing_dir' / 'prefs.db'}"))
        with pytest.raises(PersistenceReadError):
            store.get(PREFERENCES_KEY)
        with pytest.raises(PersistenceWriteError):
            store.set(PREFERENCES_KEY, "[]")

    def test_unreachable_database_degrades_to_default(self, tmp_path, catalog, caplog):
        store = SqlKeyValueStore(get_engine(f"sqlite:///{tmp_path / 'missing_dir' / 'prefs.db'}"))
        session = DeckSession(catalog, PreferencesAdapter(store))
        assert session.get_selection() == ["starter"]

        session.toggle_category("deep")
        assert session.get_selection() == ["starter", "deep"]
        assert "Could not read saved categories" in caplog.text
        assert "Failed to save categories" in caplog.text
