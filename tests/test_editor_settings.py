import json

from rendering.editor import (
    AUTO_MATCH_STORAGE_KEY,
    DEFAULT_SETTINGS,
    AutoMatchSettings,
    load_settings,
    save_settings,
    update_settings,
)


def test_defaults_enable_everything():
    assert DEFAULT_SETTINGS == AutoMatchSettings(
        parens=True, brackets=True, double_quotes=True, single_quotes=True, backticks=True
    )


def test_missing_key_loads_defaults(store):
    assert load_settings(store) == DEFAULT_SETTINGS


def test_malformed_json_loads_defaults(store, caplog):
    store[AUTO_MATCH_STORAGE_KEY] = "{not json"
    assert load_settings(store) == DEFAULT_SETTINGS
    assert "Ignoring malformed auto-match settings" in caplog.text


def test_non_object_json_loads_defaults(store, caplog):
    store[AUTO_MATCH_STORAGE_KEY] = "[true, false]"
    assert load_settings(store) == DEFAULT_SETTINGS
    assert "not a JSON object" in caplog.text


def test_partial_settings_fill_in_defaults(store):
    store[AUTO_MATCH_STORAGE_KEY] = json.dumps({"singleQuotes": False})
    loaded = load_settings(store)
    assert loaded.single_quotes is False
    assert loaded.parens and loaded.brackets and loaded.double_quotes and loaded.backticks


def test_non_boolean_values_are_ignored(store):
    store[AUTO_MATCH_STORAGE_KEY] = json.dumps({"parens": "no", "backticks": 0})
    assert load_settings(store) == DEFAULT_SETTINGS


def test_save_writes_camel_case_json(store):
    save_settings(store, AutoMatchSettings(double_quotes=False))
    assert json.loads(store[AUTO_MATCH_STORAGE_KEY]) == {
        "parens": True,
        "brackets": True,
        "doubleQuotes": False,
        "singleQuotes": True,
        "backticks": True,
    }


def test_update_persists_immediately(store):
    updated = update_settings(store, DEFAULT_SETTINGS, backticks=False)
    assert updated.backticks is False
    assert load_settings(store) == updated


def test_update_keeps_other_toggles(store):
    current = AutoMatchSettings(parens=False)
    updated = update_settings(store, current, brackets=False)
    assert updated == AutoMatchSettings(parens=False, brackets=False)
