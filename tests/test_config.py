"""Tests for nativegen.codegen.core.config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nativegen.codegen import get_language
from nativegen.codegen.core.config import (
    ConfigError,
    SettingsStore,
    default_settings_path,
    load_settings,
    settings_from_dict,
    settings_key,
    settings_to_dict,
)
from nativegen.codegen.languages.cpp import CppSettings
from nativegen.codegen.languages.lua import LuaSettings


def test_settings_key() -> None:
    assert settings_key("lua") == "Pages.GenerateCode.lua"
    assert get_language("cs").settings_key == "Pages.GenerateCode.csharp"


def test_settings_round_trip_through_dict() -> None:
    settings = LuaSettings(naming="original", generate_manifest=True)

    assert settings_from_dict(LuaSettings, settings_to_dict(settings)) == settings


def test_unknown_keys_are_dropped_and_missing_keys_default() -> None:
    settings = settings_from_dict(CppSettings, {"generate_invokers": True, "obsolete": 1})

    assert settings == CppSettings(generate_invokers=True)


@pytest.mark.parametrize(
    "data", [{"generate_invokers": "yes"}, {"invoke_function": 3}]
)
def test_wrong_value_types_are_rejected(data: dict) -> None:
    with pytest.raises(ConfigError):
        settings_from_dict(CppSettings, data)


def test_default_path_honours_environment(settings_path: Path) -> None:
    assert default_settings_path() == settings_path
    assert SettingsStore().path == settings_path


def test_store_returns_defaults_without_file(tmp_path: Path) -> None:
    spec = get_language("cpp")

    assert SettingsStore(tmp_path / "none.json").load(spec) == CppSettings()


def test_store_saves_per_backend_entries(tmp_path: Path) -> None:
    path = tmp_path / "config" / "settings.json"
    store = SettingsStore(path)
    cpp, lua = get_language("cpp"), get_language("lua")

    store.save(cpp, CppSettings(generate_invokers=True))
    store.save(lua, LuaSettings(naming="original"))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"Pages.GenerateCode.cpp", "Pages.GenerateCode.lua"}
    assert data["Pages.GenerateCode.cpp"]["generate_invokers"] is True

    assert store.load(cpp) == CppSettings(generate_invokers=True)
    assert store.load(lua).naming == "original"

    store.reset(cpp)
    assert store.load(cpp) == CppSettings()
    assert store.load(lua).naming == "original"


def test_store_rejects_malformed_files(tmp_path: Path) -> None:
    spec = get_language("cpp")
    path = tmp_path / "settings.json"

    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigError):
        SettingsStore(path).load(spec)

    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        SettingsStore(path).load(spec)

    path.write_text(json.dumps({"Pages.GenerateCode.cpp": "on"}), encoding="utf-8")
    with pytest.raises(ConfigError):
        SettingsStore(path).load(spec)


def test_load_settings_merges_file_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "cpp.json"
    path.write_text(
        json.dumps({"generate_invokers": True, "invoke_function": "call"}),
        encoding="utf-8",
    )

    settings = load_settings(
        get_language("cpp"), overrides={"invoke_function": "invoke2"}, settings_file=path
    )

    assert settings == CppSettings(generate_invokers=True, invoke_function="invoke2")


def test_load_settings_file_errors(tmp_path: Path) -> None:
    spec = get_language("cpp")

    with pytest.raises(ConfigError, match="not found"):
        load_settings(spec, settings_file=tmp_path / "missing.json")

    yaml_file = tmp_path / "settings.yml"
    yaml_file.write_text("generate_invokers: true", encoding="utf-8")
    with pytest.raises(ConfigError, match="JSON"):
        load_settings(spec, settings_file=yaml_file)


@pytest.mark.parametrize(
    "overrides",
    [{"naming": "bogus"}, {"pointer_style": "nonsense"}, {"indentation": "xx"}],
)
def test_load_settings_rejects_values_outside_the_choices(overrides: dict) -> None:
    with pytest.raises(ConfigError, match="Invalid csharp settings"):
        load_settings(get_language("csharp"), overrides=overrides)


def test_store_rejects_stored_values_outside_the_choices(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"Pages.GenerateCode.lua": {"line_ending": "\r"}}), encoding="utf-8"
    )

    with pytest.raises(ConfigError, match="line_ending"):
        SettingsStore(path).load(get_language("lua"))
