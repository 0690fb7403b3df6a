from __future__ import annotations

from pathlib import Path

import yaml

from vnglyph.domain.glyph_options import GlyphOptions
from vnglyph.services.settings_store import CONFIG_ENV_VAR, SettingsStore


def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "vnglyph.yaml")
    payload = {
        "glyph_options": {
            "grave_accent_glyph": "gravecomb",
            "should_create_horn": False,
        },
        "note": "ss01 alternates",
    }
    assert store.save(payload)
    loaded = store.load()
    assert loaded == payload
    assert not (tmp_path / "vnglyph.yaml.tmp").exists()


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "absent.yaml")
    assert store.load() == {}
    assert store.get_glyph_options() == GlyphOptions()


def test_broken_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("grave_accent_glyph: [unclosed\n", encoding="utf-8")
    store = SettingsStore(path)
    assert store.load() == {}
    assert store.get_glyph_options() == GlyphOptions()


def test_non_mapping_document_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- grave\n- acute\n", encoding="utf-8")
    assert SettingsStore(path).load() == {}


def test_top_level_camel_case_options(tmp_path: Path) -> None:
    path = tmp_path / "legacy.yaml"
    path.write_text(
        "graveAccentGlyph: gravecomb\nopenTypeFeature: ss03\nshouldCreateDotlessI: false\n",
        encoding="utf-8",
    )
    options = SettingsStore(path).get_glyph_options()
    assert options.grave_accent_glyph == "gravecomb"
    assert options.open_type_feature == "ss03"
    assert options.should_create_dotless_i is False


def test_set_glyph_options_preserves_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "vnglyph.yaml"
    store = SettingsStore(path)
    store.save({"note": "keep me"})

    options = GlyphOptions(character_style="O", horn_glyph_uppercase="horn.cap")
    assert store.set_glyph_options(options)

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert raw["note"] == "keep me"
    assert raw["glyph_options"] == {"character_style": "O", "horn_glyph_uppercase": "horn.cap"}
    assert store.get_glyph_options() == options


def test_env_var_selects_path(monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "from_env.yaml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert SettingsStore().path == path


def test_default_path_is_working_directory(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    assert SettingsStore().path == tmp_path / "vnglyph.yaml"
