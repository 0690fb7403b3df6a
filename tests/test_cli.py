from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
import yaml

from vnglyph.cli import main


def _args(tmp_path: Path, *extra: str) -> list[str]:
    return [*extra, "--config", str(tmp_path / "vnglyph.yaml")]


def test_generate_text(capsys, tmp_path: Path) -> None:
    rc = main(_args(tmp_path, "A.ss01/E.ss01", "--no-horn", "--no-dotless-i"))
    out = capsys.readouterr().out
    assert rc == 0
    assert "A.ss01+grave=Agrave.ss01" in out
    assert "E.ss01+circumflex=Ecircumflex.ss01" in out


def test_generate_json(capsys, tmp_path: Path) -> None:
    rc = main(_args(tmp_path, "A.ss01/E.ss01", "--format", "json"))
    data = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert data["A.ss01"]["Agrave.ss01"] == "A.ss01+grave"
    assert len(data["E.ss01"]) == 11


def test_single_glyph_style_flags(capsys, tmp_path: Path) -> None:
    main(_args(tmp_path, "A.ss02", "--style", "A", "--feature", "ss02"))
    out = capsys.readouterr().out
    assert "A.ss02+breve=Abreve.ss02" in out


def test_config_file_supplies_options(capsys, tmp_path: Path) -> None:
    (tmp_path / "vnglyph.yaml").write_text(
        "glyph_options:\n  grave_accent_glyph: gravecomb\n", encoding="utf-8"
    )
    main(_args(tmp_path, "Y.ss01/y.ss01"))
    out = capsys.readouterr().out
    assert "Y.ss01+gravecomb=Ygrave.ss01" in out


def test_filter_modes(capsys, tmp_path: Path) -> None:
    main(_args(tmp_path, "i.ss01/O.ss01", "--mode", "filter-i"))
    assert capsys.readouterr().out.strip() == "i.ss01=dotlessi.ss01"

    main(_args(tmp_path, "i.ss01/O.ss01", "--mode", "filter-horn", "--bare-horn"))
    assert capsys.readouterr().out.strip() == "O.ss01=Ohorn.ss01"


def test_groups_format(capsys, tmp_path: Path) -> None:
    main(_args(tmp_path, "Ohorn.ss01/O.ss01", "--format", "groups"))
    assert capsys.readouterr().out.strip() == "O.ss01/Ohorn.ss01/"


def test_reads_stdin(monkeypatch, capsys, tmp_path: Path) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("A.ss01/\nE.ss01/\n"))
    main(_args(tmp_path, "-"))
    out = capsys.readouterr().out
    assert "A.ss01+grave=Agrave.ss01" in out


def test_output_file_and_save_config(tmp_path: Path) -> None:
    target = tmp_path / "rules.txt"
    rc = main(_args(tmp_path, "A.ss01/E.ss01", "--no-horn", "--output", str(target), "--save-config"))
    assert rc == 0
    with target.open("r", encoding="utf-8", newline="") as f:
        text = f.read()
    assert "A.ss01+grave=Agrave.ss01\r\n" in text

    saved = yaml.safe_load((tmp_path / "vnglyph.yaml").read_text(encoding="utf-8"))
    assert saved["glyph_options"] == {"should_create_horn": False}


def test_unwritable_output(tmp_path: Path) -> None:
    target = tmp_path / "missing_dir" / "rules.txt"
    assert main(_args(tmp_path, "A.ss01/E.ss01", "--output", str(target))) == 1


def test_glyph_name_flags_override_config(capsys, tmp_path: Path) -> None:
    (tmp_path / "vnglyph.yaml").write_text(
        "glyph_options:\n  grave_accent_glyph: gravecomb\n", encoding="utf-8"
    )
    main(_args(tmp_path, "Y.ss01/D.ss01/O.ss01", "--grave", "grave.ss01", "--d-stroke-upper", "hyphen.sc1",
               "--horn-upper", "horncomb"))
    out = capsys.readouterr().out
    assert "Y.ss01+grave.ss01=Ygrave.ss01" in out
    assert "D.ss01+hyphen.sc1=Dcroat.ss01" in out
    assert "O.ss01+horncomb=Ohorn.ss01" in out


def test_help_lists_presets(capsys) -> None:
    with pytest.raises(SystemExit):
        main(["--help"])
    out = capsys.readouterr().out
    assert "--d-stroke-upper" in out
    assert "hyphen.sc1" in out
