from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from xcstrings_codegen.cli import main
from xcstrings_codegen.generator import HEADER


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)


def test_generates_file(tmp_path: Path, write_catalog, sample_catalog, capsys):
    catalog = write_catalog(sample_catalog)
    out_dir = tmp_path / "out" / "nested"

    code = main(["--input", str(catalog), "--output-dir", str(out_dir), "--separator", "."])

    assert code == 0
    generated = (out_dir / "L10n.swift").read_text(encoding="utf-8")
    assert generated.startswith(HEADER)
    assert "public enum Home {" in generated
    assert "static func itemsCount(_ p1: Int) -> String" in generated
    assert "static func message(_ p1: Any, _ p2: Int) -> String" in generated
    assert "[ok]" in capsys.readouterr().out


def test_stdout_mode(write_catalog, sample_catalog, capsys):
    catalog = write_catalog(sample_catalog)

    code = main(["--input", str(catalog), "--separator", ".", "--stdout", "--type-name", "Strings"])

    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith(HEADER)
    assert "public enum Strings {" in out


def test_missing_catalog_is_reported(tmp_path: Path, capsys):
    code = main(["--input", str(tmp_path / "missing.xcstrings")])

    assert code == 1
    assert "[error] Input xcstrings not found" in capsys.readouterr().err


def test_invalid_catalog_is_reported(tmp_path: Path, capsys):
    path = tmp_path / "bad.xcstrings"
    path.write_text('{"version": "1.0"}', encoding="utf-8")

    assert main(["--input", str(path)]) == 1
    assert "Invalid xcstrings structure" in capsys.readouterr().err


def test_unreadable_catalog_is_reported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys):
    path = tmp_path / "locked.xcstrings"
    path.write_text("{}", encoding="utf-8")
    read_text = Path.read_text

    def deny(self, *args, **kwargs):
        if self.suffix == ".xcstrings":
            raise PermissionError("permission denied")
        return read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", deny)

    assert main(["--input", str(path)]) == 1
    assert "[error] Cannot read xcstrings" in capsys.readouterr().err


def test_invalid_settings_are_reported(write_catalog, sample_catalog, capsys):
    catalog = write_catalog(sample_catalog)

    assert main(["--input", str(catalog), "--separator", "::"]) == 1
    assert "[error] invalid settings" in capsys.readouterr().err


def test_print_config(tmp_path: Path, capsys):
    code = main(["--print-config", "--separator", ".", "--table", "Localizable"])

    assert code == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["SEPARATOR"] == "."
    assert data["TABLE"] == "Localizable"


def test_config_file_is_used(tmp_path: Path, write_catalog, sample_catalog, capsys):
    write_catalog(sample_catalog, name="Strings.xcstrings")
    (tmp_path / "StringsCatalogPluginConfig.json").write_text(
        '{"input": "Strings.xcstrings", "separator": ".", "output": "Texts.swift"}',
        encoding="utf-8",
    )

    assert main([]) == 0
    assert (tmp_path / "Generated" / "Texts.swift").is_file()
