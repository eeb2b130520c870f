import json
import logging
from pathlib import Path

import pytest

import licensekit.core.catalog as catalog_mod
from licensekit.cli.main import main
from licensekit.core.catalog import build_catalog
from licensekit.core.config import CatalogConfig, LicenseKitConfig, TextConfig
from licensekit.core.registries import default_license_registry


@pytest.fixture(autouse=True)
def builtin_catalog(monkeypatch):
    catalog = build_catalog(default_license_registry(CatalogConfig(load_plugins=False)))
    monkeypatch.setattr(catalog_mod, "_CATALOG", catalog)
    return catalog


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("licensekit")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    logger.handlers[:] = saved[2]


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_text_command(tmp_path, capsys):
    path = _write(
        tmp_path,
        "Foo.pm",
        "package Foo;\n\n=head1 LICENSE\n\nunder the same terms as Perl itself.\n\n=cut\n",
    )

    rc = main(["text", str(path)])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["Perl_5"]


def test_cli_text_markdown(tmp_path, capsys):
    path = _write(tmp_path, "README.md", "# Foo\n\n## License\n\nGNU General Public License\n")

    rc = main(["text", str(path), "--syntax", "markdown"])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["GPL_1", "GPL_2", "GPL_3"]


def test_cli_text_syntax_from_config(tmp_path, capsys):
    cfg_path = tmp_path / "cfg.json"
    LicenseKitConfig(text=TextConfig(syntax="markdown")).to_json(cfg_path)
    path = _write(tmp_path, "README.md", "## Licence\n\nMIT\n")

    rc = main(["--config", str(cfg_path), "text", str(path)])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["MIT"]


def test_cli_meta_command(tmp_path, capsys):
    path = _write(tmp_path, "META.yml", "---\nname: Foo\nlicense: mit\n")

    rc = main(["meta", str(path)])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["MIT"]


def test_cli_key_command(capsys):
    rc = main(["key", "gpl", "--meta-version", "1"])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["GPL_1", "GPL_2", "GPL_3"]


def test_cli_key_illegal_version(capsys):
    rc = main(["key", "gpl", "--meta-version", "3"])

    assert rc == 1
    assert "illegal metadata version" in capsys.readouterr().err


def test_cli_list_command(capsys):
    rc = main(["list"])

    assert rc == 0
    rows = json.loads(capsys.readouterr().out)
    gpl2 = next(row for row in rows if row["id"] == "GPL_2")
    assert gpl2 == {
        "id": "GPL_2",
        "name": "The GNU General Public License, Version 2, June 1991",
        "meta1": "gpl",
        "meta2": "gpl_2",
    }


def test_cli_notice_command(capsys):
    rc = main(["notice", "LGPL-2.1", "--holder", "X. Ample", "--year", "2020"])

    assert rc == 0
    out = capsys.readouterr().out
    assert "copyright (c) 2020 by X. Ample" in out
    assert "Lesser General Public License, Version 2.1" in out


def test_cli_notice_unknown_short_name(capsys):
    rc = main(["notice", "Foo-Bar", "--holder", "X. Ample"])

    assert rc == 1
    assert "unknown license with short name 'Foo-Bar'" in capsys.readouterr().err


def test_cli_applies_logging_config(tmp_path, capsys, restore_package_logger):
    cfg_path = tmp_path / "licensekit.toml"
    cfg_path.write_text(
        '[logging]\nlevel = "DEBUG"\npropagate = false\n',
        encoding="utf-8",
    )

    rc = main(["--config", str(cfg_path), "key", "mit"])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == ["MIT"]
    assert restore_package_logger.propagate is False
    assert restore_package_logger.level == logging.DEBUG


def test_cli_log_level_flag_keeps_config_propagate(tmp_path, restore_package_logger):
    cfg_path = tmp_path / "licensekit.toml"
    cfg_path.write_text('[logging]\npropagate = true\n', encoding="utf-8")

    rc = main(["--log-level", "WARNING", "--config", str(cfg_path), "list"])

    assert rc == 0
    assert restore_package_logger.propagate is True
    assert restore_package_logger.level == logging.WARNING
