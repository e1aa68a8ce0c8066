from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from enki.config import EnkiConfig, load_config, resolve_style
from enki.errors import ConfigError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "enki.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_defaults() -> None:
    config = load_config(environ={})
    assert config == EnkiConfig()
    assert config.style == "colorized"
    assert config.export_duration is False
    assert config.exporter == "console"


def test_load_from_yaml(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        style: plain
        export_duration: true
        exporter: xml
        output: results.xml
        """,
    )
    config = load_config(str(path), environ={})
    assert config == EnkiConfig(style="plain", export_duration=True, exporter="xml", output="results.xml")


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, "")
    assert load_config(str(path), environ={}) == EnkiConfig()


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "style: colorized\n")
    config = load_config(str(path), environ={"ENKI_STYLE": "PLAIN"})
    assert config.style == "plain"


def test_schema_rejects_unknown_style(tmp_path: Path) -> None:
    path = _write(tmp_path, "style: neon\n")
    with pytest.raises(ConfigError) as exc:
        load_config(str(path), environ={})
    assert "style" in str(exc.value)


def test_schema_rejects_unknown_key(tmp_path: Path) -> None:
    path = _write(tmp_path, "colour: red\n")
    with pytest.raises(ConfigError) as exc:
        load_config(str(path), environ={})
    assert "colour" in str(exc.value)


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "- plain\n")
    with pytest.raises(ConfigError):
        load_config(str(path), environ={})


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "absent.yaml"), environ={})


def test_with_overrides_skips_none() -> None:
    config = EnkiConfig().with_overrides(style=None, exporter="text", output="out.log")
    assert config.style == "colorized"
    assert config.exporter == "text"
    assert config.output == "out.log"


def test_resolve_style(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_style() == "colorized"
    assert resolve_style("Plain") == "plain"
    monkeypatch.setenv("ENKI_STYLE", "plain")
    assert resolve_style() == "plain"
    assert resolve_style("colorized") == "colorized"
    with pytest.raises(ConfigError):
        resolve_style("neon")
