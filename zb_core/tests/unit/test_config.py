from pathlib import Path

import pytest

pytest.importorskip("yaml")

from zb_core import config as config_module
from zb_core.config import AppConfig, EncoderConfig, dump_default_config, load_config


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "default_config_path", lambda: tmp_path / "user" / "config.yaml")
    return tmp_path


def test_defaults_when_no_file(isolated: Path) -> None:
    config = load_config()
    assert config == AppConfig()
    assert config.encoder.strict is False
    assert config.encoder.output_format == "json"
    assert config.logging.normalized_level() == "INFO"


def test_default_is_a_copy(isolated: Path) -> None:
    config = load_config()
    config.encoder.strict = True
    assert config_module.DEFAULT_CONFIG.encoder.strict is False


def test_explicit_path_loaded(isolated: Path) -> None:
    target = isolated / "custom.yaml"
    target.write_text("encoder:\n  strict: true\n  output_format: HEX\nlogging:\n  level: debug\n", encoding="utf-8")
    config = load_config(target)
    assert config.encoder.strict is True
    assert config.encoder.output_format == "hex"
    assert config.logging.normalized_level() == "DEBUG"


def test_cwd_config_discovered(isolated: Path) -> None:
    local = isolated / ".zb" / "config.yaml"
    local.parent.mkdir()
    local.write_text("encoder:\n  output_format: base64\n", encoding="utf-8")
    assert load_config().encoder.output_format == "base64"


def test_invalid_config_raises_value_error(isolated: Path) -> None:
    target = isolated / "bad.yaml"
    target.write_text("encoder:\n  output_format: octal\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(target)


def test_output_format_validator() -> None:
    with pytest.raises(ValueError):
        EncoderConfig(output_format="binary")


def test_dump_default_round_trip(isolated: Path) -> None:
    target = isolated / "nested" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == AppConfig()
