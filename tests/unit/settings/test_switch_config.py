from __future__ import annotations

from pathlib import Path

import pytest

from foswitch.common import AppPaths
from foswitch.config import FileConfig, SwitchConfig, get_config_file_path, load_config_file
from foswitch.errors import ConfigFileError
from foswitch.settings import Settings


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in (
        "FOSWITCH_DOCUMENTS_DIR", "FOSWITCH_IDE_VERSION", "FOSWITCH_PACKAGE_STORE_DIR", "FOSWITCH_STOP_COMMAND"
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_file_path_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert get_config_file_path(AppPaths()) == tmp_path / "xdg" / "foswitch" / "config.yaml"


def test_missing_config_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config_file(tmp_path / "config.yaml")

    assert config == FileConfig()
    assert config.logging.enabled is True


def test_config_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        """
logging:
  log_level: DEBUG
  format: json
defaults:
  ide_version: VS2019
  stop_command: ["net", "stop", "W3SVC"]
""",
        encoding="utf-8",
    )

    config = load_config_file(path)

    assert config.logging.log_level == "DEBUG"
    assert config.defaults.ide_version == "VS2019"
    assert config.defaults.stop_command == ["net", "stop", "W3SVC"]


def test_invalid_yaml_reports_position(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("defaults: [", encoding="utf-8")

    with pytest.raises(ConfigFileError) as exc_info:
        load_config_file(path)

    assert exc_info.value.path == path
    assert exc_info.value.line is not None


def test_unknown_field_reports_location(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("defaults:\n  colour: blue\n", encoding="utf-8")

    with pytest.raises(ConfigFileError) as exc_info:
        load_config_file(path)

    assert exc_info.value.field == "defaults.colour"


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigFileError, match="mapping"):
        load_config_file(path)


def test_switch_config_uses_file_defaults(tmp_path: Path) -> None:
    file_config = FileConfig.model_validate(
        {"defaults": {"documents_dir": str(tmp_path / "docs"), "ide_version": "VS2017"}}
    )

    config = Settings().to_switch_config(file_config)

    assert config.documents_dir == tmp_path / "docs"
    assert config.ide_version == "VS2017"
    assert config.package_store_dir is None


def test_environment_overrides_file_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FOSWITCH_IDE_VERSION", "VS2019")
    monkeypatch.setenv("FOSWITCH_PACKAGE_STORE_DIR", str(tmp_path / "store"))
    monkeypatch.setenv("FOSWITCH_STOP_COMMAND", '["pwsh", "-Command", "Stop-D365Environment"]')
    file_config = FileConfig.model_validate({"defaults": {"ide_version": "VS2017"}})

    config = Settings().to_switch_config(file_config)

    assert config.ide_version == "VS2019"
    assert config.package_store_dir == tmp_path / "store"
    assert config.stop_command == ["pwsh", "-Command", "Stop-D365Environment"]


def test_switch_config_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "profile"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "local"))

    config = SwitchConfig()

    assert config.documents_dir == tmp_path / "profile" / "Documents"
    assert config.local_app_data_dir == tmp_path / "local"
    assert config.ide_version == "VS2022"
    assert config.stop_command == []
