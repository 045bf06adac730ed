from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from foswitch.config import SwitchConfig
from foswitch.errors import ConfigNotFoundError, PackageStoreNotFoundError
from foswitch.paths import PathResolver, ide_version_token

if TYPE_CHECKING:
    from conftest import FakeMachine


def test_resolve_developer_config_path(machine: FakeMachine) -> None:
    assert machine.resolver().resolve_developer_config_path() == machine.dev_config


def test_resolve_developer_config_path_missing_raises(tmp_path: Path) -> None:
    resolver = PathResolver(SwitchConfig(documents_dir=tmp_path, local_app_data_dir=tmp_path))

    with pytest.raises(ConfigNotFoundError) as exc_info:
        resolver.resolve_developer_config_path()

    assert exc_info.value.path == tmp_path / "Visual Studio Dynamics 365" / "DynamicsDevConfig.xml"


def test_resolve_web_config_path_reads_dev_config(machine: FakeMachine) -> None:
    resolver = machine.resolver()

    assert resolver.resolve_web_config_path() == machine.web_config
    assert resolver.resolve_web_config_path(machine.dev_config) == machine.web_config


@pytest.mark.parametrize(
    ("label", "token"),
    [
        ("VS2015", "14.0"),
        ("VS2017", "15.0"),
        ("vs2019", "16.0"),
        ("VS2022", "17.0"),
        ("VS2010", "17.0"),
        (None, "17.0"),
    ],
)
def test_ide_version_token(label: str | None, token: str) -> None:
    assert ide_version_token(label) == token


def test_resolve_ide_settings_path_uses_configured_version(machine: FakeMachine) -> None:
    assert machine.resolver().resolve_ide_settings_path() == machine.ide_settings


def test_resolve_ide_settings_path_returns_first_sorted_match(machine: FakeMachine, write_file) -> None:
    base = machine.local_app_data_dir / "Microsoft" / "VisualStudio"
    first = write_file(base / "16.0_aaaa" / "Settings" / "CurrentSettings.vssettings", "<UserSettings />")
    write_file(base / "16.0_bbbb" / "Settings" / "CurrentSettings.vssettings", "<UserSettings />")

    assert machine.resolver().resolve_ide_settings_path("VS2019") == first


def test_resolve_ide_settings_path_returns_none_without_match(machine: FakeMachine) -> None:
    assert machine.resolver().resolve_ide_settings_path("VS2015") is None


def test_package_store_override_is_used_when_directory(tmp_path: Path, make_drives) -> None:
    store = tmp_path / "store"
    store.mkdir()
    resolver = PathResolver(SwitchConfig(documents_dir=tmp_path), drives=make_drives([]))

    assert resolver.resolve_package_store_directory(store) == store


def test_package_store_configured_override(tmp_path: Path, make_drives) -> None:
    store = tmp_path / "store"
    store.mkdir()
    resolver = PathResolver(SwitchConfig(documents_dir=tmp_path, package_store_dir=store), drives=make_drives([]))

    assert resolver.resolve_package_store_directory() == store


def test_package_store_scans_drives_in_order(tmp_path: Path, make_drives) -> None:
    drives = [tmp_path / "C", tmp_path / "J", tmp_path / "K"]
    for drive in drives:
        drive.mkdir()
    (drives[1] / "AosService" / "PackagesLocalDirectory").mkdir(parents=True)
    (drives[2] / "AosService" / "PackagesLocalDirectory").mkdir(parents=True)
    resolver = PathResolver(SwitchConfig(documents_dir=tmp_path), drives=make_drives(drives))

    assert resolver.resolve_package_store_directory() == drives[1] / "AosService" / "PackagesLocalDirectory"


def test_invalid_override_falls_back_to_drive_scan(tmp_path: Path, make_drives) -> None:
    drive = tmp_path / "K"
    (drive / "AosService" / "PackagesLocalDirectory").mkdir(parents=True)
    resolver = PathResolver(SwitchConfig(documents_dir=tmp_path), drives=make_drives([drive]))

    resolved = resolver.resolve_package_store_directory(tmp_path / "missing")

    assert resolved == drive / "AosService" / "PackagesLocalDirectory"


def test_package_store_not_found_raises(tmp_path: Path, make_drives) -> None:
    resolver = PathResolver(SwitchConfig(documents_dir=tmp_path), drives=make_drives([tmp_path]))

    with pytest.raises(PackageStoreNotFoundError):
        resolver.resolve_package_store_directory()
