from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from foswitch.config import SwitchConfig
from foswitch.paths import PathResolver

DEV_CONFIG_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<DynamicsDevConfig xmlns:i="http://www.w3.org/2001/XMLSchema-instance" \
xmlns="http://schemas.microsoft.com/dynamics/2012/03/development/configuration">
  <AosWebsiteName>AOSService</AosWebsiteName>
  <WebRoleDeploymentFolder>{web_root}</WebRoleDeploymentFolder>
</DynamicsDevConfig>
"""

WEB_CONFIG_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<configuration>
  <appSettings>
    <!-- platform settings -->
    <add key="Aos.AppRoot" value="C:\\AosService\\webroot" />
    <add key="Aos.MetadataDirectory" value="{metadata}" />
    <add key="Aos.PackageDirectory" value="{metadata}" />
    <add key="bindir" value="{metadata}" />
    <add key="Common.BinDir" value="{metadata}" />
    <add key="Microsoft.Dynamics.AX.AosConfig.AzureConfig.bindir" value="{metadata}" />
    <add key="Common.DevToolsBinDir" value="{metadata}/bin" />
    <add key="DataAccess.Database" value="AxDB" />
  </appSettings>
  <runtime>
    <assemblyBinding xmlns="urn:schemas-microsoft-com:asm.v1">
      <dependentAssembly>
        <assemblyIdentity name="Newtonsoft.Json" publicKeyToken="30ad4fe6b2a6aeed" culture="neutral"/>
        <bindingRedirect oldVersion="0.0.0.0-13.0.0.0" newVersion="13.0.0.0"/>
      </dependentAssembly>
    </assemblyBinding>
  </runtime>
</configuration>
"""

IDE_SETTINGS_TEMPLATE = """<UserSettings>
  <ApplicationIdentity version="17.0" />
  <ToolsOptions>
    <ToolsOptionsCategory name="Environment" RegisteredName="Environment">
      <ToolsOptionsSubCategory name="ProjectsAndSolution" RegisteredName="ProjectsAndSolution">
        <PropertyValue name="ProjectsLocation">{projects}</PropertyValue>
        <PropertyValue name="ShowOutputWindowBeforeBuild">true</PropertyValue>
      </ToolsOptionsSubCategory>
    </ToolsOptionsCategory>
  </ToolsOptions>
</UserSettings>
"""


@dataclass(frozen=True)
class FakeMachine:
    root: Path
    documents_dir: Path
    local_app_data_dir: Path
    dev_config: Path
    web_root: Path
    web_config: Path
    ide_settings: Path
    original_metadata: Path
    config: SwitchConfig

    def resolver(self) -> PathResolver:
        return PathResolver(self.config, drives=FakeDrives([]))


class FakeDrives:
    def __init__(self, drives: list[Path]) -> None:
        self.drives = drives

    def fixed_drives(self) -> list[Path]:
        return list(self.drives)


class RecordingController:
    def __init__(self) -> None:
        self.stop_calls = 0

    def stop(self) -> None:
        self.stop_calls += 1


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def machine(tmp_path: Path) -> FakeMachine:
    documents_dir = tmp_path / "Documents"
    local_app_data_dir = tmp_path / "AppData" / "Local"
    web_root = tmp_path / "AosService" / "webroot"
    original_metadata = tmp_path / "AosService" / "PackagesLocalDirectory"

    dev_config = _write(
        documents_dir / "Visual Studio Dynamics 365" / "DynamicsDevConfig.xml",
        DEV_CONFIG_TEMPLATE.format(web_root=web_root),
    )
    web_config = _write(web_root / "web.config", WEB_CONFIG_TEMPLATE.format(metadata=original_metadata))
    ide_settings = _write(
        local_app_data_dir / "Microsoft" / "VisualStudio" / "17.0_1a2b3c4d" / "Settings" / "CurrentSettings.vssettings",
        IDE_SETTINGS_TEMPLATE.format(projects=tmp_path / "source" / "repos"),
    )

    return FakeMachine(
        root=tmp_path,
        documents_dir=documents_dir,
        local_app_data_dir=local_app_data_dir,
        dev_config=dev_config,
        web_root=web_root,
        web_config=web_config,
        ide_settings=ide_settings,
        original_metadata=original_metadata,
        config=SwitchConfig(documents_dir=documents_dir, local_app_data_dir=local_app_data_dir),
    )


@pytest.fixture
def write_file():
    return _write


@pytest.fixture
def controller() -> RecordingController:
    return RecordingController()


@pytest.fixture
def make_drives():
    return FakeDrives
