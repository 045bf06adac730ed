from pathlib import PurePath

APP_NAME = "foswitch"
ENV_PREFIX = "FOSWITCH_"

BACKUP_SUFFIX = "_OrigBackup"

DEV_CONFIG_RELATIVE_PATH = PurePath("Visual Studio Dynamics 365", "DynamicsDevConfig.xml")
WEB_ROOT_ELEMENT = "WebRoleDeploymentFolder"
WEB_CONFIG_FILENAME = "web.config"

PACKAGE_STORE_RELATIVE_PATH = PurePath("AosService", "PackagesLocalDirectory")

METADATA_DIR_NAME = "Metadata"
PROJECTS_DIR_NAME = "Projects"
BIN_DIR_NAME = "bin"

METADATA_DIRECTORY_KEY = "Aos.MetadataDirectory"
PACKAGE_DIRECTORY_KEY = "Aos.PackageDirectory"
BINDIR_KEY = "bindir"
COMMON_BINDIR_KEY = "Common.BinDir"
AZURE_BINDIR_KEY = "Microsoft.Dynamics.AX.AosConfig.AzureConfig.bindir"
DEV_TOOLS_BINDIR_KEY = "Common.DevToolsBinDir"

WORKSPACE_SETTING_KEYS = (
    METADATA_DIRECTORY_KEY,
    PACKAGE_DIRECTORY_KEY,
    BINDIR_KEY,
    COMMON_BINDIR_KEY,
    AZURE_BINDIR_KEY,
    DEV_TOOLS_BINDIR_KEY,
)

IDE_VERSION_TOKENS = {
    "VS2015": "14.0",
    "VS2017": "15.0",
    "VS2019": "16.0",
    "VS2022": "17.0",
}
DEFAULT_IDE_VERSION = "VS2022"
DEFAULT_IDE_VERSION_TOKEN = "17.0"
IDE_SETTINGS_PATTERN = "Microsoft/VisualStudio/{token}_*/Settings/CurrentSettings.vssettings"
