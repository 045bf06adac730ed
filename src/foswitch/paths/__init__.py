"""Path resolution for the files and directories foswitch works on."""

from .drives import FixedDriveProvider
from .protocol import DriveProvider
from .resolver import PathResolver, ide_version_token

__all__ = [
    "DriveProvider",
    "FixedDriveProvider",
    "PathResolver",
    "ide_version_token",
]
