"""Fixed-drive enumeration."""

from __future__ import annotations

import string
import sys
from pathlib import Path

_DRIVE_FIXED = 3


class FixedDriveProvider:
    """Lists local fixed drives via the Win32 API; the filesystem root on other platforms."""

    def fixed_drives(self) -> list[Path]:
        if sys.platform != "win32":
            return [Path(Path.cwd().anchor)]

        import ctypes

        kernel32 = ctypes.windll.kernel32
        bitmask = kernel32.GetLogicalDrives()
        drives: list[Path] = []
        for index, letter in enumerate(string.ascii_uppercase):
            if not bitmask & (1 << index):
                continue
            root = f"{letter}:\\"
            if kernel32.GetDriveTypeW(root) == _DRIVE_FIXED:
                drives.append(Path(root))
        return drives
