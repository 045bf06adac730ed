"""Drive enumeration protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DriveProvider(Protocol):
    """Protocol for listing the machine's fixed drives."""

    def fixed_drives(self) -> list[Path]:
        """Return fixed-drive roots in enumeration order."""
        ...
