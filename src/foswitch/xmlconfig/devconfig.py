from __future__ import annotations

from pathlib import Path

from foswitch.constants import WEB_ROOT_ELEMENT
from foswitch.errors import XmlSettingNotFoundError

from .document import XmlDocument


class DevConfigDocument(XmlDocument):
    """The developer config file (DynamicsDevConfig.xml)."""

    def web_root(self) -> Path:
        element = self.find_first(WEB_ROOT_ELEMENT)
        if element is None or not (element.text or "").strip():
            raise XmlSettingNotFoundError(
                self.path,
                WEB_ROOT_ELEMENT,
                f"'{WEB_ROOT_ELEMENT}' is missing from {self.path}",
            )
        return Path(element.text.strip())
