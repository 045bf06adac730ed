"""Typed accessors over the XML configuration files."""

from .devconfig import DevConfigDocument
from .document import XmlDocument
from .idesettings import IdeSettingsDocument
from .webconfig import WebConfigDocument

__all__ = [
    "DevConfigDocument",
    "IdeSettingsDocument",
    "WebConfigDocument",
    "XmlDocument",
]
