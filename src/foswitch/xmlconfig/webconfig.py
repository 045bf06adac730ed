from __future__ import annotations

from foswitch.errors import XmlSettingNotFoundError

from .document import Element, XmlDocument, local_name

_VALUE_ATTRIBUTES = ("value", "Value")


class WebConfigDocument(XmlDocument):
    """The web server config file: a flat list of ``<add key=... value=...>`` settings."""

    def has_setting(self, key: str) -> bool:
        return self._find_setting(key) is not None

    def get_setting(self, key: str) -> str | None:
        """Return the setting's value, or None when the element or its value attribute is absent."""
        element = self._find_setting(key)
        if element is None:
            return None
        return element.get(_value_attribute(element))

    def set_setting(self, key: str, value: str) -> None:
        element = self._find_setting(key)
        if element is None:
            raise XmlSettingNotFoundError(self.path, key, f"Setting '{key}' is missing from {self.path}")
        element.set(_value_attribute(element), value)

    def _find_setting(self, key: str) -> Element | None:
        for element in self.root.iter():
            if isinstance(element.tag, str) and local_name(element.tag) == "add" and element.get("key") == key:
                return element
        return None


def _value_attribute(element: Element) -> str:
    return next((name for name in _VALUE_ATTRIBUTES if name in element.attrib), "value")
