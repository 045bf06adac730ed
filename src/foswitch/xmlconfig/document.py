"""Load/save boundary for the XML files foswitch edits.

lxml keeps each element's namespace declarations and prefixes as parsed, so
sections foswitch never touches (``assemblyBinding`` redirects and the like)
are written back unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Self

from lxml import etree

from foswitch.errors import ConfigWriteError, XmlDocumentError

Element = etree._Element


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


class XmlDocument:
    """A parsed XML file together with the path it was read from."""

    def __init__(self, path: Path, tree: etree._ElementTree) -> None:
        self.path = path
        self._tree = tree

    @classmethod
    def load(cls, path: Path) -> Self:
        parser = etree.XMLParser(remove_comments=False, resolve_entities=False)
        try:
            tree = etree.parse(str(path), parser=parser)
        except etree.XMLSyntaxError as exc:
            raise XmlDocumentError(path, f"Malformed XML in {path}: {exc}") from exc
        except OSError as exc:
            raise XmlDocumentError(path, f"Unable to read {path}: {exc}") from exc
        return cls(path, tree)

    @property
    def root(self) -> Element:
        return self._tree.getroot()

    def save(self) -> None:
        encoding = self._tree.docinfo.encoding or "utf-8"
        try:
            self._tree.write(str(self.path), encoding=encoding, xml_declaration=True)
        except OSError as exc:
            raise ConfigWriteError(self.path, f"Unable to write {self.path}: {exc}") from exc

    def find_first(self, name: str) -> Element | None:
        return next((element for element in self.root.iter() if _matches(element, name)), None)


def find_child(parent: Element, name: str, *, name_attribute: str | None = None) -> Element | None:
    """Return the first direct child with the given tag and, optionally, ``name`` attribute."""
    for child in parent:
        if not _matches(child, name):
            continue
        if name_attribute is None or child.get("name") == name_attribute:
            return child
    return None


def _matches(element: Element, name: str) -> bool:
    # Comments and processing instructions carry a callable tag.
    return isinstance(element.tag, str) and local_name(element.tag) == name
