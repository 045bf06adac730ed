from __future__ import annotations

from foswitch.errors import XmlSettingNotFoundError

from .document import Element, XmlDocument, find_child, local_name

PROJECTS_LOCATION = "ProjectsLocation"


class IdeSettingsDocument(XmlDocument):
    """The IDE's exported settings file (CurrentSettings.vssettings).

    Only the node at
    UserSettings/ToolsOptions/ToolsOptionsCategory[Environment]/
    ToolsOptionsSubCategory[ProjectsAndSolution]/PropertyValue[ProjectsLocation]
    is read or written.
    """

    def projects_location(self) -> str:
        return self._projects_location_node().text or ""

    def set_projects_location(self, value: str) -> None:
        self._projects_location_node().text = value

    def _projects_location_node(self) -> Element:
        node: Element | None = self.root if local_name(self.root.tag) == "UserSettings" else None
        steps = (
            ("ToolsOptions", None),
            ("ToolsOptionsCategory", "Environment"),
            ("ToolsOptionsSubCategory", "ProjectsAndSolution"),
            ("PropertyValue", PROJECTS_LOCATION),
        )
        for tag, name in steps:
            if node is None:
                break
            node = find_child(node, tag, name_attribute=name)
        if node is None:
            raise XmlSettingNotFoundError(
                self.path,
                PROJECTS_LOCATION,
                f"'{PROJECTS_LOCATION}' is missing from {self.path}",
            )
        return node
