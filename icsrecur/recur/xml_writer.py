"""Minimal xCal element writer built on ElementTree."""

from typing import Any, Optional
import xml.etree.ElementTree as ET


class XmlValueWriter:
    """Writes property values as child elements of a parent element.

    Dict values become one child per key and list values under a key become
    repeated elements, as xCal expects for multi-valued rule parts.
    """

    def __init__(self, parent: Optional[ET.Element] = None):
        self.parent = parent if parent is not None else ET.Element("value")

    def write_element(self, name: str, value: Any) -> ET.Element:
        """Append <name> to the parent and fill it from value.

        Args:
            name: Element tag
            value: Dict, list or scalar content

        Returns:
            The created element
        """
        element = ET.SubElement(self.parent, name)
        self._write_content(element, value)
        return element

    def _write_content(self, element: ET.Element, value: Any) -> None:
        if isinstance(value, dict):
            for key, item in value.items():
                items = item if isinstance(item, list) else [item]
                for sub_value in items:
                    child = ET.SubElement(element, key)
                    self._write_content(child, sub_value)
        elif value is not None:
            element.text = str(value)

    def to_string(self) -> str:
        """Serialize the parent element to a unicode string."""
        return ET.tostring(self.parent, encoding="unicode")
