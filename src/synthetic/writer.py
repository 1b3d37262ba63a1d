"""Serialize document trees to indented UTF-8 XML files."""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

INDENT = "    "


def write_document(root: ET.Element, path: Union[str, Path]) -> Path:
    """
    Write ``root`` to ``path`` with an XML declaration and 4-space indentation.

    The parent directory must already exist. OSError propagates to the
    caller; a partially written file is left in place.

    Returns:
        The path written
    """
    path = Path(path)
    tree = ET.ElementTree(root)
    ET.indent(tree, space=INDENT)

    with open(path, "wb") as f:
        tree.write(f, encoding="UTF-8", xml_declaration=True)
        f.write(b"\n")

    return path
