"""Auto-detect which XML dialect a description file uses."""

import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import UnsupportedElement, XmlSyntaxError

ROOT_FORMATS = {
    "api": "invocations",
    "syscalls": "syscalls",
}


def detect_format(file_path: Path) -> str:
    """Detect the dialect of an XML description file.

    Returns: 'invocations' or 'syscalls'.
    """
    try:
        with file_path.open("rb") as f:
            for _event, element in ET.iterparse(f, events=("start",)):
                root_tag = element.tag
                break
            else:
                root_tag = ""
    except ET.ParseError as e:
        line, column = e.position
        raise XmlSyntaxError(str(e), line, column) from e

    fmt = ROOT_FORMATS.get(root_tag.lower())
    if fmt is None:
        raise UnsupportedElement(root_tag)
    return fmt
