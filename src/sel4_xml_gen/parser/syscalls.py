"""Syscall description parser.

Parses ``syscall.xml`` into a ``Syscalls`` model. Unlike the invocation
dialect this document is flat and regular, so it is converted to plain
data and validated by the models.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import ValidationError

from .base import Syscalls
from .errors import SyscallParseError, UnsupportedElement, XmlSyntaxError

logger = logging.getLogger(__name__)

GROUPS = {
    "api-master": "api_master",
    "api-mcs": "api_mcs",
    "debug": "debug",
}


def parse_syscalls(file_path: Path) -> Syscalls:
    """Parse a syscall XML file into a Syscalls model."""
    return parse_syscalls_string(file_path.read_bytes())


def parse_syscalls_string(data: str | bytes) -> Syscalls:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        line, column = e.position
        raise XmlSyntaxError(str(e), line, column) from e

    if root.tag != "syscalls":
        raise UnsupportedElement(root.tag)

    groups = {}
    for child in root:
        field = GROUPS.get(child.tag)
        if field is None:
            raise UnsupportedElement(child.tag)
        if field in groups:
            raise SyscallParseError(f"Duplicate <{child.tag}> group in syscall description")
        groups[field] = {"configs": [_config(config) for config in child]}

    try:
        syscalls = Syscalls.model_validate(groups)
    except ValidationError as e:
        raise SyscallParseError(f"Invalid syscall description: {e}") from e

    logger.debug(
        "Parsed %d master, %d mcs and %d debug syscall groups",
        len(syscalls.api_master.configs),
        len(syscalls.api_mcs.configs),
        len(syscalls.debug.configs),
    )
    return syscalls


def _config(el: ET.Element) -> dict:
    if el.tag != "config":
        raise UnsupportedElement(el.tag)
    syscalls = []
    for child in el:
        if child.tag != "syscall":
            raise UnsupportedElement(child.tag)
        syscalls.append(dict(child.attrib))
    return {"condition": el.get("condition"), "syscalls": syscalls}
