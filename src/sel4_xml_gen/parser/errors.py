"""Errors raised while reading interface descriptions.

Every error carries ``location``, the ``file:line`` of the generator
source that detected it. It helps when the XML dialect grows a new
element and the parser needs to learn about it.
"""

import inspect
from pathlib import Path


def source_location(depth: int = 0) -> str:
    """Return ``file:line`` of the caller, or of an outer frame.

    ``depth=0`` names the function calling ``source_location``; each
    increment walks one frame further out.
    """
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None or frame.f_back is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>"
    return f"{Path(frame.f_code.co_filename).name}:{frame.f_lineno}"


class GeneratorError(Exception):
    """Base class for every error reported to the user."""


class MissingAttribute(GeneratorError):
    def __init__(self, attribute_name: str, element_name: str, location: str | None = None):
        self.attribute_name = attribute_name
        self.element_name = element_name
        self.location = location or source_location(1)
        super().__init__(
            f"Missing required attribute '{attribute_name}' on element "
            f"'{element_name}' (detected at {self.location})"
        )


class UnsupportedElement(GeneratorError):
    def __init__(self, tag_name: str, location: str | None = None):
        self.tag_name = tag_name
        self.location = location or source_location(1)
        super().__init__(f"Unsupported element '{tag_name}' (detected at {self.location})")


class XmlSyntaxError(GeneratorError):
    """The document is not well-formed XML."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        where = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"XML parse error{where}: {message}")


class SyscallParseError(GeneratorError):
    """The syscall document does not match the expected structure."""


class HeaderValidationError(GeneratorError):
    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Generated header is invalid:\n" + "\n".join(f"  - {p}" for p in problems))
