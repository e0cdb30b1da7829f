"""Invocation header generator — turns an Api into invocation label enums."""

import logging

from sel4_xml_gen.generator.render import render
from sel4_xml_gen.generator.validator import find_duplicate_labels, validate_header
from sel4_xml_gen.parser.base import Api
from sel4_xml_gen.parser.errors import HeaderValidationError

logger = logging.getLogger(__name__)

TEMPLATES = {
    "generic": "invocation.h.j2",
    "sel4_arch": "sel4_arch_invocation.h.j2",
    "arch": "arch_invocation.h.j2",
}


def invocation_labels(api: Api) -> list[tuple[str, str | None]]:
    """Flatten every method of every interface into (label, condition) pairs.

    Document order is kept; enum values are positional.
    """
    return [
        (method.id, method.condition)
        for interface in api.interfaces
        for method in interface.methods
    ]


def _duplicate_problem(label: str, condition: str | None) -> str:
    if condition is None:
        return f"duplicate invocation label '{label}'"
    return f"duplicate invocation label '{label}' under condition '{condition}'"


class InvocationHeaderGenerator:
    """Renders one of the three invocation label headers."""

    def __init__(self, variant: str = "generic", libsel4: bool = False):
        if variant not in TEMPLATES:
            raise ValueError(f"unknown invocation header variant '{variant}'")
        self.variant = variant
        self.libsel4 = libsel4

    @property
    def header_title(self) -> str:
        return "LIBSEL4" if self.libsel4 else "API"

    def generate(self, api: Api) -> str:
        invocations = invocation_labels(api)

        # The same label may appear once per condition, e.g. MCS and non-MCS.
        problems = [_duplicate_problem(label, condition)
                    for label, condition in find_duplicate_labels(invocations)]
        if problems:
            raise HeaderValidationError(problems)

        text = render(
            TEMPLATES[self.variant],
            header_title=self.header_title,
            libsel4=self.libsel4,
            invocations=invocations,
            num_invocations=len(invocations),
        )
        problems = validate_header(text)
        if problems:
            raise HeaderValidationError(problems)

        logger.debug("Rendered %s header with %d labels", self.variant, len(invocations))
        return text
