"""Syscall header generator — numbers syscalls and renders the kernel and libsel4 headers."""

import logging

from sel4_xml_gen.generator.render import render
from sel4_xml_gen.generator.validator import find_duplicate_labels, validate_header
from sel4_xml_gen.parser.base import SyscallApi, Syscalls
from sel4_xml_gen.parser.errors import HeaderValidationError

logger = logging.getLogger(__name__)

NumberedGroup = tuple[str, list[tuple[str, int]]]


def number_syscalls(apis: list[SyscallApi]) -> list[NumberedGroup]:
    """Assign consecutive negative numbers, starting at -1, across all configs.

    Returns one (condition, [(name, number), ...]) entry per config; an
    unconditional config has an empty condition.
    """
    groups = []
    number = -1
    for api in apis:
        for config in api.configs:
            numbered = []
            for syscall in config.syscalls:
                numbered.append((syscall.name, number))
                number -= 1
            groups.append((config.condition or "", numbered))
    return groups


class SyscallHeaderGenerator:
    """Renders the kernel and libsel4 syscall headers."""

    def __init__(self, syscalls: Syscalls, mcs: bool = False):
        self.syscalls = syscalls
        self.mcs = mcs

    @property
    def api(self) -> SyscallApi:
        return self.syscalls.api_mcs if self.mcs else self.syscalls.api_master

    def generate_kernel_header(self) -> str:
        syscall_count = sum(len(config.syscalls) for config in self.api.configs)
        return self._render(
            "kernel_syscall.h.j2",
            assembler=number_syscalls([self.api]),
            enum=number_syscalls([self.api, self.syscalls.debug]),
            syscall_min=-syscall_count,
        )

    def generate_libsel4_header(self) -> str:
        return self._render(
            "libsel4_syscall.h.j2",
            enum=number_syscalls([self.api, self.syscalls.debug]),
        )

    def _render(self, template_name: str, **context) -> str:
        names = [name for _, group in number_syscalls([self.api, self.syscalls.debug]) for name, _ in group]
        problems = [f"duplicate syscall '{name}'" for name in find_duplicate_labels(names)]
        if problems:
            raise HeaderValidationError(problems)

        text = render(template_name, **context)
        problems = validate_header(text)
        if problems:
            raise HeaderValidationError(problems)

        logger.debug("Rendered %s (%s api)", template_name, "mcs" if self.mcs else "master")
        return text
