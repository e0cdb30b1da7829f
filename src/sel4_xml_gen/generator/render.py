"""Jinja2 environment shared by the header generators."""

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

ASSEMBLER_WORD = re.compile(r"[A-Z][A-Z]?[^A-Z]*")


def assembler_name(name: str) -> str:
    """Convert a CamelCase syscall name to upper snake case.

    ``DebugPutChar`` becomes ``DEBUG_PUT_CHAR``; a leading pair of capitals
    stays together, so ``NBSendRecv`` becomes ``NB_SEND_RECV``.
    """
    return "_".join(word.upper() for word in ASSEMBLER_WORD.findall(name))


def make_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters["assembler_name"] = assembler_name
    return env


def render(template_name: str, **context) -> str:
    return make_environment().get_template(template_name).render(**context)
