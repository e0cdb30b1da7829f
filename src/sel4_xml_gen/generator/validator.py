"""Validates generated headers for structural correctness."""

import re
from collections import Counter
from collections.abc import Hashable, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)

CONDITIONAL_OPEN = re.compile(r"^\s*#\s*(if|ifdef|ifndef)\b")
CONDITIONAL_CLOSE = re.compile(r"^\s*#\s*endif\b")


def validate_header(text: str) -> list[str]:
    """Check that preprocessor conditionals are balanced.

    Returns a list of problems, empty if the header is well formed.
    """
    problems = []
    open_lines: list[int] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if CONDITIONAL_OPEN.match(line):
            open_lines.append(lineno)
        elif CONDITIONAL_CLOSE.match(line):
            if not open_lines:
                problems.append(f"line {lineno}: #endif without matching #if")
            else:
                open_lines.pop()
    for lineno in open_lines:
        problems.append(f"line {lineno}: #if is never closed")
    return problems


def find_duplicate_labels(labels: Sequence[T]) -> list[T]:
    """Return entries that appear more than once, in first-seen order."""
    counts = Counter(labels)
    return [label for label in counts if counts[label] > 1]
