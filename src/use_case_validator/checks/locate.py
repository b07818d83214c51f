"""
Line location helpers shared by the declaration checkers.
"""

from typing import Sequence

NOT_FOUND = -1


def find_first_line(lines: Sequence[str], needle: str) -> int:
    """
    Return the 0-based index of the first line containing ``needle``.

    This is a plain substring test, so an earlier line that merely mentions
    the same text (a comment, an import) wins over the real declaration.
    """
    for index, line in enumerate(lines):
        if needle in line:
            return index
    return NOT_FOUND


def to_line_number(index: int) -> int:
    """Convert a located index into a 1-based line number, defaulting to line 1."""
    return 1 if index == NOT_FOUND else index + 1
