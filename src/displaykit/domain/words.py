"""PascalCase word splitting for generated labels."""

from __future__ import annotations


def _starts_word(name: str, index: int) -> bool:
    """Return True when a space belongs before ``name[index]``."""
    char = name[index]
    if not char.isupper():
        return False
    prev = name[index - 1]
    if prev.islower() or prev.isdigit():
        return True
    # Last capital of a run, e.g. the "S" in "HTTPServer".
    followed_by_lower = index + 1 < len(name) and name[index + 1].islower()
    return followed_by_lower and not prev.isspace()


def split_pascal_case(name: str) -> str:
    """Insert a space at each word boundary of a PascalCase identifier.

    Examples:
        >>> split_pascal_case("FirstName")
        'First Name'
        >>> split_pascal_case("HTTPServer")
        'HTTP Server'
        >>> split_pascal_case("First Name")
        'First Name'
    """
    if not name or name.isspace():
        return name

    parts: list[str] = [name[0]]
    for index in range(1, len(name)):
        if _starts_word(name, index):
            parts.append(" ")
        parts.append(name[index])
    return "".join(parts)
