import re
from typing import Any, Sequence


def format_loc(loc: Sequence[Any]) -> str:
    """
    Render a path as a readable dotted string.

    Integer segments are rendered as indices: ("groups", 0, "members", 1) -> "groups[0].members[1]".
    The root path renders as "$".
    """
    out = ""
    for segment in loc:
        if isinstance(segment, int) and not isinstance(segment, bool):
            out += f"[{segment}]"
        elif out:
            out += f".{segment}"
        else:
            out = str(segment)
    return out or "$"


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def get_exception_error_type(exception: Exception) -> str:
    """`MacroNotFoundException()` -> "macro_not_found"."""
    return pascal_case_to_snake_case(exception.__class__.__name__.replace('Exception', ''))
