from __future__ import annotations
from typing import TYPE_CHECKING, Union

from nestedfrac.core.constants import DEFAULT_SPACES

if TYPE_CHECKING:
    from nestedfrac.core.fraction import NestedFraction


def _render_slot(
    slot: Union[int, "NestedFraction"],
    spaces: int,
    indent: int,
    indent_level: int,
) -> str:
    if isinstance(slot, int):
        return str(slot)
    return to_string(slot, spaces=spaces, indent=indent, indent_level=indent_level)


def to_string(
    frac: "NestedFraction",
    spaces: int = DEFAULT_SPACES,
    indent: int = 0,
    indent_level: int = 0,
) -> str:
    """Renders a fraction in its parenthesized textual form, e.g. ``((1 / 2) / 3)``.

    The structure is rendered as it is, no reduction takes place. The output is always accepted by ``parse``.

    Args:
        frac (NestedFraction): fraction to render
        spaces (int, optional): Number of blanks on each side of "/". Defaults to 1.
        indent (int, optional): Indentation of the closing parenthesis. Defaults to 0.
        indent_level (int, optional): If positive, every fraction opens a new line and its content is indented by
            ``indent + indent_level``. Nested fractions are indented one level deeper. Defaults to 0 (single line).

    Returns:
        str: textual representation
    """
    if spaces < 0 or indent < 0 or indent_level < 0:
        raise ValueError(f"Spacing must not be negative, got {spaces=}, {indent=}, {indent_level=}")
    new_line = "\n" if indent_level > 0 else ""
    blank = " " * spaces
    inner = indent + indent_level
    num = _render_slot(frac.num, spaces, inner, indent_level)
    denom = _render_slot(frac.denom, spaces, inner, indent_level)
    return f"({new_line}{' ' * inner}{num}{blank}/{blank}{denom}{new_line}{' ' * indent})"
