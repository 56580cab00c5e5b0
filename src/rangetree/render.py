from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .rangetree import RangeTree, Assigned


def render_tree(tree: RangeTree, fmt: Callable[[Any], str] = str) -> str:
    """Draw the tree as indented box-drawing lines, one node per line.

    Left children get a `├` marker and right children (and the root) get `└`.
    A node below a pending assignment is drawn with the value it will have
    once the assignment is pushed. The tree itself is never modified.

    Args:
        tree: The tree to draw
        fmt: Turns a node value into the text shown for it

    Returns:
        str: The drawing, with a trailing newline, or "" for an empty tree
    """
    if not len(tree):
        return ""
    lines: list[str] = []
    _render(tree, fmt, 0, 0, len(tree), "", False, None, lines)
    return "\n".join(lines) + "\n"


def _render(
    tree: RangeTree,
    fmt: Callable[[Any], str],
    i: int,
    l: int,
    r: int,
    prefix: str,
    is_left: bool,
    inherited: Optional[Assigned],
    lines: list[str],
):
    if inherited is not None:
        value = tree.assigned_value(inherited.value, r - l)
    else:
        value = tree.nodes[i]
        inherited = tree.pending[i]
    text = fmt(value)
    lines.append(f"{prefix}{'├' if is_left else '└'}─{text}")

    if r - l == 1:
        return

    m = (l + r) // 2
    child_prefix = prefix + ("│" if is_left else " ") + " " * len(text)
    _render(tree, fmt, 2 * i + 1, l, m, child_prefix, True, inherited, lines)
    _render(tree, fmt, 2 * i + 2, m, r, child_prefix, False, inherited, lines)
