"""Rendering of parse trees built from :class:`SymbolInfo` nodes."""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import TextIO

from .symbols import SymbolInfo


def _lines(root: SymbolInfo | None, indent: str) -> Iterator[str]:
    if root is None:
        return
    stack: list[tuple[SymbolInfo, str]] = [(root, indent)]
    while stack:
        node, gap = stack.pop()
        if node.leaf:
            span = f"{node.start_line}"
        else:
            span = f"{node.start_line}-{node.end_line}"
        yield f"{gap}{node.grammar_rule}\t<Line: {span}>\n"
        deeper = gap + " "
        stack.extend((child, deeper) for child in reversed(node.children))


def print_parse_tree(out: TextIO, root: SymbolInfo | None, indent: str = "") -> None:
    """Write the tree under ``root`` to ``out``, one node per line, pre-order.

    Each level of depth adds one space to ``indent``. Leaf nodes show their
    start line only; other nodes show their line span.
    """
    out.writelines(_lines(root, indent))


def format_parse_tree(root: SymbolInfo | None) -> str:
    """Return the text :func:`print_parse_tree` would write for ``root``."""
    buffer = io.StringIO()
    print_parse_tree(buffer, root)
    return buffer.getvalue()