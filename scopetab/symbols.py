"""Symbol records stored in scope tables and used as parse-tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

_MASK64 = (1 << 64) - 1


def sdbm_hash(name: str | bytes) -> int:
    """Return the 64-bit SDBM hash of ``name``.

    Text is hashed as its UTF-8 bytes. Each byte is read as a signed
    char widened to 64 bits, so bytes from 0x80 upwards are sign-extended.
    """
    data = name.encode("utf-8") if isinstance(name, str) else bytes(name)
    value = 0
    for byte in data:
        char = byte - 256 if byte >= 0x80 else byte
        value = (char + (value << 6) + (value << 16) - value) & _MASK64
    return value


@dataclass
class SymbolInfo:
    """A named symbol with its type and optional parse-tree details."""

    name: str
    type: str
    param_type: str = ""
    return_type: str = ""
    function_defined: bool = False
    start_line: int = 1
    end_line: int = 1
    grammar_rule: str = ""
    leaf: bool = False
    length: int = 0
    variable_list: str = ""
    parameters: list[str] = field(default_factory=list)
    children: list[SymbolInfo] = field(default_factory=list)

    def add_child(self, node: SymbolInfo) -> None:
        """Append ``node`` to this symbol's children."""
        self.children.append(node)