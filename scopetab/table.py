"""A stack of nested scopes forming a complete symbol table."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .scope import IdStyle, ScopeTable
from .symbols import SymbolInfo


class SymbolTable:
    """Nested scopes, each a :class:`ScopeTable`, with the innermost current.

    The table opens the global scope (``1``) on creation. Every operation
    reports what it did as a line of text on ``out`` (standard output by
    default).

    ``announce_nested`` controls whether nested scopes are reported as
    ``ScopeTable# <id> created`` or just ``ScopeTable# <id>``;
    ``report_missing`` controls whether a failed lookup is reported.
    """

    def __init__(
        self,
        bucket_count: int,
        out: TextIO | None = None,
        id_style: IdStyle = IdStyle.DOTTED,
        announce_nested: bool = True,
        report_missing: bool = True,
    ) -> None:
        if bucket_count <= 0:
            raise ValueError(f"bucket count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self.id_style = id_style
        self.announce_nested = announce_nested
        self.report_missing = report_missing
        self._out = out
        self._current: ScopeTable | None = None
        self.enter_scope()

    @property
    def out(self) -> TextIO:
        """The stream reports are written to."""
        return self._out if self._out is not None else sys.stdout

    @property
    def current(self) -> ScopeTable | None:
        """The innermost open scope, or None once every scope is closed."""
        return self._current

    def scopes(self) -> Iterator[ScopeTable]:
        """Yield the open scopes from the innermost outwards."""
        scope = self._current
        while scope is not None:
            yield scope
            scope = scope.parent

    def _emit(self, line: str) -> None:
        self.out.write(f"{line}\n")

    def _require_scope(self) -> ScopeTable:
        if self._current is None:
            raise RuntimeError("no scope is open")
        return self._current

    def enter_scope(self) -> ScopeTable:
        """Open a new scope nested in the current one and return it."""
        if self._current is None:
            scope = ScopeTable(self.bucket_count, None, self._out, self.id_style)
            self._emit(f"\tScopeTable# {scope.id} created")
        else:
            scope = self._current.open_child()
            suffix = " created" if self.announce_nested else ""
            self._emit(f"\tScopeTable# {scope.id}{suffix}")
        self._current = scope
        return scope

    def exit_scope(self) -> bool:
        """Close the current scope; the global scope is never closed this way.

        Returns True if a scope was closed.
        """
        current = self._current
        if current is None:
            self._emit("NO scope")
            return False
        if current.parent is None:
            self._emit(f"\tScopeTable# {current.id} cannot be deleted")
            return False
        self._current = current.parent
        self._emit(f"\tScopeTable# {current.id} deleted")
        return True

    def exit_all_scopes(self) -> None:
        """Close every scope, innermost first, the global scope included."""
        while self._current is not None:
            closed = self._current
            self._current = closed.parent
            self._emit(f"\tScopeTable# {closed.id} deleted")

    def insert(self, name: str, type_: str) -> bool:
        """Insert a new symbol into the current scope."""
        return self._require_scope().insert(name, type_)

    def insert_symbol(self, symbol: SymbolInfo) -> bool:
        """Insert ``symbol`` itself into the current scope."""
        return self._require_scope().insert_symbol(symbol)

    def lookup(self, name: str) -> SymbolInfo | None:
        """Find ``name`` in the innermost scope that holds it, or return None."""
        for scope in self.scopes():
            found = scope.lookup(name)
            if found is not None:
                return found
        if self.report_missing:
            self._emit(f"\t'{name}' not found in any of the ScopeTables")
        return None

    def remove(self, name: str) -> bool:
        """Delete ``name`` from the current scope."""
        return self._require_scope().delete(name)

    def print_current(self, out: TextIO | None = None, skip_empty: bool = False) -> None:
        """Write the current scope's buckets to ``out``."""
        self._require_scope().dump(out if out is not None else self.out, skip_empty)

    def print_all(self, out: TextIO | None = None, skip_empty: bool = False) -> None:
        """Write every open scope, innermost first, to ``out``."""
        target = out if out is not None else self.out
        for scope in self.scopes():
            scope.dump(target, skip_empty)