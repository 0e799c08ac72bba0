"""A single scope: a fixed-size hash table of symbols with chained buckets."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterator
from typing import TextIO

from .symbols import SymbolInfo, sdbm_hash


class IdStyle(enum.Enum):
    """How a nested scope derives its identifier from its parent's."""

    DOTTED = "dotted"
    """Parent id, a dot, then the parent's child count: ``1``, ``1.1``, ``1.1.2``."""

    NUMERIC = "numeric"
    """Parent id read as a number plus the parent's child count."""


class ScopeTable:
    """One scope of a symbol table.

    Symbols are spread over ``bucket_count`` buckets by their SDBM hash;
    each bucket keeps its symbols in insertion order. Every operation
    reports what it did as a line of text on ``out``.
    """

    def __init__(
        self,
        bucket_count: int,
        parent: ScopeTable | None = None,
        out: TextIO | None = None,
        id_style: IdStyle = IdStyle.DOTTED,
    ) -> None:
        if bucket_count <= 0:
            raise ValueError(f"bucket count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self.parent = parent
        self.id_style = id_style
        self._out = out
        self._buckets: list[list[SymbolInfo]] = [[] for _ in range(bucket_count)]
        self.children_opened = 0
        self.id = "1" if parent is None else self._child_id(parent)

    def _child_id(self, parent: ScopeTable) -> str:
        if self.id_style is IdStyle.NUMERIC:
            return str(int(parent.id) + parent.children_opened)
        return f"{parent.id}.{parent.children_opened}"

    @property
    def out(self) -> TextIO:
        """The stream reports are written to."""
        return self._out if self._out is not None else sys.stdout

    def _emit(self, message: str) -> None:
        self.out.write(f"\t{message}\n")

    def open_child(self) -> ScopeTable:
        """Count a new nested scope and return it, sharing size, stream and style."""
        self.children_opened += 1
        return ScopeTable(self.bucket_count, self, self._out, self.id_style)

    def bucket_index(self, name: str) -> int:
        """Return the zero-based bucket that ``name`` hashes to."""
        return sdbm_hash(name) % self.bucket_count

    def insert(self, name: str, type_: str) -> bool:
        """Insert a new symbol; return False if ``name`` is already here."""
        return self.insert_symbol(SymbolInfo(name, type_))

    def insert_symbol(self, symbol: SymbolInfo) -> bool:
        """Insert ``symbol`` itself; return False if its name is already here."""
        index = self.bucket_index(symbol.name)
        bucket = self._buckets[index]
        if any(existing.name == symbol.name for existing in bucket):
            self._emit(f"'{symbol.name}' already exists in the current ScopeTable# {self.id}")
            return False
        bucket.append(symbol)
        self._emit(f"Inserted  at position <{index + 1}, {len(bucket)}> of ScopeTable# {self.id}")
        return True

    def lookup(self, name: str) -> SymbolInfo | None:
        """Return the symbol called ``name`` in this scope, or None."""
        index = self.bucket_index(name)
        for position, symbol in enumerate(self._buckets[index], start=1):
            if symbol.name == name:
                self._emit(f"'{name}' found at position <{index + 1}, {position}> of ScopeTable# {self.id}")
                return symbol
        return None

    def delete(self, name: str) -> bool:
        """Remove the symbol called ``name``; return False if it is not here."""
        index = self.bucket_index(name)
        bucket = self._buckets[index]
        for position, symbol in enumerate(bucket, start=1):
            if symbol.name == name:
                del bucket[position - 1]
                self._emit(f"Deleted '{name}' from position <{index + 1}, {position}> of ScopeTable# {self.id}")
                return True
        self._emit(f"Not found in the current ScopeTable# {self.id}")
        return False

    def dump(self, out: TextIO | None = None, skip_empty: bool = False) -> None:
        """Write every bucket and its chain to ``out`` (the report stream by default)."""
        target = out if out is not None else self.out
        target.write(f"\tScopeTable# {self.id}\n")
        for number, bucket in enumerate(self._buckets, start=1):
            if skip_empty and not bucket:
                continue
            chain = "".join(f" --> ({s.name},{s.type})" for s in bucket)
            target.write(f"\t{number}{chain}\n")

    def __iter__(self) -> Iterator[SymbolInfo]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return any(s.name == name for s in self._buckets[self.bucket_index(name)])