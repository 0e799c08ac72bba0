"""Command-driven front end for :class:`SymbolTable`.

The input's first line gives the bucket count. Every later line is one
command:

``I name type``  insert a symbol into the current scope
``L name``       look a symbol up through every open scope
``D name``       delete a symbol from the current scope
``S``            enter a new nested scope
``E``            exit the current scope
``P A`` / ``P C`` print all scopes / the current scope
``Q``            close every scope
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence
from typing import TextIO

from .table import SymbolTable

_ARITY = {"D": 2, "I": 3, "L": 2, "S": 1, "E": 1, "P": 2, "Q": 1}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_bucket_count(line: str) -> int:
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"invalid bucket count: {line.strip()!r}")
    return int(match.group(1))


def _execute(table: SymbolTable, tokens: list[str], out: TextIO) -> None:
    command, args = tokens[0], tokens[1:]
    if command == "D":
        table.remove(args[0])
    elif command == "I":
        table.insert(args[0], args[1])
    elif command == "L":
        table.lookup(args[0])
    elif command == "S":
        table.enter_scope()
    elif command == "E":
        table.exit_scope()
    elif command == "P":
        if args[0] == "A":
            table.print_all(out)
        elif args[0] == "C":
            table.print_current(out)
        else:
            out.write("\tInvalid argument for the command P\n")
    elif command == "Q":
        table.exit_all_scopes()
        out.write("\n")


def run_commands(lines: Iterable[str], out: TextIO) -> SymbolTable:
    """Run the command script in ``lines``, reporting on ``out``.

    Returns the symbol table in the state the script left it.
    Raises ValueError if the first line does not start with a bucket count.
    """
    rows = iter(lines)
    try:
        first = next(rows)
    except StopIteration:
        raise ValueError("input is empty: missing bucket count") from None
    table = SymbolTable(_parse_bucket_count(first), out)

    for number, line in enumerate(rows, start=1):
        tokens = line.split()
        out.write(f"Cmd {number}: ")
        if not tokens or tokens[0] not in _ARITY:
            continue
        out.write(" ".join(tokens) + "\n")
        command = tokens[0]
        if len(tokens) != _ARITY[command]:
            out.write(f"\tWrong number of arugments for the command {command}\n")
            continue
        _execute(table, tokens, out)
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Read a command script from a file and write the report to another."""
    parser = argparse.ArgumentParser(
        prog="scopetab", description="Run symbol-table commands from a file."
    )
    parser.add_argument("input", nargs="?", default="input.txt", help="command file")
    parser.add_argument("output", nargs="?", default="output.txt", help="report file")
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as source, open(
        args.output, "w", encoding="utf-8"
    ) as report:
        run_commands(source, report)
    return 0