# scopetab

A symbol table for compiler front ends. Symbols live in a chain of nested
scopes. Each scope is a fixed number of hash buckets with chaining. Every
operation reports what it did to a text stream, in the style of a compiler's
log file: the bucket, the position in the chain and the scope id.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
import sys
from scopetab.table import SymbolTable

table = SymbolTable(7, out=sys.stdout)   # the global scope "1" is created at once
table.insert("foo", "FUNCTION")
table.enter_scope()                      # opens scope "1.1"
table.insert("i", "VAR")
table.lookup("foo")                      # searched from the innermost scope outwards
table.print_all(sys.stdout)              # dump every scope, innermost first
table.exit_scope()
table.remove("foo")
table.exit_all_scopes()
```

When `out` is not given, reports go to standard output.

Some operations do not change the table. They are reported on the output
stream and return `False`:

- inserting a name that already exists in the current scope;
- deleting a name that is not there;
- leaving the global scope with `exit_scope`.

`lookup` returns `None` when a name is in no open scope. Some calls raise an
exception instead:

- A bucket count of zero or less raises `ValueError`.
- After `exit_all_scopes`, `insert`, `insert_symbol`, `remove` and
  `print_current` raise `RuntimeError`.

### Options of `SymbolTable`

- `id_style`: an `IdStyle` from `scopetab.scope`.
  - `IdStyle.DOTTED` (the default) names nested scopes `1.1`, `1.2`,
    `1.1.1`, and so on.
  - `IdStyle.NUMERIC` adds the parent's count of opened child scopes to the
    parent's id read as a number.
- `announce_nested`: when true (the default), a nested scope is reported as
  `ScopeTable# <id> created`. Otherwise it is reported as just
  `ScopeTable# <id>`.
- `report_missing`: when true (the default), a failed lookup is reported as
  `'<name>' not found in any of the ScopeTables`.
- `print_current` and `print_all` take `skip_empty=True` to leave out empty
  buckets.

`SymbolTable.current` is the innermost open scope. `SymbolTable.scopes()`
yields the open scopes from the innermost outwards.

### Scopes and symbols

`scopetab.scope.ScopeTable` is a single scope on its own. It has:

- `insert(name, type_)` and `insert_symbol(symbol)`;
- `lookup(name)` and `delete(name)`;
- `bucket_index(name)`;
- `open_child()`;
- `dump(out, skip_empty)`.

It also supports `len()`, iteration and `in`. Buckets are chosen by the
64-bit SDBM hash of the name's UTF-8 bytes, `scopetab.symbols.sdbm_hash`.

`scopetab.symbols.SymbolInfo` is the record stored for each name: a
dataclass with a name, a type and optional details (parameter and return
types, line range, grammar rule, children).

### Parse trees

`SymbolInfo` also serves as a parse-tree node. Attach children with
`add_child`. `scopetab.parsetree.print_parse_tree(out, root, indent)` and
`format_parse_tree(root)` render a tree one node per line, in pre-order. Each
level of depth adds one space of indentation, and each line ends with the
node's source line:

- a leaf node (`leaf=True`) shows `<Line: N>`;
- any other node shows `<Line: start-end>`.

## The command driver

`scopetab` runs a command script. The first line gives the number of buckets
per scope. Each following line is one command:

| Command         | Effect                                          |
|-----------------|-------------------------------------------------|
| `I name type`   | insert a symbol into the current scope          |
| `L name`        | look a symbol up through all open scopes        |
| `D name`        | delete a symbol from the current scope          |
| `S`             | enter a new scope                               |
| `E`             | exit the current scope                          |
| `P A` / `P C`   | print all scopes / the current scope            |
| `Q`             | exit every scope                                |

Each line is numbered and echoed as `Cmd N: ...`, followed by its report.

- A command with the wrong number of arguments is reported and otherwise
  ignored.
- For a blank or unrecognised line, only the `Cmd N: ` prefix is written.
- If the first line is missing or does not start with an integer, a
  `ValueError` is raised.

Example script:

```
7
I foo FUNCTION
S
I i VAR
L foo
P A
E
Q
```

Run the driver with:

```
scopetab input.txt output.txt
```

Both arguments are optional and default to `input.txt` and `output.txt`. See
`scopetab --help`.

From Python, `scopetab.commands.run_commands(lines, out)` does the same on any
iterable of lines and any text stream, and returns the `SymbolTable`.

## What it does not do

The package does not read or parse source code. It has no lexer and no
grammar, so parse trees must be built by the caller from `SymbolInfo` nodes
before they can be printed.