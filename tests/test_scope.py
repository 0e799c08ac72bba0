import io

import pytest

from scopetab.scope import IdStyle, ScopeTable
from scopetab.symbols import SymbolInfo, sdbm_hash


def make(buckets=7, **kwargs):
    out = io.StringIO()
    return ScopeTable(buckets, out=out, **kwargs), out


def test_root_id_is_one():
    table, _ = make()
    assert table.id == "1"
    assert table.parent is None


def test_dotted_child_ids():
    root, _ = make()
    first = root.open_child()
    second = root.open_child()
    nested = first.open_child()
    assert first.id == "1.1"
    assert second.id == "1.2"
    assert nested.id == "1.1.1"
    assert first.parent is root


def test_numeric_child_ids():
    root, _ = make(id_style=IdStyle.NUMERIC)
    first = root.open_child()
    second = root.open_child()
    assert first.id == "2"
    assert second.id == "3"
    assert second.id_style is IdStyle.NUMERIC


def test_child_shares_stream_and_size():
    root, out = make(buckets=5)
    child = root.open_child()
    assert child.bucket_count == 5
    child.insert("x", "INT")
    assert f"ScopeTable# {child.id}" in out.getvalue()


def test_bucket_index_in_range_and_hash_based():
    table, _ = make(buckets=11)
    for name in ["a", "foo", "bar", "longer_name", "é"]:
        index = table.bucket_index(name)
        assert 0 <= index < 11
        assert index == sdbm_hash(name) % 11


def test_invalid_bucket_count():
    with pytest.raises(ValueError):
        ScopeTable(0)


def test_insert_message_and_lookup():
    table, out = make()
    assert table.insert("foo", "FUNCTION") is True
    index = table.bucket_index("foo")
    assert out.getvalue() == f"\tInserted  at position <{index + 1}, 1> of ScopeTable# 1\n"
    found = table.lookup("foo")
    assert found.name == "foo" and found.type == "FUNCTION"
    assert out.getvalue().endswith(f"\t'foo' found at position <{index + 1}, 1> of ScopeTable# 1\n")


def test_duplicate_insert_rejected():
    table, out = make()
    table.insert("a", "INT")
    assert table.insert("a", "FLOAT") is False
    assert out.getvalue().endswith("\t'a' already exists in the current ScopeTable# 1\n")
    assert table.lookup("a").type == "INT"
    assert len(table) == 1


def test_chain_positions_in_single_bucket():
    table, out = make(buckets=1)
    for name in ["a", "b", "c"]:
        table.insert(name, "ID")
    lines = out.getvalue().splitlines()
    assert lines == [f"\tInserted  at position <1, {n}> of ScopeTable# 1" for n in (1, 2, 3)]


def test_lookup_missing_is_silent():
    table, out = make()
    assert table.lookup("nothing") is None
    assert out.getvalue() == ""


def test_delete_middle_of_chain():
    table, out = make(buckets=1)
    for name in ["a", "b", "c"]:
        table.insert(name, "ID")
    assert table.delete("b") is True
    assert out.getvalue().endswith("\tDeleted 'b' from position <1, 2> of ScopeTable# 1\n")
    assert [s.name for s in table] == ["a", "c"]
    assert "b" not in table


def test_delete_head_and_tail():
    table, out = make(buckets=1)
    for name in ["a", "b", "c"]:
        table.insert(name, "ID")
    assert table.delete("a") is True
    assert table.delete("c") is True
    assert [s.name for s in table] == ["b"]
    assert "from position <1, 1>" in out.getvalue()


def test_delete_missing():
    table, out = make(buckets=1)
    table.insert("a", "ID")
    assert table.delete("z") is False
    assert out.getvalue().endswith("\tNot found in the current ScopeTable# 1\n")
    assert table.delete("a") is True
    assert table.delete("a") is False
    assert len(table) == 0


def test_insert_symbol_keeps_object():
    table, _ = make()
    symbol = SymbolInfo("main", "FUNCTION", return_type="int")
    assert table.insert_symbol(symbol) is True
    assert table.lookup("main") is symbol


def test_dump_full_and_skip_empty():
    table, _ = make(buckets=1)
    table.insert("a", "INT")
    table.insert("b", "FLOAT")
    dest = io.StringIO()
    table.dump(dest)
    assert dest.getvalue() == "\tScopeTable# 1\n\t1 --> (a,INT) --> (b,FLOAT)\n"


def test_dump_skip_empty_omits_buckets():
    table, _ = make(buckets=4)
    full = io.StringIO()
    table.dump(full)
    assert full.getvalue().count("\n") == 5
    sparse = io.StringIO()
    table.dump(sparse, skip_empty=True)
    assert sparse.getvalue() == "\tScopeTable# 1\n"
    table.insert("x", "INT")
    sparse = io.StringIO()
    table.dump(sparse, skip_empty=True)
    index = table.bucket_index("x")
    assert sparse.getvalue() == f"\tScopeTable# 1\n\t{index + 1} --> (x,INT)\n"


def test_dump_defaults_to_report_stream():
    table, out = make(buckets=2)
    table.dump()
    assert out.getvalue().startswith("\tScopeTable# 1\n")
    assert out.getvalue().count("\n") == 3