import io

from scopetab.parsetree import format_parse_tree, print_parse_tree
from scopetab.symbols import SymbolInfo


def _leaf(rule, line):
    return SymbolInfo(rule, "TOKEN", start_line=line, end_line=line, grammar_rule=rule, leaf=True)


def _node(rule, start, end, *children):
    node = SymbolInfo(rule, "NODE", start_line=start, end_line=end, grammar_rule=rule)
    for child in children:
        node.add_child(child)
    return node


def test_none_root_prints_nothing():
    assert format_parse_tree(None) == ""


def test_single_leaf_shows_start_line_only():
    assert format_parse_tree(_leaf("ID : x", 3)) == "ID : x\t<Line: 3>\n"


def test_internal_node_shows_span():
    assert format_parse_tree(_node("program : unit", 1, 7)) == "program : unit\t<Line: 1-7>\n"


def test_nested_tree_indents_one_space_per_level():
    tree = _node(
        "start : program",
        1,
        4,
        _node("program : unit", 1, 4, _leaf("INT : int", 1), _leaf("ID : main", 1)),
        _leaf("SEMICOLON : ;", 4),
    )
    expected = (
        "start : program\t<Line: 1-4>\n"
        " program : unit\t<Line: 1-4>\n"
        "  INT : int\t<Line: 1>\n"
        "  ID : main\t<Line: 1>\n"
        " SEMICOLON : ;\t<Line: 4>\n"
    )
    assert format_parse_tree(tree) == expected


def test_print_uses_given_indent_and_stream():
    out = io.StringIO()
    print_parse_tree(out, _node("a", 2, 5, _leaf("b", 2)), "  ")
    assert out.getvalue() == "  a\t<Line: 2-5>\n   b\t<Line: 2>\n"


def test_line_count_matches_node_count():
    tree = _node("r", 1, 9, *(_node(f"c{i}", i, i + 1, _leaf(f"l{i}", i)) for i in range(4)))
    lines = format_parse_tree(tree).splitlines()
    assert len(lines) == 1 + 4 * 2
    assert [line.lstrip().split("\t")[0] for line in lines[:3]] == ["r", "c0", "l0"]


def test_deep_tree_does_not_overflow():
    root = _node("n0", 1, 1)
    current = root
    for depth in range(1, 3000):
        child = _node(f"n{depth}", 1, 1)
        current.add_child(child)
        current = child
    lines = format_parse_tree(root).splitlines()
    assert len(lines) == 3000
    assert lines[-1] == " " * 2999 + "n2999\t<Line: 1-1>"