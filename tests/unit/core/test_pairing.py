"""Unit tests for core/pairing.py"""

from lcsdiff.core.diff import diff_lines
from lcsdiff.core.models import ModifiedPair, Op, OpKind, Plain
from lcsdiff.core.pairing import count_pairs, iter_pairs, resolve_pairs


def same(value):
    return Op(OpKind.same, value)


def added(value):
    return Op(OpKind.added, value)


def removed(value):
    return Op(OpKind.removed, value)


def test_resolve_pairs_empty():
    assert resolve_pairs([]) == []


def test_resolve_pairs_removed_then_added():
    """[removed a, added b, same c] -> one pair then one plain same."""
    items = resolve_pairs([removed("a"), added("b"), same("c")])
    assert items == [ModifiedPair(old="a", new="b"), Plain(same("c"))]


def test_resolve_pairs_added_then_removed_swaps_roles():
    """old is always the removed value, whatever the positional order."""
    assert resolve_pairs([added("b"), removed("a")]) == [ModifiedPair(old="a", new="b")]


def test_resolve_pairs_unpaired_ops_stay_plain():
    ops = [same("x"), added("y"), same("z"), removed("w")]
    assert resolve_pairs(ops) == [Plain(op) for op in ops]


def test_resolve_pairs_runs_are_paired_in_scan_order():
    """Alternating runs pair greedily left to right; nothing is re-paired."""
    ops = [removed("r1"), added("a1"), removed("r2"), added("a2")]
    assert resolve_pairs(ops) == [
        ModifiedPair(old="r1", new="a1"),
        ModifiedPair(old="r2", new="a2"),
    ]


def test_resolve_pairs_greedy_no_lookahead():
    """[added x, removed y, added z] pairs the first two and leaves z plain."""
    items = resolve_pairs([added("x"), removed("y"), added("z")])
    assert items == [ModifiedPair(old="y", new="x"), Plain(added("z"))]


def test_resolve_pairs_same_kind_neighbours_not_paired():
    items = resolve_pairs([removed("a"), removed("b"), added("c")])
    assert items == [Plain(removed("a")), ModifiedPair(old="b", new="c")]


def test_resolve_pairs_consumes_each_op_once():
    ops = [added("b1"), added("b2"), removed("a1"), removed("a2"), same("s")]
    items = resolve_pairs(ops)
    consumed = sum(2 if isinstance(i, ModifiedPair) else 1 for i in items)
    assert consumed == len(ops)


def test_iter_pairs_is_lazy():
    gen = iter_pairs([removed("a"), added("b")])
    assert next(gen) == ModifiedPair(old="a", new="b")


def test_count_pairs():
    items = resolve_pairs([removed("a"), added("b"), same("c"), added("d"), removed("e")])
    assert count_pairs(items) == 2


def test_resolve_pairs_on_line_diff():
    """The changed first line becomes one modified pair followed by the kept line."""
    ops = diff_lines(["hello world", "foo"], ["hello there", "foo"])
    items = resolve_pairs(ops)
    assert items == [ModifiedPair(old="hello world", new="hello there"), Plain(same("foo"))]
    assert count_pairs(items) == 1
