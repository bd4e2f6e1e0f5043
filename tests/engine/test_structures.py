import pytest

from complexity_cli.engine import StructureTag, find_structures


@pytest.mark.parametrize(
    "span, tag",
    [
        ("const a = new Array(n);", StructureTag.ARRAY),
        ("const buf = new Uint8Array(8);", StructureTag.ARRAY),
        ("let out = [];", StructureTag.ARRAY),
        ("items = list(xs)", StructureTag.ARRAY),
        ("const seen = new Map();", StructureTag.HASH_MAP),
        ("const counts = {};", StructureTag.HASH_MAP),
        ("index = dict()", StructureTag.HASH_MAP),
        ("const s = new Set(xs);", StructureTag.SET),
        ("seen = set()", StructureTag.SET),
        ("stack.push(x); stack.pop();", StructureTag.STACK),
        ("q = deque()", StructureTag.QUEUE),
        ("const root = new TreeNode(1);", StructureTag.TREE),
    ],
)
def test_detects_structure(span, tag):
    assert tag in find_structures(span)


def test_plain_arithmetic_has_no_structures():
    assert find_structures("return a + b;") == frozenset()


def test_pop_before_push_is_not_a_stack():
    assert StructureTag.STACK not in find_structures("x = s.pop()\ns.push(y)")
