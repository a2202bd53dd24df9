import pytest

from proptree.errors import PTreeBadData, PTreeBadPath
from proptree.ptree import IPTree, PTree
from proptree.tree import Tree


def total_size(tree):
    return 1 + sum(total_size(child) for _, child in tree)


def total_keys_size(tree):
    return sum(len(key) + total_keys_size(child) for key, child in tree)


def total_data_size(tree):
    return len(tree.data) + sum(total_data_size(child) for _, child in tree)


def fill_test_ptree(pt):
    pt.put_value("data0")
    pt.put("key1", "data1")
    pt.put("key1.key", "data2")
    pt.put("key2", "data3")
    pt.put("key2.key", "data4")
    return pt


def test_test_ptree_structure():
    pt = fill_test_ptree(PTree())
    assert pt.data == "data0"
    assert pt.get("key1") == "data1"
    assert pt.get("key1.key") == "data2"
    assert pt.get("key2") == "data3"
    assert pt.get("key2.key") == "data4"
    assert [key for key, _ in pt] == ["key1", "key2"]


def test_test_ptree_sizes():
    pt = fill_test_ptree(PTree())
    assert len(pt) == 2
    assert total_size(pt) == 5
    assert total_data_size(pt) == 25
    assert total_keys_size(pt) == 14


def test_trees_built_alike_are_equal():
    assert fill_test_ptree(PTree()) == fill_test_ptree(PTree())
    other = fill_test_ptree(PTree())
    other.put("key2.key", "changed")
    assert not (fill_test_ptree(PTree()) == other)


def test_get_child_missing_raises_bad_path():
    pt = fill_test_ptree(PTree())
    with pytest.raises(PTreeBadPath) as info:
        pt.get_child("key1.nothing")
    assert info.value.path == "key1.nothing"


def test_get_child_default_and_optional():
    pt = fill_test_ptree(PTree())
    fallback = PTree("fallback")
    assert pt.get_child("missing", fallback) is fallback
    assert pt.get_child_optional("missing") is None
    assert pt.get_child_optional("key1").data == "data1"


def test_empty_path_names_self():
    pt = fill_test_ptree(PTree())
    assert pt.get_child("") is pt
    assert pt.get("") == "data0"


def test_put_replaces_existing_value():
    pt = PTree()
    pt.put("a.b", "one")
    pt.put("a.b", "two")
    assert pt.get_child("a").count("b") == 1
    assert pt.get("a.b") == "two"


def test_add_appends_duplicate_keys():
    pt = PTree()
    pt.add("a.b", "one")
    pt.add("a.b", "two")
    a = pt.get_child("a")
    assert a.count("b") == 2
    assert [child.data for _, child in a] == ["one", "two"]
    assert pt.get("a.b") == "one"


def test_put_int_and_read_back():
    pt = PTree()
    node = pt.put("a.b", 5)
    assert node.data == "5"
    assert pt.get("a.b", int) == 5


def test_put_bool_and_float():
    pt = PTree()
    pt.put("flag", True)
    pt.put("ratio", 0.1)
    assert pt.get("flag") == "true"
    assert pt.get("flag", bool) is True
    assert pt.get("ratio", float) == 0.1


def test_get_with_default_uses_default_type():
    pt = PTree()
    pt.put("n", "12")
    pt.put("word", "abc")
    assert pt.get("n", default=0) == 12
    assert pt.get("missing", default=3) == 3
    assert pt.get("word", default=7) == 7
    assert pt.get("word", default="x") == "abc"


def test_bad_conversion_raises_bad_data():
    pt = PTree()
    pt.put("word", "abc")
    with pytest.raises(PTreeBadData) as info:
        pt.get("word", int)
    assert info.value.data == "abc"


def test_get_optional():
    pt = PTree()
    pt.put("n", "42")
    pt.put("word", "abc")
    assert pt.get_optional("n", int) == 42
    assert pt.get_optional("word", int) is None
    assert pt.get_optional("missing") is None


def test_get_value_variants():
    node = PTree(" 17 ")
    assert node.get_value(int) == 17
    assert node.get_value() == " 17 "
    assert node.get_value_optional(float) == 17.0
    assert PTree("x").get_value(default=1.5) == 1.5


def test_put_child_replaces_and_returns_stored_node():
    pt = PTree()
    pt.put("a.b", "old")
    replacement = PTree("new")
    replacement.put("c", "deep")
    stored = pt.put_child("a.b", replacement)
    assert pt.get_child("a").count("b") == 1
    assert pt.get("a.b") == "new"
    assert pt.get("a.b.c") == "deep"
    stored.data = "edited"
    assert pt.get("a.b") == "edited"
    assert replacement.data == "new"


def test_put_child_stores_copy():
    pt = PTree()
    child = PTree("v")
    pt.put_child("k", child)
    child.data = "changed"
    assert pt.get("k") == "v"


def test_put_child_converts_plain_tree():
    pt = PTree()
    plain = Tree("top")
    plain.push_back("inner", Tree("leaf"))
    pt.put_child("x", plain)
    assert pt.get("x.inner") == "leaf"
    pt.put("x.inner.more", 1)
    assert pt.get("x.inner.more", int) == 1


def test_add_child_keeps_existing():
    pt = PTree()
    pt.put("k", "first")
    pt.add_child("k", PTree("second"))
    assert [child.data for _, child in pt] == ["first", "second"]


def test_empty_path_rejected_when_placing_child():
    with pytest.raises(ValueError):
        PTree().put_child("", PTree())


def test_sequence_path_allows_dotted_keys():
    pt = PTree()
    pt.put(["a.b", "c"], "x")
    assert pt.find("a.b").get("c") == "x"
    assert pt.get(["a.b", "c"]) == "x"
    assert pt.get_child_optional("a.b") is None


def test_unsupported_value_type():
    with pytest.raises(TypeError):
        PTree().put("a", [1, 2])


def test_iptree_keys_ignore_case():
    pt = IPTree()
    pt.put("Key.Sub", "v")
    assert pt.get("KEY.sub") == "v"
    pt.put("key.SUB", "w")
    assert pt.get_child("key").count("sub") == 1
    assert pt.get("Key.Sub") == "w"


def test_iptree_equality_ignores_key_case():
    a = IPTree()
    a.put("Alpha", "1")
    b = IPTree()
    b.put("alpha", "1")
    assert a == b
    assert fill_test_ptree(IPTree()) == fill_test_ptree(IPTree())


def test_created_children_keep_tree_type():
    pt = IPTree()
    node = pt.put("a.b", "v")
    assert isinstance(pt.get_child("a"), IPTree)
    assert isinstance(node, IPTree)
    assert node.data == "v"