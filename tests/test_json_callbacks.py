from proptree.json_callbacks import StandardCallbacks
from proptree.ptree import PTree


class PrefixingCallbacks(StandardCallbacks):
    """Marks each node's data with the kind of JSON value it came from."""

    def on_null(self):
        super().on_null()
        self._current_value = "_:" + self._current_value

    def on_boolean(self, b):
        super().on_boolean(b)
        self._current_value = "b:" + self._current_value

    def on_number(self, text):
        super().on_number(text)
        self._current_value = "n:" + self._current_value

    def on_begin_number(self):
        super().on_begin_number()
        self._current_value = "n:"

    def on_begin_string(self):
        super().on_begin_string()
        if not self.is_key():
            self._current_value = "s:"

    def on_begin_array(self):
        super().on_begin_array()
        self._current_value = "a:"

    def on_begin_object(self):
        super().on_begin_object()
        self._current_value = "o:"


def _string(cb, text):
    cb.on_begin_string()
    cb.on_code_units(text)
    cb.on_end_string()


def _feed_sample(cb):
    # {"a": [1, true, null, "x", 2.5], "b": {}, "c": false}
    cb.on_begin_object()
    _string(cb, "a")
    cb.on_begin_array()
    cb.on_begin_number()
    cb.on_digit("1")
    cb.on_end_number()
    cb.on_boolean(True)
    cb.on_null()
    _string(cb, "x")
    cb.on_number("2.5")
    cb.on_end_array()
    _string(cb, "b")
    cb.on_begin_object()
    cb.on_end_object()
    _string(cb, "c")
    cb.on_boolean(False)
    cb.on_end_object()
    return cb.output()


def test_standard_callbacks_build_tree():
    tree = _feed_sample(StandardCallbacks())
    assert tree.data == ""
    assert [key for key, _ in tree] == ["a", "b", "c"]
    array = tree.get_child("a")
    assert [(key, child.data) for key, child in array] == [
        ("", "1"),
        ("", "true"),
        ("", "null"),
        ("", "x"),
        ("", "2.5"),
    ]
    assert tree.get_child("b").empty()
    assert tree.get("c") == "false"


def test_standard_callbacks_match_tree_built_by_hand():
    expected = PTree()
    array = PTree()
    for value in ["1", "true", "null", "x", "2.5"]:
        array.push_back("", PTree(value))
    expected.push_back("a", array)
    expected.push_back("b", PTree())
    expected.push_back("c", PTree("false"))
    assert _feed_sample(StandardCallbacks()) == expected


def test_prefixing_callbacks_mark_value_kinds():
    plain = _feed_sample(StandardCallbacks())
    tree = _feed_sample(PrefixingCallbacks())
    assert tree.data == "o:"
    assert [key for key, _ in tree] == [key for key, _ in plain]
    array = tree.get_child("a")
    assert array.data == "a:"
    assert [child.data for _, child in array] == [
        "n:1",
        "b:true",
        "_:null",
        "s:x",
        "n:2.5",
    ]
    assert [child.data[2:] for _, child in array] == [
        child.data for _, child in plain.get_child("a")
    ]
    assert tree.get_child("b").data == "o:"
    assert tree.get("c") == "b:false"


def test_scalar_root_value():
    cb = StandardCallbacks()
    cb.on_number("42")
    assert cb.output().data == "42"
    assert cb.output().empty()


def test_string_root_built_from_single_units():
    cb = StandardCallbacks()
    cb.on_begin_string()
    for c in "hi!":
        cb.on_code_unit(c)
    cb.on_end_string()
    assert cb.output().data == "hi!"


def test_root_array_elements_use_empty_keys():
    cb = StandardCallbacks()
    cb.on_begin_array()
    for digit in "123":
        cb.on_number(digit)
    cb.on_end_array()
    tree = cb.output()
    assert tree.count("") == 3
    assert [child.data for _, child in tree] == ["1", "2", "3"]


def test_is_key_only_while_reading_key():
    cb = StandardCallbacks()
    cb.on_begin_object()
    assert not cb.is_key()
    cb.on_begin_string()
    assert cb.is_key()
    cb.on_code_units("k")
    cb.on_end_string()
    cb.on_null()
    assert not cb.is_key()
    cb.on_end_object()
    assert cb.output().get("k") == "null"


def test_nested_objects_and_repeated_keys():
    cb = StandardCallbacks()
    cb.on_begin_object()
    _string(cb, "a")
    cb.on_begin_object()
    _string(cb, "b")
    _string(cb, "c")
    cb.on_end_object()
    _string(cb, "a")
    _string(cb, "d")
    cb.on_end_object()
    tree = cb.output()
    assert tree.get("a.b") == "c"
    assert tree.count("a") == 2
    assert [child.data for _, child in tree.equal_range("a")] == ["", "d"]