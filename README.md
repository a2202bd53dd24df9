# proptree

A small library for hierarchical property trees: ordered, keyed nodes that
each carry a string value and any number of children, with dotted-path
access, typed value conversion, JSON output, and a syntax checker for the
INFO configuration format.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Building and reading trees

```python
from proptree.ptree import PTree

tree = PTree()
tree.put("server.host", "localhost")
tree.put("server.port", 8080)
tree.add("server.alias", "one")
tree.add("server.alias", "two")

tree.get("server.port", int)              # 8080
tree.get("server.timeout", int, 30)       # 30 (default used)
tree.get_optional("server.missing", str)  # None
tree.get_child("server").count("alias")   # 2
```

A path is either a dotted string such as `"a.b.c"` or a sequence of key
fragments, so keys that contain dots can still be reached. The empty path
names the tree itself.

- `put` replaces the first node at a path (creating missing nodes);
  `add` always appends a new one.
- `put_child` and `add_child` do the same with whole subtrees; the tree
  stores a copy of the child it is given.
- `get_child(path)` raises `PTreeBadPath` when nothing is there;
  `get_child(path, default)` and `get_child_optional(path)` do not.
- `get_value`, `get_value_optional` and `put_value` convert the node's own
  data.

`IPTree` behaves the same way, except that keys compare without regard to
case.

Both build on `proptree.tree.Tree`, the underlying ordered container. It
supports `len()`, iteration over `(key, child)` pairs, `reversed()`,
equality, `copy.copy`, and the methods `front`, `back`, `insert`,
`erase_at`, `push_front`, `push_back`, `pop_front`, `pop_back`, `reverse`,
`sort`, `ordered`, `find`, `equal_range`, `count`, `erase`, `clear` and
`swap`.

## Errors

`proptree.errors` defines `PTreeError` and its subclasses `PTreeBadPath`,
`PTreeBadData` and `FileParserError`; `InfoParserError` and
`JsonParserError` derive from `FileParserError`, which carries `message`,
`filename` and `line`.

## Value conversion

`proptree.translator.StreamTranslator(kind)` turns stored strings into
values of `str`, `int`, `float` or `bool` and back again; surrounding
whitespace is ignored and anything else left over makes the conversion
fail. `translator_for(kind)` returns the translator used for a type
(strings pass through unchanged). Booleans are read as `1`/`0` or
`true`/`false` and written as `true`/`false`. Floats are written with 17
significant digits.

## Writing JSON

```python
import io
from proptree.json_writer import to_json_string, write_json

print(to_json_string(tree, pretty=True))

buf = io.StringIO()
write_json(buf, tree, False, "")
```

A node whose children all have empty keys is written as an array. A node
without children is written as a string. A tree that cannot be
represented — a root with data, or any node with both data and children —
raises `JsonParserError` (`verify_json` performs that check on its own).
`create_escapes` gives the escaping used for keys and values.

## Building trees from JSON events

`proptree.json_callbacks.StandardCallbacks` is an event sink that assembles
a `PTree` from parse events (`on_begin_object`, `on_begin_string`,
`on_code_units`, `on_number`, `on_null`, …); `output()` returns the tree.
Scalars are stored as their text, and array elements under empty keys.

`proptree.json_encoding` offers UTF-8 helpers for such a reader:
`is_ws`, `decode_hexdigit`, `transcode_codepoint`, `skip_codepoint`,
`feed_codepoint` and `skip_introduction`, raising `EncodingError` on
malformed input.

## Checking INFO syntax

`proptree.info_grammar.info_parse(text)` reports whether text conforms to
the INFO format grammar: keys, values, quoted and continued strings, nested
`{ }` blocks and `;` comments (`#include` is not recognized).

From the command line:

```
proptree-info-check [FILE ...]
```

With file names it checks each file; without, it checks the built-in sample
documents. It prints one `Parse result: Success` or
`Parse result: Failure` line per document.

## What is not included

- There is no JSON reader: nothing turns JSON text into a tree on its own.
  `StandardCallbacks` only builds a tree from events that some parser
  supplies.
- There is no INFO reader or writer: `info_parse` only says whether text is
  well formed; it does not build a tree.
- There is no XML support.