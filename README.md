# proptree

A property tree is a hierarchical structure. Every node holds one value and an
ordered sequence of child nodes. Each child is identified by a key, and keys
need not be unique. The structure suits configuration data. `proptree` reads
trees from INI and INFO data, writes them as INI, and writes them as XML.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Working with trees

```python
from proptree.ptree import Ptree, Path
from proptree.errors import PtreeBadPath, PtreeBadData

pt = Ptree()
pt.put("server.host", "localhost")
pt.put("server.port", 8080)

pt.get("server.port", int)                   # 8080
pt.get("server.timeout", int, default=30)    # 30, the node does not exist
pt.get_optional("server.user", str)          # None

server = pt.get_child("server")
len(server)                                  # 2
[key for key, child in server]               # ['host', 'port']

pt.add("server.alias", "one")
pt.add("server.alias", "two")
server.count("alias")                        # 2

pt.get("server/port", int)                   # raises PtreeBadPath
pt.get(Path("server/port", "/"), int)        # 8080
```

Values are stored as strings. `put`, `put_value` and `add` convert values to
strings, and `get`, `get_value` and `get_optional` convert them back to the
requested type. Booleans are written as `true` and `false`. When read back,
`true`, `false`, `1` and `0` are accepted. A different translator can be
passed through the `translator` argument. `proptree.translator` provides
`IdTranslator`, `StreamTranslator` and `translator_between`.

Paths use `.` as the separator by default. A `Path` with another separator can
be built explicitly, and paths can be joined with `/`. `Ptree(ignore_case=True)`
creates a tree that compares keys without regard to letter case.

Nodes also offer a list-like interface: `push_front`, `push_back`, `insert`,
`extend`, `pop_front`, `pop_back`, `erase_at`, `reverse` and `sort`. They also
offer a keyed interface: `find`, `index_of`, `equal_range`, `count`, `erase`
and `ordered`. Two trees compare equal when their data, their keys and their
children are the same, in the same order.

A value that cannot be converted raises `PtreeBadData`. A path that does not
exist raises `PtreeBadPath`. Both derive from `PtreeError` in `proptree.errors`.

### The empty-tree trick

`get_child` accepts a default tree, so optional sections can be read without
branching:

```python
settings = pt.get_child("settings", Ptree())
settings.get("setting1", int, default=0)
```

## INI files

```python
import io
from proptree.ini import read_ini, write_ini, read_ini_file, write_ini_file

pt = Ptree()
read_ini(io.StringIO("[db]\nname = test\n"), pt)
pt.get("db.name", str)                       # 'test'

out = io.StringIO()
write_ini(out, pt)
```

`read_ini` accepts a text stream, any iterable of lines, or a string. It
raises `IniParserError` on any of these format violations:

- duplicate keys or duplicate section names
- a line without `=`
- a missing key
- an unmatched `[`

When writing, `IniParserError` is raised if:

- the root holds data
- a node holds both data and children
- the tree is deeper than two levels
- a level has duplicate keys

Every error carries the line number. When the error comes from
`read_ini_file` or `write_ini_file`, it also carries the file name.

## INFO files

```python
from proptree.info import read_info, read_info_file

pt = Ptree()
read_info_file("settings.info", pt)
read_info_file("missing.info", pt, default=Ptree())   # falls back on any error
```

The INFO format supports:

- nested `{ }` blocks
- quoted keys and values with backslash escapes
- continuation of a quoted value onto the next line with a trailing `\`
- `;` comments
- `#include "file"` directives

An include file is opened by the name given in the directive. Nesting of
includes is limited to a depth of 100. Errors raise `InfoParserError`.

## XML output

```python
from proptree.xml_writer import write_xml, write_xml_file, XmlWriterSettings

out = io.StringIO()
write_xml(out, pt, XmlWriterSettings(indent_char=" ", indent_count=2))
```

Output is pretty-printed when `indent_count` is above 0. Children keyed
`<xmlattr>` become attributes, `<xmlcomment>` become comments, and
`<xmltext>` become text nodes. Special characters are replaced by character
entities; `encode_char_entities` does this replacement. Write failures raise
`XmlParserError`.

## What is not included

The package does not read XML and does not write INFO data. It neither reads
nor writes JSON. `JsonParserError` exists in `proptree.errors`, but nothing in
the package raises it.

## Command line

`proptree-settings` reads INFO settings files. For each file it prints the
values of `settings.setting1`, `settings.setting2` and `settings.setting3`,
using defaults (`0`, `0`, `default`) for anything missing. Each file is
processed twice: once using the empty-tree trick and once handling a missing
section explicitly.

```
proptree-settings my_settings.info other.info
```

Without arguments it reads `settings_fully-existent.info`,
`settings_partially-existent.info` and `settings_non-existent.info` from the
current directory. When a file cannot be read or parsed, the command prints
`Error: ...`, stops, and still exits with status 0.