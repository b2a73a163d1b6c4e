# goed

The building blocks of a terminal text editor, in pure Python with no
dependencies beyond the standard library (Python 3.11 or later).

## What is in it

### `goed.core`

- `goed.core.text`: `count_lines`, `uses_crlf` (CRLF detection from a file's
  first bytes), `string_to_runes` / `runes_to_string` (text as a list of lines
  of characters), `drop_crlf` / `add_crlf`, `CrLfEncoding`, `bom_encoding`
  and `read_text_info`, which guesses whether a file is text and in which
  encoding (UTF-8, UTF-16, UTF-32, GB18030), returning `None` for binary.
- `goed.core.selection`: `Selection` and `Slice`, normalized on creation.
- `goed.core.theme`: `Style`, `Attr`, `StyledRune`, `Theme`, `parse_style`,
  `parse_styled_rune`, `read_theme` and `read_default_theme` (TOML themes).
- `goed.core.config`: `Config`, `load_config` (TOML, with defaults for unset
  numbers), `find_resource` and `update_resources`.
- `goed.core.io`: file copying with optional re-encoding (`copy_file`,
  `mv_file`), the editor home directory (`goed_home`, `init_home` returning an
  `Instance`, `instances`, `goed_socket`, `cleanup_dot_goed`), and helpers
  such as `lookup_location`, `env_with`, `runes_len` and `is_dir`.
- `goed.core.term`: the `Term` protocol, `MockTerm` (an in-memory 25x50
  terminal for tests), `term_colors` and `detect_colors`.
- `goed.core.types`: `CursorMvmt`, `ViewType`, `FileOp`, `VERSION`,
  `os_ls_args`.

### `goed.event`

- `goed.event.keys`: key name constants and `MouseButton`.
- `goed.event.types`: `EventType`, `DEFAULT_BINDINGS` and `load_bindings`.
- `goed.event.state`: `Combo` and `Event`, which track keys, modifiers and
  mouse buttons and match them against chords such as `ctrl+s` or `MD1`.

### `goed.syntax`

- `goed.syntax.model`: `StyleId`, `SyntaxItem`, `SyntaxPattern`,
  `LanguageSpec`, `Syntax`, `sort_items`, `build_syntax`.
- `goed.syntax.languages1`, `languages2`, `languages3`: definitions for
  ActionScript, Anko, Axon, batch, C/C++, C#, CSS, Fantom, Go, Java,
  JavaScript, Lua, make, HTML/XML, Markdown, Perl, PHP, Python, Ruby, shell,
  SQL, TOML, TypeScript and a generic fallback.
- `goed.syntax.registry`: `SYNTAXES` and `syntax_for(path)`.
- `goed.syntax.highlight`: `Highlights`, which splits lines into `Highlight`
  column ranges.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Examples

Line endings and character matrices:

```python
from goed.core.text import add_crlf, drop_crlf, string_to_runes, runes_to_string

add_crlf(b"foo\nbar")          # b"foo\r\nbar"
drop_crlf(b"aaa\r\nbbb")       # b"aaa\nbbb"

lines = string_to_runes("ABC\n\n12")
runes_to_string(lines)         # "ABC\n\n12"
```

Styles:

```python
from goed.core.theme import Attr, Style

Style(0x41).with_attr(Attr.BOLD) == Style(0x241)   # True
```

Highlighting source text:

```python
from goed.core.text import string_to_runes
from goed.syntax.highlight import Highlights

hs = Highlights()
hs.update(string_to_runes("var gop"), ".go")
for line in hs.lines:
    for hl in line:
        print(hl.style, hl.col_from, hl.col_to)
```

Matching input to bindings:

```python
from goed.event.state import Event
from goed.event.types import load_bindings

bindings = load_bindings("bindings.toml")   # falls back to the defaults
ev = Event()
ev.key_down("left_control")
ev.key_down("s")
ev.parse_type(bindings)
print(ev.type)                              # the "save" event
```

## What it does not do

This package is a library, not an editor. It has no command to run, no
screen or terminal backend other than `MockTerm`, no views, buffers, undo or
command bar, no clipboard access, no RPC server for instances, and no file
watching. It does not dispatch events to editor actions: `Event.parse_type`
only tells which `EventType` a piece of input stands for.