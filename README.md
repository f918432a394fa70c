# texteditcore

The editing logic for a single-line or multi-line text field, with no drawing
code. You supply the text storage and its layout. The package turns clicks,
drags and key presses into insertions, deletions, cursor moves, selection
changes and undo/redo steps. It has no dependencies outside the standard
library.

## Install

```
pip install texteditcore
pip install "texteditcore[test]"   # adds pytest, to run the tests
```

## Pieces

- `texteditcore.layout`
  - `TextBuffer` is the abstract interface your storage implements:
    `__len__`, `layout_row(start)`, `get_width(line_start, index)`,
    `char_at(index)`, `delete(index, count)` and `insert(index, chars)`.
    `insert` returns `False` when the characters do not fit.
  - `Row` is the frozen result of `layout_row`: `x0`, `x1`,
    `baseline_y_delta`, `ymin`, `ymax` and `num_chars`.
  - `MonospaceBuffer(text="", glyph_width=1.0, line_height=1.0, max_length=None)`
    is a ready-made buffer with fixed-width glyphs and one row per text line.
    Its `text` property holds the current contents. A newline reports the
    width `NEWLINE_WIDTH`, which stops vertical cursor scans at the line end.
    When `max_length` is set, inserts that would exceed it are refused.
  - `is_space(ch)` is the whitespace test used for word movement.
- `texteditcore.keys`
  - `Key` holds the editing key codes: `LEFT`, `RIGHT`, `UP`, `DOWN`,
    `LINESTART`, `LINEEND`, `TEXTSTART`, `TEXTEND`, `DELETE`, `BACKSPACE`,
    `UNDO`, `REDO`, `WORDLEFT`, `WORDRIGHT`, `PGUP`, `PGDOWN`, `INSERT`, and
    the `SHIFT` flag.
  - `is_word_boundary`, `move_word_left` and `move_word_right` find word
    starts. A word starts where whitespace is followed by non-whitespace.
- `texteditcore.undo`
  - `UndoState(state_count=99, char_count=999)` keeps a bounded history of
    `UndoRecord` entries. Undo and redo share one record table and one
    character store, and the oldest entries are dropped when either runs out.
    `can_undo` and `can_redo` tell whether a step is available. `undo(buffer)`
    and `redo(buffer)` return the new cursor position, or `None` when nothing
    was applied.
- `texteditcore.state`
  - `TextEditState(single_line=False, undo_states=99, undo_chars=999)` holds
    the cursor, the selection (`select_start`, `select_end`), `insert_mode`,
    `row_count_per_page` and the undo history in `undo`. It provides `click`,
    `drag`, `cut`, `paste`, `delete`, `delete_selection`, `clamp` and the
    selection helpers.
  - `locate_coord(buffer, x, y)` maps a display point to a character
    position. `find_charpos(buffer, n, single_line)` returns a `FindState`
    that describes where character `n` sits.
- `texteditcore.keyinput`
  - `handle_key(state, buffer, key)` applies one key press.

## Example

```python
from texteditcore.layout import MonospaceBuffer
from texteditcore.state import TextEditState
from texteditcore.keys import Key
from texteditcore.keyinput import handle_key

buffer = MonospaceBuffer("hello\nworld", glyph_width=8.0, line_height=16.0, max_length=256)
state = TextEditState(single_line=False, undo_states=99, undo_chars=999)

state.click(buffer, 20.0, 4.0)           # cursor into the first line
handle_key(state, buffer, Key.LINEEND)
handle_key(state, buffer, ord("!"))      # buffer.text == "hello!\nworld"
handle_key(state, buffer, Key.UNDO)      # buffer.text == "hello\nworld"
handle_key(state, buffer, Key.TEXTEND | Key.SHIFT)  # select to the end
```

## Key behaviour

A key code below `Key.LEFT` is a character code point, and it is inserted
into the buffer. To extend the selection, combine a `Key` value with
`Key.SHIFT`. Some keys behave differently depending on the state:

- In insert mode, which `Key.INSERT` toggles, a typed character overwrites
  the character under the cursor.
- In a single-line field a newline is never inserted, and `UP`/`DOWN` act as
  `LEFT`/`RIGHT`.
- `PGUP` and `PGDOWN` move by `state.row_count_per_page` rows, so set that to
  a positive value for multi-line fields.
- A paste that does not fit leaves the selection deleted. An undo restores it.

## What it does not do

The package draws nothing and reads no input devices. It does not touch the
system clipboard. Rendering the text, cursor and selection is up to you, as
is turning your toolkit's keyboard and mouse events into `Key` codes and
`click`/`drag` calls. To copy text, read the selected range out of your
buffer yourself before calling `cut`.