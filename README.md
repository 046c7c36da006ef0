# termcore

Building blocks for a terminal emulator. None of them depends on a GUI toolkit.

## What is in it

### Colors and color schemes

- `termcore.colors` defines the following:
  - `Color`, an RGB color. It has `hue()`, `saturation()` and `value()` in HSV terms, and `Color.from_hsv()` builds one from HSV.
  - `FontWeight` and `ColorEntry`.
  - `default_color_table()`, the default twenty-entry palette: foreground, background and the eight ANSI colors, each in a normal and an intense form.
  - `color_name_for_index()` and `translated_color_name_for_index()`, which give the names of palette indexes.
- `termcore.colorscheme.ColorScheme` holds a palette, a name, a description and an opacity.
  - It reads `.colorscheme` INI files with `read()`.
  - Entries can be given a `RandomizationRange`. `color_entry()` and `color_table()` then vary those colors when they are called with a nonzero seed.
  - `set_randomized_background_color()` switches this on or off for the background.
- `termcore.schememanager` provides two classes:
  - `ColorSchemeManager` finds, loads and caches the schemes in one directory. It reads both `.colorscheme` files and the older line-based `.schema` files.
  - `KDE3ColorSchemeReader` parses the `.schema` format. It understands only `title` and `color` lines.

### Filters and hotspots

- `termcore.filter` provides the base classes:
  - `Filter` scans a text buffer and records hotspots.
  - `RegExpFilter` marks every match of a regular expression as a `RegExpHotSpot`. The hotspot keeps the texts the expression captured.
  - A pattern that matches the empty string finds nothing.
- `termcore.urlfilter.UrlFilter` marks web addresses and e-mail addresses as `UrlHotSpot` links.
  - Activating a hotspot with `"open-action"`, or with no action, passes the address to `on_activated`. A web address with no protocol is given `http://` first, and an e-mail address is given `mailto:`.
  - Activating it with `"copy-action"` passes the plain address to `on_copy`.
  - `classify_url()` tells the kinds of address apart.

### Combining characters

`termcore.extchars.ExtendedCharTable` maps a sequence of code points to a single 16-bit key, for example a base character followed by combining marks.

### History search

`termcore.historysearch.HistorySearch` searches a line source for a regular expression.
- The search runs forward or backward from a given position and wraps around the end.
- The source is any object with `line_count()` and `lines(start_line, end_line)`.
- A match is returned as a `SearchMatch`.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Examples

Find a link in some text:

```python
from termcore.urlfilter import UrlFilter

opened = []
url_filter = UrlFilter(on_activated=opened.append, on_copy=None)
url_filter.set_buffer("see www.example.com for details\n", [0])
url_filter.process()

spot = url_filter.hot_spot_at(0, 6)
spot.activate("open-action")
print(opened)   # ['http://www.example.com']
```

Search some lines of output:

```python
from termcore.historysearch import HistorySearch

class Lines:
    def __init__(self, lines):
        self._lines = lines

    def line_count(self):
        return len(self._lines)

    def lines(self, start_line, end_line):
        return self._lines[start_line:end_line + 1]

search = HistorySearch(Lines(["hello world", "second line"]), "line")
print(search.search())
# SearchMatch(start_column=7, start_line=1, end_column=10, end_line=1)
```

Load a color scheme:

```python
from termcore.schememanager import ColorSchemeManager

manager = ColorSchemeManager("/path/to/schemes")
scheme = manager.find_color_scheme("Linux")
if scheme is not None:
    print(scheme.description, scheme.has_dark_background())
```

Give a combined character a key:

```python
from termcore.extchars import ExtendedCharTable

table = ExtendedCharTable()
key = table.create_extended_char([0x65, 0x301])   # "e" + combining acute accent
print(table.lookup_extended_char(key))            # (101, 769)
```

## What it does not do

termcore is not a terminal emulator. It has no limits of its own beyond what is listed here:

- It does not start or talk to a shell, and it has no pseudo-terminal handling.
- It does not parse escape sequences.
- It has no screen model and no display.
- It does not store scrollback. `HistorySearch` reads lines from whatever source you give it.
- Filters work on plain text buffers that you supply together with their line start offsets. There is no class that runs several filters over a screen image at once.

## Tests

```
pytest
```