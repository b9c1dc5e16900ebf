# logform

Small, composable formats for log records. A record is a `LogInfo` holding
a level, a message and a dictionary of JSON-compatible metadata. A format
takes a record and returns a transformed record, or `None` to drop it.
Formats can be chained so that each one feeds the next.

The package has no dependencies outside the standard library. Import from
the submodules; the top-level package exports only `__version__`.

## Installation

```
pip install .
```

## Log records

```python
from logform.log_info import LogInfo

info = LogInfo("info", "User logged in").with_meta("user_id", 12345)
print(info)                       # [info] User logged in {user_id: 12345}

parsed = LogInfo.parse('[DEBUG] Processing {user: "Alice", count: 5}')
parsed.message                    # "Processing"
parsed.meta["count"]              # 5

data = info.to_bytes()            # UTF-8 JSON: {"level":..,"message":..,"meta":{..}}
LogInfo.from_bytes(data).message  # "User logged in"
```

- `with_meta(key, value)` and `without_meta(key)` return changed copies.
- `to_value()` returns `{"level", "message", "meta"}` as a dictionary;
  `LogInfo.from_value(obj)` builds a record from such a dictionary (a
  missing or non-object `meta` gives empty metadata).
- `LogInfo.parse(text)` accepts that JSON object, or the
  `[LEVEL] message {key: value, ...}` form, where each value is read as
  JSON if it can be and kept as a string otherwise.

Invalid input raises `LogInfoError`, a subclass of `ValueError`.

## Formats

Every format is a subclass of `logform.format.Format` with a
`transform(info)` method. The factory functions take the same keyword
arguments as the classes.

| Module                  | Factory / class                          | What it does |
|-------------------------|------------------------------------------|--------------|
| `logform.basic`         | `align()` / `AlignFormat`                | prefixes the message with a tab |
| `logform.basic`         | `passthrough()` / `PassthroughFormat`    | returns the record unchanged |
| `logform.basic`         | `printf(template)` / `Printf`            | sets the message to `template(info)` |
| `logform.cli`           | `cli(...)` / `CliFormat`                 | pads, colours, then writes `level:message` |
| `logform.colorize`      | `colorize(...)` / `Colorizer`            | wraps level and/or message in ANSI codes |
| `logform.json_format`   | `json()` / `JsonFormat`                  | one line of JSON with level, message and metadata; keys sorted, metadata cleared |
| `logform.label`         | `label(...)` / `LabelFormat`             | puts a label in `meta["label"]` or `[label] ` before the message |
| `logform.logstash`      | `logstash()` / `LogstashFormat`          | JSON with `@message`, `@timestamp`, `@fields` |
| `logform.metadata`      | `metadata(...)` / `MetadataFormat`       | gathers metadata entries under one key |
| `logform.ms`            | `ms()` / `MsFormat`                      | sets `meta["ms"]` to `+<n>ms` since the previous record |
| `logform.pad_levels`    | `pad_levels(...)` / `Padder`             | pads messages so that levels line up |
| `logform.pretty_print`  | `pretty_print(...)` / `PrettyPrinter`    | indented rendering of the whole record, metadata cleared |
| `logform.simple`        | `simple()` / `SimpleFormat`              | `level:<padding> message {remaining metadata as JSON}` |
| `logform.timestamp`     | `timestamp(...)` / `Timestamp`           | adds the current UTC time as `meta["timestamp"]` |
| `logform.uncolorize`    | `uncolorize(...)` / `Uncolorize`         | strips ANSI colour codes |

### Options

- `Colorizer(all=False, level=True, message=False, colors=None)`: colours
  the level, the message, or both. Colours start from
  `config.default_colors()`; `colors` (a mapping or pairs) adds or replaces
  entries, each a name or a list of names. `add_colors(colors)` and
  `add_color(level, color)` do the same later; invalid entries are skipped
  with a warning. Names: `black`, `red`, `green`, `yellow`, `blue`,
  `magenta`, `cyan`, `white`, their `bright_` forms, backgrounds `on_...`
  and `on_bright_...`, and `bold`, `dimmed`, `italic`, `underline`,
  `blink`, `reversed`, `hidden`, `strikethrough`. Unknown names are
  ignored. `style(text, colors)` applies such names to any string.
- `Padder(levels=None, filler=" ")`: pads each known level's message to
  one character past the longest level, using `filler`; levels default to
  `config.default_levels()`. Unknown levels are left alone.
- `CliFormat(levels=None, filler=" ", all=False, level=True, message=False, colors=None)`:
  a `Padder` over `config.cli_levels()` by default, then a `Colorizer`
  (whose colours start from the default set), then `level:message`.
- `Uncolorize(level=True, message=True)`; `strip_colors(text)` removes the
  codes from a string.
- `LabelFormat(label="", message=False)`.
- `MetadataFormat(key="metadata", fill_except=(), fill_with=())`: moves the
  `fill_with` keys, or all keys when it is empty, except those in
  `fill_except`.
- `Timestamp(format=None, alias=None)`: with `format` the time is rendered
  by `strftime`, otherwise as RFC 3339 with microseconds; `alias` stores
  the same value under a second key.
- `PrettyPrinter(colorize=False)`: strings in single quotes, object keys
  sorted, two-space indentation; with `colorize` strings are green,
  numbers blue, booleans yellow and `null` red. The renderer is also
  available as `logform.format_json.format_json(value, colorize)`.
- `LogstashFormat`: a string `meta["timestamp"]` is used as is, a whole
  number as seconds since the epoch, anything else (with a warning) or
  nothing gives the current UTC time. The timestamp is removed from the
  metadata. A record that cannot be serialised is dropped (`None`).

## Chaining

```python
from logform.basic import printf
from logform.colorize import colorize
from logform.format import chain
from logform.log_info import LogInfo
from logform.timestamp import timestamp

fmt = chain(
    timestamp(),
    colorize(all=True),
    printf(lambda info: f"{info.meta['timestamp']} - {info.level}: {info.message}"),
)

result = fmt.transform(LogInfo("info", "This is a test message"))
print(result.message)
```

`chain(first, *rest)` needs at least two formats. Every format also has
`.chain(next_format)`, and calling a format is the same as calling its
`transform`: `fmt(info)`. A chain stops as soon as a format returns `None`.

## Level sets

`logform.config` returns fresh dictionaries of level priorities and colour
names for three level sets: `default_levels()` / `default_colors()`
(error, warn, info, debug, trace), `cli_levels()` / `cli_colors()` and
`syslog_levels()` / `syslog_colors()`.

## What it does not do

This package only shapes records. It has no logger, no level filtering and
no transports: nothing here writes to the console, files or the network,
and there is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```