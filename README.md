# wutils

A grab bag of small helpers and two command-line tools for everyday chores:
comparing lists of names, hashing files, running callables under a deadline,
reading the length of an MP4 file, keeping external disks awake, launching
scripts by their extension and making JetBrains IDE installations portable.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `common-starter`

```
common-starter path/to/script.sh
```

Starts a `.bat`, `.exe`, `.sh`, `.ps1` or `.cmd` file without waiting for it.
`.bat` and `.exe` files are opened with `cmd /C start`, `.sh` files with
`cmd /C start bash -c`, `.ps1` files with `powershell` and `.cmd` files with
`cmd /c`, so the command is meant for Windows. Any other extension prints
`Unknown file extension`. With no argument it does nothing.

### `jpu`

Makes JetBrains Toolbox installations portable. It looks in `JPU_PATH`
(default: `$SCOOP/persist/jetbrains-toolbox/apps`), and for every IDE folder
except `Fleet` picks the greatest version directory under `ch-0` (ignoring
`*.plugins` directories). It then writes

```
idea.config.path = ${idea.home.path}/../../config
idea.system.path = ${idea.home.path}/../../system
```

over the beginning of that version's existing `bin/idea.properties`, so
settings and caches live in shared `config` and `system` directories and
survive upgrades. Files that cannot be opened are reported and skipped.

## Library

```python
from wutils.collection import slice_diff, sort_keys
from wutils.grammar import match
from wutils.hashing import HashAlgorithm, sum_string, compare_file
from wutils.timing import with_timeout, time_costs
from wutils.linediff import check_lines_diff

missing_in_a, missing_in_b = slice_diff(["a", "b", "c"], ["b", "c", "d"])
# missing_in_a == ["d"], missing_in_b == ["a"]

sort_keys({3: "b", 1: "a", 2: "c"})   # [1, 2, 3]
match("^a", "abc")                    # True
sum_string("abc", HashAlgorithm.MD5)  # hex digest
with_timeout(0.5, slow_call, default=0)  # slow_call's result, or 0 after 0.5 s
```

The modules:

- `wutils.collection`: `for_each`, `map_to_lists`, `slice_to_map`,
  `slice_diff`, `sort_slice` and `sort_keys`.
- `wutils.cast`: `empty_value` gives a fresh empty value of a type,
  `convert` does loose conversions between `bool`, `int`, `float`, `str` and
  collections, and `to_int_list` / `to_float_list` turn lists of numbers or
  numeric strings into lists of `int` or `float`.
- `wutils.grammar`: `conditional_equal` and `match` (a regular-expression
  search; an invalid pattern is logged and counts as no match).
- `wutils.mathutil`: `int_pow`, `pow10`, and random digit strings with
  `get_rand_num` and `get_verify_code` (six digits).
- `wutils.hashing`: `HashAlgorithm` (`SHA256`, `MD5`), `sum_string`,
  `sum_file` and `compare_file` (same size and same MD5 digest).
- `wutils.timing`: `with_timeout` runs a callable in a background thread and
  returns its result, or the given default once the timeout passes;
  `time_costs` returns how long a call took as a `timedelta`.
- `wutils.media`: `get_mp4_duration` reads the whole-second duration of an
  MP4 given as bytes or a binary file, from its `moov` header.
- `wutils.ping`: `normalize_host`, `ping` (HTTP response time in
  milliseconds, 0 on failure or after 3 seconds), `ping_by_http` and
  `net_reachable` (runs the system `ping` command).
- `wutils.linediff`: `read_input_file` takes the second bracketed field of
  every line shaped like `[...] [name] ...`; `check_lines_diff` compares two
  such files and returns the names missing in each.
- `wutils.keep_runner`: `load_config` reads a YAML configuration into a
  `RunnerConfig`; `KeepRunner` holds it, reloads it every `refresh.delay`
  seconds, and runs the disk sleep guard: `write_stamp` appends a timestamp
  line to `<disk>/.dsg`, `dsg_once` stamps every configured disk at once and
  `dsg` repeats that every `dsg.delay` seconds.
- `wutils.log`: `get_logger` returns the shared logger, which writes
  pretty-printed JSON records to standard output.

The keep-runner configuration is read from `./config/cmd/wutils.yml` by
default; `dsg.disk` is required:

```yaml
debug: false
refresh:
  delay: 10
dsg:
  disk:
    - "E:"
    - "F:"
  delay: 30
```

```python
from wutils.keep_runner import KeepRunner

runner = KeepRunner("config/cmd/wutils.yml", refresh=False)
runner.dsg_once()   # one bool per disk: whether its stamp was written
```

## What it does not do

- There is no single umbrella command: the disk sleep guard and the line
  comparison are available only from Python, through `wutils.keep_runner` and
  `wutils.linediff`.
- It does not check or guess archive passwords, and it has no JSON helpers.
- It does not test or switch Go module mirrors.
- The configuration may list window-opacity settings (`ol`), which
  `load_config` reads and validates, but nothing in the package changes
  window opacity or lists windows.