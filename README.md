# nouzen

Helpers for a command-line tool that downloads and installs packages from
APT repositories: error codes, command-line argument splitting, size
formatting, path and file utilities, URI resolution and a yes/no console
prompt. The package is pure Python and needs nothing outside the standard
library.

## What it does not do

The package is a set of building blocks only. It has no command to run, and
it does not fetch repository indexes, download `.deb` files, resolve
dependencies or install anything. Those jobs are left to code built on top
of these modules.

## Modules

- `nouzen.errors`: the `ErrorCode` enumeration, `error_message(code)`, which
  returns the text for a code (or `"Unknown error"`), and the `NouzenError`
  exception, which carries a `code`, an optional `detail` and a `message`.
- `nouzen.cliargs`: `parse_arguments(args)` turns a list of arguments
  (without the program name) into `Argument` items, each with an
  `ArgumentType` (`NON_VALUE`, `VALUE`, `VALUE_ONLY`), a `key` and a
  `value`. Leading dashes mark a key; `--key=value` and `--key value` both
  give the key its value. An empty argument, or a bare value that does not
  follow a key without a value, raises `ArgumentError`.
- `nouzen.units`: `format_size(value)` writes a byte count in multiples of
  1024 (`"1.5 KB"`); `int_length(value)` and `uint_length(value)` count the
  characters needed to print an integer.
- `nouzen.buffer`: `BoundedBuffer(size)` holds at most `size - 1` bytes;
  `append(data)` raises `OverflowError` when they would not fit and
  `getvalue()` returns what is stored.
- `nouzen.paths`: string operations on paths: `is_absolute`, `is_relative`,
  `basename`, `dirname`, `strip_path_sep`, `get_extension` (only a
  non-empty alphanumeric extension counts), `remove_extensions`
  (`"a.tar.gz"` becomes `"a"`), `normalize_path(path, single_component)`
  (replaces invalid characters with `_`, trims leading and trailing dots,
  cuts components to `NAME_MAX`) and `parent_path(path, maxdepth)`.
- `nouzen.filesystem`: `directory_exists`, `file_exists`,
  `create_directory` (creates every missing parent and accepts an existing
  directory), `set_current_directory` and `get_current_directory`.
- `nouzen.attributes`: `symlink_exists`, `create_symlink(source,
  destination)`, `get_symlink`, `get_file_permissions` (returns `FileMode`
  flags, without following links) and `set_file_writable`.
- `nouzen.fileops`: `copy_file`, `move_file` (falls back to copy and
  delete across filesystems), `remove_file` (a missing file is not an
  error), `remove_empty_directory`, `remove_directory` and
  `remove_directory_contents`.
- `nouzen.locations`: `expand_filename` (absolute path with links resolved;
  for a path that does not exist, its longest existing leading directory is
  resolved), `get_app_filename` and `get_app_directory` (the parent of a
  `bin`, `sbin` or `xbin` directory holding the program).
- `nouzen.base_uri`: `BaseURI(type, value)` with a `URIType` of `URL`,
  `LOCAL_FILE` or `LOCAL_DIRECTORY`; `resolve(source)` resolves a reference
  against it. `resolve_url`, `resolve_path`, `resolve_file` and
  `resolve_directory` can be used directly. Failures, and a `TEXT` base,
  raise `URIError`.
- `nouzen.keys`: `ConsoleInputReader` is a context manager that puts a
  terminal into raw mode and restores it on exit; `read_key()` returns a
  `Key` (with `type`, `subtype`, `name` and `code`) and raises `EOFError`
  when input is closed. `lookup_key(data)` maps raw bytes to a key.
- `nouzen.ask`: `ask(read_key=None, out=None)` writes
  `Do you want to continue? [Y/n] ` and returns an `Answer`: `YES` for `y`
  or Enter, `NO` for `n`, `INTERRUPTED` for Ctrl+C, Ctrl+D, Ctrl+\ or
  closed input. Other keys are ignored, and `Abort.` goes to standard error
  unless the answer is yes.

## Examples

```python
from nouzen.units import format_size
from nouzen.paths import basename, get_extension

format_size(1536)                  # "1.5 KB"
basename("/var/cache/pkg.deb")     # "pkg.deb"
get_extension("pkg.deb")           # "deb"
```

```python
from nouzen.cliargs import parse_arguments

for argument in parse_arguments(["--assume-yes", "--concurrency", "4"]):
    print(argument.type, argument.key, argument.value)
```

```python
from nouzen.base_uri import BaseURI, URIType

base = BaseURI(URIType.URL, "https://deb.example.com/debian/dists/stable/Release")
base.resolve("main/binary-amd64/Packages")
# "https://deb.example.com/debian/dists/stable/main/binary-amd64/Packages"
```

```python
from nouzen.errors import ErrorCode, error_message

print(error_message(ErrorCode.MEM_ALLOC_FAILURE))  # "Could not allocate memory"
```

## Tests

```
pip install -e ".[test]"
pytest
```