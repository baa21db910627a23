# pyftls

A compact `ls`-style directory lister for POSIX systems.

## Installation

```
pip install .
```

## Usage

```
pyftls [-lRart] [path ...]
```

Options can be given separately or combined (`-la`, `-l -R`). They can be
placed before, between or after paths.

| Option | Effect |
|--------|--------|
| `-l`   | long format: permissions, link count, owner, group, size, modification time, and the link target for symbolic links. A `total` block count comes first |
| `-R`   | list subdirectories recursively. Symbolic links to directories are not followed |
| `-a`   | include entries whose names begin with `.`, including `.` and `..` |
| `-r`   | reverse the sort order |
| `-t`   | sort by modification time, newest first |

When no path is given, the current directory is listed. When several paths
are given, the ones that are not directories come first and the directories
follow. Each group is sorted by name without regard to case, and `-r`
reverses that order. Each directory is introduced by its name. A path that
is a regular file is printed as it is.

When standard output is a terminal, names are coloured:

- directories: blue
- symbolic links: cyan
- executables: green
- archives (`.zip`, `.tar`, `.gz`, `.bz2`, `.rar`, `.7z`, `.tgz`): red

An unknown option is reported on standard error, and the command exits with
status 1. A path that cannot be opened produces a `cannot access` or
`cannot open directory` message.

## Using it from Python

```python
from pyftls.options import parse_options
from pyftls.listing import Lister, main

main(["-la", "/tmp"])          # same as the command line; returns the exit status

options = parse_options(["-lt"])
Lister(options).run(0, ".", 0)
```

`parse_options` raises `pyftls.options.OptionError` for an unknown option
letter. `Lister` takes an optional text stream for its output and writes to
standard output by default.

The package also carries the small helpers the lister is built on:

- `pyftls.sorting`: `quicksort`, `sort_entries`, `sort_paths`
- `pyftls.fileinfo`: `is_archive`, `color_for`, `total_blocks`, `join_path`
- `pyftls.printf`: `format_printf`, `write_printf`
- `pyftls.linereader`: `LineReader`, which reads a stream line by line
- string, byte-buffer, linked-list and string-list utilities in
  `pyftls.cstring`, `pyftls.strtools`, `pyftls.memory`,
  `pyftls.linkedlist` and `pyftls.matrix`

## Limitations

Only the five options above are understood. There are no other `ls`
options, no multi-column layout and no locale-aware sorting. Names are
listed one per line, or separated by two spaces when colouring is on.

## Running the tests

```
pip install .[test]
pytest
```