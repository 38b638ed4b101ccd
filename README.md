# pipex

`pipex` runs two commands connected by a pipe, reading the first command's
input from a file and writing the second command's output to a file. It
does the same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The command takes exactly four arguments. For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

Each command is split on spaces, with no quoting, and looked up in the
directories listed in `PATH`; the first directory holding a file of that
name wins. The exit status of `pipex` is the exit status of the second
command (0 if it was ended by a signal).

Both files must already exist and be readable and executable by the
current user. The output file is truncated before the second command
writes to it; it is not created.

Errors go to standard error:

- a wrong number of arguments prints `Invalid number of arguments!` and
  exits with status 1;
- a command that cannot be found in `PATH` prints `Command not found` and
  gives status 127;
- an input or output file that cannot be opened prints the system error
  message and gives status 1;
- an empty command gives status 1 without a message.

## Library use

The pipeline can also be run from Python:

```python
import os
from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", os.environ)
```

`run_pipeline` returns the second command's exit status; when `env` is
left out, the current environment is used. `pipex.cli.main` is the
command-line entry and accepts an argument list in place of `sys.argv`.

`pipex.commands` has `parse_command`, which splits a command string on
spaces and raises `ValueError` when it holds no words, and `find_command`,
which searches `PATH` in a given environment mapping and raises
`CommandNotFoundError` when nothing matches. `pipex.files` has
`open_infile` and `open_outfile`, which return raw file descriptors and
raise `OSError` when the file is missing or not readable and executable.

The package also has small helper modules:

- `pipex.chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`);
- `pipex.numbers`: `atoi` and `itoa` for 32-bit signed integers;
- `pipex.strings`: string helpers with C-library behaviour (`strlen`,
  `strchr`, `strrchr`, `strdup`, `strjoin`, `strlcpy`, `strlcat`,
  `strncmp`, `strnstr`, `substr`, `strtrim`, `split`, `strmapi`,
  `striteri`);
- `pipex.memory`: byte-buffer helpers (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`);
- `pipex.linkedlist`: a singly linked `Node` with `lst_new`,
  `lst_add_front`, `lst_add_back`, `lst_size`, `lst_last`, `lst_delone`,
  `lst_clear`, `lst_iter` and `lst_map`;
- `pipex.output`: writing to file descriptors (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`).

## What it does not do

`pipex` runs exactly two commands. It has no shell syntax: no quoting,
no more than one pipe, no here-documents and no appending to the output
file.

## Running the tests

```sh
pip install ".[test]"
pytest
```