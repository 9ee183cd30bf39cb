# dockcompose

Building blocks for container orchestration command-line tools. It covers live
progress reporting on the terminal, interactive prompts, a line-splitting writer,
a scan suggestion after builds, and helpers for end-to-end tests that drive a
CLI binary.

## Install

    pip install dockcompose

To run the test suite:

    pip install "dockcompose[test]"
    pytest

## Progress events and writers

`dockcompose.event` defines `EventStatus` (`WORKING`, `DONE`, `ERROR`) and the
`Event` dataclass. It also has constructors for common events, for example
`creating_event`, `created_event`, `started_event`, `stopping_event`,
`removed_event` and `error_message_event`.

Every writer has the same four methods: `start`, `stop`, `event` and
`tail_msgf`.

- `dockcompose.plain.NoopWriter` discards everything.
- `dockcompose.plain.PlainWriter` prints one line for each event: its id, text
  and status text.
- `dockcompose.tty.TTYWriter` keeps the latest state of each event. Every tick it
  redraws a block of lines with a spinner (`dockcompose.spinner.Spinner`), the
  elapsed time and colours. Child events, those that have a `parent_id`, are
  indented under their parent. Messages passed to `tail_msgf` are printed once
  the writer stops.

`dockcompose.tty` also provides the functions it renders with: `line_text`,
`num_done` and `align`.

## Running a task with progress

`dockcompose.progress.run(func, out)` calls `func()` with no arguments. While it
runs, a writer is active in another thread. When `out` is a terminal the writer
is a `TTYWriter`; otherwise it is a `PlainWriter`. Inside the task,
`context_writer()` returns that writer.

```python
import sys

from dockcompose.event import creating_event, created_event
from dockcompose.progress import context_writer, run


def work():
    w = context_writer()
    w.event(creating_event("Container web-1"))
    # ... do the job ...
    w.event(created_event("Container web-1"))


run(work, sys.stderr)
```

`run_with_status` does the same and returns what `func` returned. Outside a
run, `context_writer()` returns a `NoopWriter`. Use `with_context_writer(writer)`
as a context manager to install a writer of your own.

## Line splitting

`dockcompose.utils.get_writer(consumer)` returns a `SplitWriter`. It joins the
chunks written to it and passes each complete line to `consumer`. `close()`
passes on whatever is left over.

```python
from dockcompose.utils import get_writer

lines = []
w = get_writer(lines.append)
w.write(b"hello\nwor")
w.write(b"ld!\n")
w.close()
assert lines == ["hello", "world!"]
```

`string_contains(array, needle)` tells whether a string is in a sequence.

## Scan suggestion

`dockcompose.scan_suggest.display_scan_suggest_msg(stream)` writes
`SCAN_SUGGEST_MSG` to `stream`, or to stderr when no stream is given. It writes
nothing in any of these cases:

- `DOCKER_SCAN_SUGGEST` is `false`.
- No `docker-scan` CLI plugin is installed.
- `scan/config.json` in the CLI configuration directory already records an
  opt-in.

The configuration directory is `$DOCKER_CONFIG`, or `~/.docker` when that is not
set.

## Prompts

`dockcompose.prompt.User` implements the `UI` interface:

- `select(message, options)` returns the index of the chosen option.
- `input(message, default_value)` returns the text entered, or `default_value`
  when the answer is empty.
- `confirm(message, default_value)` accepts `y`/`yes`/`n`/`no`.
- `password(message)` reads an answer without echoing it.

By default it reads and writes on the process's terminal. Pass `stdin` and
`stdout` streams to use others.

## End-to-end helpers

`dockcompose.e2e.new_e2e_cli(bin_dir)` creates an `E2eCLI` with its own
temporary configuration directory. If a `docker-compose` binary is found in
`../../bin` or `../../../bin`, it is copied into that directory's `cli-plugins`.
Commands run with `DOCKER_CONFIG` pointing at the directory.

- `run_docker_cmd` and `run_cmd` raise `CommandFailed` on a non-zero exit code.
- `run_docker_or_exit_error` returns the `CmdResult` whatever the exit code.
- `wait_for_cmd_result` and `wait_for_condition` poll until a predicate holds and
  raise `WaitTimeout` if it does not.
- `http_get_with_retry(endpoint, expected_status, retry_delay, timeout)` polls a
  URL until it answers with the expected status, then returns the body.
- `cleanup()`, or leaving a `with` block, removes the configuration directory.

## What this package does not do

The package has no command-line program of its own. It does not talk to a
container engine: it cannot pull, push, start, stop or list containers. The
end-to-end helpers only run whatever binaries are installed on the machine.