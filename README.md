# typerace

A small terminal typing game. It counts your keystrokes against a target
text, tracks mistakes, and can work out your speed in words per minute and
your accuracy.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
typerace
typerace --text "The quick brown fox"
typerace --log-dir ./logs
```

Options:

- `--text` – the text to type (default: `Example text...`).
- `--log-dir` – directory that receives `app.log` (default: `/app/logs`).
  The file is truncated at start-up. If it cannot be created, the command
  prints a message to standard error and exits with status 1.

While it runs, the screen shows a green frame titled `Type Racer TUI` with
one line of text in it:

- before your first keystroke: `Hello <user>! Press 'ESC' to quit.`
- while you type: `Testing your typing speed...`

Rules:

- Your first character starts the timer.
- Backspace removes the last character you typed. A mistake you already
  made still counts.
- `Esc` quits.
- The game ends once you have typed as many characters as the target text
  holds; the program then exits.

## What it does not do

The screen does not show the target text, the characters you have typed, or
your results. Words per minute and accuracy are computed by the game state
(see below) but the command does not display them.

## Using it as a library

The game rules live in `typerace.game` and do not depend on the terminal.
A keypress is either a one-character string or a member of `Key`:

```python
from typerace.game import AppState, GameStatus, Key

state = AppState("abc")
for ch in "abd":
    state.handle_keypress(ch)

assert state.status is GameStatus.FINISHED
print(state.mistakes)              # 1
print(state.calculate_accuracy())  # 66.66...
print(state.calculate_wpm())       # five characters per word

state.reset()
state.handle_keypress(Key.ESC)
assert state.status is GameStatus.EXITING
```

`AppState` takes an optional `clock` callable (default `time.monotonic`) for
its start and end times. `calculate_wpm()` returns 0 until the game has both
a start and an end time.

Other pieces:

- `typerace.tui.frame_lines(app_state, width, height, user=None)` returns the
  rows of one screen as plain text; it raises `ValueError` for a frame
  smaller than 2×2.
- `typerace.tui.TerminalSession` is a context manager that enters full-screen
  mode, hides the cursor and reads keys without line buffering. `draw()`
  redraws the screen and `read_key(timeout)` returns a character, a `Key`,
  or `None` when no key arrived in time.
- `typerace.app.run_app(target_text, session=None)` runs the loop in a
  session until the game finishes or is cancelled, and returns the final
  `AppState`.
- `typerace.logsetup.setup_logging(log_dir)` sends the package's log records
  to `<log_dir>/app.log` and returns that path.