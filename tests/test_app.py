import pytest

from typerace.app import main, run_app
from typerace.game import GameStatus, Key


class FakeSession:
    def __init__(self, keys, error=None):
        self._keys = list(keys)
        self._error = error
        self.drawn = []
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True

    def draw(self, app_state):
        self.drawn.append(app_state.status)

    def read_key(self, timeout):
        if not self._keys and self._error is not None:
            raise self._error
        return self._keys.pop(0)


def test_typing_full_text_finishes():
    session = FakeSession(list("hi"))
    state = run_app("hi", session)
    assert state.status is GameStatus.FINISHED
    assert "".join(state.typed_chars) == "hi"
    assert session.drawn[-1] is GameStatus.FINISHED
    assert session.entered and session.exited


def test_draws_once_per_iteration():
    session = FakeSession(list("ok"))
    run_app("ok", session)
    assert session.drawn == [
        GameStatus.NOT_STARTED,
        GameStatus.IN_PROGRESS,
        GameStatus.FINISHED,
    ]


def test_timeouts_are_skipped():
    session = FakeSession([None, "a", None, None, "b"])
    state = run_app("ab", session)
    assert state.status is GameStatus.FINISHED
    assert state.mistakes == 0


def test_escape_ends_loop():
    session = FakeSession(["a", Key.ESC])
    state = run_app("abc", session)
    assert state.status is GameStatus.EXITING
    assert session.drawn[-1] is GameStatus.EXITING
    assert session.exited


def test_input_error_propagates_and_cleans_up():
    session = FakeSession(["a"], error=OSError("input failure"))
    with pytest.raises(OSError, match="input failure"):
        run_app("abc", session)
    assert session.exited


def test_main_fails_when_logging_cannot_start(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    assert main(["--log-dir", str(blocker)]) == 1
    assert "CRITICAL: Failed to set up logging" in capsys.readouterr().err