import random

import pytest

from floppy.data_models import InputState, Key
from floppy.game import FloppyGame
from floppy.highscores import HighScoreLedger


class FakeBackend:
    """Records every presentation call instead of drawing."""

    def __init__(self, missing=(), held=(), pressed=(), frames=None):
        self.missing = set(missing)
        self.held = set(held)
        self.pressed = set(pressed)
        self.frames = frames
        self.calls = []
        self.loaded = []
        self.unloaded = []
        self.polls = 0
        self.closed = False

    def load_texture(self, name, size=None):
        if name in self.missing:
            return None
        self.loaded.append(name)
        return f"tex:{name}"

    def unload_texture(self, handle):
        self.unloaded.append(handle)

    def texture_size(self, handle):
        return (200, 100)

    def begin_frame(self, clear_color):
        self.calls.append(("begin_frame", clear_color))

    def end_frame(self):
        self.calls.append(("end_frame",))

    def draw_texture(self, handle, x, y, tint=(255, 255, 255)):
        self.calls.append(("draw_texture", handle, x, y))

    def draw_rectangle(self, x, y, width, height, color):
        self.calls.append(("draw_rectangle", x, y, width, height, color))

    def draw_circle(self, x, y, radius, color):
        self.calls.append(("draw_circle", x, y, radius, color))

    def draw_text(self, text, x, y, size, color):
        self.calls.append(("draw_text", text, x, y, size, color))

    def measure_text(self, text, size):
        return len(text) * size // 2

    def poll_events(self):
        self.polls += 1

    def is_key_down(self, key):
        return key in self.held

    def is_key_pressed(self, key):
        return key in self.pressed

    def window_should_close(self):
        return self.frames is not None and self.polls >= self.frames

    def close(self):
        self.closed = True

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "draw_text"]


NO_INPUT = InputState()
START = InputState(pressed=frozenset({Key.START}))
PAUSE = InputState(pressed=frozenset({Key.PAUSE}))


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def ledger(tmp_path):
    return HighScoreLedger(tmp_path / "highscores.txt")


@pytest.fixture
def game(ledger):
    return FloppyGame(ledger, rng=random.Random(1234))


@pytest.fixture
def playing(game):
    game.update(START)
    return game
