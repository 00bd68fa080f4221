import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from flappy_dragon.config import GameConfig


class RecordingConsole:
    """Stands in for the pygame console and records what the game draws."""

    def __init__(self, key=None, frame_time_ms=0.0):
        self.key = key
        self.frame_time_ms = frame_time_ms
        self.quitting = False
        self.cells = {}
        self.texts = []
        self.clears = []

    def set(self, x, y, fg, bg, glyph):
        self.cells[(x, y)] = (glyph, fg, bg)

    def print(self, x, y, text):
        self.texts.append(text)

    def print_centered(self, y, text):
        self.texts.append(text)

    def cls(self):
        self.clears.append(None)

    def cls_bg(self, color):
        self.clears.append(color)


class FixedRandom:
    """Returns the same gap centre every time."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def console():
    return RecordingConsole()
