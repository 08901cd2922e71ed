import os

# Headless SDL so pygame never opens a real window or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from stick_brawlers.core.input_handler import InputState
from tests.fakes import make_fighter, RecordingRenderer, RecordingUI, RecordingSound


@pytest.fixture
def fighter():
    return make_fighter()


@pytest.fixture
def input_state():
    return InputState()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def sound():
    return RecordingSound()
