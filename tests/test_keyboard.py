import pytest

from eightbit.keyboard import Key, Keyboard


class FakeEmulator:
    def __init__(self, running=False):
        self.running = running
        self.calls = []

    def is_running(self):
        return self.running

    def stop(self):
        self.calls.append("stop")

    def start_asynchronous(self):
        self.calls.append("start_asynchronous")

    def reload(self):
        self.calls.append("reload")

    def single_step(self):
        self.calls.append("single_step")

    def increase_frequency(self):
        self.calls.append("increase_frequency")

    def decrease_frequency(self):
        self.calls.append("decrease_frequency")


def _press(key, running=False):
    emulator = FakeEmulator(running)
    Keyboard(emulator).key_up(key)
    return emulator.calls


def test_s_starts_when_stopped():
    assert _press(Key.S, running=False) == ["start_asynchronous"]


def test_s_stops_when_running():
    assert _press(Key.S, running=True) == ["stop"]


def test_r_reloads_when_stopped():
    assert _press(Key.R, running=False) == ["reload"]


def test_r_ignored_when_running():
    assert _press(Key.R, running=True) == []


@pytest.mark.parametrize("running", [True, False])
def test_space_single_steps(running):
    assert _press(Key.SPACE, running) == ["single_step"]


@pytest.mark.parametrize("key", [Key.PLUS, Key.KP_PLUS])
def test_plus_increases_frequency(key):
    assert _press(key) == ["increase_frequency"]


@pytest.mark.parametrize("key", [Key.MINUS, Key.KP_MINUS])
def test_minus_decreases_frequency(key):
    assert _press(key) == ["decrease_frequency"]


def test_plain_int_keycode_is_accepted():
    assert _press(ord(" ")) == ["single_step"]


@pytest.mark.parametrize("keycode", [ord("x"), ord("S"), 0])
def test_unknown_keys_ignored(keycode):
    assert _press(keycode, running=True) == []
    assert _press(keycode, running=False) == []


def test_repeated_presses_accumulate():
    emulator = FakeEmulator()
    keyboard = Keyboard(emulator)
    keyboard.key_up(Key.PLUS)
    keyboard.key_up(Key.PLUS)
    keyboard.key_up(Key.MINUS)
    assert emulator.calls == ["increase_frequency", "increase_frequency", "decrease_frequency"]