"""Keyboard handling for controlling the emulator."""

from enum import IntEnum
from typing import Protocol


class Key(IntEnum):
    """Key codes the keyboard reacts to."""

    S = ord("s")
    R = ord("r")
    SPACE = ord(" ")
    PLUS = ord("+")
    MINUS = ord("-")
    KP_PLUS = 0x40000057
    KP_MINUS = 0x40000056


class Emulator(Protocol):
    """Operations the keyboard needs from an emulator."""

    def is_running(self) -> bool: ...

    def stop(self) -> None: ...

    def start_asynchronous(self) -> None: ...

    def reload(self) -> None: ...

    def single_step(self) -> None: ...

    def increase_frequency(self) -> None: ...

    def decrease_frequency(self) -> None: ...


class Keyboard:
    """Translates key releases into emulator commands."""

    def __init__(self, emulator: Emulator) -> None:
        self.emulator = emulator

    def key_up(self, keycode: int) -> None:
        """Handle a released key; unknown keys are ignored."""
        if keycode == Key.S:
            if self.emulator.is_running():
                self.emulator.stop()
            else:
                self.emulator.start_asynchronous()
        elif keycode == Key.R:
            if not self.emulator.is_running():
                self.emulator.reload()
        elif keycode == Key.SPACE:
            self.emulator.single_step()
        elif keycode in (Key.PLUS, Key.KP_PLUS):
            self.emulator.increase_frequency()
        elif keycode in (Key.MINUS, Key.KP_MINUS):
            self.emulator.decrease_frequency()