"""Presentation models that observe emulator components and render their state as text."""

from enum import Enum, auto
from typing import Iterable, List


def _byte(value: int) -> str:
    return format(value & 0xFF, "08b")


class ValueModel:
    """Observes a component holding a single 3, 4 or 8-bit value."""

    _SUPPORTED_BITS = (3, 4, 8)

    def __init__(self, name: str, bits: int) -> None:
        self.name = name
        self.bits = bits
        self.value = 0

    def value_updated(self, new_value: int) -> None:
        self.value = new_value & 0xFF

    def _value_as_binary(self) -> str:
        if self.bits not in self._SUPPORTED_BITS:
            return "Unhandled"
        mask = (1 << self.bits) - 1
        return format(self.value & mask, f"0{self.bits}b")

    def render_text(self) -> str:
        return f"{self.name}: {self._value_as_binary()} / {self.value}"


class ArithmeticLogicUnitModel:
    """Observes the arithmetic logic unit result and its carry and zero bits."""

    def __init__(self) -> None:
        self.value = 0
        self.carry = False
        self.zero = True

    def result_updated(self, new_value: int, new_carry_bit: bool, new_zero_bit: bool) -> None:
        self.value = new_value & 0xFF
        self.carry = bool(new_carry_bit)
        self.zero = bool(new_zero_bit)

    def render_text(self) -> str:
        return (
            f"Arithmetic Logic Unit: {_byte(self.value)} / {self.value}"
            f" C={self.carry:d} Z={self.zero:d}"
        )


class ClockModel:
    """Observes the clock state and frequency."""

    def __init__(self) -> None:
        self.on = False
        self.frequency = 0.0

    def clock_ticked(self, new_on: bool) -> None:
        self.on = bool(new_on)

    def frequency_changed(self, new_hz: float) -> None:
        self.frequency = new_hz

    def render_text(self) -> str:
        return f"Clock: {self.on:d} / {self.frequency:.1f} Hz"


class FlagsRegisterModel:
    """Observes the carry and zero flags."""

    def __init__(self) -> None:
        self.carry_flag = False
        self.zero_flag = False

    def flags_updated(self, new_carry_flag: bool, new_zero_flag: bool) -> None:
        self.carry_flag = bool(new_carry_flag)
        self.zero_flag = bool(new_zero_flag)

    def render_text(self) -> str:
        return f"Flags: C={self.carry_flag:d} Z={self.zero_flag:d}"


class ControlLine(Enum):
    """Control lines of the instruction decoder, in display order."""

    HLT = auto()
    MI = auto()
    RI = auto()
    RO = auto()
    II = auto()
    IO = auto()
    AI = auto()
    AO = auto()
    BI = auto()
    BO = auto()
    SM = auto()
    SO = auto()
    OI = auto()
    OM = auto()
    CE = auto()
    CO = auto()
    CJ = auto()
    FI = auto()


class InstructionDecoderModel:
    """Observes the control word produced by the instruction decoder."""

    TITLE = "HLT MI RI RO II IO AI AO BI BO S- SO OI O- CE CO CJ FI"

    def __init__(self) -> None:
        self.lines = {line: False for line in ControlLine}

    def control_word_updated(self, new_lines: Iterable[ControlLine]) -> None:
        active = set(new_lines)
        self.lines = {line: line in active for line in ControlLine}

    def render_title_text(self) -> str:
        return self.TITLE

    def render_value_text(self) -> str:
        return " " + "  ".join(f"{self.lines[line]:d}" for line in ControlLine)


class RandomAccessMemoryModel:
    """Observes the memory value at the current address and mirrors the memory content."""

    MEMORY_SIZE = 16

    def __init__(self, memory_address_register: ValueModel) -> None:
        self.memory_address_register = memory_address_register
        self.memory = [0] * self.MEMORY_SIZE
        self.value = 0

    def value_updated(self, new_value: int) -> None:
        self.value = new_value & 0xFF
        self.memory[self.memory_address_register.value] = self.value

    def render_text(self) -> str:
        return f"Random Access Memory: {_byte(self.value)} / {self.value}"

    def render_text_full(self) -> List[str]:
        return [f"{_byte(cell)} / {cell}" for cell in self.memory]