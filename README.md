# eightbit

Building blocks for the front end of an emulated 8-bit breadboard computer.
The package provides observer models that turn component state into display
text, a keyboard handler that drives an emulator object, and small timing and
number helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `eightbit.utils`

- `debug_l1()` and `debug_l2()` report whether the module-level `DEBUG` level
  is at least 1 or 2.
- `to_4bits(value)` returns the low four bits of `value` as a binary string,
  for example `to_4bits(10) == "1010"`.
- `starts_with(string_to_check, value_to_look_for)` is `str.startswith`,
  except that an empty prefix never matches.
- `is_less_than(x, y)` and `equals(x, y)` compare floats with a tolerance of
  0.000001, so `equals(0.1 + 0.1 + 0.1, 0.3)` is true and
  `is_less_than(0.1 + 0.1 + 0.1, 0.3)` is false.
- `FOUR_BITS_MAX` is 15.

### `eightbit.timesource`

`TimeSource` keeps a monotonic time stamp:

- `delta()` returns the nanoseconds passed since the last `delta()` or
  `reset()` call (or since creation) and moves the time stamp forward.
- `reset()` restarts the measurement.
- `sleep(nanoseconds)` sleeps the current thread; zero or negative values
  return at once.

### `eightbit.models`

Display models that receive updates from emulator components and render them
as text:

- `ValueModel(name, bits)` for a single 3, 4 or 8-bit value;
  `value_updated(new_value)` stores it and `render_text()` gives
  `"<name>: <binary> / <decimal>"`. Any other bit width renders the binary
  part as `Unhandled`.
- `ArithmeticLogicUnitModel` – `result_updated(new_value, new_carry_bit,
  new_zero_bit)`; renders as
  `"Arithmetic Logic Unit: 00000000 / 0 C=0 Z=1"` initially.
- `ClockModel` – `clock_ticked(new_on)` and `frequency_changed(new_hz)`;
  renders as `"Clock: 1 / 2.0 Hz"`.
- `FlagsRegisterModel` – `flags_updated(new_carry_flag, new_zero_flag)`;
  renders as `"Flags: C=0 Z=0"`.
- `InstructionDecoderModel` with the `ControlLine` enumeration –
  `control_word_updated(new_lines)` marks exactly the given lines as active;
  `render_title_text()` and `render_value_text()` give two aligned rows of
  line names and 0/1 values.
- `RandomAccessMemoryModel(memory_address_register)` – `value_updated(new_value)`
  stores the value at the address currently held by the given `ValueModel`;
  `render_text()` shows the current value and `render_text_full()` returns the
  16 memory cells as text.

### `eightbit.keyboard`

`Keyboard(emulator)` maps key releases, passed to `key_up(keycode)`, onto an
emulator object that offers `is_running()`, `stop()`, `start_asynchronous()`,
`reload()`, `single_step()`, `increase_frequency()` and `decrease_frequency()`.
The key codes are in the `Key` enumeration; other keys are ignored.

| Key                    | Action                                              |
|------------------------|-----------------------------------------------------|
| `Key.S`                | `stop()` when running, else `start_asynchronous()`  |
| `Key.R`                | `reload()`, only when not running                   |
| `Key.SPACE`            | `single_step()`                                     |
| `Key.PLUS`, `KP_PLUS`  | `increase_frequency()`                              |
| `Key.MINUS`, `KP_MINUS`| `decrease_frequency()`                              |

## Example

```python
from eightbit.models import ValueModel, RandomAccessMemoryModel

mar = ValueModel("Memory Address Register", 4)
ram = RandomAccessMemoryModel(mar)

mar.value_updated(3)
ram.value_updated(42)

print(mar.render_text())          # Memory Address Register: 0011 / 3
print(ram.render_text())          # Random Access Memory: 00101010 / 42
print(ram.render_text_full()[3])  # 00101010 / 42
```

## What this package does not do

It contains no emulator core (clock, bus, registers, memory, instruction
decoding or assembler), no window or drawing code, and no command to start
anything. The models and the keyboard handler are meant to be wired to an
emulator and a display supplied by the application that uses them.