# chip8emu

An emulator for the CHIP-8 virtual machine. It loads a ROM image at address
`0x200`, runs it at 60 frames per second with 12 instructions per frame, and
draws the 64×32 monochrome screen in a window scaled up twenty times.

## Installation

```
pip install .
```

This installs the package together with `pygame`, which provides the window
and keyboard input.

## Running a ROM

```
chip8emu path/to/game.ch8
```

The same entry point can be started with `python -m chip8emu.main`.

- Without a ROM path, the program prints `Missing ROM path` and exits with
  status 1.
- If the ROM cannot be read, or is larger than the 3584 bytes available from
  `0x200` to the end of memory, it prints `Error loading ROM` and exits with
  status 1.
- If the window cannot be created, it exits with status 1.
- Close the window to quit; the exit status is then 0.

## Keyboard layout

The sixteen CHIP-8 keys map to the left side of a QWERTY keyboard:

| CHIP-8 | Key |     | CHIP-8 | Key |     | CHIP-8 | Key |     | CHIP-8 | Key |
|--------|-----|-----|--------|-----|-----|--------|-----|-----|--------|-----|
| `1`    | 1   |     | `2`    | 2   |     | `3`    | 3   |     | `C`    | 4   |
| `4`    | Q   |     | `5`    | W   |     | `6`    | E   |     | `D`    | R   |
| `7`    | A   |     | `8`    | S   |     | `9`    | D   |     | `E`    | F   |
| `A`    | Z   |     | `0`    | X   |     | `B`    | C   |     | `F`    | V   |

When several keys are held, instructions that read the keypad see the lowest
one.

## Behaviour notes

- The built-in hexadecimal font is stored at address `0x000`.
- `8XY6` and `8XYE` shift `VX` in place and ignore `VY`.
- `BNNN` jumps to `NNN + V0`.
- `FX1E` sets `VF` when the index register goes past `0x1000`.
- `FX29` sets the index register to the low four bits of `VX`.
- `FX55` and `FX65` leave the index register unchanged.
- When an instruction is invalid or unsupported, or the call stack overflows
  or underflows, a message is printed and execution goes on with the next
  instruction.

## What it does not do

There is no sound. `FX18` sets the sound timer, which counts down with the
delay timer, but nothing is ever played.

## Using it as a library

The pieces can be driven without a window:

```python
from chip8emu.memory import Memory
from chip8emu.display import Display
from chip8emu.keyboard import Keyboard
from chip8emu.cpu import Cpu

memory = Memory()
memory.load_bytes(bytes([0x60, 0x2A]))   # V0 = 0x2A
display = Display()
keyboard = Keyboard()
cpu = Cpu(memory, display, keyboard)

cpu.execute(memory.fetch())
assert memory.v[0] == 0x2A
```

- `Memory` holds `ram`, the registers `v`, the program counter `pc` and the
  index register `ri`. `fetch()` raises `OutOfMemory` past the end of memory;
  `stack_push()` and `stack_pop()` raise `StackOverflow` and `StackUnderflow`.
  All of these derive from `Chip8Error`. `dump()` yields one hex line per
  memory cell.
- `Cpu.execute()` raises `InvalidOpcode` for instructions it does not support.
  `Cpu` accepts an optional `random.Random` for `CXNN`, and
  `update_timers()` counts the timers down by one tick.
- `Display` keeps the pixel state even with no window. `is_lit(x, y)` reports
  a pixel; `open()` and `close()`, or a `with` block, manage the window.
- `Keyboard.press(key)` and `Keyboard.release(key)` set a CHIP-8 key directly,
  `get_key()` returns the lowest held key or `None`, and `map_key()` turns a
  pygame key code into a CHIP-8 key.
- `chip8emu.main.emulate_cycle(memory, cpu)` runs one instruction and returns
  whether it ran.

## Development

```
pip install -e ".[test]"
pytest
```