"""Instruction decoding and execution for the CHIP-8 interpreter."""

from __future__ import annotations

import random

from .display import HEIGHT, WIDTH, Display
from .keyboard import Keyboard
from .memory import MAX_MEMORY_SIZE, Chip8Error, Memory

FLAG = 0xF
# Shift instructions operate on VX in place instead of copying VY first.
BITSHIFT_IN_PLACE = True


class InvalidOpcode(Chip8Error):
    """Raised for an instruction the interpreter does not support."""

    def __init__(self, opcode: int, kind: str = "Unsupported opcode") -> None:
        super().__init__(f"{kind}: {opcode:04x}")
        self.opcode = opcode


def _signed_byte(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


class Cpu:
    """Executes instructions against memory, the screen and the keypad."""

    def __init__(
        self,
        memory: Memory,
        display: Display,
        keyboard: Keyboard,
        rng: random.Random | None = None,
    ) -> None:
        self.memory = memory
        self.display = display
        self.keyboard = keyboard
        self.rng = rng if rng is not None else random.Random()
        self.delay_timer = 0
        self.sound_timer = 0

    def update_timers(self) -> None:
        """Count the timers down by one tick, stopping at zero."""
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1

    def _skip_if(self, condition: bool) -> None:
        if condition:
            self.memory.pc += 2

    def _read(self, address: int) -> int:
        return self.memory.ram[address % MAX_MEMORY_SIZE]

    def _write(self, address: int, value: int) -> None:
        self.memory.ram[address % MAX_MEMORY_SIZE] = value & 0xFF

    def execute(self, instr: int) -> None:
        """Execute one 16-bit instruction; raise InvalidOpcode if unsupported."""
        instr &= 0xFFFF
        op = instr >> 12
        x = (instr >> 8) & 0xF
        y = (instr >> 4) & 0xF
        n = instr & 0xF
        nn = instr & 0xFF
        nnn = instr & 0xFFF
        mem = self.memory
        v = mem.v

        if op == 0x0:
            if instr == 0x00E0:
                self.display.clear()
            elif instr == 0x00EE:
                mem.pc = mem.stack_pop()
            else:
                raise InvalidOpcode(instr, "Skipping unsupported opcode")
        elif op == 0x1:
            mem.pc = nnn
        elif op == 0x2:
            mem.stack_push(mem.pc)
            mem.pc = nnn
        elif op == 0x3:
            self._skip_if(v[x] == nn)
        elif op == 0x4:
            self._skip_if(v[x] != nn)
        elif op == 0x5:
            self._skip_if(v[x] == v[y])
        elif op == 0x6:
            v[x] = nn
        elif op == 0x7:
            v[x] = (v[x] + nn) & 0xFF
        elif op == 0x8:
            self._arithmetic(instr, x, y, n)
        elif op == 0x9:
            self._skip_if(v[x] != v[y])
        elif op == 0xA:
            mem.ri = nnn
        elif op == 0xB:
            mem.pc = nnn + v[0x0]
        elif op == 0xC:
            v[x] = self.rng.randrange(0x100) & nn
        elif op == 0xD:
            self._draw(x, y, n)
        elif op == 0xE:
            pressed = self.keyboard.get_key()
            if nn == 0x9E:
                self._skip_if(pressed == v[x])
            elif nn == 0xA1:
                self._skip_if(pressed != v[x])
            else:
                raise InvalidOpcode(instr, "Invalid EXNN opcode")
        elif op == 0xF:
            self._misc(instr, x, nn)

    def _arithmetic(self, instr: int, x: int, y: int, n: int) -> None:
        v = self.memory.v
        if n == 0x0:
            v[x] = v[y]
        elif n == 0x1:
            v[x] = v[x] | v[y]
        elif n == 0x2:
            v[x] = v[x] & v[y]
        elif n == 0x3:
            v[x] = v[x] ^ v[y]
        elif n == 0x4:
            total = v[x] + v[y]
            v[FLAG] = 1 if total > 0xFF else 0
            v[x] = total & 0xFF
        elif n == 0x5:
            diff = _signed_byte(v[x] - v[y])
            v[FLAG] = 1 if diff > 0 else 0
            v[x] = diff & 0xFF
        elif n == 0x6:
            if not BITSHIFT_IN_PLACE:
                v[x] = v[y]
            v[FLAG] = v[x] & 0x01
            v[x] = v[x] >> 1
        elif n == 0x7:
            diff = _signed_byte(v[y] - v[x])
            v[FLAG] = 1 if diff > 0 else 0
            v[x] = diff & 0xFF
        elif n == 0xE:
            if not BITSHIFT_IN_PLACE:
                v[x] = v[y]
            v[FLAG] = v[x] & 0x80
            v[x] = (v[x] << 1) & 0xFF
        else:
            raise InvalidOpcode(instr, "Invalid 8XYN opcode")

    def _draw(self, x: int, y: int, n: int) -> None:
        v = self.memory.v
        x0 = v[x] % WIDTH
        y0 = v[y] % HEIGHT
        v[FLAG] = 0
        ri = self.memory.ri
        for row in range(min(n, HEIGHT - y0)):
            sprite = self._read(ri + row)
            for col in range(min(8, WIDTH - x0)):
                if (sprite >> (7 - col)) & 0x1:
                    self.display.toggle_pixel(x0 + col, y0 + row)

    def _misc(self, instr: int, x: int, nn: int) -> None:
        mem = self.memory
        v = mem.v
        if nn == 0x07:
            v[x] = self.delay_timer
        elif nn == 0x0A:
            pressed = self.keyboard.get_key()
            if pressed is None:
                mem.pc -= 2
            else:
                v[x] = pressed
        elif nn == 0x15:
            self.delay_timer = v[x]
        elif nn == 0x18:
            self.sound_timer = v[x]
        elif nn == 0x1E:
            new_ri = (mem.ri + v[x]) & 0xFFFF
            if new_ri > 0x1000:
                v[FLAG] = 0x01
            mem.ri = new_ri
        elif nn == 0x29:
            mem.ri = v[x] & 0x0F
        elif nn == 0x33:
            value = v[x]
            ri = mem.ri
            self._write(ri, value // 100 % 10)
            self._write(ri + 1, value // 10 % 10)
            self._write(ri + 2, value % 10)
        elif nn == 0x55:
            for reg in range(x + 1):
                self._write(mem.ri + reg, v[reg])
        elif nn == 0x65:
            for reg in range(x + 1):
                v[reg] = self._read(mem.ri + reg)
        else:
            raise InvalidOpcode(instr, "Invalid FXNN opcode")