"""Main memory, registers and call stack of the CHIP-8 machine."""

from __future__ import annotations

import os
from collections.abc import Iterator

MAX_MEMORY_SIZE = 4096
MAX_STACK_SIZE = 1024
START_ADDRESS = 0x200
FONT_ADDRESS = 0x000
N_REGISTERS = 16

FONT = bytes(
    (
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    )
)


class Chip8Error(Exception):
    """Base class for errors raised by the emulator."""


class StackOverflow(Chip8Error):
    """Raised when a push would exceed the call stack capacity."""


class StackUnderflow(Chip8Error):
    """Raised when popping from an empty call stack."""


class OutOfMemory(Chip8Error):
    """Raised when an instruction is fetched beyond the end of memory."""


class Memory:
    """4 KiB of RAM, sixteen 8-bit registers, the index register, PC and stack."""

    MAX_MEMORY_SIZE = MAX_MEMORY_SIZE
    MAX_STACK_SIZE = MAX_STACK_SIZE
    START_ADDRESS = START_ADDRESS

    def __init__(self) -> None:
        self.ram = bytearray(MAX_MEMORY_SIZE)
        self.ram[FONT_ADDRESS : FONT_ADDRESS + len(FONT)] = FONT
        self.v = bytearray(N_REGISTERS)
        self._stack: list[int] = []
        self._pc = START_ADDRESS
        self._ri = 0

    @property
    def pc(self) -> int:
        """Program counter (16 bits)."""
        return self._pc

    @pc.setter
    def pc(self, value: int) -> None:
        self._pc = value & 0xFFFF

    @property
    def ri(self) -> int:
        """Index register (16 bits)."""
        return self._ri

    @ri.setter
    def ri(self, value: int) -> None:
        self._ri = value & 0xFFFF

    def stack_push(self, value: int) -> None:
        """Push a return address onto the call stack."""
        if len(self._stack) >= MAX_STACK_SIZE:
            raise StackOverflow("stack overflow")
        self._stack.append(value & 0xFFFF)

    def stack_pop(self) -> int:
        """Pop the most recently pushed return address."""
        if not self._stack:
            raise StackUnderflow("stack underflow")
        return self._stack.pop()

    def load(self, path: str | os.PathLike[str]) -> None:
        """Load a ROM file at the program start address and reset PC and stack."""
        with open(path, "rb") as rom:
            data = rom.read(MAX_MEMORY_SIZE + 1)
        self.load_bytes(data)

    def load_bytes(self, data: bytes) -> None:
        """Load a ROM image at the program start address and reset PC and stack."""
        data = bytes(data)
        capacity = MAX_MEMORY_SIZE - START_ADDRESS
        if len(data) > capacity:
            raise Chip8Error(
                f"ROM of {len(data)} bytes does not fit in {capacity} bytes"
            )
        self.ram[START_ADDRESS : START_ADDRESS + len(data)] = data
        self.pc = START_ADDRESS
        self._stack.clear()

    def fetch(self) -> int:
        """Read the big-endian instruction at PC and advance PC by two."""
        if self._pc + 1 >= MAX_MEMORY_SIZE:
            raise OutOfMemory(f"instruction fetch at 0x{self._pc:04x}")
        instr = (self.ram[self._pc] << 8) | self.ram[self._pc + 1]
        self.pc = self._pc + 2
        return instr

    def dump(self) -> Iterator[str]:
        """Yield one line per memory cell: address and value in hex."""
        for address, value in enumerate(self.ram):
            yield f"0x{address:04x} {value:02x}"