"""Command-line entry point: load a ROM and run it in a window."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

import pygame

from .cpu import Cpu
from .display import Display
from .keyboard import Keyboard
from .memory import MAX_MEMORY_SIZE, Chip8Error, Memory

TARGET_FPS = 60
FRAME_DELAY = 1000 // TARGET_FPS
CYCLES_PER_FRAME = 12


def emulate_cycle(memory: Memory, cpu: Cpu) -> bool:
    """Fetch and execute one instruction; return False if it could not run."""
    if memory.pc >= MAX_MEMORY_SIZE:
        print("Out of Memory!!")
        return False
    try:
        cpu.execute(memory.fetch())
    except Chip8Error as error:
        print(error)
        return False
    return True


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chip8emu", description="CHIP-8 emulator")
    parser.add_argument("rom", nargs="?", help="path of the ROM to run")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the emulator; return the process exit status."""
    args = _parse_args(argv)
    print("CHIP-8 emulator")

    if args.rom is None:
        print("Missing ROM path")
        return 1

    memory = Memory()
    try:
        memory.load(args.rom)
    except OSError:
        print(f"{args.rom} is not a readable file")
        print("Error loading ROM")
        return 1
    except Chip8Error as error:
        print(error)
        print("Error loading ROM")
        return 1

    display = Display()
    try:
        display.open()
    except pygame.error as error:
        print(f"Display could not be created: {error}")
        print("Error initializing display")
        display.close()
        return 1

    keyboard = Keyboard()
    cpu = Cpu(memory, display, keyboard)

    try:
        running = True
        while running:
            frame_start = time.perf_counter()
            cpu.update_timers()
            for _ in range(CYCLES_PER_FRAME):
                emulate_cycle(memory, cpu)
                display.refresh()

            frame_time = int((time.perf_counter() - frame_start) * 1000)
            if FRAME_DELAY > frame_time:
                display.delay(FRAME_DELAY - frame_time)

            running = keyboard.handle_events()
            if not running:
                print("Got quit")
    finally:
        display.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())