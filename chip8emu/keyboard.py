"""The sixteen-key CHIP-8 keypad mapped onto a PC keyboard."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

N_KEYS = 0x10

KEYMAP = (
    pygame.K_x,  # 0x0
    pygame.K_1,  # 0x1
    pygame.K_2,  # 0x2
    pygame.K_3,  # 0x3
    pygame.K_q,  # 0x4
    pygame.K_w,  # 0x5
    pygame.K_e,  # 0x6
    pygame.K_a,  # 0x7
    pygame.K_s,  # 0x8
    pygame.K_d,  # 0x9
    pygame.K_z,  # 0xA
    pygame.K_c,  # 0xB
    pygame.K_4,  # 0xC
    pygame.K_r,  # 0xD
    pygame.K_f,  # 0xE
    pygame.K_v,  # 0xF
)

_KEY_VALUES = {code: value for value, code in enumerate(KEYMAP)}


def map_key(key: int) -> int | None:
    """Return the keypad value for a pygame key code, or None if unmapped."""
    return _KEY_VALUES.get(key)


class Keyboard:
    """Tracks which keypad keys are held down."""

    def __init__(self) -> None:
        self._down = [False] * N_KEYS

    @staticmethod
    def _check(key: int) -> None:
        if not 0 <= key < N_KEYS:
            raise ValueError(f"keypad key out of range: {key}")

    def press(self, key: int) -> None:
        """Mark keypad key as held."""
        self._check(key)
        self._down[key] = True

    def release(self, key: int) -> None:
        """Mark keypad key as released."""
        self._check(key)
        self._down[key] = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one pygame event; return False when the user asked to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            value = map_key(event.key)
            if value is not None:
                self._down[value] = event.type == pygame.KEYDOWN
        return True

    def handle_events(self) -> bool:
        """Process one pending event, if any; return False on quit."""
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return True
        return self.handle_event(event)

    def get_key(self) -> int | None:
        """Return the lowest held keypad key, or None if none is held."""
        return next((key for key, down in enumerate(self._down) if down), None)