"""The 64x32 monochrome CHIP-8 screen, drawn in a pygame window."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

WIDTH = 64
HEIGHT = 32
SCALE_FACTOR = 20

COLOR_BLACK = (0x00, 0x00, 0x00, 0xFF)
COLOR_WHITE = (0xCC, 0xCC, 0xCC, 0xFF)


class Display:
    """Pixel state of the screen, optionally mirrored into a window."""

    WIDTH = WIDTH
    HEIGHT = HEIGHT
    SCALE_FACTOR = SCALE_FACTOR

    def __init__(self, title: str = "CHIP-8 Emulator") -> None:
        self.title = title
        self._pixels = [[False] * WIDTH for _ in range(HEIGHT)]
        self._surface: pygame.Surface | None = None

    @property
    def surface(self) -> pygame.Surface | None:
        """The window surface, or None while the window is closed."""
        return self._surface

    def __enter__(self) -> Display:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> None:
        """Create the window and clear it."""
        pygame.display.init()
        try:
            self._surface = pygame.display.set_mode(
                (WIDTH * SCALE_FACTOR, HEIGHT * SCALE_FACTOR), 0, 32
            )
        except pygame.error:
            pygame.display.quit()
            raise
        pygame.display.set_caption(self.title)
        self.clear()

    def close(self) -> None:
        """Destroy the window if it is open."""
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def clear(self) -> None:
        """Turn every pixel off."""
        for row in self._pixels:
            row[:] = [False] * WIDTH
        if self._surface is not None:
            self._surface.fill(COLOR_BLACK)
            pygame.display.flip()

    def toggle_pixel(self, x: int, y: int) -> None:
        """Flip the pixel at (x, y)."""
        self._check(x, y)
        lit = not self._pixels[y][x]
        self._pixels[y][x] = lit
        if self._surface is not None:
            rect = pygame.Rect(
                x * SCALE_FACTOR, y * SCALE_FACTOR, SCALE_FACTOR, SCALE_FACTOR
            )
            self._surface.fill(COLOR_WHITE if lit else COLOR_BLACK, rect)
            pygame.display.update(rect)

    def is_lit(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is on."""
        self._check(x, y)
        return self._pixels[y][x]

    def refresh(self) -> None:
        """Present the current frame."""
        if self._surface is not None:
            pygame.display.flip()

    def delay(self, milliseconds: int) -> None:
        """Pause for the given number of milliseconds."""
        if milliseconds > 0:
            pygame.time.delay(int(milliseconds))

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"pixel out of range: ({x}, {y})")