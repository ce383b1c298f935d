"""A CHIP-8 emulator: memory, CPU, display and keyboard, with a pygame front end."""

__version__ = "0.1.0"
__all__ = ["cpu", "display", "keyboard", "main", "memory"]