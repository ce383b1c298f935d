import time

import pytest

from chip8emu.display import COLOR_BLACK, COLOR_WHITE, HEIGHT, SCALE_FACTOR, WIDTH, Display


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    display = Display()
    display.open()
    yield display
    display.close()


def test_new_display_is_dark():
    display = Display()
    assert not any(display.is_lit(x, y) for x in range(WIDTH) for y in range(HEIGHT))


def test_toggle_twice_restores_pixel():
    display = Display()
    display.toggle_pixel(10, 5)
    assert display.is_lit(10, 5) is True
    display.toggle_pixel(10, 5)
    assert display.is_lit(10, 5) is False


def test_toggle_affects_only_one_pixel():
    display = Display()
    display.toggle_pixel(WIDTH - 1, HEIGHT - 1)
    lit = [(x, y) for x in range(WIDTH) for y in range(HEIGHT) if display.is_lit(x, y)]
    assert lit == [(WIDTH - 1, HEIGHT - 1)]


def test_clear_turns_everything_off():
    display = Display()
    display.toggle_pixel(0, 0)
    display.toggle_pixel(3, 4)
    display.clear()
    assert not display.is_lit(0, 0)
    assert not display.is_lit(3, 4)


@pytest.mark.parametrize("x, y", [(WIDTH, 0), (0, HEIGHT), (-1, 0), (0, -1)])
def test_out_of_range_pixel_raises(x, y):
    with pytest.raises(IndexError):
        Display().toggle_pixel(x, y)


def test_delay_waits_and_keeps_pixels():
    display = Display()
    display.toggle_pixel(7, 9)
    start = time.monotonic()
    display.delay(30)
    elapsed = time.monotonic() - start
    assert elapsed >= 0.02
    assert display.is_lit(7, 9) is True
    assert display.is_lit(8, 9) is False


def test_window_size(window):
    assert window.surface.get_size() == (WIDTH * SCALE_FACTOR, HEIGHT * SCALE_FACTOR)


def test_window_draws_toggled_pixel(window):
    window.toggle_pixel(2, 3)
    corner = (2 * SCALE_FACTOR, 3 * SCALE_FACTOR)
    assert tuple(window.surface.get_at(corner))[:3] == COLOR_WHITE[:3]
    window.toggle_pixel(2, 3)
    assert tuple(window.surface.get_at(corner))[:3] == COLOR_BLACK[:3]


def test_window_clear_paints_black(window):
    window.toggle_pixel(0, 0)
    window.clear()
    assert tuple(window.surface.get_at((0, 0)))[:3] == COLOR_BLACK[:3]
    assert window.is_lit(0, 0) is False


def test_close_releases_surface(window):
    window.close()
    assert window.surface is None