import pytest

from chip8emu.memory import (
    FONT,
    MAX_MEMORY_SIZE,
    MAX_STACK_SIZE,
    START_ADDRESS,
    Chip8Error,
    Memory,
    OutOfMemory,
    StackOverflow,
    StackUnderflow,
)


def test_load_bytes_places_rom_at_start_address():
    memory = Memory()
    memory.load_bytes(b"\xab\xcd\xef")
    assert memory.pc == START_ADDRESS
    assert memory.ram[START_ADDRESS : START_ADDRESS + 3] == b"\xab\xcd\xef"


def test_fetch_is_big_endian_and_advances_pc():
    memory = Memory()
    memory.load_bytes(b"\x12\x34\x56\x78")
    assert memory.fetch() == 0x1234
    assert memory.pc == START_ADDRESS + 2
    assert memory.fetch() == 0x5678
    assert memory.pc == START_ADDRESS + 4


def test_fetch_past_end_raises():
    memory = Memory()
    memory.pc = MAX_MEMORY_SIZE
    with pytest.raises(OutOfMemory):
        memory.fetch()


def test_fetch_of_last_full_word_succeeds():
    memory = Memory()
    memory.ram[MAX_MEMORY_SIZE - 2] = 0xAA
    memory.ram[MAX_MEMORY_SIZE - 1] = 0xBB
    memory.pc = MAX_MEMORY_SIZE - 2
    assert memory.fetch() == 0xAABB
    assert memory.pc == MAX_MEMORY_SIZE


def test_stack_is_last_in_first_out():
    memory = Memory()
    for address in (0x200, 0x300, 0x400):
        memory.stack_push(address)
    assert [memory.stack_pop() for _ in range(3)] == [0x400, 0x300, 0x200]


def test_stack_underflow_raises():
    with pytest.raises(StackUnderflow):
        Memory().stack_pop()


def test_stack_overflow_raises():
    memory = Memory()
    for _ in range(MAX_STACK_SIZE):
        memory.stack_push(0x222)
    with pytest.raises(StackOverflow):
        memory.stack_push(0x222)


def test_stack_errors_share_base_class():
    with pytest.raises(Chip8Error):
        Memory().stack_pop()


def test_load_from_file_matches_load_bytes(tmp_path):
    rom = bytes(range(40))
    path = tmp_path / "game.ch8"
    path.write_bytes(rom)
    from_file = Memory()
    from_file.load(path)
    from_data = Memory()
    from_data.load_bytes(rom)
    assert from_file.ram == from_data.ram
    assert from_file.pc == from_data.pc


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Memory().load(tmp_path / "missing.ch8")


def test_load_resets_stack():
    memory = Memory()
    memory.stack_push(0x300)
    memory.load_bytes(b"\x00\xe0")
    with pytest.raises(StackUnderflow):
        memory.stack_pop()


def test_rom_too_large_raises():
    with pytest.raises(Chip8Error):
        Memory().load_bytes(bytes(MAX_MEMORY_SIZE - START_ADDRESS + 1))


def test_rom_filling_all_space_loads():
    memory = Memory()
    memory.load_bytes(b"\x01" * (MAX_MEMORY_SIZE - START_ADDRESS))
    assert memory.ram[-1] == 1


def test_font_is_in_low_memory():
    memory = Memory()
    assert len(FONT) == 16 * 5
    assert memory.ram[: len(FONT)] == FONT


def test_pc_and_ri_wrap_to_sixteen_bits():
    memory = Memory()
    memory.pc = 0x10002
    memory.ri = 0x1FFFF
    assert memory.pc == 2
    assert memory.ri == 0xFFFF


def test_dump_lists_every_cell():
    lines = list(Memory().dump())
    assert len(lines) == MAX_MEMORY_SIZE
    assert lines[0] == "0x0000 f0"
    assert lines[-1] == "0x0fff 00"