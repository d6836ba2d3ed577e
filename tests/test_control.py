from dcdump.control import (
    name_for_control_code,
    is_control,
    is_printable,
    C0_NAMES,
    C1_NAMES,
    UNKNOWN,
)


def test_tables_size():
    assert len(C0_NAMES) == 32
    assert len(C1_NAMES) == 33


def test_c0_names():
    assert name_for_control_code(0) == 'NUL'
    assert name_for_control_code(7) == 'BEL'
    assert name_for_control_code(27) == 'ESC'
    assert name_for_control_code(31) == 'US'


def test_c0_escapes():
    """tab, newline and carriage return use the escape sequences instead of the names"""
    assert name_for_control_code(9) == '\\t'
    assert name_for_control_code(10) == '\\n'
    assert name_for_control_code(13) == '\\r'


def test_c1_names():
    assert name_for_control_code(127) == 'DEL'
    assert name_for_control_code(128) == 'PAD'
    assert name_for_control_code(141) == 'RI'
    assert name_for_control_code(148) == 'CCH'
    assert name_for_control_code(149) == 'MW'
    assert name_for_control_code(150) == 'SPA'
    assert name_for_control_code(153) == 'SGCI'
    assert name_for_control_code(157) == 'OSC'
    assert name_for_control_code(159) == 'APC'


def test_unknown():
    assert name_for_control_code(32) == UNKNOWN
    assert name_for_control_code(65) == '????'
    assert name_for_control_code(126) == '????'
    assert name_for_control_code(160) == '????'
    assert name_for_control_code(200) == '????'
    assert name_for_control_code(255) == '????'


def test_total_over_bytes():
    for byte in range(256):
        name = name_for_control_code(byte)
        assert 1 <= len(name) <= 4
        assert name.isascii()


def test_classification():
    assert is_printable(ord(' '))
    assert is_printable(ord('~'))
    assert not is_printable(0x7f)
    assert not is_printable(0x1f)
    assert not is_printable(0xe9)

    assert is_control(0)
    assert is_control(0x7f)
    assert is_control(0x9f)
    assert not is_control(0xa0)
    assert not is_control(ord('A'))
