import pytest

from keyspy.canonical import MOUSE_OFFSET, resolve, unknown_name
from keyspy.commontypes import CanonicalKey
from keyspy.eventtypes import RawKeyDescriptor
from keyspy.keymaps import keytable

TABLE = keytable(
    (30, "KEY_A", "A", CanonicalKey.A),
    (113, "KEY_MUTE", "MUTE", None),
    (MOUSE_OFFSET + 1, "Button1", "MOUSE LEFT", CanonicalKey.MOUSE_LEFT),
)


def test_unknown_name_is_uppercase_hex():
    assert unknown_name(0) == "UNKNOWN_0x0"
    assert unknown_name(0xABC) == "UNKNOWN_0xABC"
    assert unknown_name(MOUSE_OFFSET + 4) == "UNKNOWN_0xFFFF0004"


def test_mapped_code_resolves_to_table_entry():
    assert resolve(TABLE, 30) is TABLE[30]
    assert resolve(TABLE, MOUSE_OFFSET + 1) is TABLE[MOUSE_OFFSET + 1]


def test_every_unmapped_code_falls_back():
    empty = {}
    for code in range(0x10000):
        descriptor = resolve(empty, code)
        assert descriptor.canonical is CanonicalKey.UNKNOWN
        assert descriptor.raw_name == descriptor.name == f"UNKNOWN_0x{code:X}"


def test_entry_without_portable_key_falls_back():
    descriptor = resolve(TABLE, 113)
    assert descriptor == RawKeyDescriptor(raw_name="UNKNOWN_0x71", name="UNKNOWN_0x71", canonical=CanonicalKey.UNKNOWN)


def test_fallback_uses_reported_code():
    # X11 reports keycode 255; the table is keyed by 255 - 8
    descriptor = resolve(TABLE, 247, raw_code=255)
    assert descriptor.name == "UNKNOWN_0xFF"
    assert resolve(TABLE, 30, raw_code=38) is TABLE[30]


def test_duplicate_table_entries_rejected():
    with pytest.raises(ValueError):
        keytable((1, "one", "one", CanonicalKey.A), (1, "uno", "uno", CanonicalKey.B))
