# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import typing

from .commontypes import CanonicalKey
from .eventtypes import RawKeyDescriptor

# Mouse buttons live in their own band on platforms where button numbers would collide with key codes.
MOUSE_OFFSET = 0xFFFF0000

KeyTable = collections.abc.Mapping[int, RawKeyDescriptor]


def unknown_name(code: int) -> str:
    return f"UNKNOWN_0x{code:X}"


def unknown_descriptor(code: int) -> RawKeyDescriptor:
    name = unknown_name(code)
    return RawKeyDescriptor(raw_name=name, name=name, canonical=CanonicalKey.UNKNOWN)


def resolve(table: KeyTable, code: int, raw_code: typing.Optional[int] = None) -> RawKeyDescriptor:
    """Look up a code in a platform table.

    Codes missing from the table, and entries the table knows by name but cannot map to a portable key, resolve to an
    UNKNOWN descriptor named after the code. When the table is keyed by a translated code (X11's keycode offset, the
    mouse band), pass the code the key server actually reported as raw_code so the fallback name matches what the
    server sent.
    """
    key = table.get(code)
    if key is not None and key.canonical is not None:
        return key
    return unknown_descriptor(code if raw_code is None else raw_code)
