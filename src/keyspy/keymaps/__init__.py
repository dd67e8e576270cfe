# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

from ..commontypes import CanonicalKey
from ..eventtypes import RawKeyDescriptor

Entry = tuple[int, str, str, typing.Optional[CanonicalKey]]


def keytable(*entries: Entry) -> dict[int, RawKeyDescriptor]:
    table = {}
    for code, raw_name, name, canonical in entries:
        if code in table:
            raise ValueError(f"Duplicate key table entry for 0x{code:X}")
        table[code] = RawKeyDescriptor(raw_name=raw_name, name=name, canonical=canonical)
    return table
