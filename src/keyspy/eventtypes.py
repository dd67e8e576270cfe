# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import pathlib
import typing

import msgspec

from .commontypes import CanonicalKey, KeySpyError, KeyState


class DecodeError(KeySpyError):
    def __init__(self, message: str, line: str):
        self.line = line
        super().__init__(f"{message}: {line!r}")


class ServerLaunchError(KeySpyError):
    def __init__(self, server_path: pathlib.Path):
        self.server_path = server_path
        super().__init__(f"Unable to launch key server {str(server_path)!r}")


class EscalationError(KeySpyError):
    pass


class RawKeyDescriptor(msgspec.Struct, frozen=True):
    raw_name: str
    name: str
    canonical: typing.Optional[CanonicalKey] = None


Location = tuple[float, float]


class RawEvent(msgspec.Struct, frozen=True, kw_only=True):
    code: int
    scan_code: int
    is_down: bool
    is_mouse: bool
    location: typing.Optional[Location]
    correlation_id: str
    raw_line: str


class KeyEvent(msgspec.Struct, frozen=True, kw_only=True):
    virtual_key: int
    raw_key: RawKeyDescriptor
    name: CanonicalKey
    state: KeyState
    scan_code: int
    raw: str
    location: typing.Optional[Location] = None

    @property
    def is_down(self):
        return self.state is KeyState.DOWN


DownStateView = collections.abc.Mapping[CanonicalKey, bool]
Listener = collections.abc.Callable[[KeyEvent, DownStateView], typing.Optional[bool]]
ErrorCallback = collections.abc.Callable[[typing.Optional[int]], None]
InfoCallback = collections.abc.Callable[[str], None]
