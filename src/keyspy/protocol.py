# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Key servers write one event per line on stdout:
#   <KEYBOARD|MOUSE>,<DOWN|UP>,<code>[,<scan code>],<x>,<y>,<correlation id>
# and wait for one acknowledgement per event on stdin:
#   <1|0>,<correlation id>
# where 1 asks the server to stop the event from reaching other applications.
# There is no escaping; every field is numeric or an enumerated word.
from __future__ import annotations

import math
import typing

import msgspec

from .eventtypes import DecodeError, Location, RawEvent

DEVICES = ("KEYBOARD", "MOUSE")
STATES = ("DOWN", "UP")


class LineLayout(msgspec.Struct, frozen=True):
    fields: tuple[str, ...]

    @property
    def has_scan_code(self):
        return "scan_code" in self.fields


WINDOWS_LAYOUT = LineLayout(fields=("device", "state", "code", "scan_code", "x", "y", "correlation_id"))
POINTER_LAYOUT = LineLayout(fields=("device", "state", "code", "x", "y", "correlation_id"))


def _parse_int(token: str, field: str, line: str) -> int:
    if "_" in token:
        raise DecodeError(f"Bad integer {token!r} for {field}", line)
    try:
        return int(token, 10)
    except ValueError as exc:
        raise DecodeError(f"Bad integer {token!r} for {field}", line) from exc


def _parse_float(token: str, field: str, line: str) -> float:
    if "_" in token:
        raise DecodeError(f"Bad number {token!r} for {field}", line)
    try:
        value = float(token)
    except ValueError as exc:
        raise DecodeError(f"Bad number {token!r} for {field}", line) from exc
    if not math.isfinite(value):
        raise DecodeError(f"Bad number {token!r} for {field}", line)
    return value


def _parse_location(x: str, y: str, line: str) -> typing.Optional[Location]:
    if not x and not y:
        return None
    return (_parse_float(x, "x", line), _parse_float(y, "y", line))


def decode_line(layout: LineLayout, line: str) -> RawEvent:
    compact = "".join(line.split())
    tokens = compact.split(",")
    if len(tokens) != len(layout.fields):
        raise DecodeError(f"Expected {len(layout.fields)} fields, got {len(tokens)}", line)
    fields = dict(zip(layout.fields, tokens))

    device = fields["device"]
    if device not in DEVICES:
        raise DecodeError(f"Unknown device {device!r}", line)
    state = fields["state"]
    if state not in STATES:
        raise DecodeError(f"Unknown key state {state!r}", line)
    correlation_id = fields["correlation_id"]
    if not correlation_id:
        raise DecodeError("Missing correlation id", line)

    code = _parse_int(fields["code"], "code", line)
    scan_code = _parse_int(fields["scan_code"], "scan_code", line) if layout.has_scan_code else code
    return RawEvent(
        code=code,
        scan_code=scan_code,
        is_down=state == "DOWN",
        is_mouse=device == "MOUSE",
        location=_parse_location(fields["x"], fields["y"], line),
        correlation_id=correlation_id,
        raw_line=line.rstrip("\r\n"),
    )


def encode_ack(suppress: bool, correlation_id: str) -> bytes:
    return f"{'1' if suppress else '0'},{correlation_id}\n".encode("utf-8")
