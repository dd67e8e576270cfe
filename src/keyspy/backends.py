# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import pathlib
import sys
import typing

import msgspec

from .canonical import MOUSE_OFFSET, KeyTable
from .commontypes import UnsupportedPlatformError
from .keymaps.mac import MAC_KEYS
from .keymaps.windows import WINDOWS_KEYS
from .keymaps.x11 import X11_KEYCODE_OFFSET, X11_KEYS
from .protocol import POINTER_LAYOUT, WINDOWS_LAYOUT, LineLayout

if typing.TYPE_CHECKING:
    from .settings import BackendConfig

PACKAGE_DIR = pathlib.Path(__file__).parent


@enum.unique
class BackendKind(enum.Enum):
    WINDOWS = "windows"
    X11 = "x11"
    MAC = "mac"


class BackendSpec(msgspec.Struct, frozen=True, kw_only=True):
    kind: BackendKind
    layout: LineLayout
    table: KeyTable
    executable: str
    keyboard_offset: int = 0
    mouse_band: bool = False
    escalates: bool = True
    acknowledges: bool = True
    # whether answering 1 actually stops the event reaching other applications
    honors_suppression: bool = True

    def lookup_code(self, code: int, is_mouse: bool) -> int:
        if is_mouse:
            return MOUSE_OFFSET + code if self.mouse_band else code
        return code + self.keyboard_offset

    def server_path(self, config: BackendConfig) -> pathlib.Path:
        if config.server_path is not None:
            return config.server_path
        built = PACKAGE_DIR / "build" / self.executable
        if built.exists():
            return built
        return PACKAGE_DIR / "runtime" / self.executable


WINDOWS = BackendSpec(
    kind=BackendKind.WINDOWS,
    layout=WINDOWS_LAYOUT,
    table=WINDOWS_KEYS,
    executable="WinKeyServer.exe",
    escalates=False,
)

X11 = BackendSpec(
    kind=BackendKind.X11,
    layout=POINTER_LAYOUT,
    table=X11_KEYS,
    executable="X11KeyServer",
    keyboard_offset=X11_KEYCODE_OFFSET,
    mouse_band=True,
    honors_suppression=False,
)

MAC = BackendSpec(
    kind=BackendKind.MAC,
    layout=POINTER_LAYOUT,
    table=MAC_KEYS,
    executable="MacKeyServer",
    mouse_band=True,
)

BACKENDS = {spec.kind: spec for spec in (WINDOWS, X11, MAC)}


def detect_backend(platform: str = sys.platform) -> BackendSpec:
    match platform:
        case "win32" | "cygwin":
            return WINDOWS
        case "darwin":
            return MAC
        case _ if platform.startswith(("linux", "freebsd", "openbsd")):
            return X11
        case _:
            raise UnsupportedPlatformError(platform)
