# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Event flow
# key server (native, out of process): capture keyboard/mouse, write one line per event, wait for an ack
# supervisor: own the process, read lines in order, write acks back
# keyserver: decode the line, canonicalize the platform code
# dispatch: update held keys, fan out to listeners, decide whether to suppress
from .backends import BackendKind, BackendSpec, detect_backend
from .bridge import KeyEventBridge
from .commontypes import CanonicalKey, KeySpyError, KeyState, UnsupportedPlatformError
from .eventtypes import DecodeError, EscalationError, KeyEvent, RawKeyDescriptor, ServerLaunchError
from .settings import BackendConfig, Settings

__all__ = [
    "BackendConfig",
    "BackendKind",
    "BackendSpec",
    "CanonicalKey",
    "DecodeError",
    "EscalationError",
    "KeyEvent",
    "KeyEventBridge",
    "KeySpyError",
    "KeyState",
    "RawKeyDescriptor",
    "ServerLaunchError",
    "Settings",
    "UnsupportedPlatformError",
    "detect_backend",
]
