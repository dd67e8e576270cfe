# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import collections.abc
import logging
import os
import pathlib
import sys

import trio

from .bridge import KeyEventBridge
from .commontypes import MODIFIER_PAIRS, CanonicalKey, KeySpyError
from .eventtypes import DownStateView, KeyEvent
from .permissions import check_permissions, permission_instructions
from .settings import Settings

logger = logging.getLogger(__name__)

MAX_VERBOSITY = 3


def verbosity(flag_count, environ: collections.abc.Mapping[str, str] = os.environ) -> int:
    if flag_count is not None:
        return min(flag_count, MAX_VERBOSITY)
    try:
        level = int(environ.get("KEYSPY_DEBUG", "0"))
    except ValueError:
        return 0
    return max(0, min(level, MAX_VERBOSITY))


def held_modifiers(down: DownStateView) -> list[str]:
    return [name for name, keys in MODIFIER_PAIRS.items() if any(down.get(key, False) for key in keys)]


def format_event(event: KeyEvent, down: DownStateView) -> str:
    parts = [
        f"{event.state.value:<4}",
        f"{event.name.value:<20}",
        f"{event.raw_key.raw_name:<24}",
        f"vkey={event.virtual_key}",
    ]
    if event.location is not None:
        parts.append(f"at=({event.location[0]:g}, {event.location[1]:g})")
    modifiers = held_modifiers(down)
    if modifiers:
        parts.append("+".join(modifiers))
    return " ".join(parts)


def is_exit_chord(event: KeyEvent, down: DownStateView, platform: str = sys.platform) -> bool:
    if not event.is_down:
        return False
    if event.name is CanonicalKey.ESCAPE:
        return True
    modifiers = held_modifiers(down)
    if event.name is CanonicalKey.C and "ctrl" in modifiers:
        return True
    return platform == "darwin" and event.name is CanonicalKey.Q and "meta" in modifiers


def leaf_exceptions(group: BaseExceptionGroup) -> list[BaseException]:
    leaves = []
    for exc in group.exceptions:
        if isinstance(exc, BaseExceptionGroup):
            leaves.extend(leaf_exceptions(exc))
        else:
            leaves.append(exc)
    return leaves


async def watch_events(settings: Settings, level: int):
    done = trio.Event()

    def listener(event: KeyEvent, down: DownStateView):
        if level >= 3:
            print(f"raw: {event.raw!r}")
        if level >= 1 and event.name is CanonicalKey.UNKNOWN:
            print(f"Unknown key {event.raw_key.name} (vkey {event.virtual_key}, scan code {event.scan_code})")
        print(format_event(event, down))
        if level >= 3:
            print("down: " + ", ".join(key.value for key, pressed in down.items() if pressed))
        if is_exit_chord(event, down):
            done.set()

    def on_error(returncode):
        print(f"Key server exited with status {returncode}", file=sys.stderr)

    def on_info(text):
        logger.info("key server: %s", text)

    async def wait_for_server(bridge: KeyEventBridge):
        await bridge.wait_stopped()
        done.set()

    async with KeyEventBridge(settings.with_callbacks(on_error=on_error, on_info=on_info)) as bridge:
        await bridge.add_listener(listener)
        print("Listening for key events. Press ESC to exit.")
        async with trio.open_nursery() as nursery:
            nursery.start_soon(wait_for_server, bridge)
            await done.wait()
            nursery.cancel_scope.cancel()


events_parser = argparse.ArgumentParser(prog="keyspy-events", description="Print global keyboard and mouse events.")
events_parser.add_argument(
    "-v",
    "--verbose",
    action="count",
    default=None,
    help="1: report unknown keys, 2: debug logging, 3: raw lines and held keys (default: $KEYSPY_DEBUG)",
)
events_parser.add_argument("--settings", type=pathlib.Path)
events_parser.add_argument("--check-permissions", action="store_true")


def print_events():
    args = events_parser.parse_args()
    level = verbosity(args.verbose)
    logging.basicConfig(
        level=logging.DEBUG if level >= 2 else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.check_permissions:
        if trio.run(check_permissions):
            print("Key capture permissions look fine.")
            return
        print(permission_instructions())
        sys.exit(1)

    settings = Settings.load(args.settings) if args.settings is not None else Settings()
    failures = []
    try:
        trio.run(watch_events, settings, level)
    except* KeySpyError as group:
        failures.extend(leaf_exceptions(group))
    except* KeyboardInterrupt:
        pass
    if failures:
        for exc in failures:
            print(f"keyspy-events: {exc}", file=sys.stderr)
        sys.exit(1)
