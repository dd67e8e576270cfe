# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import types

import outcome

from .commontypes import CanonicalKey, KeyState
from .eventtypes import DownStateView, KeyEvent, Listener

logger = logging.getLogger(__name__)


class DownState:
    def __init__(self):
        self._keys: dict[CanonicalKey, bool] = {}
        self.view: DownStateView = types.MappingProxyType(self._keys)

    def apply(self, event: KeyEvent):
        self._keys[event.name] = event.state is KeyState.DOWN

    def held(self) -> list[CanonicalKey]:
        return [key for key, down in self._keys.items() if down]


def should_suppress(outcomes: collections.abc.Iterable[outcome.Outcome]) -> bool:
    """True if any listener returned a truthy value. Listeners that raised never vote to suppress."""
    return any(isinstance(result, outcome.Value) and result.value for result in outcomes)


class Dispatcher:
    listeners: list[Listener]

    def __init__(self):
        self.listeners = []
        self.down_state = DownState()

    def __len__(self):
        return len(self.listeners)

    def add(self, listener: Listener):
        self.listeners.append(listener)

    def remove(self, listener: Listener) -> bool:
        try:
            self.listeners.remove(listener)
        except ValueError:
            return False
        return True

    def dispatch(self, event: KeyEvent) -> bool:
        self.down_state.apply(event)
        outcomes = []
        for listener in list(self.listeners):
            result = outcome.capture(listener, event, self.down_state.view)
            if isinstance(result, outcome.Error):
                if not isinstance(result.error, Exception):
                    result.unwrap()
                logger.debug("Listener %r raised while handling %s", listener, event.name, exc_info=result.error)
            outcomes.append(result)
        return should_suppress(outcomes)
