# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing

import trio
from tricycle import BackgroundObject

from .backends import BackendSpec, detect_backend
from .dispatch import Dispatcher
from .eventtypes import DownStateView, Listener
from .keyserver import KeyServer
from .privileges import grant_execute_permission
from .settings import Settings
from .supervisor import Escalator, SupervisorState

logger = logging.getLogger(__name__)


class KeyEventBridge(BackgroundObject, daemon=True):
    """Global keyboard and mouse events, delivered to listeners.

    Use as an async context manager. Backends are started by the first add_listener() and stopped when the block
    exits, or dispose_delay seconds after the last listener is removed.

    Listeners are called with (event, down_state) from inside the key server's reader task, in registration order.
    Returning a truthy value asks for the event to be suppressed; one truthy listener is enough. Exceptions raised by
    listeners are logged and otherwise ignored.
    """

    servers: list[KeyServer]
    _dispose_scope: typing.Optional[trio.CancelScope]

    def __init__(
        self,
        settings: typing.Optional[Settings] = None,
        *,
        backends: typing.Optional[collections.abc.Sequence[BackendSpec]] = None,
        escalator: Escalator = grant_execute_permission,
    ):
        self.settings = settings if settings is not None else Settings()
        self.backends = list(backends) if backends is not None else [detect_backend()]
        self.escalator = escalator
        self.dispatcher = Dispatcher()
        self.servers = []
        self._start_lock = trio.Lock()
        self._dispose_scope = None

    @property
    def listeners(self) -> list[Listener]:
        return list(self.dispatcher.listeners)

    @property
    def down_state(self) -> DownStateView:
        return self.dispatcher.down_state.view

    @property
    def running(self):
        return bool(self.servers) and all(server.running for server in self.servers)

    async def __close__(self):
        with trio.CancelScope(shield=True):
            await self.stop()

    async def add_listener(self, listener: Listener):
        self._cancel_dispose()
        self.dispatcher.add(listener)
        try:
            await self._ensure_started()
        except BaseException:
            self.dispatcher.remove(listener)
            raise

    def remove_listener(self, listener: Listener) -> bool:
        removed = self.dispatcher.remove(listener)
        if removed and not self.dispatcher.listeners:
            self._cancel_dispose()
            self.nursery.start_soon(self._dispose_later)
        return removed

    async def _ensure_started(self):
        async with self._start_lock:
            if not self.servers:
                self.servers = [
                    KeyServer.from_settings(spec, self.settings, self.dispatcher, self.nursery, escalator=self.escalator)
                    for spec in self.backends
                ]
            try:
                for server in self.servers:
                    if not server.running:
                        await server.start()
            except BaseException:
                logger.debug("Key servers failed to start; stopping any that did", exc_info=True)
                with trio.CancelScope(shield=True):
                    await self.stop()
                raise

    def _cancel_dispose(self):
        if self._dispose_scope is not None:
            self._dispose_scope.cancel()
            self._dispose_scope = None

    async def _dispose_later(self):
        with trio.CancelScope() as scope:
            self._dispose_scope = scope
            await trio.sleep(self.settings.dispose_delay)
        if self._dispose_scope is scope:
            self._dispose_scope = None
        if scope.cancelled_caught or self.dispatcher.listeners:
            return
        logger.debug("No listeners left; stopping key servers")
        await self.stop()

    async def stop(self):
        self._cancel_dispose()
        for server in self.servers:
            await server.stop()

    async def wait_stopped(self):
        for server in list(self.servers):
            await server.state.wait_value(SupervisorState.STOPPED)
