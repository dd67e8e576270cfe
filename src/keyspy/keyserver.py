# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

import trio

from .canonical import resolve
from .commontypes import KeyState
from .eventtypes import DecodeError, KeyEvent, RawEvent
from .protocol import decode_line, encode_ack
from .supervisor import ProcessSupervisor, SupervisorState

if typing.TYPE_CHECKING:
    from .backends import BackendSpec
    from .dispatch import Dispatcher
    from .settings import BackendConfig, Settings

logger = logging.getLogger(__name__)


class KeyServer:
    """One running backend: a supervised key server whose events are canonicalized and fed to a dispatcher."""

    def __init__(
        self,
        spec: BackendSpec,
        config: BackendConfig,
        dispatcher: Dispatcher,
        nursery: trio.Nursery,
        *,
        stop_grace_period: float = 2.0,
        **supervisor_kwargs,
    ):
        self.spec = spec
        self.config = config
        self.dispatcher = dispatcher
        self.supervisor = ProcessSupervisor(
            spec.server_path(config),
            config,
            self.handle_line,
            nursery,
            stop_grace_period=stop_grace_period,
            **supervisor_kwargs,
        )

    @classmethod
    def from_settings(cls, spec: BackendSpec, settings: Settings, dispatcher: Dispatcher, nursery: trio.Nursery, **kwargs):
        return cls(
            spec,
            settings.for_backend(spec.kind),
            dispatcher,
            nursery,
            stop_grace_period=settings.stop_grace_period,
            **kwargs,
        )

    def __repr__(self):
        return f"<KeyServer {self.spec.kind.value} {self.supervisor.server_path}>"

    @property
    def state(self):
        return self.supervisor.state

    @property
    def running(self):
        return self.supervisor.state.value in (SupervisorState.STARTING, SupervisorState.RUNNING, SupervisorState.RESTARTING)

    def make_event(self, raw: RawEvent) -> KeyEvent:
        lookup = self.spec.lookup_code(raw.code, raw.is_mouse)
        descriptor = resolve(self.spec.table, lookup, raw_code=raw.code)
        return KeyEvent(
            virtual_key=raw.code,
            raw_key=descriptor,
            name=descriptor.canonical,
            state=KeyState.DOWN if raw.is_down else KeyState.UP,
            scan_code=raw.scan_code,
            raw=raw.raw_line,
            location=raw.location,
        )

    async def handle_line(self, line: str):
        try:
            raw = decode_line(self.spec.layout, line)
        except DecodeError as exc:
            logger.error("Skipping malformed line from %r: %s", self, exc)
            return
        suppress = self.dispatcher.dispatch(self.make_event(raw))
        if suppress and not self.spec.honors_suppression:
            logger.debug("%r cannot suppress events; %s will still propagate", self, raw.correlation_id)
        if self.spec.acknowledges:
            await self.supervisor.send(encode_ack(suppress, raw.correlation_id))

    async def start(self):
        await self.supervisor.start(allow_escalation=self.config.allow_escalation and self.spec.escalates)

    async def stop(self):
        await self.supervisor.stop()
