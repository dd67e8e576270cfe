# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import enum
import logging
import pathlib
import subprocess
import typing

import tricycle
import trio
import trio.lowlevel
from trio_util import AsyncValue

from .eventtypes import EscalationError, ServerLaunchError
from .privileges import grant_execute_permission

if typing.TYPE_CHECKING:
    from .settings import BackendConfig

logger = logging.getLogger(__name__)

LineHandler = collections.abc.Callable[[str], collections.abc.Awaitable[None]]
Escalator = collections.abc.Callable[[pathlib.Path, str], collections.abc.Awaitable[None]]


@enum.unique
class SupervisorState(enum.Enum):
    IDLE = "idle"
    STARTING = "starting"
    RUNNING = "running"
    RESTARTING = "restarting"
    STOPPED = "stopped"


class ProcessSupervisor:
    """Owns one key server process.

    The stdout reader hands each complete line to line_handler and waits for it before reading the next one, so
    lines are handled strictly in the order the server wrote them. Acknowledgements go back through send().
    """

    state: AsyncValue[SupervisorState]
    _process: typing.Optional[trio.Process]
    _cancel_scope: typing.Optional[trio.CancelScope]

    def __init__(
        self,
        server_path: pathlib.Path,
        config: BackendConfig,
        line_handler: LineHandler,
        nursery: trio.Nursery,
        *,
        stop_grace_period: float = 2.0,
        escalator: Escalator = grant_execute_permission,
    ):
        self.server_path = server_path
        self.config = config
        self.line_handler = line_handler
        self.nursery = nursery
        self.stop_grace_period = stop_grace_period
        self.escalator = escalator
        self.state = AsyncValue(SupervisorState.IDLE)
        self.running = False
        self.restarting = False
        self._process = None
        self._cancel_scope = None

    @property
    def process(self):
        return self._process

    async def start(self, *, allow_escalation: bool = True):
        self.running = True
        await self._launch(allow_escalation)

    async def _launch(self, allow_escalation: bool):
        self.state.value = SupervisorState.STARTING
        logger.debug("Starting key server %s", self.server_path)
        try:
            process = await trio.lowlevel.open_process(
                [str(self.server_path)],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            await self._recover_from_launch_failure(exc, allow_escalation)
            return
        if not self.running:
            # stop() arrived while the spawn was in flight
            logger.debug("Key server %s was stopped while starting; terminating pid %d", self.server_path, process.pid)
            await self._terminate(process)
            return
        self._process = process
        await self.nursery.start(self._serve, process)
        if self.running and self._process is process:
            self.state.value = SupervisorState.RUNNING
            logger.debug("Key server %s running as pid %d", self.server_path, process.pid)

    async def _recover_from_launch_failure(self, exc: OSError, allow_escalation: bool):
        if not allow_escalation:
            self.running = False
            self.state.value = SupervisorState.STOPPED
            raise ServerLaunchError(self.server_path) from exc

        logger.debug("Key server %s failed to launch (%r); trying to make it executable", self.server_path, exc)
        self.restarting = True
        self.state.value = SupervisorState.RESTARTING
        try:
            try:
                await self.escalator(self.server_path, self.config.display_name)
            except EscalationError as escalation_exc:
                logger.debug("Privilege escalation failed: %r", escalation_exc)
                self.running = False
                self.state.value = SupervisorState.STOPPED
                raise ServerLaunchError(self.server_path) from exc
            if not self.running:
                # stopped while we were waiting on the privilege prompt
                logger.debug("Key server %s was stopped during restart; not relaunching", self.server_path)
                return
            await self._launch(allow_escalation=False)
        finally:
            self.restarting = False

    async def _serve(self, process: trio.Process, *, task_status=trio.TASK_STATUS_IGNORED):
        with trio.CancelScope() as cancel_scope:
            self._cancel_scope = cancel_scope
            async with trio.open_nursery() as nursery:
                nursery.start_soon(self._read_events, process.stdout)
                nursery.start_soon(self._read_diagnostics, process.stderr)
                task_status.started()
                await process.wait()
        if cancel_scope.cancelled_caught or process is not self._process:
            return
        if self.restarting or not self.running:
            return
        self.running = False
        self._process = None
        await self._release(process)
        self.state.value = SupervisorState.STOPPED
        logger.warning("Key server %s exited unexpectedly with status %r", self.server_path, process.returncode)
        if self.config.on_error is not None:
            self.config.on_error(process.returncode)

    async def _read_events(self, stdout: trio.abc.ReceiveStream):
        async with tricycle.TextReceiveStream(stdout, encoding="utf-8", errors="replace") as lines:
            while True:
                line = await lines.receive_line()
                if not line:
                    return
                if not line.endswith(("\n", "\r")):
                    logger.warning("Dropping partial line at end of key server output: %r", line)
                    return
                if not line.strip():
                    continue
                await self.line_handler(line)

    async def _read_diagnostics(self, stderr: trio.abc.ReceiveStream):
        async with tricycle.TextReceiveStream(stderr, encoding="utf-8", errors="replace") as lines:
            while True:
                line = await lines.receive_line()
                if not line:
                    return
                text = line.rstrip("\r\n")
                logger.debug("Key server says: %s", text)
                if self.config.on_info is not None:
                    self.config.on_info(text)

    async def send(self, data: bytes):
        process = self._process
        if process is None or process.stdin is None:
            logger.debug("No key server to send %r to", data)
            return
        try:
            await process.stdin.send_all(data)
        except (trio.BrokenResourceError, trio.ClosedResourceError):
            logger.debug("Key server %s stopped listening before %r was sent", self.server_path, data, exc_info=True)

    async def stop(self):
        self.running = False
        self.state.value = SupervisorState.STOPPED
        if self._cancel_scope is not None:
            self._cancel_scope.cancel()
        process, self._process = self._process, None
        if process is None:
            return
        logger.debug("Stopping key server %s (pid %d)", self.server_path, process.pid)
        await self._terminate(process)

    async def _terminate(self, process: trio.Process):
        with trio.CancelScope(shield=True):
            if process.returncode is None:
                process.terminate()
                with trio.move_on_after(self.stop_grace_period):
                    await process.wait()
            if process.returncode is None:
                process.kill()
            await self._release(process)

    @staticmethod
    async def _release(process: trio.Process):
        for stream in (process.stdin, process.stdout, process.stderr):
            if stream is not None:
                await stream.aclose()
        await process.wait()
