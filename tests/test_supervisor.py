import errno

import pytest
import trio

from keyspy.eventtypes import EscalationError, ServerLaunchError
from keyspy.protocol import POINTER_LAYOUT, decode_line, encode_ack
from keyspy.settings import BackendConfig
from keyspy.supervisor import ProcessSupervisor, SupervisorState


class Harness:
    """A supervisor whose line handler acks every line, with callbacks feeding memory channels."""

    def __init__(self, server_path, nursery, **kwargs):
        self.lines = []
        self.info_send, self.info_recv = trio.open_memory_channel(100)
        self.error_send, self.error_recv = trio.open_memory_channel(10)
        self.config = BackendConfig(
            server_path=server_path,
            on_error=self.error_send.send_nowait,
            on_info=self.info_send.send_nowait,
        )
        self.supervisor = ProcessSupervisor(server_path, self.config, self.handle_line, nursery, stop_grace_period=1, **kwargs)

    async def handle_line(self, line):
        self.lines.append(line)
        event = decode_line(POINTER_LAYOUT, line)
        await self.supervisor.send(encode_ack(event.code % 2 == 1, event.correlation_id))

    async def infos(self, count):
        with trio.fail_after(5):
            return [await self.info_recv.receive() for _ in range(count)]


class FakeEscalator:
    def __init__(self, grant=True, fail=False):
        self.grant = grant
        self.fail = fail
        self.calls = []
        self.called = trio.Event()
        self.release = None

    async def __call__(self, path, app_name):
        self.calls.append((path, app_name))
        self.called.set()
        if self.release is not None:
            await self.release.wait()
        if self.fail:
            raise EscalationError("user cancelled the prompt")
        if self.grant:
            path.chmod(0o755)


async def test_lines_handled_and_acked_in_order(fake_server, nursery):
    lines = [f"KEYBOARD,DOWN,{code},,,{n}\n" for n, code in enumerate([30, 31, 32])]
    harness = Harness(fake_server(lines), nursery)
    await harness.supervisor.start()
    assert harness.supervisor.state.value is SupervisorState.RUNNING

    assert await harness.infos(3) == ["ACK 0,0", "ACK 1,1", "ACK 0,2"]
    assert harness.lines == lines

    await harness.supervisor.stop()
    assert harness.supervisor.state.value is SupervisorState.STOPPED
    assert harness.supervisor.process is None


async def test_blank_lines_ignored(fake_server, nursery):
    harness = Harness(fake_server(["\n", "KEYBOARD,UP,30,,,a\n", "  \n", "KEYBOARD,UP,31,,,b\n"]), nursery)
    await harness.supervisor.start()
    assert await harness.infos(2) == ["ACK 0,a", "ACK 1,b"]
    assert len(harness.lines) == 2
    await harness.supervisor.stop()


async def test_partial_line_at_exit_dropped(fake_server, nursery):
    harness = Harness(fake_server(["KEYBOARD,DOWN,30,,,a\n", "KEYBOARD,DOWN,30,,,b"], tail="sys.exit(0)"), nursery)
    await harness.supervisor.start()
    with trio.fail_after(5):
        await harness.supervisor.state.wait_value(SupervisorState.STOPPED)
    assert harness.lines == ["KEYBOARD,DOWN,30,,,a\n"]


async def test_unsolicited_exit_reported(fake_server, nursery):
    harness = Harness(fake_server(tail="sys.exit(3)"), nursery)
    await harness.supervisor.start()
    with trio.fail_after(5):
        assert await harness.error_recv.receive() == 3
    assert harness.supervisor.state.value is SupervisorState.STOPPED
    assert harness.supervisor.process is None
    assert not harness.supervisor.running


async def test_stop_is_not_reported_as_error(fake_server, nursery):
    harness = Harness(fake_server(), nursery)
    await harness.supervisor.start()
    await harness.supervisor.stop()
    await harness.supervisor.stop()
    await trio.sleep(0.1)
    with pytest.raises(trio.WouldBlock):
        harness.error_recv.receive_nowait()


async def test_send_after_exit_is_ignored(fake_server, nursery):
    harness = Harness(fake_server(tail="sys.exit(0)"), nursery)
    await harness.supervisor.start()
    process = harness.supervisor.process
    with trio.fail_after(5):
        await process.wait()
    await harness.supervisor.send(b"0,late\n")
    with trio.fail_after(5):
        await harness.supervisor.state.wait_value(SupervisorState.STOPPED)
        assert await harness.error_recv.receive() == 0
    await harness.supervisor.send(b"0,later\n")
    assert harness.supervisor.process is None
    assert not harness.supervisor.running


async def test_escalates_once_when_not_executable(fake_server, nursery):
    path = fake_server(["KEYBOARD,DOWN,30,,,a\n"], executable=False)
    escalator = FakeEscalator()
    harness = Harness(path, nursery, escalator=escalator)
    await harness.supervisor.start()
    assert escalator.calls == [(path, "KeySpy")]
    assert harness.supervisor.state.value is SupervisorState.RUNNING
    assert await harness.infos(1) == ["ACK 0,a"]
    await harness.supervisor.stop()


async def test_failed_retry_does_not_escalate_again(fake_server, nursery):
    path = fake_server(executable=False)
    escalator = FakeEscalator(grant=False)
    harness = Harness(path, nursery, escalator=escalator)
    with pytest.raises(ServerLaunchError) as excinfo:
        await harness.supervisor.start()
    assert len(escalator.calls) == 1
    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert excinfo.value.server_path == path
    assert harness.supervisor.state.value is SupervisorState.STOPPED
    assert not harness.supervisor.restarting


async def test_escalation_failure_raises_launch_error(fake_server, nursery):
    escalator = FakeEscalator(fail=True)
    harness = Harness(fake_server(executable=False), nursery, escalator=escalator)
    with pytest.raises(ServerLaunchError) as excinfo:
        await harness.supervisor.start()
    assert isinstance(excinfo.value.__cause__, OSError)
    assert isinstance(excinfo.value.__context__, EscalationError)


async def test_no_escalation_when_disallowed(fake_server, nursery):
    escalator = FakeEscalator()
    harness = Harness(fake_server(executable=False), nursery, escalator=escalator)
    with pytest.raises(ServerLaunchError):
        await harness.supervisor.start(allow_escalation=False)
    assert escalator.calls == []


async def test_missing_server(tmp_path, nursery):
    escalator = FakeEscalator(grant=False)
    harness = Harness(tmp_path / "missing", nursery, escalator=escalator)
    with pytest.raises(ServerLaunchError) as excinfo:
        await harness.supervisor.start()
    assert excinfo.value.__cause__.errno == errno.ENOENT


async def test_stop_during_escalation_wins(fake_server, nursery):
    escalator = FakeEscalator()
    escalator.release = trio.Event()
    harness = Harness(fake_server(executable=False), nursery, escalator=escalator)
    started = trio.Event()

    async def start():
        await harness.supervisor.start()
        started.set()

    nursery.start_soon(start)
    with trio.fail_after(5):
        await escalator.called.wait()
    assert harness.supervisor.state.value is SupervisorState.RESTARTING
    await harness.supervisor.stop()
    escalator.release.set()
    with trio.fail_after(5):
        await started.wait()
    assert harness.supervisor.process is None
    assert harness.supervisor.state.value is SupervisorState.STOPPED
    assert len(escalator.calls) == 1


async def test_stop_reaps_process_and_closes_pipes(fake_server, nursery):
    harness = Harness(fake_server(), nursery)
    await harness.supervisor.start()
    process = harness.supervisor.process
    await harness.supervisor.stop()
    assert process.returncode is not None
    with pytest.raises(trio.ClosedResourceError):
        await process.stdin.send_all(b"0,x\n")


async def test_batched_and_split_lines_handled_in_order(fake_server, nursery):
    chunks = ["KEYBOARD,DOWN,30,,,a\nKEYBOARD,DOWN,31,,,b\nKEYBOARD,UP,3", "0,,,c\n"]
    harness = Harness(fake_server.batch(chunks), nursery)
    await harness.supervisor.start()
    assert await harness.infos(3) == ["ACK 0,a", "ACK 1,b", "ACK 0,c"]
    assert harness.lines == ["KEYBOARD,DOWN,30,,,a\n", "KEYBOARD,DOWN,31,,,b\n", "KEYBOARD,UP,30,,,c\n"]
    await harness.supervisor.stop()


class GatedSpawn:
    """Holds open_process until released, so stop() can land while a spawn is in flight."""

    def __init__(self, open_process, gate_after=0):
        self.open_process = open_process
        self.gate_after = gate_after
        self.calls = 0
        self.spawning = trio.Event()
        self.release = trio.Event()
        self.processes = []

    async def __call__(self, *args, **kwargs):
        self.calls += 1
        if self.calls > self.gate_after:
            self.spawning.set()
            await self.release.wait()
        process = await self.open_process(*args, **kwargs)
        self.processes.append(process)
        return process


async def stop_while_spawning(harness, gate):
    finished = trio.Event()

    async def start():
        await harness.supervisor.start()
        finished.set()

    harness.supervisor.nursery.start_soon(start)
    with trio.fail_after(5):
        await gate.spawning.wait()
    await harness.supervisor.stop()
    gate.release.set()
    with trio.fail_after(5):
        await finished.wait()


async def test_stop_during_spawn_wins(fake_server, nursery, monkeypatch):
    gate = GatedSpawn(trio.lowlevel.open_process)
    monkeypatch.setattr(trio.lowlevel, "open_process", gate)
    harness = Harness(fake_server(), nursery)

    await stop_while_spawning(harness, gate)

    [process] = gate.processes
    assert process.returncode is not None
    assert harness.supervisor.process is None
    assert harness.supervisor.state.value is SupervisorState.STOPPED
    assert not harness.supervisor.running


async def test_stop_during_retry_spawn_wins(fake_server, nursery, monkeypatch):
    # the first spawn fails on permissions; the retry after escalation is the one held open
    gate = GatedSpawn(trio.lowlevel.open_process, gate_after=1)
    monkeypatch.setattr(trio.lowlevel, "open_process", gate)
    escalator = FakeEscalator()
    harness = Harness(fake_server(executable=False), nursery, escalator=escalator)

    await stop_while_spawning(harness, gate)

    assert len(escalator.calls) == 1
    [process] = gate.processes
    assert process.returncode is not None
    assert harness.supervisor.process is None
    assert harness.supervisor.state.value is SupervisorState.STOPPED
