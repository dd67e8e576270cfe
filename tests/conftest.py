import pathlib
import sys
import textwrap

import pytest

# Stands in for a native key server: writes each line, waits for its ack and echoes the ack on stderr.
FAKE_SERVER = """\
#!{python}
import os
import sys
import time

wait_for = {wait_for!r}
while wait_for is not None and not os.path.exists(wait_for):
    time.sleep(0.01)

for line in {lines!r}:
    sys.stdout.write(line)
    sys.stdout.flush()
    if not line.strip() or not line.endswith("\\n"):
        continue
    ack = sys.stdin.readline()
    if not ack:
        break
    sys.stderr.write("ACK " + ack)
    sys.stderr.flush()
{tail}
"""

# Writes raw chunks with a pause between them, then collects every ack at once.
BATCH_SERVER = """\
#!{python}
import sys
import time

for chunk in {chunks!r}:
    sys.stdout.write(chunk)
    sys.stdout.flush()
    time.sleep({pause!r})

for _ in range({count!r}):
    ack = sys.stdin.readline()
    if not ack:
        break
    sys.stderr.write("ACK " + ack)
    sys.stderr.flush()
sys.stdin.read()
"""

WAIT_FOR_STDIN_CLOSE = "sys.stdin.read()"


class FakeServerFactory:
    def __init__(self, tmp_path: pathlib.Path):
        self.tmp_path = tmp_path
        self.count = 0

    def _write(self, source: str, executable: bool) -> pathlib.Path:
        self.count += 1
        path = self.tmp_path / f"fake_key_server_{self.count}"
        path.write_text(source)
        path.chmod(0o755 if executable else 0o644)
        return path

    def __call__(self, lines=(), *, tail=WAIT_FOR_STDIN_CLOSE, executable=True, wait_for=None) -> pathlib.Path:
        source = FAKE_SERVER.format(
            python=sys.executable,
            lines=list(lines),
            tail=textwrap.dedent(tail),
            wait_for=None if wait_for is None else str(wait_for),
        )
        return self._write(source, executable)

    def batch(self, chunks, *, pause=0.2) -> pathlib.Path:
        count = "".join(chunks).count("\n")
        source = BATCH_SERVER.format(python=sys.executable, chunks=list(chunks), pause=pause, count=count)
        return self._write(source, True)


@pytest.fixture
def fake_server(tmp_path):
    if sys.platform == "win32":
        pytest.skip("fake key servers are POSIX scripts")
    return FakeServerFactory(tmp_path)
