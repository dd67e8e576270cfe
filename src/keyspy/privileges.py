# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import pathlib
import shlex
import sys

import trio

from .eventtypes import EscalationError

logger = logging.getLogger(__name__)


def _applescript_string(value: str):
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def chmod_command(path: pathlib.Path, app_name: str, platform: str = sys.platform) -> list[str]:
    shell_command = f"chmod +x {shlex.quote(str(path))}"
    if platform == "darwin":
        script = (
            f"do shell script {_applescript_string(shell_command)} "
            f"with prompt {_applescript_string(f'{app_name} needs to make its key server executable.')} "
            "with administrator privileges"
        )
        return ["osascript", "-e", script]
    if platform.startswith("linux"):
        # pkexec shows the desktop's polkit password dialog
        return ["pkexec", "sh", "-c", shell_command]
    raise EscalationError(f"Don't know how to elevate privileges on {platform!r}")


async def grant_execute_permission(path: pathlib.Path, app_name: str):
    command = chmod_command(path, app_name)
    logger.debug("Asking for privileges to run %r on behalf of %s", command, app_name)
    try:
        result = await trio.run_process(command, capture_stdout=True, capture_stderr=True, check=False)
    except OSError as exc:
        raise EscalationError(f"Unable to run {command[0]}") from exc
    stderr = result.stderr.decode(errors="replace").strip()
    if result.returncode != 0:
        raise EscalationError(f"{command[0]} exited with status {result.returncode}: {stderr}")
    if stderr:
        raise EscalationError(stderr)
