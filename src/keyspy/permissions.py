# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import os
import sys
import typing

import trio

logger = logging.getLogger(__name__)

MAC_PROBE_SCRIPT = """
tell application "System Events"
    try
        set frontApp to name of first application process whose frontmost is true
        return true
    on error
        return false
    end try
end tell
"""

INSTRUCTIONS = {
    "darwin": """\
macOS Accessibility permission is required:
1. Open System Settings > Privacy & Security > Accessibility
2. Unlock the panel if needed
3. Add your terminal application (Terminal, iTerm2, your editor...)
4. Make sure the checkbox next to it is ticked
5. Restart the terminal and try again
""",
    "linux": """\
X11 display access is required:
1. Make sure you are running an X11 session, not Wayland
2. Make sure your user can open the display in $DISPLAY
3. Try running: xhost +local:
4. Over SSH, enable X11 forwarding with ssh -X
""",
    "win32": """\
Windows normally needs no extra permission:
1. Try running your terminal as Administrator
2. Some antivirus software blocks low-level keyboard hooks
3. Allow keyspy in your antivirus software if needed
""",
}


def _platform_key(platform: str):
    return "linux" if platform.startswith("linux") else platform


def check_command(platform: str = sys.platform, display: typing.Optional[str] = None) -> typing.Optional[list[str]]:
    """The command whose output tells us whether key capture will work, or None if nothing needs checking."""
    match _platform_key(platform):
        case "darwin":
            return ["osascript", "-e", MAC_PROBE_SCRIPT]
        case "linux":
            if display is None:
                display = os.environ.get("DISPLAY", ":0")
            return ["xdpyinfo", "-display", display]
        case _:
            return None


def check_succeeded(platform: str, stdout: str) -> bool:
    if _platform_key(platform) == "darwin":
        return stdout.strip() == "true"
    return "screen #0" in stdout


async def check_permissions(platform: str = sys.platform) -> bool:
    key = _platform_key(platform)
    if key == "win32":
        # user-level hooks work without administrator rights
        return True
    command = check_command(platform)
    if command is None:
        logger.debug("No permission check for platform %r", platform)
        return False
    try:
        result = await trio.run_process(command, capture_stdout=True, capture_stderr=True, check=False)
    except OSError:
        logger.debug("Unable to run permission check %r", command, exc_info=True)
        return False
    if result.returncode != 0:
        logger.debug("Permission check %r exited with status %d", command[0], result.returncode)
        return False
    return check_succeeded(platform, result.stdout.decode(errors="replace"))


def permission_instructions(platform: str = sys.platform) -> str:
    return INSTRUCTIONS.get(_platform_key(platform), "Platform not supported\n")
