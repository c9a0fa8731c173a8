"""Copy text to the system clipboard through a platform utility.

One ordered list of commands is chosen per platform:
- Windows, Cygwin and MSYS: clip.exe
- macOS: pbcopy
- Linux and others: xclip, falling back to xsel
"""

import os
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, emoji=False)

CYGDRIVE_PATH = Path("/cygdrive")


@dataclass(frozen=True)
class ClipboardCommand:
    """An external clipboard utility that reads the text on stdin."""

    name: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.name, *self.args]


CLIP_EXE = ClipboardCommand("clip.exe")
PBCOPY = ClipboardCommand("pbcopy")
XCLIP = ClipboardCommand("xclip", ("-selection", "clipboard"))
XSEL = ClipboardCommand("xsel", ("--clipboard", "--input"))


def _is_windows(platform: str, environ: Mapping[str, str], cygdrive: Path) -> bool:
    ostype = environ.get("OSTYPE", "")
    return platform == "win32" or "cygwin" in ostype or "msys" in ostype or cygdrive.exists()


def detect_clipboard_commands(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
    cygdrive: Path = CYGDRIVE_PATH,
) -> list[ClipboardCommand]:
    """Get the clipboard commands to try for this platform, in order.

    Args:
        platform: Platform identifier as in sys.platform. Defaults to the current one.
        environ: Environment to inspect for OSTYPE. Defaults to os.environ.
        cygdrive: Mount point whose presence marks a Cygwin environment.

    Returns:
        Commands to attempt in order until one succeeds.
    """
    if platform is None:
        platform = sys.platform
    if environ is None:
        environ = os.environ

    if _is_windows(platform, environ, cygdrive):
        return [CLIP_EXE]
    if platform == "darwin":
        return [PBCOPY]
    return [XCLIP, XSEL]


def copy_to_clipboard(text: str, commands: list[ClipboardCommand] | None = None) -> bool:
    """Copy text to the clipboard.

    Each command is tried in turn with the text on stdin. Failures are
    reported on stderr rather than raised.

    Args:
        text: Text to copy.
        commands: Commands to try. If None, detects them for the current platform.

    Returns:
        True if a command succeeded, False otherwise.
    """
    if commands is None:
        commands = detect_clipboard_commands()
    if not commands:
        err_console.print("[red]Failed to copy: no clipboard command available[/red]")
        return False

    last_error: Exception | None = None
    for command in commands:
        try:
            subprocess.run(command.argv, input=text.encode("utf-8"), check=True)
            return True
        except (FileNotFoundError, subprocess.CalledProcessError, OSError) as e:
            last_error = e

    err_console.print(f"[red]Failed to copy: {escape(str(last_error))}[/red]")
    return False
