"""Claude Code Blocks - copy code from the last Claude Code reply.

This module provides the pieces behind the `ccb` command:
- Scanner: Find the latest transcript and read its last assistant message
- Blocks: Extract fenced code blocks from that message
- Selection: Resolve "all", "last" or an index to the code to copy
- Clipboard: Hand text to the platform clipboard utility
"""

__version__ = "0.1.0"

from .blocks import extract_code_blocks
from .clipboard import ClipboardCommand, copy_to_clipboard, detect_clipboard_commands
from .scanner import (
    CodeBlock,
    SessionFileInfo,
    find_latest_session,
    get_claude_projects_dir,
    get_last_assistant_text,
    scan_session_files,
)
from .selection import InvalidSelectionError, Selection, resolve_selection

__all__ = [
    # Package
    "__version__",
    # Scanner
    "CodeBlock",
    "SessionFileInfo",
    "find_latest_session",
    "get_claude_projects_dir",
    "get_last_assistant_text",
    "scan_session_files",
    # Blocks
    "extract_code_blocks",
    # Selection
    "InvalidSelectionError",
    "Selection",
    "resolve_selection",
    # Clipboard
    "ClipboardCommand",
    "copy_to_clipboard",
    "detect_clipboard_commands",
]
