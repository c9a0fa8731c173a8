"""Scanner package to find and parse Claude Code transcript files.

Claude Code stores one JSONL transcript per session under
~/.claude/projects/<project>/<session-id>.jsonl.
"""

from .content import count_lines, format_preview
from .discovery import (
    find_latest_session,
    get_claude_projects_dir,
    scan_session_files,
)
from .models import CodeBlock, SessionFileInfo
from .transcript import (
    extract_text_parts,
    get_last_assistant_text,
    is_assistant_record,
)

__all__ = [
    "CodeBlock",
    "SessionFileInfo",
    "count_lines",
    "extract_text_parts",
    "find_latest_session",
    "format_preview",
    "get_claude_projects_dir",
    "get_last_assistant_text",
    "is_assistant_record",
    "scan_session_files",
]
