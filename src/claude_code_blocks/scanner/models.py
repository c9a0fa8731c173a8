"""Data models for Claude Code transcript scanning."""

from dataclasses import dataclass
from pathlib import Path

from .content import count_lines, format_preview


@dataclass
class SessionFileInfo:
    """Lightweight metadata about a transcript file.

    This allows picking the latest session before any parsing.
    """

    file_path: Path
    mtime: float


@dataclass
class CodeBlock:
    """A fenced code block taken from an assistant reply."""

    language: str  # Fence info string, or "text" when the fence has none
    code: str

    @property
    def line_count(self) -> int:
        return count_lines(self.code)

    @property
    def preview(self) -> str:
        return format_preview(self.code)
