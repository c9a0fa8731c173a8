"""Transcript file discovery under the Claude Code projects directory."""

from collections.abc import Iterator
from pathlib import Path

from .models import SessionFileInfo

TRANSCRIPT_SUFFIX = ".jsonl"


def get_claude_projects_dir() -> Path:
    """Get the default Claude Code projects directory.

    Claude Code keeps one subdirectory per project under ~/.claude/projects,
    each holding one JSONL transcript per session.
    """
    return Path.home() / ".claude" / "projects"


def scan_session_files(projects_dir: Path | None = None) -> Iterator[SessionFileInfo]:
    """Scan for transcript files and yield metadata without parsing content.

    Args:
        projects_dir: Root directory holding one subdirectory per project.
                      If None, uses the default Claude Code projects directory.

    Yields:
        SessionFileInfo objects in directory listing order.
    """
    if projects_dir is None:
        projects_dir = get_claude_projects_dir()

    if not projects_dir.is_dir():
        return

    for project_dir in projects_dir.iterdir():
        if not project_dir.is_dir():
            continue

        for item in project_dir.iterdir():
            if not item.name.endswith(TRANSCRIPT_SUFFIX):
                continue
            try:
                stat = item.stat()
            except OSError:
                # Removed between listing and stat
                continue
            yield SessionFileInfo(file_path=item, mtime=stat.st_mtime)


def find_latest_session(projects_dir: Path | None = None) -> Path | None:
    """Find the most recently modified transcript across all projects.

    Ties on modification time go to whichever file is scanned last, so the
    result depends on directory listing order in that case.

    Args:
        projects_dir: Root directory holding one subdirectory per project.

    Returns:
        Path to the latest transcript, or None if the directory is missing
        or holds no transcripts.
    """
    latest: SessionFileInfo | None = None
    for info in scan_session_files(projects_dir):
        if latest is None or info.mtime >= latest.mtime:
            latest = info
    return latest.file_path if latest else None
