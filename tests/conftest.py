"""Pytest configuration and shared fixtures."""

import json
import os
import subprocess
from pathlib import Path

import pytest

from claude_code_blocks.clipboard import XCLIP


def assistant_record(*texts: str, extra_blocks: list | None = None) -> dict:
    """Build an assistant transcript record with one text block per text."""
    content = [{"type": "text", "text": t} for t in texts]
    if extra_blocks:
        content.extend(extra_blocks)
    return {
        "type": "assistant",
        "message": {"role": "assistant", "content": content},
    }


def user_record(text: str) -> dict:
    """Build a user transcript record."""
    return {
        "type": "user",
        "message": {"role": "user", "content": [{"type": "text", "text": text}]},
    }


def write_transcript(path: Path, records: list, mtime: float | None = None) -> Path:
    """Write records as JSONL; strings are written as raw lines."""
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def projects_dir(tmp_path):
    """Return an empty projects directory."""
    root = tmp_path / "projects"
    root.mkdir()
    return root


@pytest.fixture
def clipboard_calls(monkeypatch):
    """Replace subprocess.run in the clipboard module and record each call."""
    calls = []

    def fake_run(argv, input=None, check=False, **kwargs):
        calls.append({"argv": list(argv), "input": input.decode("utf-8")})
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr("claude_code_blocks.clipboard.subprocess.run", fake_run)
    monkeypatch.setattr(
        "claude_code_blocks.clipboard.detect_clipboard_commands",
        lambda: [XCLIP],
    )
    return calls
