"""Claude Code JSONL transcript parsing."""

from pathlib import Path
from typing import Any

import orjson


def is_assistant_record(record: Any) -> bool:
    """Check whether a parsed transcript line is an assistant message with content blocks.

    Claude Code writes one JSON object per line:
        {"type": "assistant", "message": {"role": "assistant", "content": [...]}, ...}
    User turns, summaries and system records use other type values.
    """
    if not isinstance(record, dict) or record.get("type") != "assistant":
        return False
    message = record.get("message")
    if not isinstance(message, dict):
        return False
    return message.get("role") == "assistant" and isinstance(message.get("content"), list)


def extract_text_parts(content: list) -> list[str]:
    """Return the non-empty text of every text-kind content block, in order."""
    parts = []
    for block in content:
        if not isinstance(block, dict) or block.get("type") != "text":
            continue
        text = block.get("text")
        if isinstance(text, str) and text:
            parts.append(text)
    return parts


def get_last_assistant_text(session_path: Path) -> str | None:
    """Get the text of the last assistant message in a transcript.

    Each line is parsed on its own; lines that are not valid JSON are
    skipped, since a transcript that is still being written can end with a
    partial line. Every assistant record replaces the previous result, so
    only the final one counts, even when it carries no text (for example a
    message that only calls tools).

    Args:
        session_path: Path to the JSONL transcript.

    Returns:
        The text blocks of the last assistant message joined with newlines,
        or None if there is no assistant message or it has no text.
    """
    data = session_path.read_bytes()

    last_text: str | None = None
    for line in data.strip().splitlines():
        try:
            record = orjson.loads(line)
        except orjson.JSONDecodeError:
            continue

        if is_assistant_record(record):
            last_text = "\n".join(extract_text_parts(record["message"]["content"]))

    return last_text or None
