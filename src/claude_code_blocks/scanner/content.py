"""Formatting helpers for code block listings."""

PREVIEW_WIDTH = 50


def count_lines(code: str) -> int:
    """Return the number of lines in a code block, counting an empty block as one line."""
    return len(code.split("\n"))


def format_preview(code: str, width: int = PREVIEW_WIDTH) -> str:
    """Return the first non-blank line of code, truncated to width characters.

    Truncated previews end with "..." so the listing shows that more text follows.
    """
    preview = next((line for line in code.split("\n") if line.strip()), "")
    if len(preview) > width:
        return preview[:width] + "..."
    return preview
