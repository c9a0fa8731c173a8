"""Resolution of user selection tokens against extracted code blocks."""

import re
from dataclasses import dataclass

from .scanner.models import CodeBlock

ALL_TOKEN = "all"
LAST_TOKEN = "last"

_INDEX_PATTERN = re.compile(r"\d+", re.ASCII)


class InvalidSelectionError(ValueError):
    """Raised when a selection token names no block."""

    def __init__(self, token: str, block_count: int) -> None:
        self.token = token
        self.block_count = block_count
        super().__init__(f'Invalid selection. Pick 1-{block_count}, "{ALL_TOKEN}", or "{LAST_TOKEN}".')


@dataclass
class Selection:
    """What a selection token resolved to.

    For "all", index and block are None and code holds every block joined
    by a blank line.
    """

    code: str
    count: int
    index: int | None = None  # 1-based
    block: CodeBlock | None = None


def resolve_selection(token: str, blocks: list[CodeBlock]) -> Selection:
    """Resolve a selection token to the code it names.

    Args:
        token: "all", "last", or a 1-based block index.
        blocks: Extracted code blocks in document order.

    Returns:
        The resolved Selection.

    Raises:
        InvalidSelectionError: If the token is not a keyword or an index in range.
    """
    token = token.strip()
    count = len(blocks)

    if token == ALL_TOKEN and blocks:
        return Selection(code="\n\n".join(block.code for block in blocks), count=count)

    if token == LAST_TOKEN and blocks:
        return Selection(code=blocks[-1].code, count=count, index=count, block=blocks[-1])

    if _INDEX_PATTERN.fullmatch(token):
        index = int(token)
        if 1 <= index <= count:
            block = blocks[index - 1]
            return Selection(code=block.code, count=count, index=index, block=block)

    raise InvalidSelectionError(token, count)
