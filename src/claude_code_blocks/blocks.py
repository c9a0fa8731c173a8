"""Fenced code block extraction from assistant reply text."""

import re

from .scanner.models import CodeBlock

DEFAULT_LANGUAGE = "text"

# Opening fence with an optional language tag directly attached, body up to the
# first closing fence. Unclosed fences never match.
_FENCE_PATTERN = re.compile(r"```(\w*)\n(.*?)```", re.DOTALL | re.ASCII)


def extract_code_blocks(text: str) -> list[CodeBlock]:
    """Extract fenced code blocks in the order they appear in text.

    A fence without a language tag is labelled "text". One trailing newline
    is removed from each body; any other trailing whitespace is kept.

    Example:
        >>> extract_code_blocks("```js\\nconsole.log(1)\\n```")
        [CodeBlock(language='js', code='console.log(1)')]
    """
    return [
        CodeBlock(
            language=match.group(1) or DEFAULT_LANGUAGE,
            code=match.group(2).removesuffix("\n"),
        )
        for match in _FENCE_PATTERN.finditer(text)
    ]
