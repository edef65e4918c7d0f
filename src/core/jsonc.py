"""JSONC parser - JSON with Comments support.

TIER 0: No internal imports, only Python stdlib.
"""

import json
from typing import Any


def _scan(content: str, *, drop_trailing_commas: bool) -> str:
    """Copy content, skipping comments (and optionally trailing commas).

    String literals are copied verbatim, so "//" or "," inside a string
    are never touched.
    """
    out: list[str] = []
    i = 0
    n = len(content)

    while i < n:
        char = content[i]

        if char == '"':
            # Copy the whole string literal, honouring escapes
            j = i + 1
            while j < n and content[j] != '"':
                j += 2 if content[j] == "\\" else 1
            out.append(content[i : j + 1])
            i = j + 1
            continue

        if content.startswith("//", i):
            newline = content.find("\n", i)
            i = n if newline == -1 else newline
            continue

        if content.startswith("/*", i):
            end = content.find("*/", i + 2)
            i = n if end == -1 else end + 2
            continue

        if drop_trailing_commas and char == ",":
            j = i + 1
            while j < n and content[j] in " \t\r\n":
                j += 1
            if j < n and content[j] in "]}":
                i += 1
                continue

        out.append(char)
        i += 1

    return "".join(out)


def strip_comments(content: str) -> str:
    """Strip // and /* */ comments from JSONC content.

    Args:
        content: JSONC content with comments.

    Returns:
        Content without comments (trailing commas kept).
    """
    return _scan(content, drop_trailing_commas=False)


def parse_jsonc(content: str) -> Any:
    """Parse JSONC content.

    Comments and trailing commas are removed before json.loads().

    Raises:
        json.JSONDecodeError: If the remaining content is not valid JSON.
    """
    return json.loads(_scan(content, drop_trailing_commas=True))
