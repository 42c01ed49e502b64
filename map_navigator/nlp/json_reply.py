"""Locate and decode the JSON object inside a language model reply.

Models often wrap the requested JSON in prose or a Markdown fence. The
scanner below returns the first balanced ``{...}`` fragment, tracking
string literals so braces inside values do not end the match early.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..domain.errors import PARSE_ERROR_MESSAGE, ParseError


def _balanced_end(text: str, start: int) -> Optional[int]:
    """Index of the brace closing the object opened at ``start``, if any."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def find_json_object(text: str) -> Optional[str]:
    """Return the first balanced ``{...}`` fragment of ``text``, or None."""
    start = text.find("{")
    while start != -1:
        end = _balanced_end(text, start)
        if end is not None:
            return text[start : end + 1]
        start = text.find("{", start + 1)
    return None


def parse_json_object(text: str) -> Dict[str, Any]:
    """Decode the first JSON object embedded in ``text``.

    Raises:
        ParseError: If no balanced fragment exists or it is not a valid
            JSON object.
    """
    fragment = find_json_object(text or "")
    if fragment is None:
        raise ParseError(PARSE_ERROR_MESSAGE, reply=text)

    try:
        value = json.loads(fragment)
    except json.JSONDecodeError as e:
        raise ParseError(PARSE_ERROR_MESSAGE, cause=e, reply=text)

    if not isinstance(value, dict):
        raise ParseError(PARSE_ERROR_MESSAGE, reply=text)
    return value
