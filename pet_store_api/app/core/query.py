"""
Decoding of bracket‑notation query strings.

Browsers and many HTTP clients serialise structured query parameters
with brackets::

    russianDoll[name]=a&russianDoll[nestedDoll][name]=b
    tags[0]=cute&tags[1]=gentle
    tags[]=cute&tags[]=gentle

FastAPI only exposes flat key/value pairs, so ``parse_nested_query``
rebuilds the nested structure: bracket segments become dict keys,
numeric or empty segments become list items, and a plain key repeated
several times becomes a list of its values.  Segments nested deeper
than ``max_depth`` are kept together as one literal key.
"""

import re
from typing import Any, Dict, Iterable, List, Tuple

from fastapi import Request

from .config import settings

_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


def split_key(key: str, max_depth: int) -> List[str]:
    """Split ``a[b][c]`` into ``["a", "b", "c"]``.

    Keys that do not start with a plain name, or that contain text
    between bracket groups, are returned unsplit.
    """
    open_at = key.find("[")
    if open_at <= 0:
        return [key]

    segments = [key[:open_at]]
    pos = open_at
    while pos < len(key):
        match = _SEGMENT.match(key, pos)
        if match is None:
            return [key]
        if len(segments) > max_depth:
            segments.append(key[pos:])
            break
        segments.append(match.group(1))
        pos = match.end()
    return segments


def _assign(container: Dict[str, Any], segments: List[str], value: str) -> None:
    head, rest = segments[0], segments[1:]
    if head == "":
        head = str(len(container))

    if not rest:
        existing = container.get(head)
        if existing is None:
            container[head] = value
        elif isinstance(existing, list):
            existing.append(value)
        elif isinstance(existing, str):
            container[head] = [existing, value]
        else:
            container[head] = value
        return

    child = container.get(head)
    if not isinstance(child, dict):
        child = {}
        container[head] = child
    _assign(child, rest, value)


def _is_index(key: str) -> bool:
    # str.isdigit also accepts characters such as "²" that int() rejects.
    return key.isascii() and key.isdigit()


def _finalise(node: Any) -> Any:
    if isinstance(node, list):
        return [_finalise(item) for item in node]
    if not isinstance(node, dict):
        return node
    node = {key: _finalise(value) for key, value in node.items()}
    if node and all(_is_index(key) for key in node):
        return [node[key] for key in sorted(node, key=int)]
    return node


def parse_nested_query(items: Iterable[Tuple[str, str]], max_depth: int = 20) -> Dict[str, Any]:
    """Build a nested dict from flat ``(key, value)`` query pairs."""
    root: Dict[str, Any] = {}
    for key, value in items:
        _assign(root, split_key(key, max_depth), value)
    return {key: _finalise(value) for key, value in root.items()}


async def nested_query(request: Request) -> Dict[str, Any]:
    """FastAPI dependency returning the decoded query string of ``request``."""
    return parse_nested_query(request.query_params.multi_items(), settings.query_max_depth)


def bracket_values(items: Iterable[Tuple[str, str]], name: str, max_depth: int = 20) -> List[str]:
    """Return the values of every bracket‑form key rooted at ``name``.

    ``tags[0]=a&tags[]=b&tags[x][y]=c`` gives ``["a", "b", "c"]`` for
    ``name="tags"``.  Plain ``name=value`` pairs are not included.
    """
    values = []
    for key, value in items:
        segments = split_key(key, max_depth)
        if len(segments) > 1 and segments[0] == name:
            values.append(value)
    return values
