"""RFC 6901 JSON pointers."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any


def escape_token(token: str | int) -> str:
    """Escape one reference token (``~`` -> ``~0``, ``/`` -> ``~1``)."""
    return str(token).replace("~", "~0").replace("/", "~1")


def to_json_pointer(parts: Iterable[str | int]) -> str:
    """Build a JSON pointer from object keys and array indices.

    >>> to_json_pointer(["items", 0, "a/b"])
    '/items/0/a~1b'

    No parts means the whole document, which is the empty pointer ``""``.
    """
    return "".join(f"/{escape_token(part)}" for part in parts)


def document_path(document: Any, loc: Sequence[str | int]) -> list[str | int]:
    """Keep the parts of a pydantic error location that address ``document``.

    Pydantic mixes union member and discriminator tags into ``loc``
    (``("value", "int")``, ``("pet", "cat", "meow")``). A part is kept only
    when it is a key or index of the current node. A missing key in the last
    position is kept too, since it names the absent member.

    >>> document_path({"pet": {"kind": "cat"}}, ["pet", "cat", "meow"])
    ['pet', 'meow']
    """
    path: list[str | int] = []
    node = document
    for position, part in enumerate(loc):
        if isinstance(node, Mapping) and isinstance(part, str):
            if part in node:
                node = node[part]
                path.append(part)
            elif position == len(loc) - 1:
                path.append(part)
        elif (
            isinstance(node, Sequence)
            and not isinstance(node, str | bytes)
            and isinstance(part, int)
            and 0 <= part < len(node)
        ):
            node = node[part]
            path.append(part)
    return path
