"""Helpers shared by the problem schemas.

Pydantic has no ``flatten`` switch for nested models, so models that embed
another model's fields at their own level serialize normally and then lift
the nested object's keys into the parent dict.
"""

from typing import Any


def flatten_field(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Replace ``data[key]`` with its own key/value pairs.

    The nested value must have serialized to a mapping whose keys are not
    already present in ``data``. A missing or ``None`` value is dropped.

    Raises:
        TypeError: the nested value did not serialize to an object.
        ValueError: a nested key collides with a key of the parent.
    """
    nested = data.pop(key, None)
    if nested is None:
        return data
    if not isinstance(nested, dict):
        raise TypeError(f"{key!r} must serialize to an object, got {type(nested).__name__}")

    collisions = data.keys() & nested.keys()
    if collisions:
        raise ValueError(f"{key!r} fields collide with reserved fields: {sorted(collisions)}")

    data.update(nested)
    return data
