from collections.abc import Mapping
from typing import Any


def normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bytes | bytearray):
        return bytes(key).decode('utf-8')
    return str(key)


def normalize_keys(value: Any) -> Any:
    """Return a copy of a parsed document with every mapping key as `str`.

    Mappings and lists/tuples are walked recursively, anything else is
    returned as is. Normalizing an already normalized document is a no-op.
    """
    if isinstance(value, Mapping):
        return {normalize_key(key): normalize_keys(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [normalize_keys(item) for item in value]
    return value
