import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from spriteframes.kernel.preset import DecoderSettings


class DecodeError(Exception):
    pass


class MissingFieldError(DecodeError, KeyError):
    def __init__(self, path: str) -> None:
        super().__init__(f'missing required field: {path}')
        self.path = path

    def __str__(self) -> str:
        # KeyError quotes its message otherwise
        return str(self.args[0])


class MalformedReferenceError(DecodeError, ValueError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'malformed reference at {path}: {reason}')
        self.path = path
        self.reason = reason


class UnknownDirectionError(DecodeError, ValueError):
    def __init__(self, tag: str, direction: str) -> None:
        super().__init__(f'unknown direction {direction!r} for tag {tag}')
        self.tag = tag
        self.direction = direction


@contextmanager
def direction_check(cfg: DecoderSettings) -> Iterator[None]:
    try:
        yield
    except UnknownDirectionError as exc:
        if cfg.errors == 'strict':
            raise
        getattr(cfg, 'logger', logging).warning(f'{exc}, playing forward')


def fetch(data: Mapping[str, Any], key: str, path: str = '') -> Any:
    path = f'{path}.{key}' if path else key
    if not isinstance(data, Mapping):
        raise MalformedReferenceError(path, f'expected an object, got {type(data).__name__}')
    if key not in data:
        raise MissingFieldError(path)
    return data[key]


def fetch_list(data: Mapping[str, Any], key: str, path: str = '') -> Sequence[Any]:
    value = fetch(data, key, path)
    if not isinstance(value, list | tuple):
        full = f'{path}.{key}' if path else key
        raise MalformedReferenceError(full, f'expected a list, got {type(value).__name__}')
    return value


def fetch_int(data: Mapping[str, Any], key: str, path: str = '') -> int:
    value = fetch(data, key, path)
    if isinstance(value, bool) or not isinstance(value, int):
        full = f'{path}.{key}' if path else key
        raise MalformedReferenceError(full, f'expected an integer, got {value!r}')
    return value
