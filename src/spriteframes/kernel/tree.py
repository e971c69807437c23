from collections.abc import Iterator, Mapping
from typing import TypeVar

from parse import parse  # type: ignore[import-untyped]

T = TypeVar('T')


def findall(pattern: str, root: Mapping[str, T] | None) -> Iterator[tuple[str, T]]:
    if not root:
        return
    for name, item in root.items():
        if parse(pattern, name, evaluate_result=False):
            yield name, item


def find(pattern: str, root: Mapping[str, T] | None) -> T | None:
    return next((item for _, item in findall(pattern, root)), None)


def select(pattern: str | None, root: Mapping[str, T]) -> dict[str, T]:
    if pattern is None:
        return dict(root)
    return dict(findall(pattern, root))
