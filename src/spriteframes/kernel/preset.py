from dataclasses import dataclass, replace
from typing import Any, Literal, Self

ErrorPolicy = Literal['strict', 'ignore']


@dataclass(frozen=True)
class _DefaultOverride:
    def __call__(self, **kwargs: Any) -> Self:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DecoderSettings(_DefaultOverride):
    # 50ms = 3 ticks
    tick_ms: int = 50
    ticks_per_step: int = 3
    errors: ErrorPolicy = 'ignore'


aseprite = DecoderSettings()
