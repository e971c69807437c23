from collections.abc import Mapping, Sequence
from dataclasses import astuple, dataclass, replace
from typing import Any, Self

from spriteframes.aseprite.element import (
    MalformedReferenceError,
    fetch,
    fetch_int,
    fetch_list,
)
from spriteframes.aseprite.schema import RECT
from spriteframes.kernel.preset import DecoderSettings, aseprite


@dataclass(frozen=True, slots=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    def astuple(self) -> tuple[int, int, int, int]:
        return astuple(self)

    def flip_y(self, height: int) -> Self:
        return replace(self, y=height - self.y - self.h)

    def flip_x(self, width: int) -> Self:
        return replace(self, x=width - self.x - self.w)


@dataclass(frozen=True, slots=True)
class RawFrame:
    rect: Rect
    duration_ticks: int


def read_rect(data: Mapping[str, Any], path: str) -> Rect:
    return Rect(*(fetch_int(data, key, path) for key in RECT))


def quantize_duration(duration_ms: int, cfg: DecoderSettings = aseprite) -> int:
    """Round a duration in milliseconds down to whole runtime ticks.

    With the default settings 50ms are 3 ticks, so 149ms become 6 ticks
    and 150ms become 9.
    """
    if duration_ms < 0:
        raise ValueError(f'negative duration: {duration_ms}')
    return duration_ms // cfg.tick_ms * cfg.ticks_per_step


def read_frames(
    document: Mapping[str, Any],
    cfg: DecoderSettings = aseprite,
) -> Sequence[RawFrame]:
    frames = []
    for idx, frame_data in enumerate(fetch_list(document, 'frames')):
        path = f'frames[{idx}]'
        rect = read_rect(fetch(frame_data, 'frame', path), f'{path}.frame')
        duration_ms = fetch_int(frame_data, 'duration', path)
        if duration_ms < 0:
            raise MalformedReferenceError(f'{path}.duration', 'negative duration')
        frames.append(RawFrame(rect, quantize_duration(duration_ms, cfg)))
    return tuple(frames)


def check_frame_index(frames: Sequence[RawFrame], index: int, path: str) -> int:
    if not 0 <= index < len(frames):
        raise MalformedReferenceError(
            path,
            f'frame {index} out of range, sheet has {len(frames)} frames',
        )
    return index
