import logging
import os
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from spriteframes.aseprite.element import (
    MalformedReferenceError,
    UnknownDirectionError,
    direction_check,
    fetch,
    fetch_int,
    fetch_list,
)
from spriteframes.aseprite.frames import RawFrame, Rect, check_frame_index, read_frames
from spriteframes.aseprite.schema import DIRECTIONS, PINGPONG
from spriteframes.aseprite.slices import SliceTable, read_slices, slice_bounds_for_frame
from spriteframes.kernel.fileio import read_json
from spriteframes.kernel.keys import normalize_keys
from spriteframes.kernel.preset import DecoderSettings, aseprite

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnimationFrame:
    image_path: str
    w: int
    h: int
    tile_rect: Rect
    flip_horizontally: bool
    duration_ticks: int
    slices: Mapping[str, Rect]


@dataclass(frozen=True, slots=True)
class Animation:
    frames: tuple[AnimationFrame, ...]

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError('animation needs at least one frame')

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[AnimationFrame]:
        return iter(self.frames)


AnimationSet = dict[str, Animation]


def direction_indices(length: int, direction: str) -> list[int]:
    """Positions into a tag's forward frame list in playback order.

    `pingpong` plays forward and then back through the interior frames,
    without repeating either end: four frames play as 0,1,2,3,2,1.
    Any other direction plays forward.
    """
    forward = list(range(length))
    if direction == PINGPONG:
        return forward + list(range(length - 2, 0, -1))
    return forward


def sprite_path(document: Mapping[str, Any], document_path: str | os.PathLike[str]) -> str:
    image = str(fetch(fetch(document, 'meta'), 'image', 'meta'))
    document_path = os.fspath(document_path)
    # directory prefix kept up to and including the last separator
    cut = max(document_path.rfind(sep) for sep in {os.sep, '/'}) + 1
    return document_path[:cut] + image


def build_frame(
    path: str,
    raw: RawFrame,
    frame_index: int,
    slices: SliceTable,
) -> AnimationFrame:
    rect = raw.rect
    return AnimationFrame(
        image_path=path,
        w=rect.w,
        h=rect.h,
        tile_rect=rect,
        flip_horizontally=False,
        duration_ticks=raw.duration_ticks,
        slices=MappingProxyType(slice_bounds_for_frame(slices, frame_index, rect.h)),
    )


def read_tag(
    tag_data: Mapping[str, Any],
    path: str,
    image_path: str,
    frames: Sequence[RawFrame],
    slices: SliceTable,
    cfg: DecoderSettings = aseprite,
) -> tuple[str, Animation]:
    name = str(fetch(tag_data, 'name', path))
    start = fetch_int(tag_data, 'from', path)
    end = fetch_int(tag_data, 'to', path)
    direction = str(fetch(tag_data, 'direction', path))

    if start > end:
        raise MalformedReferenceError(path, f'tag {name} ends before it starts ({start} > {end})')
    check_frame_index(frames, start, f'{path}.from')
    check_frame_index(frames, end, f'{path}.to')

    tag_frames = [
        build_frame(image_path, frames[idx], idx, slices)
        for idx in range(start, end + 1)
    ]

    with direction_check(cfg):
        if direction not in DIRECTIONS:
            raise UnknownDirectionError(name, direction)

    order = direction_indices(len(tag_frames), direction)
    return name, Animation(tuple(tag_frames[pos] for pos in order))


def decode_document(
    document: Mapping[str, Any],
    document_path: str | os.PathLike[str],
    cfg: DecoderSettings = aseprite,
) -> AnimationSet:
    """Decode an already parsed Aseprite sheet data document.

    `document_path` is only used to resolve the sheet image, which is
    expected next to the data file.
    """
    document = normalize_keys(document)
    image_path = sprite_path(document, document_path)
    frames = read_frames(document, cfg)
    slices = read_slices(document)

    animations: AnimationSet = {}
    for idx, tag_data in enumerate(fetch_list(fetch(document, 'meta'), 'frameTags', 'meta')):
        name, animation = read_tag(
            tag_data,
            f'meta.frameTags[{idx}]',
            image_path,
            frames,
            slices,
            cfg,
        )
        if name in animations:
            getattr(cfg, 'logger', logging).warning(
                f'duplicate tag {name}, keeping the last one',
            )
        animations[name] = animation

    logger.debug(
        'decoded %d animations from %d frames and %d slices',
        len(animations),
        len(frames),
        len(slices),
    )
    return animations


def decode(
    document_path: str | os.PathLike[str],
    cfg: DecoderSettings = aseprite,
) -> AnimationSet:
    return decode_document(read_json(document_path), document_path, cfg)
