import bisect
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from spriteframes.aseprite.element import (
    MalformedReferenceError,
    fetch,
    fetch_int,
    fetch_list,
)
from spriteframes.aseprite.frames import Rect, read_rect


@dataclass(frozen=True, slots=True)
class SliceKey:
    frame: int
    bounds: Rect


SliceTable = Mapping[str, Sequence[SliceKey]]


def read_slice_keys(slice_data: Mapping[str, Any], path: str) -> Sequence[SliceKey]:
    keys = []
    for idx, key_data in enumerate(fetch_list(slice_data, 'keys', path)):
        key_path = f'{path}.keys[{idx}]'
        key = SliceKey(
            fetch_int(key_data, 'frame', key_path),
            read_rect(fetch(key_data, 'bounds', key_path), f'{key_path}.bounds'),
        )
        if keys and key.frame < keys[-1].frame:
            raise MalformedReferenceError(
                f'{key_path}.frame',
                f'keys out of order, frame {key.frame} after {keys[-1].frame}',
            )
        keys.append(key)
    return tuple(keys)


def read_slices(document: Mapping[str, Any]) -> SliceTable:
    """Collect slice keys by slice name.

    Keys of each slice must be sorted by frame index, since bounds for a
    frame come from the last key at or before it.
    """
    meta = fetch(document, 'meta')
    slices: dict[str, Sequence[SliceKey]] = {}
    for idx, slice_data in enumerate(fetch_list(meta, 'slices', 'meta')):
        path = f'meta.slices[{idx}]'
        name = str(fetch(slice_data, 'name', path))
        slices[name] = read_slice_keys(slice_data, path)
    return slices


def find_slice_key(keys: Sequence[SliceKey], frame_index: int) -> SliceKey | None:
    pos = bisect.bisect_right(keys, frame_index, key=attrgetter('frame'))
    return keys[pos - 1] if pos else None


def slice_bounds_for_frame(
    slices: SliceTable,
    frame_index: int,
    frame_height: int,
) -> dict[str, Rect]:
    bounds = {}
    for name, keys in slices.items():
        key = find_slice_key(keys, frame_index)
        if key is None:
            raise MalformedReferenceError(
                f'slice {name}',
                f'no key at or before frame {frame_index}',
            )
        # Aseprite counts y from the top, the renderer from the bottom
        bounds[name] = key.bounds.flip_y(frame_height)
    return bounds
