import io
import sys
from collections.abc import Mapping
from typing import IO

from spriteframes.aseprite.anim import Animation, AnimationFrame


def _attribs(attribs: Mapping[str, object]) -> str:
    return ''.join(f' {key}="{value}"' for key, value in attribs.items() if value is not None)


def render_frame(
    idx: int,
    frame: AnimationFrame,
    level: int = 0,
    stream: IO[str] = sys.stdout,
) -> None:
    attribs = {
        'index': idx,
        'tile': ','.join(map(str, frame.tile_rect.astuple())),
        'duration': frame.duration_ticks,
        'flip': 'h' if frame.flip_horizontally else None,
    }
    indent = '    ' * level
    closing = '' if frame.slices else ' /'
    print(f'{indent}<frame{_attribs(attribs)}{closing}>', file=stream)
    if frame.slices:
        for name, bounds in frame.slices.items():
            rect = ','.join(map(str, bounds.astuple()))
            print(f'{indent}    <slice{_attribs({"name": name, "bounds": rect})} />', file=stream)
        print(f'{indent}</frame>', file=stream)


def render(
    animations: Mapping[str, Animation],
    stream: IO[str] = sys.stdout,
) -> None:
    for name, animation in animations.items():
        attribs = {'name': name, 'frames': len(animation.frames)}
        print(f'<animation{_attribs(attribs)}>', file=stream)
        for idx, frame in enumerate(animation.frames):
            render_frame(idx, frame, level=1, stream=stream)
        print('</animation>', file=stream)


def renders(animations: Mapping[str, Animation]) -> str:
    with io.StringIO() as stream:
        render(animations, stream=stream)
        return stream.getvalue()
