import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from spriteframes.aseprite.anim import Animation, AnimationFrame, decode
from spriteframes.kernel.preset import DecoderSettings, aseprite


@dataclass(frozen=True, slots=True)
class Sprite:
    path: str
    w: int
    h: int
    tile_x: int
    tile_y: int
    tile_w: int
    tile_h: int
    flip_horizontally: bool = False
    duration: int = 0
    metadata: Mapping[str, Any] = field(default_factory=dict)


def to_sprite(frame: AnimationFrame) -> Sprite:
    tile = frame.tile_rect
    return Sprite(
        path=frame.image_path,
        w=frame.w,
        h=frame.h,
        tile_x=tile.x,
        tile_y=tile.y,
        tile_w=tile.w,
        tile_h=tile.h,
        flip_horizontally=frame.flip_horizontally,
        duration=frame.duration_ticks,
        metadata={'slices': dict(frame.slices)},
    )


def animation_to_sprites(animation: Animation) -> Sprite | list[Sprite]:
    sprites = [to_sprite(frame) for frame in animation.frames]
    return sprites[0] if len(sprites) == 1 else sprites


def project_to_sprites(
    animations: Mapping[str, Animation],
) -> dict[str, Sprite | list[Sprite]]:
    """Turn every animation into plain sprites.

    A tag with a single frame becomes a single sprite, any longer tag a
    list of sprites in playback order.
    """
    return {name: animation_to_sprites(animation) for name, animation in animations.items()}


def read_as_sprites(
    document_path: str | os.PathLike[str],
    cfg: DecoderSettings = aseprite,
) -> dict[str, Sprite | list[Sprite]]:
    return project_to_sprites(decode(document_path, cfg))
