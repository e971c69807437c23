import os
from collections.abc import Iterator

import numpy as np
from PIL import Image

from spriteframes.aseprite.anim import Animation, AnimationFrame
from spriteframes.aseprite.frames import Rect
from spriteframes.aseprite.sprites import Sprite

TImage = Image.Image


def load_sheet(path: str | os.PathLike[str]) -> TImage:
    with Image.open(path) as im:
        return im.convert('RGBA')


def crop_tile(sheet: TImage, tile: Rect, flip_horizontally: bool = False) -> TImage:
    if tile.x < 0 or tile.y < 0 or tile.x + tile.w > sheet.width or tile.y + tile.h > sheet.height:
        raise ValueError(f'tile {tile.astuple()} outside of {sheet.width}x{sheet.height} sheet')
    npp = np.asarray(sheet)[tile.y : tile.y + tile.h, tile.x : tile.x + tile.w]
    if flip_horizontally:
        npp = np.fliplr(npp)
    return Image.fromarray(np.ascontiguousarray(npp))


def crop_frame(sheet: TImage, frame: AnimationFrame) -> TImage:
    return crop_tile(sheet, frame.tile_rect, frame.flip_horizontally)


def crop_sprite(sheet: TImage, sprite: Sprite) -> TImage:
    tile = Rect(sprite.tile_x, sprite.tile_y, sprite.tile_w, sprite.tile_h)
    return crop_tile(sheet, tile, sprite.flip_horizontally)


def animation_images(animation: Animation, sheet: TImage | None = None) -> Iterator[TImage]:
    cache: dict[str, TImage] = {}
    for frame in animation.frames:
        im = sheet
        if im is None:
            if frame.image_path not in cache:
                cache[frame.image_path] = load_sheet(frame.image_path)
            im = cache[frame.image_path]
        yield crop_frame(im, frame)
