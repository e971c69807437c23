from dataclasses import replace
from types import MappingProxyType

from spriteframes.aseprite.anim import Animation, AnimationFrame


def mirror_frame(frame: AnimationFrame) -> AnimationFrame:
    return replace(
        frame,
        flip_horizontally=not frame.flip_horizontally,
        slices=MappingProxyType(
            {name: bounds.flip_x(frame.w) for name, bounds in frame.slices.items()},
        ),
    )


def mirror_horizontally(animation: Animation) -> Animation:
    """Return a copy of `animation` drawn mirrored, slices included."""
    return Animation(tuple(mirror_frame(frame) for frame in animation.frames))
