__all__ = (
    'Animation',
    'AnimationFrame',
    'AnimationSet',
    'DecodeError',
    'MalformedReferenceError',
    'MissingFieldError',
    'Sprite',
    'decode',
    'decode_document',
    'mirror_horizontally',
    'project_to_sprites',
    'read_as_sprites',
)

from spriteframes.aseprite.anim import (
    Animation,
    AnimationFrame,
    AnimationSet,
    decode,
    decode_document,
)
from spriteframes.aseprite.element import (
    DecodeError,
    MalformedReferenceError,
    MissingFieldError,
)
from spriteframes.aseprite.mirror import mirror_horizontally
from spriteframes.aseprite.sprites import Sprite, project_to_sprites, read_as_sprites
