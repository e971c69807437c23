# Fields read from an Aseprite "Export Sprite Sheet" data file exported as
# *Array* with *Tags* and *Slices* enabled. Anything else is ignored.

RECT = ('x', 'y', 'w', 'h')

PINGPONG = 'pingpong'
DIRECTIONS = frozenset({'forward', PINGPONG})
