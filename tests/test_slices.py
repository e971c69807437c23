import pytest

from spriteframes.aseprite.element import MalformedReferenceError, MissingFieldError
from spriteframes.aseprite.frames import Rect
from spriteframes.aseprite.slices import (
    SliceKey,
    find_slice_key,
    read_slices,
    slice_bounds_for_frame,
)


def slice_data(name, *keys):
    return {
        'name': name,
        'keys': [
            {'frame': frame, 'bounds': dict(zip('xywh', bounds, strict=True))}
            for frame, bounds in keys
        ],
    }


@pytest.fixture
def document(make_sheet):
    return make_sheet(
        4,
        [],
        [
            slice_data('hitbox', (0, (0, 0, 2, 2)), (2, (1, 1, 4, 4))),
            slice_data('pivot', (0, (3, 5, 1, 1))),
        ],
        h=16,
    )


class TestReadSlices:
    def test_table(self, document):
        slices = read_slices(document)
        assert slices == {
            'hitbox': (SliceKey(0, Rect(0, 0, 2, 2)), SliceKey(2, Rect(1, 1, 4, 4))),
            'pivot': (SliceKey(0, Rect(3, 5, 1, 1)),),
        }

    def test_no_slices(self, make_sheet):
        assert read_slices(make_sheet(1, [])) == {}

    def test_missing_slices(self, document):
        del document['meta']['slices']
        with pytest.raises(MissingFieldError) as exc:
            read_slices(document)
        assert exc.value.path == 'meta.slices'

    def test_missing_keys(self, document):
        del document['meta']['slices'][1]['keys']
        with pytest.raises(MissingFieldError) as exc:
            read_slices(document)
        assert exc.value.path == 'meta.slices[1].keys'

    def test_keys_out_of_order(self, document):
        document['meta']['slices'][0]['keys'].reverse()
        with pytest.raises(MalformedReferenceError):
            read_slices(document)


class TestSliceBounds:
    def test_last_key_applies(self, document):
        slices = read_slices(document)
        keys = slices['hitbox']
        assert find_slice_key(keys, 0).frame == 0
        assert find_slice_key(keys, 1).frame == 0
        assert find_slice_key(keys, 2).frame == 2
        assert find_slice_key(keys, 3).frame == 2

    def test_y_flipped_against_frame_height(self, document):
        slices = read_slices(document)
        assert slice_bounds_for_frame(slices, 1, 16) == {
            'hitbox': Rect(0, 14, 2, 2),
            'pivot': Rect(3, 10, 1, 1),
        }
        assert slice_bounds_for_frame(slices, 3, 16)['hitbox'] == Rect(1, 11, 4, 4)

    def test_flip_top_edge(self):
        slices = {'box': (SliceKey(0, Rect(0, 0, 4, 10)),)}
        assert slice_bounds_for_frame(slices, 0, 32)['box'].y == 22

    def test_no_key_before_frame(self):
        slices = {'late': (SliceKey(2, Rect(0, 0, 1, 1)),)}
        assert find_slice_key(slices['late'], 1) is None
        with pytest.raises(MalformedReferenceError):
            slice_bounds_for_frame(slices, 0, 8)
