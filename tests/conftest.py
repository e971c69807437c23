import copy
import json

import pytest


WALK_SHEET = {
    'frames': [
        {'filename': 'walk 0.aseprite', 'frame': {'x': 0, 'y': 0, 'w': 16, 'h': 16}, 'duration': 100},
        {'filename': 'walk 1.aseprite', 'frame': {'x': 16, 'y': 0, 'w': 16, 'h': 16}, 'duration': 100},
        {'filename': 'walk 2.aseprite', 'frame': {'x': 32, 'y': 0, 'w': 16, 'h': 16}, 'duration': 100},
    ],
    'meta': {
        'app': 'https://www.aseprite.org/',
        'image': 'walk.png',
        'size': {'w': 48, 'h': 16},
        'frameTags': [
            {'name': 'walk', 'from': 0, 'to': 2, 'direction': 'forward'},
        ],
        'slices': [
            {
                'name': 'hitbox',
                'color': '#0000ffff',
                'keys': [{'frame': 0, 'bounds': {'x': 2, 'y': 2, 'w': 4, 'h': 4}}],
            },
        ],
    },
}


def _make_sheet(
    nframes: int,
    tags: list[dict],
    slices: list[dict] | None = None,
    w: int = 8,
    h: int = 8,
) -> dict:
    return {
        'frames': [
            {'frame': {'x': idx * w, 'y': 0, 'w': w, 'h': h}, 'duration': 100 + idx * 50}
            for idx in range(nframes)
        ],
        'meta': {
            'image': 'sheet.png',
            'frameTags': tags,
            'slices': slices or [],
        },
    }


@pytest.fixture
def walk_sheet() -> dict:
    return copy.deepcopy(WALK_SHEET)


@pytest.fixture
def make_sheet():
    return _make_sheet


@pytest.fixture
def write_sheet(tmp_path):
    def write(document: dict, name: str = 'sheet.json') -> str:
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return str(path)

    return write
