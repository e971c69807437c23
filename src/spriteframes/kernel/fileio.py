import json
import os
from typing import Any

import numpy as np


def read_file(file_path: str | os.PathLike[str]) -> bytes:
    return np.fromfile(file_path, dtype='u1').tobytes()


def read_json(file_path: str | os.PathLike[str]) -> Any:
    return json.loads(read_file(file_path))
