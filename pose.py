# pose.py
import logging
import numpy as np
from config import INITIAL_VERTICES

log = logging.getLogger(__name__)

class PoseStore:
    """Original, base and current poses of the animated polygon.

    `original` is fixed at construction and only read by reset(). `base` is
    the pose the running animation interpolates away from, `current` is the
    live (rendered) pose.
    """

    def __init__(self, vertices=INITIAL_VERTICES):
        poly = [(float(x), float(y)) for x, y in vertices]
        if len(poly) < 3:
            raise ValueError("a polygon needs at least 3 vertices")
        self.original = tuple(poly)
        self.base = list(poly)
        self.current = list(poly)

    def __len__(self):
        return len(self.original)

    def snapshot_as_base(self):
        self.base = list(self.current)

    def reset(self):
        self.base = list(self.original)
        self.current = list(self.original)
        log.info("pose reset to original (%d vertices)", len(self))

    def vertices(self):
        """Copy of the live polygon."""
        return list(self.current)

    def update(self, polygon):
        if len(polygon) != len(self):
            raise ValueError(f"expected {len(self)} vertices, got {len(polygon)}")
        self.current = [(x, y) for x, y in polygon]

def to_array(polygon):
    """(N, 2) float32 copy of a polygon, for OpenGL vertex arrays."""
    return np.asarray(polygon, dtype=np.float32).reshape(-1, 2)
