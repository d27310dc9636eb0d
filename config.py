# config.py
import os

SCREEN_W = 800
SCREEN_H = 800
WINDOW_TITLE = "2D Transformations - Console Input"

# Animation
TOTAL_STEPS = 120            # frames 0..TOTAL_STEPS are all rendered
FRAME_DELAY_MS = 16          # ~60 fps, oversleep is not compensated

# Starting shape (equilateral triangle around the origin)
INITIAL_VERTICES = [
    (0.0, 100.0),
    (-86.6, -50.0),
    (86.6, -50.0)
]

# Colors (normalized floats 0..1)
BACKGROUND = (0.1, 0.15, 0.2)
AXIS_COLOR = (0.3, 0.3, 0.3)
POLYGON_COLOR = (0.2, 0.6, 1.0)

# Logging
LOG_LEVEL = os.environ.get("TRANSFORM_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
