# transform2d.py
import math
from dataclasses import dataclass
from typing import ClassVar, List, Tuple, Union

from states import Axis

Vertex = Tuple[float, float]
Polygon = List[Vertex]

def translate(points, tx, ty):
    return [(x + tx, y + ty) for (x, y) in points]

def rotate(points, angle_deg, origin=(0,0)):
    angle = math.radians(angle_deg)
    ox, oy = origin
    cos_a = math.cos(angle); sin_a = math.sin(angle)
    out = []
    for x, y in points:
        x -= ox; y -= oy
        xr = x * cos_a - y * sin_a
        yr = x * sin_a + y * cos_a
        out.append((xr + ox, yr + oy))
    return out

def scale(points, sx, sy=None, origin=(0,0)):
    if sy is None: sy = sx
    ox, oy = origin
    return [((x-ox) * sx + ox, (y-oy) * sy + oy) for x, y in points]

def shear(points, shx=0.0, shy=0.0):
    return [(x + shx*y, shy*x + y) for (x,y) in points]

def reflect(points, axis, factor=-1.0):
    """Multiply one coordinate by factor. -1 mirrors about the axis, 1 is identity.
    Axis.X keeps x and flips y; Axis.Y keeps y and flips x."""
    if axis == Axis.X:
        return [(x, y * factor) for (x, y) in points]
    return [(x * factor, y) for (x, y) in points]

# ----------------- transform specs -----------------

@dataclass(frozen=True)
class Translate:
    dx: float
    dy: float
    name: ClassVar[str] = "translate"

@dataclass(frozen=True)
class Scale:
    sx: float
    sy: float
    name: ClassVar[str] = "scale"

@dataclass(frozen=True)
class Rotate:
    degrees: float
    name: ClassVar[str] = "rotate"

@dataclass(frozen=True)
class Reflect:
    axis: Axis
    name: ClassVar[str] = "reflect"

    def __post_init__(self):
        # accepts the raw menu value (1/2) too; anything else raises ValueError
        object.__setattr__(self, 'axis', Axis(self.axis))

@dataclass(frozen=True)
class Shear:
    shx: float
    shy: float
    name: ClassVar[str] = "shear"

TransformSpec = Union[Translate, Scale, Rotate, Reflect, Shear]
TRANSFORM_KINDS = (Translate, Scale, Rotate, Reflect, Shear)

def clamp_progress(progress):
    return max(0.0, min(1.0, float(progress)))

def evaluate(spec: TransformSpec, base: Polygon, progress: float) -> Polygon:
    """Pose of `base` after `progress` (0..1) of the transform described by `spec`.

    Pure: the base polygon is never modified and the same inputs always give
    the same output. Progress 0 returns the base coordinates unchanged.

    Scale and Reflect interpolate the factor itself (1 -> sx, 1 -> -1) and
    apply it to the base, so intermediate frames differ from a straight
    lerp between start and end positions. Rotate interpolates the angle.
    """
    t = clamp_progress(progress)
    if isinstance(spec, Translate):
        return translate(base, spec.dx * t, spec.dy * t)
    if isinstance(spec, Scale):
        return scale(base, 1.0 + (spec.sx - 1.0) * t, 1.0 + (spec.sy - 1.0) * t)
    if isinstance(spec, Rotate):
        return rotate(base, spec.degrees * t)
    if isinstance(spec, Reflect):
        return reflect(base, spec.axis, 1.0 - 2.0 * t)
    if isinstance(spec, Shear):
        return shear(base, spec.shx * t, spec.shy * t)
    raise TypeError(f"unsupported transform spec: {spec!r}")
