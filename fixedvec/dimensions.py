import numpy as np

from .vector import Vector

# Rotations of (x, y, z) used by the 3D cross product.
_YZX = [1, 2, 0]
_ZXY = [2, 0, 1]


def _planar_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.array([a[1] * b[0] - a[0] * b[1], a[0] * b[1] - a[1] * b[0]], dtype=a.dtype)


def _spatial_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    # Components past z are plain elementwise products.
    out = a * b
    out[:3] = a[_YZX] * b[_ZXY] - a[_ZXY] * b[_YZX]
    return out


def _component(index: int) -> property:
    def getter(self: Vector) -> np.generic:
        return self._data[index]

    return property(getter, doc=f"Component {index}, read-only; assign through v[{index}].")


class Vec2(Vector, size=2):
    __slots__ = ()

    x = _component(0)
    y = _component(1)

    _cross = staticmethod(_planar_cross)


class Vec3(Vector, size=3):
    __slots__ = ()

    x = _component(0)
    y = _component(1)
    z = _component(2)

    _cross = staticmethod(_spatial_cross)


class Vec4(Vector, size=4):
    __slots__ = ()

    x = _component(0)
    y = _component(1)
    z = _component(2)
    w = _component(3)

    _cross = staticmethod(_spatial_cross)


class Vec5(Vector, size=5):
    __slots__ = ()

    x = _component(0)
    y = _component(1)
    z = _component(2)
    w = _component(3)
    v = _component(4)

    _cross = staticmethod(_spatial_cross)


class Vec6(Vector, size=6):
    __slots__ = ()

    x = _component(0)
    y = _component(1)
    z = _component(2)
    w = _component(3)
    v = _component(4)
    u = _component(5)

    _cross = staticmethod(_spatial_cross)
