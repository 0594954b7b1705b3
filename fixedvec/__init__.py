"""Fixed-size 2D to 6D vectors over numpy scalar types.

    >>> from fixedvec import Vec3, vec3i
    >>> print(Vec3(1.0, 2.0, 3.0).magnitude())
    3.7416573867739413
    >>> vec3i(1, 0, 0).cross(vec3i(0, 1, 0)).tolist()
    [0, 0, 1]
"""

from .config import DEFAULT_DTYPE, SUPPORTED_DTYPES
from .errors import FixedVecError, IndexOutOfRange, UnsupportedDTypeError
from .vector import Vector, vector_class
from .dimensions import Vec2, Vec3, Vec4, Vec5, Vec6
from .aliases import *  # noqa: F401,F403
from . import aliases

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    "FixedVecError",
    "IndexOutOfRange",
    "UnsupportedDTypeError",
    "Vector",
    "vector_class",
    "Vec2",
    "Vec3",
    "Vec4",
    "Vec5",
    "Vec6",
    *aliases.__all__,
]
