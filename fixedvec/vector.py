import logging
import numbers
import operator
import threading
from typing import Any, ClassVar, Iterator, TextIO

import numpy as np

from . import kernels
from .config import DEFAULT_DTYPE, FLOAT_FORMAT, MAX_SIZE, MIN_SIZE, SEPARATOR, SUPPORTED_DTYPES
from .errors import IndexOutOfRange, UnsupportedDTypeError

logger = logging.getLogger(__name__)

_specialisation_lock = threading.Lock()


def resolve_dtype(dtype: Any) -> np.dtype:
    """Normalises anything numpy understands as a dtype and checks it is supported."""
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise UnsupportedDTypeError(dtype) from exc

    if resolved not in SUPPORTED_DTYPES:
        raise UnsupportedDTypeError(dtype)

    return resolved


def _coerce(value: Any, dtype: np.dtype) -> np.generic:
    # C-style cast: floats truncate, out of range integers wrap.
    return np.asarray(value).astype(dtype)[()]


def _promote(buffer: np.ndarray) -> np.ndarray:
    # Integers narrower than a C int are widened before products and squares.
    if buffer.dtype.kind in "iu" and buffer.dtype.itemsize < 4:
        return buffer.astype(np.int64)
    return buffer


class Vector:
    """A fixed-size vector over a numpy scalar type.

    Concrete sizes are declared by subclassing with ``size=N`` (see
    ``fixedvec.dimensions``). Each sized class is the float64 vector of that
    size; other element types are reached by subscription, ``Vec3[np.int32]``.
    """

    size: ClassVar[int] = 0
    kind: ClassVar[str] = "Vector"
    dtype: ClassVar[np.dtype] = DEFAULT_DTYPE
    _specialisations: ClassVar[dict[np.dtype, type["Vector"]]]
    _families: ClassVar[dict[int, type["Vector"]]] = {}

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]
    # Makes numpy scalars on the left of an operator defer to the vector.
    __array_ufunc__ = None

    _data: np.ndarray

    def __init_subclass__(cls, size: int | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        if size is None:
            return

        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"vector size must be in [{MIN_SIZE}, {MAX_SIZE}], got {size}")

        cls.size = size
        cls.kind = cls.__name__
        cls._specialisations = {cls.dtype: cls}
        Vector._families[size] = cls

    def __class_getitem__(cls, dtype: Any) -> type["Vector"]:
        if not cls.size:
            raise TypeError(f"{cls.__name__} has no fixed size; subscript one of Vec2 ... Vec6")

        resolved = resolve_dtype(dtype)
        specialised = cls._specialisations.get(resolved)

        if specialised is None:
            with _specialisation_lock:
                specialised = cls._specialisations.get(resolved)

                if specialised is None:
                    family = cls._specialisations[DEFAULT_DTYPE]
                    specialised = type(family.__name__, (family,), {
                        "__slots__": (),
                        "__module__": family.__module__,
                        "__qualname__": f"{family.__qualname__}[{resolved.name}]",
                        "dtype": resolved,
                    })
                    cls._specialisations[resolved] = specialised
                    logger.debug("created %s[%s]", family.kind, resolved.name)

        return specialised

    def __init__(self, *values: Any) -> None:
        """Takes up to size components (the rest are zero), or one vector of any size and type."""
        if not self.size:
            raise TypeError("Vector cannot be instantiated directly; use Vec2 ... Vec6")

        data = np.zeros(self.size, dtype=self.dtype)

        if len(values) == 1 and isinstance(values[0], Vector):
            source = values[0]._data
            count = min(self.size, source.shape[0])
            data[:count] = source[:count].astype(self.dtype)

            if source.shape[0] > self.size:
                logger.debug("narrowing %s to %s drops %d component(s)",
                             values[0]._name(), self._name(), source.shape[0] - self.size)
        else:
            if len(values) > self.size:
                raise TypeError(f"{self._name()} takes at most {self.size} components ({len(values)} given)")

            for i, value in enumerate(values):
                data[i] = self._component(value)

        self._data = data

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Vector":
        vector = cls.__new__(cls)
        vector._data = data.astype(cls.dtype, copy=False)
        return vector

    @classmethod
    def _name(cls) -> str:
        return f"{cls.kind}[{cls.dtype.name}]"

    def _component(self, value: Any) -> np.generic:
        if not isinstance(value, numbers.Real):
            raise TypeError(f"{self._name()} components must be real numbers, got {type(value).__name__}")

        return _coerce(value, self.dtype)

    def _scalar(self, value: Any) -> np.generic:
        return _coerce(value, self.dtype)

    def _operand(self, other: Any, scalars: bool = False) -> np.ndarray | None:
        if isinstance(other, Vector):
            if other.size == self.size and other.dtype == self.dtype:
                return other._data
            return None

        if scalars and isinstance(other, numbers.Real):
            return np.full(self.size, self._component(other), dtype=self.dtype)

        return None

    def _require(self, other: Any) -> np.ndarray:
        operand = self._operand(other)

        if operand is None:
            other_name = other._name() if isinstance(other, Vector) else type(other).__name__
            raise TypeError(f"expected {self._name()}, got {other_name}")

        return operand

    def _divide(self, numerator: np.ndarray, denominator: np.ndarray) -> np.ndarray:
        if self.dtype.kind == "f":
            with np.errstate(divide="ignore", invalid="ignore"):
                return np.divide(numerator, denominator)

        out = np.empty_like(numerator)
        kernels.truncated_divide(numerator, denominator, out)
        return out

    # Arithmetic

    def __add__(self, other: Any) -> "Vector":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._wrap(self._data + operand)

    def __sub__(self, other: Any) -> "Vector":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self._wrap(self._data - operand)

    def __mul__(self, other: Any) -> "Vector":
        operand = self._operand(other, scalars=True)
        if operand is None:
            return NotImplemented
        return self._wrap(self._data * operand)

    def __rmul__(self, other: Any) -> "Vector":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Vector":
        operand = self._operand(other, scalars=True)
        if operand is None:
            return NotImplemented
        return self._wrap(self._divide(self._data, operand))

    def __neg__(self) -> "Vector":
        return self._wrap(-self._data)

    def __pos__(self) -> "Vector":
        return self.copy()

    # Component access

    def _index(self, index: Any) -> int:
        position = operator.index(index)

        if not 0 <= position < self.size:
            raise IndexOutOfRange(position, self.size, self._name())

        return position

    def __getitem__(self, index: int) -> np.generic:
        return self._data[self._index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        position = self._index(index)
        self._data[position] = self._component(value)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and bool(np.all(self._data == other._data))

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.array(self._data, dtype=dtype, copy=True)

    def tolist(self) -> list:
        return self._data.tolist()

    def copy(self) -> "Vector":
        return self._wrap(self._data.copy())

    def astype(self, dtype: Any) -> "Vector":
        """Same-size conversion to another element type."""
        return type(self)[dtype](self)

    def resize(self, size: int) -> "Vector":
        """Conversion to another size, zero-filling or dropping trailing components."""
        return vector_class(size, self.dtype)(self)

    # Metric operations

    def dot(self, other: "Vector") -> np.generic:
        return self._scalar(kernels.dot(_promote(self._data), _promote(self._require(other))))

    def cross(self, other: "Vector") -> "Vector":
        """Cross product.

        The first three components follow the 3D formula; any further
        components are the elementwise products of both vectors. Vec2 has
        its own planar rule.
        """
        return self._wrap(self._cross(self._data, self._require(other)))

    @staticmethod
    def _cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def magnitude(self) -> np.generic:
        return self._scalar(kernels.norm(_promote(self._data)))

    def length(self) -> np.generic:
        """Same as magnitude."""
        return self.magnitude()

    def normalize(self) -> "Vector":
        magnitude = np.full(self.size, self.magnitude(), dtype=self.dtype)
        return self._wrap(self._divide(self._data, magnitude))

    def distance(self, other: "Vector") -> np.generic:
        return self._scalar(kernels.distance(_promote(self._data), _promote(self._require(other))))

    def _arccos_ratio(self, other: "Vector") -> np.generic:
        # dot, magnitudes and ratio stay in the element type; integers take arccos in float64.
        self._require(other)
        numerator = np.array([self.dot(other)], dtype=self.dtype)
        denominator = np.array([self.magnitude() * other.magnitude()], dtype=self.dtype)
        ratio = self._divide(numerator, denominator)[0]

        if self.dtype.kind != "f":
            ratio = np.float64(ratio)

        with np.errstate(invalid="ignore"):
            return np.arccos(ratio)

    def angle(self, other: "Vector") -> np.generic:
        """Angle between both vectors in radians."""
        return self._scalar(self._arccos_ratio(other))

    def angle_rad(self, other: "Vector") -> np.generic:
        return self._scalar(self._arccos_ratio(other))

    def angle_deg(self, other: "Vector") -> np.generic:
        return self._scalar(self._arccos_ratio(other) * 180 / np.pi)

    # Text

    def __format__(self, spec: str) -> str:
        if not spec:
            spec = FLOAT_FORMAT if self.dtype.kind == "f" else ""
        return SEPARATOR.join(format(value, spec) for value in self._data.tolist())

    def __str__(self) -> str:
        return self.__format__("")

    def __repr__(self) -> str:
        return f"{self._name()}({', '.join(repr(value) for value in self._data.tolist())})"

    def write(self, stream: TextIO) -> int:
        """Writes str(self) to a text stream and returns the character count."""
        return stream.write(str(self))


def vector_class(size: int, dtype: Any = DEFAULT_DTYPE) -> type[Vector]:
    """Returns the vector class for a size and element type, e.g. (3, np.int32) -> Vec3[int32]."""
    try:
        family = Vector._families[size]
    except KeyError:
        raise ValueError(f"no vector type of size {size}; sizes {MIN_SIZE} to {MAX_SIZE} are available") from None

    return family[dtype]
