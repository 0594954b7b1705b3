class FixedVecError(Exception):
    """Base class for errors raised by fixedvec."""


class IndexOutOfRange(FixedVecError, IndexError):
    """A component index fell outside [0, size)."""

    def __init__(self, index: int, size: int, name: str = "vector") -> None:
        super().__init__(f"index {index} out of range for {name}")
        self.index = index
        self.size = size


class UnsupportedDTypeError(FixedVecError, TypeError):
    """The requested element type has no vector specialisation."""

    def __init__(self, dtype: object) -> None:
        super().__init__(f"unsupported element type: {dtype!r}")
        self.dtype = dtype
