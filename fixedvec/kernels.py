import numpy as np
from typing import TypeAlias
from numba import njit  # type: ignore

# Contiguous 1-D component buffer of a single numpy dtype.
Buffer: TypeAlias = np.ndarray

@njit(inline="always")
def dot(self: Buffer, other: Buffer):
    return np.sum(self * other)

@njit(inline="always")
def norm2(self: Buffer):
    return dot(self, self)

@njit
def norm(self: Buffer) -> float:
    return np.sqrt(norm2(self))

@njit
def distance(self: Buffer, other: Buffer) -> float:
    return np.sqrt(np.sum((self - other) ** 2))

@njit
def truncated_divide(self: Buffer, other: Buffer, out: Buffer) -> None:
    """
    Integer division rounding toward zero, written into out.
    A zero divisor raises ZeroDivisionError.
    """
    for i in range(self.shape[0]):
        quotient = self[i] // other[i]

        if quotient < 0 and quotient * other[i] != self[i]:
            out[i] = quotient + 1
        else:
            out[i] = quotient
