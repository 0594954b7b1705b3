import numpy as np

DEFAULT_DTYPE = np.dtype(np.float64)

SUPPORTED_DTYPES = tuple(np.dtype(t) for t in (
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64,
    np.float32, np.float64,
))

COMPONENT_NAMES = ("x", "y", "z", "w", "v", "u")
MIN_SIZE = 2
MAX_SIZE = len(COMPONENT_NAMES)

# Matches the default precision of a C++ ostream.
FLOAT_FORMAT = "g"
SEPARATOR = ", "
