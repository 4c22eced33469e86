""" Module containing all params """
import math
import os

import numpy as np

# Storage dtypes. Vectors of integers are kept as INT_DTYPE,
# anything else is promoted to FLOAT_DTYPE.
INT_DTYPE: type = np.int64
FLOAT_DTYPE: type = np.float64

# Integer results outside this range are promoted to FLOAT_DTYPE
INT_MIN: int = int(np.iinfo(INT_DTYPE).min)
INT_MAX: int = int(np.iinfo(INT_DTYPE).max)
INT_BOUND: float = 2. ** 63

TWO_PI: float = 2. * math.pi

DEFAULT_LOG_BASE: float = math.e
DEFAULT_INTERVAL: int = 1
DEFAULT_PRECISION: int = 0

# Slack added when counting the elements of a range so that
# float intervals (see linspace) still reach the end point.
RANGE_TOLERANCE: float = 1e-9

# Relative slack past the end point, as a fraction of the range span.
# Elements further out are dropped, closer ones are clamped to the end.
RANGE_END_TOLERANCE: float = 1e-12

# Default tolerance for approximate comparisons
PRECISION_ERROR: float = 1e-9

# Seed of the process-wide generator. None means OS entropy.
SEED: int = int(os.environ['NUMTENSOR_SEED']) if os.environ.get('NUMTENSOR_SEED') else None
