import math

from decimal import ROUND_HALF_UP, Decimal
from functools import partial
from typing import Callable

import numpy as np

import numtensor.param as param


# Numpy overrides
zeros = partial(np.zeros, dtype=param.INT_DTYPE)
ones = partial(np.ones, dtype=param.INT_DTYPE)

# Floating point hazards (x / 0, log(0), sqrt(-1)) yield inf/nan silently
quiet = partial(np.errstate, divide='ignore', invalid='ignore', over='ignore')


def power(x: np.ndarray, y) -> np.ndarray:
    exponent = np.asarray(y)

    # Integers to negative integer powers are not allowed in numpy
    if x.dtype.kind in 'iu' and exponent.dtype.kind in 'iu' and np.any(exponent < 0):
        x = x.astype(param.FLOAT_DTYPE)

    with quiet():
        return np.power(x, exponent)


def exact(op: Callable, x: np.ndarray, y) -> np.ndarray:
    """
    Applies a binary op, promoting integer results to float when any of them
    leaves the int64 range instead of letting them wrap around.
    """
    if isinstance(y, (int, np.integer)) and not param.INT_MIN <= y <= param.INT_MAX:
        y = float(y)

    y = np.asarray(y)

    with quiet():
        if x.dtype.kind not in 'iu' or y.dtype.kind not in 'iu':
            return op(x, y)

        approx: np.ndarray = op(x.astype(param.FLOAT_DTYPE), y.astype(param.FLOAT_DTYPE))

        if np.all(np.abs(approx) < param.INT_BOUND):
            return op(x, y)

        return approx


def round_half_up(x: np.ndarray, precision: int) -> np.ndarray:
    precision = int(precision)
    quantum = Decimal(1).scaleb(-precision)

    def _round(value) -> float:
        if not math.isfinite(value):
            return value

        # Shortest repr, so 1.005 rounds as written rather than as stored
        d = Decimal(repr(value))

        if d.as_tuple().exponent >= -precision:
            return float(d)

        return float(d.quantize(quantum, rounding=ROUND_HALF_UP))

    rounded = [_round(value) for value in x.ravel().tolist()]

    return np.array(rounded, dtype=param.FLOAT_DTYPE).reshape(x.shape)
