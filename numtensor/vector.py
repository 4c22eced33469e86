"""
One dimensional tensor.

Elements are integers or floats. Operators and transforms never mutate the
receiver, they return a new Vector built with `quick` since their inputs
are already validated.
"""
import logging
import math

from typing import TYPE_CHECKING, Any, Callable

import numpy as np

import numtensor.param as param

from numtensor.errors import DimensionMismatch, EmptyVector, IndexOutOfRange, InvalidInput, ShapeMismatch, UnsupportedOperand
from numtensor.prg import PRG, get_prg
from numtensor.tensor import Tensor
from numtensor.utils.custom_types import exact, ones, power, quiet, zeros
from numtensor.utils.type_ops import TypeOps

if TYPE_CHECKING:
    from numtensor.matrix import Matrix

logger = logging.getLogger(__name__)


def _check_length(n: int) -> int:
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)) or n < 0:
        raise InvalidInput(f'Vector length must be a non-negative integer, {n!r} given.')

    return int(n)


class Vector(Tensor):
    def __init__(self: 'Vector', a=(), validate: bool = True):
        self._store(TypeOps.to_ndarray(a, validate))

    @classmethod
    def build(cls, a=()) -> 'Vector':
        return cls(a, True)

    @classmethod
    def quick(cls, a=()) -> 'Vector':
        return cls(a, False)

    @classmethod
    def zeros(cls, n: int) -> 'Vector':
        return cls.quick(zeros(_check_length(n)))

    @classmethod
    def ones(cls, n: int) -> 'Vector':
        return cls.quick(ones(_check_length(n)))

    @classmethod
    def fill(cls, value, n: int) -> 'Vector':
        TypeOps.check_numeric(value, 'Fill value')

        return cls.quick(np.full(_check_length(n), value))

    @classmethod
    def rand(cls, n: int, prg: PRG = None) -> 'Vector':
        prg = get_prg() if prg is None else prg

        return cls.quick(prg.random(_check_length(n)))

    @classmethod
    def gaussian(cls, n: int, prg: PRG = None) -> 'Vector':
        """ Standard normal values from the Box-Muller transform. """
        prg = get_prg() if prg is None else prg
        n = _check_length(n)

        r1: np.ndarray = prg.positive_random(n)
        r2: np.ndarray = prg.positive_random(n)

        return cls.quick(np.sqrt(-2. * np.log(r1)) * np.cos(param.TWO_PI * r2))

    @classmethod
    def uniform(cls, m: int, n: int, prg: PRG = None) -> 'Vector':
        """ Values uniformly distributed in [-1, 1]. `m` does not affect the output. """
        prg = get_prg() if prg is None else prg
        logger.debug('Uniform vector of length %s (m=%s is ignored)', n, m)

        return cls.quick(prg.uniform(-1., 1., _check_length(n)))

    @classmethod
    def range(cls, start: float, end: float, interval: float = param.DEFAULT_INTERVAL) -> 'Vector':
        """
        Arithmetic sequence from start towards end, end included when reached.
        Counts down when start is greater than end.
        """
        TypeOps.check_numeric(start, 'Range start')
        TypeOps.check_numeric(end, 'Range end')
        TypeOps.check_numeric(interval, 'Interval')

        if interval <= 0:
            raise InvalidInput(f'Interval must be greater than 0, {interval} given.')

        count: int = math.floor(abs(end - start) / interval + param.RANGE_TOLERANCE) + 1
        step = interval if start <= end else -interval
        logger.debug('Range from %s to %s by %s has %d elements', start, end, step, count)

        if all(isinstance(e, (int, np.integer)) for e in (start, end, interval)):
            return cls.quick(start + np.arange(count, dtype=param.INT_DTYPE) * step)

        arr: np.ndarray = start + np.arange(count, dtype=param.FLOAT_DTYPE) * step
        slack: float = abs(end - start) * param.RANGE_END_TOLERANCE

        # Never step past the end point
        if step > 0:
            arr = np.minimum(arr[arr <= end + slack], end)
        else:
            arr = np.maximum(arr[arr >= end - slack], end)

        return cls.quick(arr)

    @classmethod
    def linspace(cls, start: float, end: float, n: int) -> 'Vector':
        """ n evenly spaced values from start to end. n == 1 divides by zero. """
        TypeOps.check_numeric(start, 'Range start')
        TypeOps.check_numeric(end, 'Range end')

        interval: float = abs(end - start) / (n - 1)

        return cls.range(start, end, interval)

    @property
    def n(self: 'Vector') -> int:
        return len(self._a)

    def __str__(self: 'Vector') -> str:
        return str(self.as_array())

    def __repr__(self: 'Vector') -> str:
        return f'Vector({self.as_array()})'

    # Access
    def __getitem__(self: 'Vector', index):
        if isinstance(index, slice):
            return self.quick(self._a[index])

        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)) or not -self.n <= index < self.n:
            raise IndexOutOfRange(f'Element not found at index {index!r}.')

        return self._a[index].item()

    def __iter__(self: 'Vector'):
        return iter(self._a.tolist())

    # Shape conversion
    def as_row_matrix(self: 'Vector') -> 'Matrix':
        from numtensor.matrix import Matrix

        return Matrix.quick(self._a.reshape(1, self.n))

    def as_column_matrix(self: 'Vector') -> 'Matrix':
        from numtensor.matrix import Matrix

        return Matrix.quick(self._a.reshape(self.n, 1))

    def reshape(self: 'Vector', m: int, n: int) -> 'Matrix':
        from numtensor.matrix import Matrix

        for dim in (m, n):
            if isinstance(dim, (bool, np.bool_)) or not isinstance(dim, (int, np.integer)):
                raise InvalidInput(f'Matrix dimensions must be integers, {dim!r} given.')

        if m < 0 or n < 0 or m * n != self.n:
            raise ShapeMismatch(f'The shape of the new matrix ({m}, {n}) is incompatible with a vector of {self.n} elements.')

        logger.debug('Reshaping vector of %d elements to (%d, %d)', self.n, m, n)
        return Matrix.quick(self._a.reshape(m, n))

    # Products
    def _check_vector(self: 'Vector', b: Any, verb: str) -> 'Vector':
        if not isinstance(b, Vector):
            raise UnsupportedOperand(f'Cannot {verb} vector with a {type(b).__name__}.')

        if self.n != b.n:
            raise DimensionMismatch(f'Vector dimensionality does not match. {self.n} needed but found {b.n}.')

        return b

    def dot(self: 'Vector', b: 'Vector') -> float:
        self._check_vector(b, 'dot')

        return float(np.dot(self._a.astype(param.FLOAT_DTYPE), b._a.astype(param.FLOAT_DTYPE)))

    def inner(self: 'Vector', b: 'Vector') -> float:
        return self.dot(b)

    def outer(self: 'Vector', b: 'Vector') -> 'Matrix':
        from numtensor.matrix import Matrix

        if not isinstance(b, Vector):
            raise UnsupportedOperand(f'Cannot compute outer product with a {type(b).__name__}.')

        return Matrix.quick(exact(np.multiply, self._a[:, np.newaxis], b._a[np.newaxis, :]))

    def cross(self: 'Vector', b: 'Vector') -> 'Vector':
        if not isinstance(b, Vector):
            raise UnsupportedOperand(f'Cannot compute cross product with a {type(b).__name__}.')

        if self.n != 3 or b.n != 3:
            raise InvalidInput(f'Cross product is only defined for vectors in 3 dimensions, got {self.n} and {b.n}.')

        return self.quick(exact(np.cross, self._a, b._a))

    # Elementwise vector-vector
    def _vector_op(self: 'Vector', b: 'Vector', op: Callable, verb: str) -> 'Vector':
        self._check_vector(b, verb)

        return self.quick(exact(op, self._a, b._a))

    def multiply_vector(self: 'Vector', b: 'Vector') -> 'Vector':
        return self._vector_op(b, np.multiply, 'multiply')

    def divide_vector(self: 'Vector', b: 'Vector') -> 'Vector':
        return self._vector_op(b, np.true_divide, 'divide')

    def add_vector(self: 'Vector', b: 'Vector') -> 'Vector':
        return self._vector_op(b, np.add, 'add')

    def subtract_vector(self: 'Vector', b: 'Vector') -> 'Vector':
        return self._vector_op(b, np.subtract, 'subtract')

    def pow_vector(self: 'Vector', b: 'Vector') -> 'Vector':
        return self._vector_op(b, power, 'raise')

    # Dispatch on the operand kind
    def multiply(self: 'Vector', b) -> 'Vector':
        if isinstance(b, Vector):
            return self.multiply_vector(b)
        if TypeOps.is_numeric(b):
            return self.multiply_scalar(b)

        raise UnsupportedOperand(f'Cannot multiply vector with a {type(b).__name__}.')

    def divide(self: 'Vector', b) -> 'Vector':
        if isinstance(b, Vector):
            return self.divide_vector(b)
        if TypeOps.is_numeric(b):
            return self.divide_scalar(b)

        raise UnsupportedOperand(f'Cannot divide vector by a {type(b).__name__}.')

    def add(self: 'Vector', b) -> 'Vector':
        if isinstance(b, Vector):
            return self.add_vector(b)
        if TypeOps.is_numeric(b):
            return self.add_scalar(b)

        raise UnsupportedOperand(f'Cannot add vector to a {type(b).__name__}.')

    def subtract(self: 'Vector', b) -> 'Vector':
        if isinstance(b, Vector):
            return self.subtract_vector(b)
        if TypeOps.is_numeric(b):
            return self.subtract_scalar(b)

        raise UnsupportedOperand(f'Cannot subtract a {type(b).__name__} from vector.')

    def pow(self: 'Vector', b) -> 'Vector':
        if isinstance(b, Vector):
            return self.pow_vector(b)
        if TypeOps.is_numeric(b):
            return self.pow_scalar(b)

        raise UnsupportedOperand(f'Cannot raise vector to the power of a {type(b).__name__}.')

    def __add__(self: 'Vector', other) -> 'Vector':
        return self.add(other)

    def __radd__(self: 'Vector', other) -> 'Vector':
        return self.add(other)

    def __sub__(self: 'Vector', other) -> 'Vector':
        return self.subtract(other)

    def __rsub__(self: 'Vector', other) -> 'Vector':
        return self.negate().add(other)

    def __mul__(self: 'Vector', other) -> 'Vector':
        return self.multiply(other)

    def __rmul__(self: 'Vector', other) -> 'Vector':
        return self.multiply(other)

    def __truediv__(self: 'Vector', other) -> 'Vector':
        return self.divide(other)

    def __rtruediv__(self: 'Vector', other) -> 'Vector':
        if not TypeOps.is_numeric(other):
            raise UnsupportedOperand(f'Cannot divide a {type(other).__name__} by vector.')

        with quiet():
            return self.quick(np.true_divide(other, self._a))

    def __pow__(self: 'Vector', other) -> 'Vector':
        return self.pow(other)

    def __matmul__(self: 'Vector', other: 'Vector') -> float:
        return self.dot(other)

    def __neg__(self: 'Vector') -> 'Vector':
        return self.negate()

    def __abs__(self: 'Vector') -> 'Vector':
        return self.abs()

    # Statistics
    def median(self: 'Vector') -> float:
        if self.n < 1:
            raise EmptyVector('Median is only defined for vectors with 1 or more elements.')

        mid: int = self.n // 2
        a: np.ndarray = np.sort(self._a)

        if self.n % 2 == 1:
            return float(a[mid])

        return (float(a[mid - 1]) + float(a[mid])) / 2.

    def variance(self: 'Vector') -> tuple:
        """
        Sum of squared deviations from the mean, not divided by n.

        Returns:
            (variance, mean)
        """
        mean: float = self.mean()
        variance: float = self.subtract_scalar(mean).square().sum()

        return variance, mean

    # Norms
    def l1_norm(self: 'Vector') -> float:
        return float(np.sum(np.abs(self._a.astype(param.FLOAT_DTYPE))))

    def l2_norm(self: 'Vector') -> float:
        a: np.ndarray = self._a.astype(param.FLOAT_DTYPE)

        return math.sqrt(float(np.dot(a, a)))

    def max_norm(self: 'Vector') -> float:
        if self.n < 1:
            raise EmptyVector('Max norm is only defined for vectors with 1 or more elements.')

        return float(np.max(np.abs(self._a.astype(param.FLOAT_DTYPE))))
