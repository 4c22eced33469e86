"""
Shared interface of Vector and Matrix.

Elements live in a read-only numpy array. Every operation allocates a new
array and wraps it in a new tensor of the receiver's type, so tensors are
never aliased nor mutated after construction.
"""
from abc import ABC, abstractmethod
from functools import reduce as fold
from typing import Any, Callable

import numpy as np

import numtensor.param as param

from numtensor.errors import EmptyVector, ImmutableViolation, UnsupportedOperand
from numtensor.utils.custom_types import exact, power, quiet, round_half_up
from numtensor.utils.type_ops import TypeOps


class Tensor(ABC):
    _a: np.ndarray

    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    @classmethod
    @abstractmethod
    def quick(cls, a) -> 'Tensor':
        """ Build without validating the elements. """

    @abstractmethod
    def __getitem__(self: 'Tensor', index):
        ...

    @abstractmethod
    def __iter__(self: 'Tensor'):
        ...

    def _store(self: 'Tensor', arr: np.ndarray):
        arr.setflags(write=False)
        self._a = arr

    def _new(self: 'Tensor', arr: np.ndarray) -> 'Tensor':
        return type(self).quick(arr)

    @property
    def shape(self: 'Tensor') -> tuple:
        return tuple(self._a.shape)

    @property
    def size(self: 'Tensor') -> int:
        return int(self._a.size)

    def as_array(self: 'Tensor') -> list:
        return self._a.tolist()

    def __array__(self: 'Tensor', dtype=None, copy=None) -> np.ndarray:
        return np.array(self._a, dtype=dtype)

    def __len__(self: 'Tensor') -> int:
        return len(self._a)

    def __eq__(self: 'Tensor', other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented

        return self.shape == other.shape and bool(np.array_equal(self._a, other._a))

    def __hash__(self: 'Tensor') -> int:
        return hash((self.shape, tuple(self._a.ravel().tolist())))

    def __setitem__(self: 'Tensor', index, value):
        raise ImmutableViolation(f'{type(self).__name__} cannot be mutated directly.')

    def __delitem__(self: 'Tensor', index):
        raise ImmutableViolation(f'{type(self).__name__} cannot be mutated directly.')

    def map(self: 'Tensor', fn: Callable, validate: bool = False) -> 'Tensor':
        values: list = [fn(value) for value in self._a.ravel().tolist()]

        if validate:
            for value in values:
                TypeOps.check_numeric(value, 'Mapped element')

        if not values:
            return self._new(np.zeros(self.shape, dtype=param.FLOAT_DTYPE))

        return self._new(TypeOps.as_storage(np.array(values)).reshape(self.shape))

    def reduce(self: 'Tensor', fn: Callable, initial: float = 0.) -> Any:
        return fold(fn, self._a.ravel().tolist(), initial)

    # Scalar arithmetic
    def _scalar_op(self: 'Tensor', scalar, op: Callable, verb: str) -> 'Tensor':
        if not TypeOps.is_numeric(scalar):
            raise UnsupportedOperand(f'Scalar must be an integer or float, cannot {verb} a {type(scalar).__name__}.')

        return self._new(exact(op, self._a, scalar))

    def multiply_scalar(self: 'Tensor', scalar) -> 'Tensor':
        return self._scalar_op(scalar, np.multiply, 'multiply by')

    def divide_scalar(self: 'Tensor', scalar) -> 'Tensor':
        return self._scalar_op(scalar, np.true_divide, 'divide by')

    def add_scalar(self: 'Tensor', scalar) -> 'Tensor':
        return self._scalar_op(scalar, np.add, 'add')

    def subtract_scalar(self: 'Tensor', scalar) -> 'Tensor':
        return self._scalar_op(scalar, np.subtract, 'subtract')

    def pow_scalar(self: 'Tensor', scalar) -> 'Tensor':
        return self._scalar_op(scalar, power, 'raise to the power of')

    # Unary transforms
    def abs(self: 'Tensor') -> 'Tensor':
        return self._new(np.abs(self._a))

    def negate(self: 'Tensor') -> 'Tensor':
        return self._new(np.negative(self._a))

    def square(self: 'Tensor') -> 'Tensor':
        return self.pow_scalar(2)

    def sqrt(self: 'Tensor') -> 'Tensor':
        with quiet():
            return self._new(np.sqrt(self._a))

    def exp(self: 'Tensor') -> 'Tensor':
        with quiet():
            return self._new(np.exp(self._a))

    def log(self: 'Tensor', base: float = param.DEFAULT_LOG_BASE) -> 'Tensor':
        TypeOps.check_numeric(base, 'Logarithm base')

        with quiet():
            if base == param.DEFAULT_LOG_BASE:
                return self._new(np.log(self._a))

            return self._new(np.log(self._a) / np.log(base))

    def sin(self: 'Tensor') -> 'Tensor':
        return self._new(np.sin(self._a))

    def cos(self: 'Tensor') -> 'Tensor':
        return self._new(np.cos(self._a))

    def round(self: 'Tensor', precision: int = param.DEFAULT_PRECISION) -> 'Tensor':
        """ Half away from zero, i.e. round(2.5) == 3 and round(-2.5) == -3. """
        return self._new(round_half_up(self._a, precision))

    def floor(self: 'Tensor') -> 'Tensor':
        return self._new(np.floor(self._a))

    def ceil(self: 'Tensor') -> 'Tensor':
        return self._new(np.ceil(self._a))

    def clip(self: 'Tensor', min: float, max: float) -> 'Tensor':
        TypeOps.check_numeric(min, 'Lower bound')
        TypeOps.check_numeric(max, 'Upper bound')

        # The upper bound wins when the bounds cross
        return self._new(np.where(self._a > max, max, np.where(self._a < min, min, self._a)))

    # Reductions
    def _check_not_empty(self: 'Tensor', what: str):
        if self._a.size < 1:
            raise EmptyVector(f'{what} is only defined for tensors with 1 or more elements.')

    def sum(self: 'Tensor') -> float:
        return float(np.sum(self._a, dtype=param.FLOAT_DTYPE))

    def product(self: 'Tensor') -> float:
        return float(np.prod(self._a, dtype=param.FLOAT_DTYPE))

    def min(self: 'Tensor') -> float:
        self._check_not_empty('Minimum')
        return float(np.min(self._a))

    def max(self: 'Tensor') -> float:
        self._check_not_empty('Maximum')
        return float(np.max(self._a))

    def mean(self: 'Tensor') -> float:
        self._check_not_empty('Mean')
        return self.sum() / self._a.size
