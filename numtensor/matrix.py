"""
Two dimensional tensor, the shape Vector converts to and from.

Only the container is provided here: rows and columns as vectors,
flattening and transposition. Elementwise transforms, scalar arithmetic
and reductions come from Tensor.
"""
import numpy as np

from numtensor.errors import IndexOutOfRange
from numtensor.tensor import Tensor
from numtensor.utils.type_ops import TypeOps
from numtensor.vector import Vector


class Matrix(Tensor):
    def __init__(self: 'Matrix', a=(), validate: bool = True):
        self._store(TypeOps.to_matrix_ndarray(a, validate))

    @classmethod
    def build(cls, a=()) -> 'Matrix':
        return cls(a, True)

    @classmethod
    def quick(cls, a=()) -> 'Matrix':
        return cls(a, False)

    @property
    def m(self: 'Matrix') -> int:
        return self._a.shape[0]

    @property
    def n(self: 'Matrix') -> int:
        return self._a.shape[1]

    def __str__(self: 'Matrix') -> str:
        return str(self.as_array())

    def __repr__(self: 'Matrix') -> str:
        return f'Matrix({self.as_array()})'

    def _check_index(self: 'Matrix', index, size: int, what: str) -> int:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)) or not -size <= index < size:
            raise IndexOutOfRange(f'{what} not found at index {index!r}.')

        return int(index)

    def __getitem__(self: 'Matrix', index):
        if isinstance(index, tuple) and len(index) == 2:
            i: int = self._check_index(index[0], self.m, 'Row')
            j: int = self._check_index(index[1], self.n, 'Column')
            return self._a[i, j].item()

        return self.row_as_vector(index)

    def __iter__(self: 'Matrix'):
        return iter(self.as_vectors())

    def row_as_vector(self: 'Matrix', i: int) -> Vector:
        return Vector.quick(self._a[self._check_index(i, self.m, 'Row')])

    def column_as_vector(self: 'Matrix', j: int) -> Vector:
        return Vector.quick(self._a[:, self._check_index(j, self.n, 'Column')])

    def as_vectors(self: 'Matrix') -> list:
        return [Vector.quick(row) for row in self._a]

    def flatten(self: 'Matrix') -> Vector:
        return Vector.quick(self._a.ravel())

    def transpose(self: 'Matrix') -> 'Matrix':
        return self.quick(self._a.T)
