import math

from collections.abc import Iterable, Mapping

import numpy as np

import numtensor.param as param

from numtensor.errors import InvalidInput, ShapeMismatch


class TypeOps:
    @staticmethod
    def is_numeric(value) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return False

        return isinstance(value, (int, float, np.integer, np.floating))

    @staticmethod
    def check_numeric(value, what: str = 'Value'):
        if not TypeOps.is_numeric(value):
            raise InvalidInput(f'{what} must be an integer or float, {type(value).__name__} found.')

    @staticmethod
    def is_integral(arr: np.ndarray) -> bool:
        return arr.dtype.kind in 'iu'

    @staticmethod
    def to_list(values) -> list:
        if isinstance(values, Mapping):
            # External keys are dropped, elements are re-indexed from 0
            return list(values.values())

        if isinstance(values, np.ndarray):
            return list(values)

        if not isinstance(values, Iterable) or isinstance(values, (str, bytes)):
            raise InvalidInput(f'Expected a sequence of numbers, {type(values).__name__} found.')

        return list(values)

    @staticmethod
    def as_storage(arr: np.ndarray) -> np.ndarray:
        if arr.dtype.kind == 'u' and arr.size and arr.max() > param.INT_MAX:
            arr = arr.astype(param.FLOAT_DTYPE)
        elif arr.dtype.kind in 'iu':
            arr = arr.astype(param.INT_DTYPE, copy=False)
        elif arr.dtype.kind == 'f':
            arr = arr.astype(param.FLOAT_DTYPE, copy=False)
        else:
            arr = arr.astype(param.FLOAT_DTYPE)

        return arr

    @staticmethod
    def to_ndarray(values, validate: bool = True) -> np.ndarray:
        if isinstance(values, np.ndarray) and not validate:
            if values.ndim != 1:
                raise ShapeMismatch(f'Expected a 1-D array, got {values.ndim} dimensions.')
            return TypeOps.as_storage(np.array(values))

        elements: list = TypeOps.to_list(values)

        if validate:
            for value in elements:
                TypeOps.check_numeric(value, 'Vector element')

        if not elements:
            return np.array([], dtype=param.FLOAT_DTYPE)

        return TypeOps.as_storage(np.array(elements))

    @staticmethod
    def to_matrix_ndarray(rows, validate: bool = True) -> np.ndarray:
        if isinstance(rows, np.ndarray) and not validate:
            if rows.ndim != 2:
                raise ShapeMismatch(f'Expected a 2-D array, got {rows.ndim} dimensions.')
            return TypeOps.as_storage(np.array(rows))

        rows: list = [TypeOps.to_list(row) for row in TypeOps.to_list(rows)]

        n: int = len(rows[0]) if rows else 0
        for i, row in enumerate(rows):
            if len(row) != n:
                raise ShapeMismatch(f'Matrix rows must have the same length. Row 0 has {n} elements but row {i} has {len(row)}.')

            if validate:
                for value in row:
                    TypeOps.check_numeric(value, 'Matrix element')

        if not rows or n == 0:
            return np.zeros((len(rows), 0), dtype=param.FLOAT_DTYPE)

        return TypeOps.as_storage(np.array(rows))

    @staticmethod
    def is_close(a: float, b: float, error: float = param.PRECISION_ERROR) -> bool:
        return math.isclose(a, b, rel_tol=error, abs_tol=error)
