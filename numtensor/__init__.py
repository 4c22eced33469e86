"""
numtensor
~~~~~~~~~

Dense numeric tensors: Vector and Matrix.
"""

__version__ = '0.1.0'

from numtensor import errors, param
from numtensor.errors import (
    DimensionMismatch,
    EmptyVector,
    ImmutableViolation,
    IndexOutOfRange,
    InvalidInput,
    ShapeMismatch,
    TensorError,
    UnsupportedOperand,
)
from numtensor.matrix import Matrix
from numtensor.prg import PRG, get_prg, seed
from numtensor.tensor import Tensor
from numtensor.vector import Vector

__all__ = [
    'errors',
    'param',
    'Tensor',
    'Vector',
    'Matrix',
    'PRG',
    'get_prg',
    'seed',
    'TensorError',
    'InvalidInput',
    'DimensionMismatch',
    'UnsupportedOperand',
    'ShapeMismatch',
    'IndexOutOfRange',
    'ImmutableViolation',
    'EmptyVector',
]
