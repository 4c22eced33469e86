""" Exceptions raised by numtensor. Every one of them is also a builtin exception type. """


class TensorError(Exception):
    pass


class InvalidInput(TensorError, ValueError):
    """ A value is not numeric or a parameter is out of its domain. """


class DimensionMismatch(TensorError, ValueError):
    """ Two vectors have differing lengths. """


class ShapeMismatch(TensorError, ValueError):
    """ Target shape is incompatible with the number of elements. """


class EmptyVector(TensorError, ValueError):
    """ Reduction requires at least one element. """


class UnsupportedOperand(TensorError, TypeError):
    """ Operand is neither a vector nor a numeric scalar. """


class ImmutableViolation(TensorError, TypeError):
    """ Tensors cannot be mutated in place. """


class IndexOutOfRange(TensorError, IndexError):
    pass
