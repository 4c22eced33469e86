import math

import numpy as np
import pytest

import numtensor.param as param

from numtensor import PRG, Matrix, Vector, seed
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
from numtensor.utils.type_ops import TypeOps


def assert_values(result, expected):
    assert np.all(np.asarray(result) == np.asarray(expected)), f'Result: {result}. Expected: {expected}'


def assert_approx(result, expected, error = 10 ** (-9)):
    assert np.allclose(np.asarray(result, dtype=float), np.asarray(expected, dtype=float), rtol=error, atol=error), f'Result: {result}. Expected: {expected}'


# Construction
def test_build():
    a = [1, 2.5, -3, 0]
    assert Vector.build(a).as_array() == a
    assert Vector.build([]).as_array() == []
    assert Vector.build(np.array([4, 5])).as_array() == [4, 5]
    assert Vector.build((x for x in range(3))).as_array() == [0, 1, 2]

    # Keys are dropped, elements re-indexed from 0
    v = Vector.build({'b': 7, 'a': 8})
    assert v.as_array() == [7, 8]
    assert v[0] == 7

    for bad in (['1', 2], [None], [True, 1], [1, [2]], [1 + 2j]):
        with pytest.raises(InvalidInput):
            Vector.build(bad)

    with pytest.raises(InvalidInput):
        Vector.build(5)


def test_build_keeps_integers():
    v = Vector.build([1, 2, 3])
    assert all(isinstance(e, int) for e in v)
    assert all(isinstance(e, float) for e in Vector.build([1, 2.5]))


def test_quick():
    v = Vector.quick([1, 2, 3])
    assert v.as_array() == [1, 2, 3]
    assert v == Vector.build([1, 2, 3])


def test_zeros_ones_fill():
    assert Vector.zeros(3).as_array() == [0, 0, 0]
    assert Vector.ones(2).as_array() == [1, 1]
    assert Vector.zeros(0).as_array() == []
    assert Vector.fill(2.5, 3).as_array() == [2.5, 2.5, 2.5]
    assert Vector.fill(-1, 2).as_array() == [-1, -1]

    with pytest.raises(InvalidInput):
        Vector.fill('2', 3)
    with pytest.raises(InvalidInput):
        Vector.zeros(-1)
    with pytest.raises(InvalidInput):
        Vector.ones(2.5)


def test_rand():
    v = Vector.rand(100, prg=PRG(1))
    assert v.n == 100
    assert 0 <= v.min() and v.max() <= 1
    assert v == Vector.rand(100, prg=PRG(1))
    assert v != Vector.rand(100, prg=PRG(2))


def test_gaussian():
    v = Vector.gaussian(20000, prg=PRG(3))
    assert v.n == 20000
    assert all(math.isfinite(e) for e in v)
    assert abs(v.mean()) < 0.05
    variance, _ = v.variance()
    assert abs(variance / v.n - 1) < 0.05


def test_uniform():
    v = Vector.uniform(7, 50, prg=PRG(4))
    assert v.n == 50
    assert -1 <= v.min() and v.max() <= 1
    assert v == Vector.uniform(1, 50, prg=PRG(4))


def test_global_seed():
    seed(42)
    a = Vector.rand(5)
    b = Vector.gaussian(5)
    seed(42)
    assert Vector.rand(5) == a
    assert Vector.gaussian(5) == b


def test_prg_streams():
    prg = PRG(7)
    prg.import_seed('other', 7)

    a = prg.random(4)
    prg.switch_seed('other')
    assert prg.current == 'other'
    assert_values(prg.random(4), a)

    prg.restore_seed()
    assert prg.current == 'default'
    assert 0 < prg.positive_random(10).min()

    with pytest.raises(KeyError):
        prg.switch_seed('missing')


def test_range():
    assert Vector.range(0, 10, 2).as_array() == [0, 2, 4, 6, 8, 10]
    assert Vector.range(0, 9, 2).as_array() == [0, 2, 4, 6, 8]
    assert Vector.range(1, 4).as_array() == [1, 2, 3, 4]
    assert Vector.range(3, 3).as_array() == [3]
    assert Vector.range(5, 1).as_array() == [5, 4, 3, 2, 1]
    assert_approx(Vector.range(0, 1, 0.25), [0, 0.25, 0.5, 0.75, 1])
    assert all(isinstance(e, int) for e in Vector.range(0, 3))

    for interval in (0, -1, -0.5):
        with pytest.raises(InvalidInput):
            Vector.range(0, 5, interval)

    with pytest.raises(InvalidInput):
        Vector.range('0', 5)


def test_range_stays_within_end():
    assert Vector.range(0, 0.9999999999, 1).as_array() == [0.]
    assert Vector.range(0, -0.9999999999, 1).as_array() == [0.]
    assert Vector.range(0, 2.9999999999, 1.5).as_array() == [0., 1.5]
    assert Vector.range(0, 0.3, 0.1).as_array()[-1] == 0.3
    assert Vector.linspace(0, 1, 11).as_array()[-1] == 1.
    assert_approx(Vector.linspace(1, 0, 7)[-1], 0.)

    for start, end, interval in ((0, 1, 0.1), (0.5, 7.25, 0.3), (3, -2, 0.7), (0, 1e-6, 1e-8)):
        v = Vector.range(start, end, interval)
        assert min(start, end) <= v.min() and v.max() <= max(start, end), f'Result: {v}. Expected within: {start}, {end}'


def test_linspace():
    assert_approx(Vector.linspace(0, 1, 5), [0, 0.25, 0.5, 0.75, 1])
    assert_approx(Vector.linspace(1, 0, 3), [1, 0.5, 0])
    assert Vector.linspace(0, 1, 11).n == 11
    assert Vector.linspace(-3, 3, 7).as_array() == [-3., -2., -1., 0., 1., 2., 3.]

    with pytest.raises(ZeroDivisionError):
        Vector.linspace(0, 1, 1)
    with pytest.raises(InvalidInput):
        Vector.linspace(0, 1, 0)
    with pytest.raises(InvalidInput):
        Vector.linspace(2, 2, 4)


# Shape conversion
def test_row_and_column_matrix():
    v = Vector.build([1, 2, 3])

    row = v.as_row_matrix()
    assert isinstance(row, Matrix)
    assert row.shape == (1, 3)
    assert row.as_array() == [[1, 2, 3]]

    column = v.as_column_matrix()
    assert column.shape == (3, 1)
    assert column.as_array() == [[1], [2], [3]]


def test_reshape():
    v = Vector.build([1, 2, 3, 4, 5, 6])

    m = v.reshape(2, 3)
    assert m.as_array() == [[1, 2, 3], [4, 5, 6]]
    assert v.reshape(3, 2).as_array() == [[1, 2], [3, 4], [5, 6]]
    assert m.flatten() == v

    for shape in ((2, 4), (1, 5), (-2, -3)):
        with pytest.raises(ShapeMismatch):
            v.reshape(*shape)

    for shape in ((2.0, 3), (2, 3.0), (True, 6), ('2', 3)):
        with pytest.raises(InvalidInput):
            v.reshape(*shape)


# Binary operators
def test_vector_vector_ops():
    a = Vector.build([2, 4, 6])
    b = Vector.build([1, 2, 3])

    assert a.multiply(b).as_array() == [2, 8, 18]
    assert a.divide(b).as_array() == [2, 2, 2]
    assert a.add(b).as_array() == [3, 6, 9]
    assert a.subtract(b).as_array() == [1, 2, 3]
    assert Vector.build([2, 3]).pow(Vector.build([3, 2])).as_array() == [8, 9]

    assert a.multiply_vector(b) == a.multiply(b)
    assert a.pow_vector(b).as_array() == [2, 16, 216]


def test_vector_scalar_ops():
    a = Vector.build([2, 4, 6])

    assert a.multiply(2).as_array() == [4, 8, 12]
    assert a.divide(4).as_array() == [0.5, 1, 1.5]
    assert a.add(1.5).as_array() == [3.5, 5.5, 7.5]
    assert a.subtract(np.int64(2)).as_array() == [0, 2, 4]
    assert a.pow(2).as_array() == [4, 16, 36]
    assert_approx(a.pow(-1), [0.5, 0.25, 1 / 6])
    assert_approx(Vector.build([4, 9]).pow(0.5), [2, 3])


def test_dimension_mismatch():
    a = Vector.build([1, 2, 3])
    b = Vector.build([1, 2])

    for op in (a.add, a.subtract, a.multiply, a.divide, a.pow, a.dot):
        with pytest.raises(DimensionMismatch):
            op(b)


def test_unsupported_operand():
    a = Vector.build([1, 2, 3])

    for operand in ('2', [1, 2, 3], None, True, Matrix.build([[1, 2, 3]])):
        for op in (a.add, a.subtract, a.multiply, a.divide, a.pow):
            with pytest.raises(UnsupportedOperand):
                op(operand)

    for op in (a.add_scalar, a.subtract_scalar, a.multiply_scalar, a.divide_scalar, a.pow_scalar):
        with pytest.raises(UnsupportedOperand):
            op('2')

    with pytest.raises(UnsupportedOperand):
        a.add_vector(2)
    with pytest.raises(TypeError):
        a + 'a'


def test_division_by_zero():
    result = Vector.build([1, -1, 0]).divide(0)
    assert result[0] == math.inf
    assert result[1] == -math.inf
    assert math.isnan(result[2])

    result = Vector.build([1, 2]).divide(Vector.build([0, 2]))
    assert result.as_array() == [math.inf, 1]


def test_operators():
    v = Vector.build([1, 2, 4])
    w = Vector.build([1, 1, 1])

    assert (v + w).as_array() == [2, 3, 5]
    assert (v - w).as_array() == [0, 1, 3]
    assert (v * w) == v
    assert (v / 2).as_array() == [0.5, 1, 2]
    assert (v ** 2).as_array() == [1, 4, 16]
    assert (1 + v).as_array() == [2, 3, 5]
    assert (2 * v).as_array() == [2, 4, 8]
    assert (1 - v).as_array() == [0, -1, -3]
    assert (1 / v).as_array() == [1, 0.5, 0.25]
    assert (-v).as_array() == [-1, -2, -4]
    assert abs(Vector.build([-1, 2])).as_array() == [1, 2]
    assert v @ w == 7.


def test_numpy_scalar_operands():
    v = Vector.build([1, 2, 4])

    assert isinstance(np.float64(2) * v, Vector)
    assert (np.float64(2) * v).as_array() == [2., 4., 8.]
    assert isinstance(np.int64(1) + v, Vector)
    assert (np.int64(1) + v).as_array() == [2, 3, 5]
    assert (np.int64(1) - v).as_array() == [0, -1, -3]
    assert (np.float64(1) / v).as_array() == [1, 0.5, 0.25]
    assert (v * np.int32(3)).as_array() == [3, 6, 12]
    assert_values(np.asarray(v), [1, 2, 4])


def test_inverse_laws():
    a = Vector.gaussian(50, prg=PRG(5))
    b = Vector.gaussian(50, prg=PRG(6))

    for s in (3, -0.7, 1e-3, 12345.6):
        assert_approx(a.multiply_scalar(s).divide_scalar(s), a)

    assert_approx(a.add(b).subtract(b), a)


# Products
def test_dot():
    a = Vector.build([1, 2, 3])
    b = Vector.build([4, 5, 6])

    assert a.dot(b) == 32.
    assert isinstance(a.dot(b), float)
    assert a.dot(b) == b.dot(a)
    assert a.inner(b) == a.dot(b)
    assert Vector.build([]).dot(Vector.build([])) == 0.

    with pytest.raises(UnsupportedOperand):
        a.dot([4, 5, 6])


def test_outer():
    m = Vector.build([1, 2, 3]).outer(Vector.build([1, 10]))

    assert m.shape == (3, 2)
    assert m.as_array() == [[1, 10], [2, 20], [3, 30]]


def test_cross():
    x = Vector.build([1, 0, 0])
    y = Vector.build([0, 1, 0])

    assert x.cross(y).as_array() == [0, 0, 1]
    assert y.cross(x).as_array() == [0, 0, -1]
    assert Vector.build([1, 2, 3]).cross(Vector.build([4, 5, 6])).as_array() == [-3, 6, -3]

    with pytest.raises(InvalidInput):
        Vector.build([1, 2]).cross(Vector.build([3, 4]))
    with pytest.raises(InvalidInput):
        x.cross(Vector.build([1, 2, 3, 4]))


# Unary transforms
def test_unary_transforms():
    v = Vector.build([1, -2, 3])

    assert v.abs().as_array() == [1, 2, 3]
    assert v.negate().as_array() == [-1, 2, -3]
    assert v.square().as_array() == [1, 4, 9]
    assert v.square() == v.pow(2)
    assert Vector.build([4, 9, 0]).sqrt().as_array() == [2, 3, 0]
    assert_approx(Vector.build([0, 1]).exp(), [1, math.e])
    assert_approx(Vector.build([0, math.pi / 2]).sin(), [0, 1])
    assert_approx(Vector.build([0, math.pi]).cos(), [1, -1])


def test_log():
    assert_approx(Vector.build([1, math.e, math.e ** 2]).log(), [0, 1, 2])
    assert_approx(Vector.build([1, 8, 1024]).log(2), [0, 3, 10])
    assert_approx(Vector.build([100, 0.1]).log(10), [2, -1])

    result = Vector.build([0, -1]).log()
    assert result[0] == -math.inf
    assert math.isnan(result[1])


def test_rounding():
    assert Vector.build([1.25, 2.5, -2.5, 0.4]).round().as_array() == [1, 3, -3, 0]
    assert_approx(Vector.build([1.234, 5.678, -0.125]).round(2), [1.23, 5.68, -0.13])
    assert_approx(Vector.build([1234, 5678]).round(-2), [1200, 5700])
    assert Vector.build([1.005, 2.675, -1.005]).round(2).as_array() == [1.01, 2.68, -1.01]
    assert Vector.build([0.285, 1.45]).round(2).as_array() == [0.29, 1.45]
    assert Vector.build([1.5, -0.1, 7]).round(400).as_array() == [1.5, -0.1, 7]
    assert Vector.build([1234.5]).round(-400).as_array() == [0.]
    assert Vector.build([5.5, math.inf]).round().as_array() == [6., math.inf]
    assert Vector.build([]).round(2).as_array() == []
    assert Vector.build([1.7, -1.2]).floor().as_array() == [1, -2]
    assert Vector.build([1.2, -1.7]).ceil().as_array() == [2, -1]


def test_clip():
    assert Vector.build([-5, 0, 5, 10]).clip(0, 5).as_array() == [0, 0, 5, 5]
    assert Vector.build([0.5, 1.5]).clip(1, 2).as_array() == [1, 1.5]

    with pytest.raises(InvalidInput):
        Vector.build([1]).clip('0', 5)


def test_transforms_do_not_mutate():
    v = Vector.build([1, -2, 3])
    before = v.as_array()

    v.abs()
    v.add(10)
    v.multiply(v)
    v.clip(0, 1)

    assert v.as_array() == before

    arr = v.as_array()
    arr[0] = 100
    assert v[0] == 1

    arr = np.asarray(v)
    arr[0] = 100
    assert v[0] == 1


# Reductions
def test_sum_product():
    v = Vector.build([1, 2, 3, 4])

    assert v.sum() == 10.
    assert isinstance(v.sum(), float)
    assert v.product() == 24.
    assert isinstance(v.product(), float)
    assert Vector.build([]).sum() == 0.
    assert Vector.build([]).product() == 1.


def test_integer_overflow_promotes_to_float():
    big = Vector.build([10]).pow(19)
    assert isinstance(big[0], float)
    assert big[0] == 1e19

    assert Vector.build([2 ** 62, 2 ** 62]).sum() == 2. ** 63
    assert Vector.build([2 ** 62, 2 ** 62]).mean() == 2. ** 62

    squared = Vector.build([3037000500]).square()
    assert squared[0] > 0
    assert_approx(squared, [3037000500 ** 2])

    assert Vector.build([param.INT_MAX]).add_scalar(1).as_array() == [2. ** 63]
    assert Vector.build([param.INT_MIN]).subtract_scalar(1).as_array() == [-2. ** 63]
    assert Vector.build([2 ** 32]).multiply(Vector.build([2 ** 32])).as_array() == [2. ** 64]
    assert Vector.build([2 ** 62]).add(Vector.build([2 ** 62])).as_array() == [2. ** 63]
    assert Vector.build([1]).add(2 ** 70).as_array() == [float(2 ** 70)]
    assert Vector.build([2, 3]).pow(Vector.build([64, 2])).as_array() == [2. ** 64, 9.]

    assert Vector.build([2 ** 32, 2 ** 32]).dot(Vector.build([2 ** 32, 2 ** 32])) == 2. ** 65
    assert Vector.build([param.INT_MIN]).l1_norm() == 2. ** 63
    assert Vector.build([param.INT_MIN]).max_norm() == 2. ** 63
    assert Vector.build([2 ** 40]).outer(Vector.build([2 ** 40])).as_array() == [[2. ** 80]]
    assert Matrix.build([[2 ** 62]]).multiply_scalar(4).as_array() == [[2. ** 64]]

    # Results that fit stay exact integers
    fits = Vector.build([2 ** 31, 3]).square()
    assert fits.as_array() == [2 ** 62, 9]
    assert all(isinstance(e, int) for e in fits)
    assert Vector.build([2 ** 40]).multiply_scalar(-2 ** 20).as_array() == [-2 ** 60]


def test_large_integers_round_trip():
    for values in ([param.INT_MAX], [param.INT_MIN], [param.INT_MAX, param.INT_MIN, 0]):
        v = Vector.build(values)
        assert v.as_array() == values
        assert all(isinstance(e, int) for e in v)

    # Beyond int64 the elements are kept as the nearest float
    v = Vector.build([2 ** 63 + 1])
    assert v.as_array() == [float(2 ** 63 + 1)]
    assert isinstance(v[0], float)


def test_min_max_mean():
    v = Vector.build([3, -1, 7, 2])

    assert v.min() == -1
    assert v.max() == 7
    assert v.mean() == 2.75

    empty = Vector.build([])
    for reduction in (empty.min, empty.max, empty.mean, empty.max_norm, empty.variance):
        with pytest.raises(EmptyVector):
            reduction()


def test_median():
    assert Vector.build([3, 1, 2]).median() == 2
    assert Vector.build([4, 1, 3, 2]).median() == 2.5
    assert Vector.build([5]).median() == 5
    assert Vector.build([-1.5, 10, 0]).median() == 0

    with pytest.raises(EmptyVector):
        Vector.build([]).median()


def test_variance():
    variance, mean = Vector.build([1, 2, 3, 4]).variance()

    # Sum of squared deviations, not normalised by n
    assert mean == 2.5
    assert variance == 5.

    variance, mean = Vector.fill(3, 10).variance()
    assert variance == 0.
    assert mean == 3.


def test_norms():
    v = Vector.build([-3, 4])

    assert v.l1_norm() == 7.
    assert v.l2_norm() == 5.
    assert v.max_norm() == 4.
    assert Vector.build([]).l1_norm() == 0.
    assert Vector.build([]).l2_norm() == 0.

    w = Vector.gaussian(30, prg=PRG(8))
    assert TypeOps.is_close(w.l2_norm() ** 2, w.square().sum())


# Access
def test_indexed_access():
    v = Vector.build([10, 20, 30])

    assert v[0] == 10
    assert v[2] == 30
    assert v[-1] == 30
    assert v[np.int64(1)] == 20
    assert v[1:].as_array() == [20, 30]

    for index in (3, -4, '0', 1.0, None):
        with pytest.raises(IndexOutOfRange):
            v[index]

    with pytest.raises(IndexError):
        Vector.build([])[0]


def test_mutation_is_forbidden():
    v = Vector.build([1, 2, 3])

    with pytest.raises(ImmutableViolation):
        v[0] = 9
    with pytest.raises(ImmutableViolation):
        del v[0]
    with pytest.raises(ImmutableViolation):
        Vector.zeros(1)[5] = 1

    assert v.as_array() == [1, 2, 3]


def test_iteration():
    v = Vector.build([1, 2, 3])

    assert list(v) == [1, 2, 3]
    assert list(v) == [1, 2, 3]
    assert [e * 2 for e in v] == [2, 4, 6]
    assert 2 in v
    assert list(Vector.build([])) == []


def test_size_and_shape():
    v = Vector.build([1, 2, 3])

    assert len(v) == 3
    assert v.size == 3
    assert v.n == 3
    assert v.shape == (3,)
    assert Vector.build([]).shape == (0,)


def test_map_reduce():
    v = Vector.build([1, 2, 3])

    assert v.map(lambda x: x * 2).as_array() == [2, 4, 6]
    assert v.map(float).as_array() == [1., 2., 3.]
    assert Vector.build([]).map(abs).as_array() == []

    with pytest.raises(InvalidInput):
        v.map(str, validate=True)

    assert v.reduce(lambda carry, x: carry + x) == 6.
    assert v.reduce(lambda carry, x: carry * x, 1) == 6
    assert v.reduce(max, -math.inf) == 3


def test_equality_and_hash():
    assert Vector.build([1, 2]) == Vector.build([1., 2.])
    assert Vector.build([1, 2]) != Vector.build([2, 1])
    assert Vector.build([1, 2]) != Vector.build([1, 2, 3])
    assert Vector.build([1, 2]) != [1, 2]
    assert len({Vector.build([1, 2]), Vector.build([1, 2]), Vector.build([3])}) == 2


def test_repr():
    assert repr(Vector.build([1, 2])) == 'Vector([1, 2])'
    assert str(Vector.build([1.5])) == '[1.5]'


# Matrix
def test_matrix_build():
    m = Matrix.build([[1, 2, 3], [4, 5, 6]])

    assert m.shape == (2, 3)
    assert m.m == 2
    assert m.n == 3
    assert m.size == 6
    assert len(m) == 2

    with pytest.raises(ShapeMismatch):
        Matrix.build([[1, 2], [3]])
    with pytest.raises(InvalidInput):
        Matrix.build([[1, 'a']])
    with pytest.raises(ShapeMismatch):
        Matrix.quick(np.zeros(3))


def test_matrix_access():
    m = Matrix.build([[1, 2, 3], [4, 5, 6]])

    assert m[1] == Vector.build([4, 5, 6])
    assert m[0, 2] == 3
    assert m[-1, -1] == 6
    assert m.row_as_vector(0).as_array() == [1, 2, 3]
    assert m.column_as_vector(1).as_array() == [2, 5]
    assert [row.as_array() for row in m] == [[1, 2, 3], [4, 5, 6]]
    assert m.as_vectors() == [Vector.build([1, 2, 3]), Vector.build([4, 5, 6])]

    with pytest.raises(IndexOutOfRange):
        m[2]
    with pytest.raises(IndexOutOfRange):
        m[0, 3]
    with pytest.raises(IndexOutOfRange):
        m.column_as_vector(5)
    with pytest.raises(ImmutableViolation):
        m[0] = Vector.build([0, 0, 0])


def test_matrix_transforms():
    m = Matrix.build([[1, -2], [3, -4]])

    assert m.transpose().as_array() == [[1, 3], [-2, -4]]
    assert m.flatten().as_array() == [1, -2, 3, -4]
    assert m.abs().as_array() == [[1, 2], [3, 4]]
    assert isinstance(m.abs(), Matrix)
    assert m.multiply_scalar(2).as_array() == [[2, -4], [6, -8]]
    assert m.square().as_array() == [[1, 4], [9, 16]]
    assert m.map(lambda x: x + 1).as_array() == [[2, -1], [4, -3]]
    assert m.sum() == -2.
    assert m.min() == -4
    assert m.mean() == -0.5


# Errors
def test_error_taxonomy():
    assert issubclass(InvalidInput, ValueError)
    assert issubclass(DimensionMismatch, ValueError)
    assert issubclass(ShapeMismatch, ValueError)
    assert issubclass(EmptyVector, ValueError)
    assert issubclass(UnsupportedOperand, TypeError)
    assert issubclass(ImmutableViolation, TypeError)
    assert issubclass(IndexOutOfRange, IndexError)

    for error in (InvalidInput, DimensionMismatch, ShapeMismatch, EmptyVector,
                  UnsupportedOperand, ImmutableViolation, IndexOutOfRange):
        assert issubclass(error, TensorError)


def test_type_ops():
    assert TypeOps.is_numeric(1)
    assert TypeOps.is_numeric(1.5)
    assert TypeOps.is_numeric(np.float32(1.5))
    assert TypeOps.is_numeric(np.int8(3))
    assert not TypeOps.is_numeric(True)
    assert not TypeOps.is_numeric(np.bool_(True))
    assert not TypeOps.is_numeric('1')
    assert not TypeOps.is_numeric(1j)
    assert not TypeOps.is_numeric(None)

    assert TypeOps.to_ndarray([1, 2]).dtype == param.INT_DTYPE
    assert TypeOps.to_ndarray([1, 2.5]).dtype == param.FLOAT_DTYPE
    assert TypeOps.to_ndarray([2 ** 63]).dtype == param.FLOAT_DTYPE
