import numpy as np
import pytest

from sparsemat.sparse import DOK


def make_simple():
    # A = [[1,0,2],[0,3,0]]
    A = DOK(2, 3)
    A.set(0, 0, 1)
    A.set(0, 2, 2)
    A.set(1, 1, 3)
    return A


def test_empty_from_dimensions():
    A = DOK(3, 4)
    assert A.shape == (3, 4)
    assert (A.rows, A.cols) == (3, 4)
    assert A.nnz == 0
    assert A.get(1, 2) == 0


def test_zero_dimensions_allowed():
    A = DOK(0, 0)
    assert A.shape == (0, 0)
    assert A.toarray().shape == (0, 0)


@pytest.mark.parametrize("rows,cols", [(-1, 2), (2, -3), (1.5, 2), ("2", 2)])
def test_bad_dimensions(rows, cols):
    with pytest.raises(ValueError):
        DOK(rows, cols)


def test_shape_is_read_only():
    A = DOK(2, 2)
    with pytest.raises(AttributeError):
        A.shape = (3, 3)
    with pytest.raises(AttributeError):
        A.rows = 5


def test_last_set_wins():
    A = DOK(2, 2)
    A.set(0, 1, 4)
    A.set(0, 1, 7)
    assert A.get(0, 1) == 7
    assert A.nnz == 1


def test_set_zero_removes_entry():
    A = make_simple()
    A.set(0, 0, 0)
    assert A.get(0, 0) == 0
    assert A.nnz == 2
    assert (0, 0) not in dict(A.items())
    # removing a key that was never set is a no-op
    A.set(1, 0, 0)
    assert A.nnz == 2


def test_get_outside_shape_is_zero():
    A = make_simple()
    assert A.get(10, 10) == 0


def test_indexing():
    A = make_simple()
    assert A[0, 2] == 2
    assert A[1, 0] == 0
    A[1, 0] = -5
    assert A.get(1, 0) == -5
    A[1, 0] = 0
    assert A.nnz == 3


@pytest.mark.parametrize("key", [0, (0,), (0, 1, 2), (0, slice(None)), (0.0, 1), (True, 0)])
def test_indexing_rejects_non_pairs(key):
    A = make_simple()
    with pytest.raises(TypeError):
        A[key]


def test_items():
    A = make_simple()
    assert dict(A.items()) == {(0, 0): 1, (0, 2): 2, (1, 1): 3}


def test_equality_is_order_independent():
    A = make_simple()
    B = DOK(2, 3)
    B.set(1, 1, 3)
    B.set(0, 2, 2)
    B.set(0, 0, 1)
    assert A == B
    B.set(1, 1, 4)
    assert A != B
    assert DOK(2, 3) != DOK(3, 2)
    assert A != A.toarray().tolist()


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(DOK(1, 1))


def test_copy_is_independent():
    A = make_simple()
    B = A.copy()
    B.set(0, 0, 9)
    assert A.get(0, 0) == 1
    assert B.get(0, 0) == 9


def test_toarray():
    A = make_simple()
    np.testing.assert_array_equal(A.toarray(), np.array([[1, 0, 2], [0, 3, 0]]))
    assert A.toarray().dtype == np.int64


def test_toarray_skips_out_of_range_entries():
    A = DOK(2, 2)
    A.set(5, 5, 1)
    A.set(1, 1, 2)
    np.testing.assert_array_equal(A.toarray(), np.array([[0, 0], [0, 2]]))
    assert A.nnz == 2


def test_from_dense():
    D = np.array([[0, 4], [-1, 0], [0, 0]])
    A = DOK.from_dense(D)
    assert A.shape == (3, 2)
    assert A.nnz == 2
    assert dict(A.items()) == {(0, 1): 4, (1, 0): -1}
    np.testing.assert_array_equal(A.toarray(), D)


def test_from_dense_rejects_1d():
    with pytest.raises(ValueError):
        DOK.from_dense([1, 2, 3])


def test_transpose_and_negate():
    A = make_simple()
    AT = A.T
    assert AT.shape == (3, 2)
    np.testing.assert_array_equal(AT.toarray(), A.toarray().T)
    N = -A
    np.testing.assert_array_equal(N.toarray(), -A.toarray())
    # operands untouched
    assert A.get(0, 2) == 2


def test_render():
    A = make_simple()
    out = A.render()
    assert out.splitlines() == [
        "Matrix (2x3):",
        "      1       0       2 ",
        "      0       3       0 ",
    ]
    assert str(A) == out


def test_render_custom_width():
    A = make_simple()
    assert A.render(width=3).splitlines()[1] == " 1  0  2 "
    # values wider than the cell are not truncated
    A.set(0, 0, -12345)
    assert A.render(width=3).splitlines()[1] == "-12345  0  2 "


def test_render_empty():
    assert DOK(0, 3).render() == "Matrix (0x3):"


def test_repr():
    assert repr(make_simple()) == "DOK(shape=(2, 3), nnz=3)"


def test_array_namespace():
    import sparsemat.array_api as xp

    assert make_simple().__array_namespace__() is xp
