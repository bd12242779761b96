import numpy as np
import pytest

import sparsemat.array_api as xp
from sparsemat.sparse import DOK


def test_namespace_info_capabilities():
    info = xp.__array_namespace_info__()
    caps = info["capabilities"]
    assert caps["sparse"] is True
    assert "matmul" in caps.get("linalg", [])
    assert "matrix_transpose" in caps.get("linalg", [])
    assert "add" in caps.get("elementwise", [])
    assert "subtract" in caps.get("elementwise", [])
    assert "zeros" in caps.get("creation", [])
    assert "eye" in caps.get("creation", [])
    assert info["default_dtypes"]["integral"] == "int64"


def test_numpy_passthrough_for_dense():
    np.testing.assert_array_equal(xp.abs(np.array([-1, 2])), np.array([1, 2]))


def test_numpy_passthrough_rejects_sparse():
    with pytest.raises(NotImplementedError, match="abs"):
        xp.abs(DOK(2, 2))
    with pytest.raises(NotImplementedError):
        xp.sum(a=DOK(2, 2))


def test_zeros():
    A = xp.zeros((10, 20))
    assert isinstance(A, DOK)
    assert A.shape == (10, 20)
    assert A.nnz == 0


def test_zeros_validates():
    with pytest.raises(ValueError, match="cpu"):
        xp.zeros((2, 2), device="gpu")
    with pytest.raises(ValueError):
        xp.zeros((2, 2, 2))


@pytest.mark.parametrize("n,m,k", [(3, None, 0), (3, 5, 0), (4, 2, 0), (3, 3, 1), (3, 4, -2), (2, 2, 5)])
def test_eye_matches_numpy(n, m, k):
    E = xp.eye(n, m, k)
    np.testing.assert_array_equal(E.toarray(), np.eye(n, m, k, dtype=np.int64))


def test_eye_validates_device():
    with pytest.raises(ValueError, match="cpu"):
        xp.eye(2, device="cuda")


def test_asarray():
    D = np.array([[0, 1], [2, 0]])
    A = xp.asarray(D)
    assert isinstance(A, DOK)
    np.testing.assert_array_equal(A.toarray(), D)
    assert xp.asarray(A) is A
    B = xp.asarray(A, copy=True)
    assert B == A and B is not A


def test_asarray_applies_dtype_to_dok():
    A = DOK.from_dense(np.array([[0, 1], [2, 0]]))
    F = xp.asarray(A, dtype=np.float64)
    assert F is not A
    assert F.dtype == np.float64
    assert F.toarray().dtype == np.float64
    assert dict(F.items()) == {(0, 1): 1.0, (1, 0): 2.0}
    assert A.dtype == np.int64
    # same dtype keeps the no-copy path
    assert xp.asarray(A, dtype=np.int64) is A
    with pytest.raises(ValueError, match="copy"):
        xp.asarray(A, dtype=np.float64, copy=False)


def test_astype_drops_values_cast_to_zero():
    A = DOK(1, 2, dtype=np.float64)
    A.set(0, 0, 0.25)
    A.set(0, 1, 2.5)
    B = A.astype(np.int64)
    assert dict(B.items()) == {(0, 1): 2}
