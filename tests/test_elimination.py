# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from complexdet.complex_ops import approx_equal
from complexdet.elimination import (
    SingularPivot,
    SingularPivotError,
    determinant_by_lu,
    lu_decompose,
)
from complexdet.expansion import determinant_by_cofactor_expansion
from complexdet.utils import random_complex_matrix

TOL = 1e-9


def test_literal_scenarios():
    assert determinant_by_lu([[1, 2], [3, 4]]) == complex(-2, 0)
    diag = determinant_by_lu([[1 + 2j, 0], [0, 1 - 2j]])
    assert approx_equal(diag, complex(5, 0), TOL)

    marker = determinant_by_lu([[1, 2], [2, 4]])
    assert isinstance(marker, SingularPivot)
    assert marker.column == 1
    assert marker.value == 0j


@pytest.mark.parametrize("pivot", [False, True])
@pytest.mark.parametrize("n", [2, 5, 20])
def test_lu_matches_numpy(n, pivot):
    A = random_complex_matrix(n, seed=n)
    ours = determinant_by_lu(A, pivot=pivot)
    ref = np.linalg.det(A)
    assert not isinstance(ours, SingularPivot)
    assert np.isclose(ours, ref, rtol=1e-7, atol=0)


@pytest.mark.parametrize("n", [3, 4, 5])
def test_lu_matches_cofactor(n):
    A = random_complex_matrix(n, low=-1, high=1, seed=n)
    assert approx_equal(determinant_by_lu(A), determinant_by_cofactor_expansion(A), TOL)


def test_row_swap_negates():
    A = np.array(random_complex_matrix(5, low=-1, high=1, seed=9))
    B = A[[0, 3, 2, 1, 4]]
    assert approx_equal(determinant_by_lu(B), -determinant_by_lu(A), TOL)


def test_zero_leading_pivot():
    A = [[0, 1], [1, 0]]
    marker = determinant_by_lu(A)
    assert isinstance(marker, SingularPivot)
    assert marker.column == 0
    # the exact answer is available with pivoting
    assert determinant_by_lu(A, pivot=True) == complex(-1, 0)


def test_identity():
    assert determinant_by_lu(np.eye(50)) == complex(1, 0)


def test_lu_decompose_upper_triangular():
    A = random_complex_matrix(6, seed=1)
    U, perm = lu_decompose(A, pivot=True)
    np.testing.assert_allclose(np.tril(U, -1), 0, atol=1e-10)
    assert sorted(perm) == list(range(6))


def test_lu_decompose_raises_on_zero_pivot():
    with pytest.raises(SingularPivotError) as exc:
        lu_decompose([[1, 1], [1, 1]])
    assert exc.value.column == 1


def test_input_is_not_mutated():
    A = np.array(random_complex_matrix(5, seed=4))
    before = A.copy()
    determinant_by_lu(A)
    determinant_by_lu(A, pivot=True)
    np.testing.assert_array_equal(A, before)
