# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

from .permutations import permutation_sign
from .utils import as_matrix

logger = logging.getLogger(__name__)

# squared pivot magnitudes below this count as zero
PIVOT_EPS: float = float(np.finfo(float).eps)


class SingularPivotError(ArithmeticError):
    def __init__(self, column: int, pivot: complex):
        super().__init__(f"zero pivot {pivot} in column {column}")
        self.column = column
        self.pivot = pivot


@dataclass(frozen=True)
class SingularPivot:
    """
    Elimination hit a (numerically) zero pivot.

    This is ambiguous: the determinant may really be 0, or elimination
    without pivoting may simply have broken down. Fall back to an exact
    expansion before trusting the zero.
    """

    column: int
    pivot: complex

    @property
    def value(self) -> complex:
        return 0j


def lu_decompose(matrix, pivot: bool = False) -> Tuple[np.ndarray, List[int]]:
    """
    Gaussian elimination of an n by n complex matrix to upper-triangular U.

    Parameters
    ----------
    matrix : (n, n) array-like of complex
        Never modified; elimination runs on a private copy.
    pivot : bool
        If True, swap in the largest-magnitude entry of each column
        (partial pivoting). Default False: pivots are taken in place.

    Returns
    -------
    U    : np.ndarray  (n, n) complex
        Upper-triangular factor.
    perm : list[int]
        Row i of U comes from original row perm[i].

    Raises
    ------
    SingularPivotError : if a pivot has squared magnitude below PIVOT_EPS.
    """
    U = as_matrix(matrix).astype(complex, copy=True)
    n = U.shape[0]
    perm = list(range(n))  # Identity Permutation

    for col in range(n):
        if pivot:
            # Largest |U[k, col]| for k >= col gives the most stable pivot
            col_slice = np.abs(U[col:, col])
            pivot_row = col + int(col_slice.argmax())
            if pivot_row != col:
                U[[col, pivot_row]] = U[[pivot_row, col]]
                perm[col], perm[pivot_row] = perm[pivot_row], perm[col]

        p = U[col, col]
        if p.real * p.real + p.imag * p.imag < PIVOT_EPS:
            raise SingularPivotError(col, complex(p))

        # Eliminate entries below the pivot
        factors = U[col + 1 :, col] / p
        U[col + 1 :, col:] -= factors[:, None] * U[col, col:]

    return U, perm


def determinant_by_lu(matrix, pivot: bool = False) -> Union[complex, SingularPivot]:
    """
    Determinant as the product of the elimination pivots, O(n^3).

    Only meaningful for purely numeric input. Returns SingularPivot
    instead of a number when elimination meets a zero pivot.
    """
    try:
        U, perm = lu_decompose(matrix, pivot=pivot)
    except SingularPivotError as e:
        logger.debug(f"{e}; reporting singular, use an expansion method to confirm")
        return SingularPivot(e.column, e.pivot)

    det = complex(np.prod(np.diag(U)))
    return det * permutation_sign(perm)
