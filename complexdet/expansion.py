# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import functools
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .complex_ops import add, mul, scale, sub
from .permutations import permutations_of, sign_of
from .utils import MAX_EXPANSION_ORDER, TRACE_MAX_ORDER, as_matrix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceEntry:
    """One signed term sign * prod_i M[i, perm[i]] of the Leibniz sum."""

    permutation: Tuple[int, ...]
    sign: int
    term: complex


@dataclass(frozen=True)
class DeterminantResult:
    value: complex
    trace: Optional[Tuple[TraceEntry, ...]] = None


@dataclass(frozen=True)
class CofactorTerm:
    """(-1)^col * entry * det(minor) for one column of row 0."""

    column: int
    sign: int
    entry: complex
    minor_det: complex
    term: complex


def _check_order(n: int, max_order: int, method: str) -> None:
    if n > max_order:
        logger.warning(
            f"{method}(): n={n} exceeds {max_order}, expansion is O(n!) and will be slow"
        )


def determinant_by_permutation_expansion(
    matrix,
    trace: Optional[bool] = None,
    max_order: int = MAX_EXPANSION_ORDER,
) -> DeterminantResult:
    """
    Leibniz (Levi-Civita) expansion:

        det M = sum over permutations p of sign(p) * prod_i M[i, p[i]]

    Parameters
    ----------
    matrix : (n, n) array-like of complex
    trace : bool | None
        Record one TraceEntry per permutation. None means "only when
        n <= TRACE_MAX_ORDER".
    max_order : int
        Sizes above this log a warning.

    Returns
    -------
    DeterminantResult with the value and, if requested, the trace.
    """
    M = as_matrix(matrix)
    n = M.shape[0]
    _check_order(n, max_order, "determinant_by_permutation_expansion")
    if trace is None:
        trace = n <= TRACE_MAX_ORDER

    acc = 0j
    steps = []
    for p in permutations_of(n):
        sign = sign_of(p)
        prod = functools.reduce(mul, (M[i, p[i]] for i in range(n)), 1 + 0j)
        if sign == -1:
            prod = scale(prod, -1)
        acc = add(acc, prod)
        if trace:
            steps.append(TraceEntry(p, sign, prod))

    return DeterminantResult(acc, tuple(steps) if trace else None)


def minor(matrix, row: int, col: int) -> np.ndarray:
    """The (n-1, n-1) matrix left after deleting `row` and `col`."""
    M = np.asarray(matrix)
    n = M.shape[0]
    keep_r = np.arange(n) != row
    keep_c = np.arange(n) != col
    return M[keep_r][:, keep_c]


def _cofactor(M: np.ndarray) -> complex:
    n = M.shape[0]
    if n == 1:
        return complex(M[0, 0])
    if n == 2:
        # |a b; c d| = ad - bc
        return sub(mul(M[0, 0], M[1, 1]), mul(M[0, 1], M[1, 0]))

    terms = (
        scale(mul(M[0, j], _cofactor(minor(M, 0, j))), 1 if j % 2 == 0 else -1)
        for j in range(n)
    )
    return functools.reduce(add, terms, 0j)


def determinant_by_cofactor_expansion(
    matrix, max_order: int = MAX_EXPANSION_ORDER
) -> complex:
    """
    Laplace expansion along the first row, recursing on minors.
    """
    M = as_matrix(matrix)
    _check_order(M.shape[0], max_order, "determinant_by_cofactor_expansion")
    return _cofactor(M)


def cofactor_terms(matrix) -> Tuple[CofactorTerm, ...]:
    """
    The top-level terms of the Laplace expansion along row 0.
    Their `term` values sum to the determinant.
    """
    M = as_matrix(matrix)
    n = M.shape[0]
    if n == 1:
        return (CofactorTerm(0, 1, complex(M[0, 0]), 1 + 0j, complex(M[0, 0])),)

    out = []
    for j in range(n):
        sign = 1 if j % 2 == 0 else -1
        entry = complex(M[0, j])
        minor_det = _cofactor(minor(M, 0, j))
        term = scale(mul(entry, minor_det), sign)
        out.append(CofactorTerm(j, sign, entry, minor_det, term))
    return tuple(out)
