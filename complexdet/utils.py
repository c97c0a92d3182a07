# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-12
DEFAULT_TOLERANCE: float = 1e-9

# Expansion methods cost O(N!); past these sizes tracing is noise
# and the sums themselves become slow.
TRACE_MAX_ORDER: int = 5
MAX_EXPANSION_ORDER: int = 9


class MatrixShapeError(ValueError):
    """Raised when the input is not a non-empty square matrix."""


def as_matrix(M) -> np.ndarray:
    """
    Validate M and return it as a fresh, read-only (n, n) complex array.

    Parameters
    ----------
    M : sequence of sequences or ndarray
        Entries must be numbers (int, float, complex).

    Raises
    ------
    MatrixShapeError : if M is empty, ragged or not square.
    TypeError        : if an entry is not numeric.
    """
    if isinstance(M, np.ndarray):
        if M.ndim != 2 or M.shape[0] == 0 or M.shape[0] != M.shape[1]:
            raise MatrixShapeError(f"invalid matrix shape {M.shape}")
        if M.dtype.kind in "US" or (
            M.dtype.kind == "O"
            and any(isinstance(x, (str, bytes)) for x in M.flat)
        ):
            raise TypeError("matrix entries must be numeric, use parse_matrix")
        rows = M
    else:
        rows = [list(r) for r in M]
        n = len(rows)
        if n == 0:
            raise MatrixShapeError("invalid matrix shape: empty matrix")
        for i, r in enumerate(rows):
            if len(r) != n:
                raise MatrixShapeError(
                    f"invalid matrix shape: row {i} has {len(r)} entries, expected {n}"
                )
            # numpy would happily coerce "1+2j"; entry strings go through parsing
            if any(isinstance(x, (str, bytes)) for x in r):
                raise TypeError("matrix entries must be numeric, use parse_matrix")

    try:
        A = np.array(rows, dtype=complex)
    except (TypeError, ValueError) as e:
        raise TypeError(f"matrix entries must be numeric: {e}") from e

    A.flags.writeable = False
    return A


def random_complex_matrix(n, low=-10, high=10, seed=None) -> np.ndarray:
    """
    Build an n by n matrix with independent uniform real and
    imaginary parts in [low, high)

    Returns
    -------
    Read-only matrix with complex128 dtype
    """
    rng = np.random.default_rng(seed)
    re = rng.uniform(low, high, size=(n, n))
    im = rng.uniform(low, high, size=(n, n))
    return as_matrix(re + 1j * im)
