#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time the three determinant methods against numpy.linalg.det.

    python -m complexdet.benchmark_det
"""

import time

import numpy as np
import pandas as pd

from complexdet.elimination import SingularPivot, determinant_by_lu
from complexdet.expansion import (
    determinant_by_cofactor_expansion,
    determinant_by_permutation_expansion,
)
from complexdet.utils import random_complex_matrix

REPEATS = 5  # best of 5 runs
EXPANSION_SIZES = [2, 3, 4, 5, 6, 7]
LU_SIZES = [10, 50, 200]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def best(f, *args, **kwargs):
    return min(wall(f, *args, **kwargs) for _ in range(REPEATS))


def main():
    records = []
    for n in EXPANSION_SIZES + LU_SIZES:
        A = random_complex_matrix(n, seed=n)
        t_np = best(np.linalg.det, A)
        ref = np.linalg.det(A)
        scale = max(1.0, abs(ref))

        kernels = [("LU", lambda: determinant_by_lu(A))]
        if n in EXPANSION_SIZES:
            kernels += [
                ("Leibniz", lambda: determinant_by_permutation_expansion(A).value),
                ("Laplace", lambda: determinant_by_cofactor_expansion(A)),
            ]

        for name, f in kernels:
            t = best(f)
            d = f()
            if isinstance(d, SingularPivot):
                rel_err = float("nan")
            else:
                rel_err = abs(d - ref) / scale
            records.append((name, f"{n}x{n}", t, t / t_np, rel_err))

    df = pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "rel_err"],
    )
    print(df.to_string(index=False))
    return df


if __name__ == "__main__":
    main()
