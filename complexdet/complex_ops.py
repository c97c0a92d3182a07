# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Complex arithmetic on Python's immutable ``complex``.

Every helper returns a new value. NumPy ``complex128`` scalars work too
since they subclass ``complex``.
"""

import numpy as np

from .utils import EPS

SIGNIFICANT_DIGITS = 12


def add(a: complex, b: complex) -> complex:
    return complex(a.real + b.real, a.imag + b.imag)


def sub(a: complex, b: complex) -> complex:
    return complex(a.real - b.real, a.imag - b.imag)


def mul(a: complex, b: complex) -> complex:
    return complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def scale(a: complex, k: float) -> complex:
    return complex(a.real * k, a.imag * k)


def approx_equal(a: complex, b: complex, tol: float = EPS) -> bool:
    """Componentwise |a - b| < tol on both the real and imaginary parts."""
    return abs(a.real - b.real) < tol and abs(a.imag - b.imag) < tol


def _snap(x: float) -> float:
    """Round to SIGNIFICANT_DIGITS to hide floating-point noise."""
    snapped = float(f"{x:.{SIGNIFICANT_DIGITS}g}")
    if abs(snapped) < EPS:
        return 0.0
    return snapped


def _number(x: float) -> str:
    # positional, shortest round-trip digits, no trailing ".0"
    return np.format_float_positional(x, trim="-")


def format_complex(a: complex) -> str:
    """
    Canonical text form of a complex value.

    Components keep SIGNIFICANT_DIGITS significant digits, so re-parsing
    the text recovers the value to about 1e-12 *relative* to its size;
    `approx_equal` with the absolute EPS only holds for magnitudes below 1.

    >>> format_complex(complex(1, 2))
    '1+2i'
    >>> format_complex(complex(0, -1))
    '-i'
    >>> format_complex(complex(1.5, 1e-15))
    '1.5'
    """
    re = _snap(a.real)
    im = _snap(a.imag)

    if im == 0.0:
        return _number(re)

    if im == 1.0:
        im_str = "i"
    elif im == -1.0:
        im_str = "-i"
    else:
        im_str = f"{_number(im)}i"

    if re == 0.0:
        return im_str
    sign = "+" if im > 0 else ""
    return f"{_number(re)}{sign}{im_str}"
