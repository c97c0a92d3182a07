# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
complexdet
==========

Determinants of small complex matrices, computed three ways and
cross-checked against each other.

Public API
~~~~~~~~~~
- Entry parsing
    - `parse_entry`, `parse_matrix`
- Determinants
    - `determinant_by_permutation_expansion` (Leibniz / Levi-Civita)
    - `determinant_by_cofactor_expansion` (Laplace)
    - `determinant_by_lu` (Gaussian elimination, numeric input only)
- Checking and display
    - `compare_results`, `format_complex`
- All of the above in one call
    - `compute_determinants`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import complexdet as cd
>>> report = cd.compute_determinants([["1+2i", "0"], ["0", "1-2i"]])
>>> cd.format_complex(report.values["cofactor"])
'5'
>>> bool(report.agreement)
True
"""

from importlib.metadata import version as _pkg_version

from .complex_ops import add, approx_equal, format_complex, mul, scale, sub
from .consistency import Agreement, compare_results

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .elimination import SingularPivot, determinant_by_lu, lu_decompose
from .expansion import (
    CofactorTerm,
    DeterminantResult,
    TraceEntry,
    cofactor_terms,
    determinant_by_cofactor_expansion,
    determinant_by_permutation_expansion,
    minor,
)
from .parsing import (
    ParsedMatrix,
    ParsedValue,
    ParseFailure,
    Symbolic,
    parse_entry,
    parse_matrix,
)
from .permutations import permutations_of, sign_of
from .report import ALL_METHODS, DeterminantReport, compute_determinants
from .utils import (
    DEFAULT_TOLERANCE,
    EPS,
    MAX_EXPANSION_ORDER,
    TRACE_MAX_ORDER,
    MatrixShapeError,
    as_matrix,
)

__all__ = [
    "add",
    "sub",
    "mul",
    "scale",
    "approx_equal",
    "format_complex",
    "parse_entry",
    "parse_matrix",
    "ParsedValue",
    "Symbolic",
    "ParseFailure",
    "ParsedMatrix",
    "permutations_of",
    "sign_of",
    "minor",
    "determinant_by_permutation_expansion",
    "determinant_by_cofactor_expansion",
    "cofactor_terms",
    "DeterminantResult",
    "TraceEntry",
    "CofactorTerm",
    "determinant_by_lu",
    "lu_decompose",
    "SingularPivot",
    "compare_results",
    "Agreement",
    "compute_determinants",
    "DeterminantReport",
    "ALL_METHODS",
    "as_matrix",
    "MatrixShapeError",
    "EPS",
    "DEFAULT_TOLERANCE",
    "TRACE_MAX_ORDER",
    "MAX_EXPANSION_ORDER",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show complexdet”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
