# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
One-call determinant computation for a presentation layer.

The caller hands over the raw grid (entry strings and/or numbers) and gets
plain data back: values per method, traces, agreement verdicts, and
diagnostics about entries that could not be read numerically.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .consistency import Agreement, compare_results
from .elimination import SingularPivot, determinant_by_lu
from .expansion import (
    CofactorTerm,
    TraceEntry,
    cofactor_terms,
    determinant_by_cofactor_expansion,
    determinant_by_permutation_expansion,
)
from .parsing import ParseFailure, Symbolic, parse_matrix
from .utils import DEFAULT_TOLERANCE, MAX_EXPANSION_ORDER, TRACE_MAX_ORDER

logger = logging.getLogger(__name__)

PERMUTATION = "permutation"
COFACTOR = "cofactor"
LU = "lu"
ALL_METHODS = (PERMUTATION, COFACTOR, LU)


@dataclass(frozen=True)
class DeterminantReport:
    values: Dict[str, complex]
    trace: Optional[Tuple[TraceEntry, ...]] = None
    cofactor_trace: Optional[Tuple[CofactorTerm, ...]] = None
    agreement: Optional[Agreement] = None
    lu_agreement: Optional[Agreement] = None
    lu_singular: Optional[SingularPivot] = None
    symbolic: Tuple[Tuple[int, int, Symbolic], ...] = ()
    failures: Tuple[Tuple[int, int, ParseFailure], ...] = ()

    @property
    def is_symbolic(self) -> bool:
        return bool(self.symbolic)


def compute_determinants(
    entries: Sequence[Sequence],
    tolerance: float = DEFAULT_TOLERANCE,
    methods: Sequence[str] = ALL_METHODS,
    max_order: int = MAX_EXPANSION_ORDER,
) -> DeterminantReport:
    """
    Parse `entries`, run the requested methods and cross-check them.

    Parameters
    ----------
    entries : n by n grid of strings / numbers
    tolerance : float
        Componentwise tolerance for the agreement verdicts.
    methods : subset of ALL_METHODS
    max_order : int
        Expansion methods are skipped above this size; LU still runs.

    Returns
    -------
    DeterminantReport. If any entry is symbolic no method runs and only
    `symbolic` / `failures` are filled in.

    Raises
    ------
    MatrixShapeError : ragged or empty input.
    ValueError       : unknown method name.
    """
    unknown = set(methods) - set(ALL_METHODS)
    if unknown:
        raise ValueError(f"unknown methods {sorted(unknown)}, expected {ALL_METHODS}")

    parsed = parse_matrix(entries)
    if parsed.is_symbolic:
        logger.info(
            f"{len(parsed.symbolic)} symbolic entries, numeric methods not applied"
        )
        return DeterminantReport({}, symbolic=parsed.symbolic, failures=parsed.failures)

    M = parsed.matrix
    n = M.shape[0]
    values: Dict[str, complex] = {}
    trace = cofactor_trace = agreement = lu_agreement = lu_singular = None

    run_expansion = n <= max_order
    if not run_expansion and (PERMUTATION in methods or COFACTOR in methods):
        logger.warning(f"n={n} > {max_order}: skipping expansion methods")

    if run_expansion and PERMUTATION in methods:
        result = determinant_by_permutation_expansion(M, max_order=max_order)
        values[PERMUTATION] = result.value
        trace = result.trace

    if run_expansion and COFACTOR in methods:
        values[COFACTOR] = determinant_by_cofactor_expansion(M, max_order=max_order)
        if n <= TRACE_MAX_ORDER:
            cofactor_trace = cofactor_terms(M)

    if LU in methods:
        lu = determinant_by_lu(M)
        if isinstance(lu, SingularPivot):
            lu_singular = lu
        else:
            values[LU] = lu

    if PERMUTATION in values and COFACTOR in values:
        agreement = compare_results(values[PERMUTATION], values[COFACTOR], tolerance)

    exact = values.get(COFACTOR, values.get(PERMUTATION))
    if LU in values and exact is not None:
        lu_agreement = compare_results(values[LU], exact, tolerance)

    return DeterminantReport(
        values=values,
        trace=trace,
        cofactor_trace=cofactor_trace,
        agreement=agreement,
        lu_agreement=lu_agreement,
        lu_singular=lu_singular,
        failures=parsed.failures,
    )
