# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix-entry parsing
====================

Turns free-form entry text into a complex value using a small explicit
grammar, tried in this order:

1. ``""``                     -> 0
2. ``i``, ``-i``, ``3i``, ``-2.5i``
3. ``a/b``, ``-3/2``          (b == 0 gives 0)
4. ``-1+3i``, ``2-i``, ``3/2-4i``  (split at the last sign before ``i``)
5. ``-2.75``
6. anything with letters besides ``i`` is symbolic, the rest is a failure

Forms such as ``3/2+1/4i`` are outside the grammar and are reported as
failures. No general expression evaluator is ever used.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np

from .utils import MatrixShapeError, as_matrix

logger = logging.getLogger(__name__)

_DECIMAL = r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)"

_IMAGINARY_RE = re.compile(rf"^([+-]?)({_DECIMAL})?i$")
_FRACTION_RE = re.compile(rf"^([+-]?{_DECIMAL})/({_DECIMAL})$")
# greedy real part so the split lands on the final sign
_COMBINED_RE = re.compile(rf"^(.+)([+-])({_DECIMAL})?i$")
_REAL_RE = re.compile(rf"^[+-]?{_DECIMAL}$")
# any run of Unicode letters
_SYMBOL_RE = re.compile(r"[^\W\d_]+")
_NONZERO_DIGIT_RE = re.compile(r"[1-9]")


class _OutOfRange(ValueError):
    """Literal does not fit a finite, nonzero-preserving double."""


@dataclass(frozen=True)
class ParsedValue:
    value: complex


@dataclass(frozen=True)
class Symbolic:
    """Entry holds free variables; route it to a symbolic evaluator."""

    text: str
    tokens: Tuple[str, ...]

    @property
    def value(self) -> complex:
        return 0j


@dataclass(frozen=True)
class ParseFailure:
    """Entry matched no numeric form; ``value`` is the 0 fallback."""

    text: str
    reason: str

    @property
    def value(self) -> complex:
        return 0j


EntryResult = Union[ParsedValue, Symbolic, ParseFailure]


def _float(text: str) -> float:
    x = float(text)
    if not math.isfinite(x) or (x == 0.0 and _NONZERO_DIGIT_RE.search(text)):
        raise _OutOfRange(text)
    return x


def _fraction(num: str, den: str) -> float:
    if not _NONZERO_DIGIT_RE.search(den):
        logger.warning(f"Division by zero in entry {num}/{den}, using 0")
        return 0.0
    a = _float(num)
    q = a / _float(den)
    if not math.isfinite(q) or (q == 0.0 and a != 0.0):
        raise _OutOfRange(f"{num}/{den}")
    return q


def _real(text: str):
    """Decimal or fraction -> float, None if neither."""
    if _REAL_RE.match(text):
        return _float(text)
    m = _FRACTION_RE.match(text)
    if m:
        return _fraction(m.group(1), m.group(2))
    return None


def _imag(sign: str, coef: str) -> float:
    c = _float(coef) if coef else 1.0
    return -c if sign == "-" else c


def _numeric(s: str):
    """Grammar forms 2-5 -> complex, None if s matches none of them."""
    m = _IMAGINARY_RE.match(s)
    if m:
        return complex(0.0, _imag(m.group(1), m.group(2)))

    m = _FRACTION_RE.match(s)
    if m:
        return complex(_fraction(m.group(1), m.group(2)), 0.0)

    m = _COMBINED_RE.match(s)
    if m:
        re_part = _real(m.group(1))
        if re_part is not None:
            return complex(re_part, _imag(m.group(2), m.group(3)))

    if _REAL_RE.match(s):
        return complex(_float(s), 0.0)
    return None


def parse_entry(text) -> EntryResult:
    """
    Parse one matrix entry.

    Never raises: unparseable text comes back as ParseFailure (logged)
    and text with variables as Symbolic. Literals that overflow a double,
    or underflow it to zero, are failures too, so every value is finite.
    """
    raw = str(text)
    s = re.sub(r"\s+", "", raw)

    if s == "":
        return ParsedValue(0j)

    try:
        value = _numeric(s)
    except _OutOfRange:
        logger.warning(f"Entry {raw[:40]!r} is out of floating-point range, using 0")
        return ParseFailure(raw, "value out of range")
    if value is not None:
        return ParsedValue(value)

    tokens = tuple(t for t in _SYMBOL_RE.findall(s) if t != "i")
    if tokens:
        return Symbolic(raw, tokens)

    logger.warning(f"Could not parse entry {raw[:40]!r}, using 0")
    return ParseFailure(raw, "no numeric form matched")


@dataclass(frozen=True)
class ParsedMatrix:
    """
    matrix   : read-only (n, n) complex array, 0 where parsing did not succeed
    symbolic : (row, col, Symbolic) for every symbolic entry
    failures : (row, col, ParseFailure) for every unparseable entry
    """

    matrix: np.ndarray
    symbolic: Tuple[Tuple[int, int, Symbolic], ...] = ()
    failures: Tuple[Tuple[int, int, ParseFailure], ...] = ()

    @property
    def is_symbolic(self) -> bool:
        return bool(self.symbolic)


def parse_matrix(rows: Sequence[Sequence]) -> ParsedMatrix:
    """
    Parse a square grid of entry strings and/or numbers.

    Numbers pass through untouched; strings go through parse_entry.
    The shape is checked before anything is parsed.
    """
    grid = [list(r) for r in rows]
    n = len(grid)
    if n == 0 or any(len(r) != n for r in grid):
        raise MatrixShapeError(
            f"invalid matrix shape: {[len(r) for r in grid]} for {n} rows"
        )

    values: List[List[complex]] = []
    symbolic = []
    failures = []
    for i, row in enumerate(grid):
        out = []
        for j, entry in enumerate(row):
            if isinstance(entry, (int, float, complex)) and not isinstance(entry, bool):
                out.append(complex(entry))
                continue
            result = parse_entry(entry)
            if isinstance(result, Symbolic):
                symbolic.append((i, j, result))
            elif isinstance(result, ParseFailure):
                failures.append((i, j, result))
            out.append(result.value)
        values.append(out)

    return ParsedMatrix(as_matrix(values), tuple(symbolic), tuple(failures))
