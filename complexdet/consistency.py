# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import enum
import logging

from .complex_ops import approx_equal, format_complex
from .utils import EPS

logger = logging.getLogger(__name__)


class Agreement(enum.Enum):
    MATCH = "match"
    MISMATCH = "mismatch"

    def __bool__(self) -> bool:
        return self is Agreement.MATCH


def compare_results(a: complex, b: complex, tolerance: float = EPS) -> Agreement:
    """
    Cross-check two determinants computed by different methods.

    A mismatch is returned, not raised. Beyond rounding noise it points
    at a bug in one of the algorithms.
    """
    if approx_equal(a, b, tolerance):
        return Agreement.MATCH
    logger.warning(
        f"Determinants disagree: {format_complex(a)} vs {format_complex(b)} "
        f"(tolerance {tolerance:g})"
    )
    return Agreement.MISMATCH
