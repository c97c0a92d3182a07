# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Permutations of {0..n-1} and their parity.

Enumerating all n! permutations and counting inversions costs
O(n! * n^2); anything past n = 8 or 9 is impractical.
"""

import itertools
from typing import Iterator, Sequence, Tuple


def permutations_of(n: int) -> Iterator[Tuple[int, ...]]:
    """Yield every permutation of range(n) in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return itertools.permutations(range(n))


def inversions(perm: Sequence[int]) -> int:
    """Number of pairs i < j with perm[i] > perm[j]."""
    n = len(perm)
    return sum(1 for i in range(n) for j in range(i + 1, n) if perm[i] > perm[j])


def sign_of(perm: Sequence[int]) -> int:
    """Return +1 or -1 depending on permutation parity."""
    return -1 if inversions(perm) & 1 else 1


def permutation_sign(perm: Sequence[int]) -> int:
    """
    Parity via cycle decomposition, O(n): n - #cycles transpositions.
    Used for the row swaps of pivoted elimination.
    """
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles
    return -1 if swaps & 1 else 1
