# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import pytest

from complexdet.permutations import (
    inversions,
    permutation_sign,
    permutations_of,
    sign_of,
)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 6])
def test_permutations_are_exhaustive(n):
    perms = list(permutations_of(n))
    assert len(perms) == math.factorial(n)
    assert len(set(perms)) == len(perms)
    for p in perms:
        assert sorted(p) == list(range(n))


def test_enumeration_is_deterministic():
    assert list(permutations_of(4)) == list(permutations_of(4))
    assert list(permutations_of(3))[0] == (0, 1, 2)


@pytest.mark.parametrize(
    "perm,inv,sign",
    [
        ((0, 1, 2), 0, 1),
        ((1, 0, 2), 1, -1),
        ((2, 0, 1), 2, 1),
        ((2, 1, 0), 3, -1),
        ((3, 2, 1, 0), 6, 1),
        ((0,), 0, 1),
    ],
)
def test_sign_from_inversions(perm, inv, sign):
    assert inversions(perm) == inv
    assert sign_of(perm) == sign


def test_cycle_parity_matches_inversion_parity():
    for p in permutations_of(5):
        assert permutation_sign(p) == sign_of(p)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        permutations_of(-1)
