"""Twisted conductors modelled as a weighted average of permutations."""

from __future__ import annotations

from typing import Tuple

import numpy as np


def solve_twisting(resistance, inductance, weights, permutations) -> Tuple[np.ndarray, np.ndarray]:
    """Return the resistance and inductance matrices of twisted conductors.

    Along a twisted bundle every conductor successively occupies the positions
    of the other ones. Each column ``k`` of ``permutations`` lists, for every
    conductor, the index of the position it occupies over a fraction
    ``weights[k]`` of the length:

        R_t = Σ_k w_k R[p_k, p_k]
        L_t = Σ_k w_k L[p_k, p_k]

    Parameters
    ----------
    resistance, inductance : array_like
        Matrices of the untwisted conductors, shape (n, n).
    weights : array_like
        Weight of each permutation, shape (n_permutation,).
    permutations : array_like
        0-based permutation indices, shape (n, n_permutation).

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        Twisted resistance and inductance matrices.
    """
    R = np.asarray(resistance, dtype=np.float64)
    L = np.asarray(inductance, dtype=np.float64)
    if R.ndim != 2 or R.shape[0] != R.shape[1]:
        raise ValueError(f"resistance must be a square matrix, got shape {R.shape}")
    if L.shape != R.shape:
        raise ValueError(f"inductance must have shape {R.shape}, got {L.shape}")

    n_total = R.shape[0]
    weights = np.atleast_1d(np.asarray(weights, dtype=np.float64))
    permutations = np.asarray(permutations)
    if permutations.ndim != 2 or permutations.shape != (n_total, weights.size):
        raise ValueError(
            f"permutations must have shape {(n_total, weights.size)}, got {permutations.shape}"
        )
    if permutations.dtype.kind not in "iu":
        raise ValueError("permutations must contain integer indices")

    expected = np.arange(n_total)
    R_twisted = np.zeros_like(R)
    L_twisted = np.zeros_like(L)
    for k, weight in enumerate(weights):
        idx = permutations[:, k]
        if not np.array_equal(np.sort(idx), expected):
            raise ValueError(f"permutation column {k} is not a permutation of 0..{n_total - 1}")

        R_twisted += weight * R[np.ix_(idx, idx)]
        L_twisted += weight * L[np.ix_(idx, idx)]

    return R_twisted, L_twisted
