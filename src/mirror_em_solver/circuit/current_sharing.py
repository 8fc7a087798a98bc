"""Frequency-dependent current sharing between parallel conductors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class CurrentGroup:
    """Conductors connected in parallel and fed with an imposed total current.

    Parameters
    ----------
    name
        Display name of the group (e.g. ``wire 1``).
    indices
        0-based indices of the conductors in the group.
    current
        Total current of the group [A], complex phasor allowed.
    """

    name: str
    indices: tuple[int, ...]
    current: complex

    def __post_init__(self) -> None:
        object.__setattr__(self, "indices", tuple(int(idx) for idx in self.indices))

    def validate(self) -> None:
        """Raise ``ValueError`` when the group definition is invalid."""
        if not self.name or not self.name.strip():
            raise ValueError("group name must be a non-empty string")
        if not self.indices:
            raise ValueError(f"group {self.name!r} must contain at least one conductor")
        if len(set(self.indices)) != len(self.indices):
            raise ValueError(f"group {self.name!r} contains duplicated conductor indices")
        if not np.isfinite(complex(self.current)):
            raise ValueError(f"group {self.name!r} current must be finite")


@dataclass(frozen=True)
class CurrentSharingResult:
    """Conductor currents and voltages for every frequency.

    ``currents`` and ``voltages`` have shape (n_conductor, n_frequency).
    """

    frequencies: np.ndarray
    currents: np.ndarray
    voltages: np.ndarray
    groups: tuple[CurrentGroup, ...]

    def group_current(self, group: CurrentGroup) -> np.ndarray:
        """Return the total current of ``group`` for every frequency."""
        return np.sum(self.currents[list(group.indices), :], axis=0)


def _validate_square(name: str, matrix, n_total: int) -> np.ndarray:
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape != (n_total, n_total):
        raise ValueError(f"{name} matrix must have shape {(n_total, n_total)}, got {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise ValueError(f"{name} matrix contains non-finite values")
    return matrix


def _validate_groups(groups: Sequence[CurrentGroup], n_total: int) -> None:
    if not groups:
        raise ValueError("groups must be non-empty")

    used: set[int] = set()
    for group in groups:
        group.validate()
        for idx in group.indices:
            if idx < 0 or idx >= n_total:
                raise ValueError(f"group {group.name!r}: conductor index {idx} out of range")
            if idx in used:
                raise ValueError(f"conductor {idx} belongs to more than one group")
            used.add(idx)


def _incidence_matrix(groups: Sequence[CurrentGroup], n_total: int) -> np.ndarray:
    """Return the (n_total, n_group) matrix linking conductors to groups."""
    incidence = np.zeros((n_total, len(groups)), dtype=np.float64)
    for col, group in enumerate(groups):
        incidence[list(group.indices), col] = 1.0
    return incidence


def solve_current_sharing(
    resistance,
    inductance,
    groups: Sequence[CurrentGroup],
    frequencies,
) -> CurrentSharingResult:
    """Solve the current sharing between parallel conductors.

    The conductors of a group share the same terminal voltage and their
    currents add up to the group current. For every frequency f, with the
    impedance matrix ``Z = R + j 2π f L``, the saddle-point system

        [ Z   A ] [ I   ]   [ 0   ]
        [ A^T 0 ] [ V_g ] = [ I_g ]

    is solved, where ``A`` is the conductor/group incidence matrix.
    A conductor outside every group is a shorted branch: its voltage
    ``(Z I)_i`` is zero and it carries the current induced by the others.

    Parameters
    ----------
    resistance, inductance : array_like
        Resistance [Ohm] and inductance [H] matrices, shape (n, n).
    groups : Sequence[CurrentGroup]
        Disjoint conductor groups with their imposed currents.
    frequencies : array_like
        Non-negative frequencies [Hz].

    Returns
    -------
    CurrentSharingResult
        Conductor currents and induced voltages ``Z @ I`` per frequency.
    """
    shape = np.shape(resistance)
    if len(shape) != 2 or shape[0] == 0:
        raise ValueError(f"resistance must be a non-empty square matrix, got shape {shape}")
    n_total = shape[0]
    R = _validate_square("resistance", resistance, n_total)
    L = _validate_square("inductance", inductance, n_total)
    _validate_groups(groups, n_total)

    frequencies = np.atleast_1d(np.asarray(frequencies, dtype=np.float64))
    if frequencies.ndim != 1 or frequencies.size == 0:
        raise ValueError("frequencies must be a non-empty 1-D array")
    if not np.all(np.isfinite(frequencies)) or np.any(frequencies < 0.0):
        raise ValueError("frequencies must be finite and non-negative")

    n_group = len(groups)
    incidence = _incidence_matrix(groups, n_total)
    group_currents = np.array([complex(group.current) for group in groups], dtype=np.complex128)

    rhs = np.concatenate([np.zeros(n_total, dtype=np.complex128), group_currents])

    currents = np.zeros((n_total, frequencies.size), dtype=np.complex128)
    voltages = np.zeros((n_total, frequencies.size), dtype=np.complex128)
    for i, frequency in enumerate(frequencies):
        s = 2.0j * np.pi * frequency
        impedance = R + s * L

        system = np.block([
            [impedance, incidence],
            [incidence.T, np.zeros((n_group, n_group))],
        ])
        try:
            solution = np.linalg.solve(system, rhs)
        except np.linalg.LinAlgError as exc:
            raise ValueError(
                f"current sharing system is singular at f={frequency:g} Hz"
            ) from exc

        currents[:, i] = solution[:n_total]
        voltages[:, i] = impedance @ currents[:, i]

    return CurrentSharingResult(
        frequencies=frequencies,
        currents=currents,
        voltages=voltages,
        groups=tuple(groups),
    )
