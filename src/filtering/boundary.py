"""
Boundary index mapping.

Resolves indices that fall outside ``[0, size)`` for the reflective border
modes. Only a single fold is applied, so :func:`mirror_index` is exact for
indices in ``[-size + 1, 2 * size - 2]``; :func:`mirror_indices` clamps
anything beyond that onto the edge.

==============  ==============================  ========================
mode            index < 0                       index >= size
==============  ==============================  ========================
REPLICATE       0                               size - 1
REFLECT         -index - 1                      2 * size - index - 1
REFLECT_101     -index                          2 * size - index - 2
CONSTANT        (no index, use the constant)    (no index)
==============  ==============================  ========================
"""

import numpy as np
from numpy.typing import NDArray

from filtering.data_formats import BorderMode

KERNEL_TOLERANCE = 1e-6


def is_close(a: float, b: float, tolerance: float = KERNEL_TOLERANCE) -> bool:
    """Return True if `a` and `b` differ by strictly less than `tolerance`."""
    return abs(a - b) < tolerance


def mirror_index(index: int, size: int, border_mode: BorderMode | int) -> int:
    """
    Map a 1D index onto ``[0, size)`` according to `border_mode`.

    In-range indices are returned unchanged by the reflective modes. For
    ``CONSTANT`` (and unknown mode codes) the result is 0 and meaningless: use
    :func:`border_value` to get the constant instead.

    :param index: Logical index, possibly negative or ``>= size``.
    :param size: Length of the axis. A non-positive size returns 0.
    :param border_mode: Border mode or its integer code.
    :return: The index to read from.
    """
    if size <= 0:
        return 0

    match BorderMode(border_mode):
        case BorderMode.REPLICATE:
            return min(max(index, 0), size - 1)
        case BorderMode.REFLECT:
            if index < 0:
                return -index - 1
            if index >= size:
                return 2 * size - index - 1
            return index
        case BorderMode.REFLECT_101:
            if index < 0:
                return -index
            if index >= size:
                return 2 * size - index - 2
            return index
        case _:
            return 0


def mirror_indices(
    indices: NDArray[np.integer], size: int, border_mode: BorderMode | int
) -> NDArray[np.intp]:
    """
    Vectorised :func:`mirror_index`.

    The folded indices are clamped to ``[0, size)``, so a pad that is too wide
    for a single fold repeats the edge sample instead of reading out of bounds.

    :param indices: Integer array of logical indices.
    :param size: Length of the axis.
    :param border_mode: Border mode or its integer code.
    :return: Array of in-range indices with the shape of `indices`.
    """
    indices = np.asarray(indices, dtype=np.intp)
    if size <= 0:
        return np.zeros_like(indices)

    match BorderMode(border_mode):
        case BorderMode.REPLICATE:
            mirrored = indices
        case BorderMode.REFLECT:
            mirrored = np.where(
                indices < 0,
                -indices - 1,
                np.where(indices >= size, 2 * size - indices - 1, indices),
            )
        case BorderMode.REFLECT_101:
            mirrored = np.where(
                indices < 0,
                -indices,
                np.where(indices >= size, 2 * size - indices - 2, indices),
            )
        case _:
            return np.zeros_like(indices)

    return np.clip(mirrored, 0, size - 1)


def border_value(
    values: NDArray[np.floating],
    index: int,
    border_mode: BorderMode | int,
    cval: float = 0.0,
) -> float:
    """
    Read ``values[index]`` with border extension.

    :param values: 1D array of samples.
    :param index: Logical index, possibly outside the array.
    :param border_mode: Border mode or its integer code.
    :param cval: Value returned for out-of-range indices in ``CONSTANT`` mode.
    :return: The sample value.
    """
    size = len(values)
    if 0 <= index < size:
        return float(values[index])
    if BorderMode(border_mode) is BorderMode.CONSTANT:
        return cval
    return float(values[mirror_index(index, size, border_mode)])
