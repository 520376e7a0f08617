from collections.abc import Sequence

import numpy as np
from loguru import logger
from numpy.typing import ArrayLike, NDArray

from container_models.base import FloatArray2D, FloatArray3D
from exceptions import FilterArgumentError, VolumeShapeError
from filtering.boundary import mirror_indices
from filtering.data_formats import Axis, BorderMode, Pad3D
from filtering.validation import _validate_volume


def _pad_axis(
    data: NDArray[np.floating],
    pad: int,
    array_axis: int,
    border_mode: BorderMode,
    cval: float,
) -> NDArray[np.floating]:
    """Extend `data` by `pad` samples on both sides of a single numpy axis."""
    if pad == 0:
        return data

    if border_mode is BorderMode.CONSTANT:
        pad_width = [(0, 0)] * data.ndim
        pad_width[array_axis] = (pad, pad)
        return np.pad(data, pad_width, mode="constant", constant_values=cval)

    size = data.shape[array_axis]
    indices = mirror_indices(np.arange(-pad, size + pad), size, border_mode)
    return np.take(data, indices, axis=array_axis)


def _to_pad3d(pads: Sequence[int]) -> Pad3D:
    """Convert (row, column[, depth]) pad amounts.

    :raises FilterArgumentError: If fewer than two amounts or a negative amount is given.
    """
    if len(pads) < 2:
        raise FilterArgumentError(
            f"Pads must have at least 2 elements (row, column), got {len(pads)}"
        )
    pad = Pad3D(*(int(p) for p in pads[:3]))
    if any(p < 0 for p in pad):
        raise FilterArgumentError(f"Pad values must be non-negative, got {pad}")
    return pad


def pad_2d(
    data: NDArray[np.floating],
    pad_row: int,
    pad_col: int,
    border_mode: BorderMode | int,
    cval: float = 0.0,
) -> NDArray[np.floating]:
    """Pad the last two axes (rows, columns) of `data`.

    Rows are extended first and columns second, so the corners are resolved by
    composing the per-axis rules. Leading axes, e.g. the depth of a volume, are
    carried along unpadded.

    :param data: Array of shape (..., rows, columns).
    :param pad_row: Rows added above and below.
    :param pad_col: Columns added left and right.
    :param border_mode: Border mode or its integer code.
    :param cval: Fill value for ``CONSTANT`` mode.
    :return: Array of shape (..., rows + 2 * pad_row, columns + 2 * pad_col).
    """
    data = np.asarray(data, dtype=np.float64)
    if data.ndim < 2:
        raise VolumeShapeError(f"Data must be at least 2D, got {data.ndim}D")
    if pad_row < 0 or pad_col < 0:
        raise FilterArgumentError(
            f"Pad values must be non-negative, got row={pad_row}, col={pad_col}"
        )
    if data.size == 0:
        return data.copy()

    border_mode = BorderMode(border_mode)
    padded = _pad_axis(data, pad_row, data.ndim - 2, border_mode, cval)
    padded = _pad_axis(padded, pad_col, data.ndim - 1, border_mode, cval)
    return padded if pad_row or pad_col else data.copy()


def pad_3d(
    volume: ArrayLike,
    pads: Sequence[int],
    border_mode: BorderMode | int,
    cval: float = 0.0,
) -> FloatArray3D:
    """Pad a volume along all three axes.

    Every slice is padded in-plane with :func:`pad_2d` before the depth axis
    is extended. ``CONSTANT`` mode fills every exterior sample with `cval`.

    :param volume: Volume of shape (depth, rows, columns).
    :param pads: Pad amounts ``(row, column)`` or ``(row, column, depth)``.
    :param border_mode: Border mode or its integer code.
    :param cval: Fill value for ``CONSTANT`` mode.
    :return: Volume of shape (depth + 2 * pad_depth, rows + 2 * pad_row, columns + 2 * pad_col).
    :raises FilterArgumentError: If `pads` has fewer than two elements or negative values.
    :raises VolumeShapeError: If `volume` is not 3D.
    """
    data = _validate_volume(volume)
    pad = _to_pad3d(pads)
    if data.size == 0:
        return data.copy()

    border_mode = BorderMode(border_mode)
    logger.trace(f"Padding volume of shape {data.shape} by {pad} ({border_mode.name})")
    padded = pad_2d(data, pad.row, pad.column, border_mode, cval)
    padded = _pad_axis(padded, pad.depth, Axis.DEPTH.array_axis, border_mode, cval)
    return padded if any(pad) else data.copy()


def extract_slice(volume: ArrayLike, z: int) -> FloatArray2D:
    """
    Return a copy of slice `z` of a volume.

    :param volume: Volume of shape (depth, rows, columns).
    :param z: Slice index.
    :return: Array of shape (rows, columns).
    :raises VolumeShapeError: If the volume is empty or `z` is out of range.
    """
    data = _validate_volume(volume)
    if data.shape[0] == 0:
        raise VolumeShapeError("Input volume is empty")
    if not 0 <= z < data.shape[0]:
        raise VolumeShapeError(
            f"Z index {z} out of range for volume of depth {data.shape[0]}"
        )
    return data[z].copy()
