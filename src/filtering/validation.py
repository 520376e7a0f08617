import numpy as np
from numpy.typing import ArrayLike

from container_models.base import FloatArray1D, FloatArray3D
from exceptions import FilterArgumentError, VolumeShapeError
from filtering.data_formats import Axis


def _validate_axis(axis: int) -> Axis:
    """Validate an axis code.

    :param axis: Axis code to validate.
    :return: The matching `Axis`.
    :raises FilterArgumentError: If the axis is not 0, 1 or 2.
    """
    if axis not in (Axis.ROW, Axis.COLUMN, Axis.DEPTH):
        raise FilterArgumentError(f"Invalid axis (0-2), got {axis}")
    return Axis(axis)


def _validate_volume(volume: ArrayLike) -> FloatArray3D:
    """Coerce input to a contiguous float64 volume.

    :param volume: Nested sequence or array of shape (depth, rows, columns).
    :return: The volume as a float64 array.
    :raises VolumeShapeError: If the input is not three-dimensional.
    """
    try:
        data = np.ascontiguousarray(volume, dtype=np.float64)
    except ValueError as error:
        raise VolumeShapeError(f"Volume is not a dense 3D array: {error}") from error
    if data.ndim != 3:
        raise VolumeShapeError(f"Volume must be 3D, got {data.ndim}D")
    return data


def _validate_kernel(kernel: ArrayLike) -> FloatArray1D:
    """Coerce input to a 1D float64 kernel of odd length.

    An empty kernel is returned as is.

    :raises FilterArgumentError: If the kernel is not 1D or has an even length.
    """
    weights = np.asarray(kernel, dtype=np.float64)
    if weights.ndim != 1:
        raise FilterArgumentError(f"Kernel must be 1D, got {weights.ndim}D")
    if weights.size and weights.size % 2 == 0:
        raise FilterArgumentError(f"Kernel length must be odd, got {weights.size}")
    return weights


def _validate_sigma(sigma: float) -> None:
    """Validate a Gaussian standard deviation.

    :raises FilterArgumentError: If sigma is not a positive finite number.
    """
    if not np.isfinite(sigma) or sigma <= 0:
        raise FilterArgumentError(f"sigma must be positive, got {sigma}")
