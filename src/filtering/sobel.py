import numpy as np
from loguru import logger
from numpy.typing import ArrayLike

from container_models.base import FloatArray3D
from filtering.correlation import correlate_1d
from filtering.data_formats import Axis, BorderMode
from filtering.kernels import SOBEL_DERIVATIVE, SOBEL_SMOOTHING
from filtering.validation import _validate_axis, _validate_volume


def sobel(
    volume: ArrayLike,
    axis: Axis | int = Axis.ROW,
    border_mode: BorderMode | int = BorderMode.REPLICATE,
    cval: float = 0.0,
) -> FloatArray3D:
    """
    Approximate the gradient of a volume along one axis with a 3D Sobel operator.

    The central difference ``[-1, 0, 1]`` is applied along `axis`, then the
    smoothing kernel ``[1, 2, 1]`` along each other axis in ascending order.
    Neither kernel is normalized.

    :param volume: Volume of shape (depth, rows, columns).
    :param axis: Gradient direction: ``0`` rows, ``1`` columns, ``2`` depth.
    :param border_mode: How samples beyond the edges are resolved.
    :param cval: Fill value for ``CONSTANT`` mode.
    :return: The gradient volume, same shape as the input.
    :raises FilterArgumentError: If the axis is invalid.
    """
    data = _validate_volume(volume)
    if data.size == 0:
        return data.copy()
    axis = _validate_axis(axis)

    logger.debug(f"Sobel filter along {axis.name} on volume {data.shape}")
    result = correlate_1d(data, SOBEL_DERIVATIVE, axis, border_mode, cval)
    for other in Axis:
        if other is not axis:
            result = correlate_1d(result, SOBEL_SMOOTHING, other, border_mode, cval)
    return result


def gradient_magnitude(
    volume: ArrayLike,
    border_mode: BorderMode | int = BorderMode.REPLICATE,
    cval: float = 0.0,
) -> FloatArray3D:
    """Euclidean norm of the Sobel gradients along all three axes."""
    data = _validate_volume(volume)
    if data.size == 0:
        return data.copy()
    squared = sum(sobel(data, axis, border_mode, cval) ** 2 for axis in Axis)
    return np.sqrt(squared)
