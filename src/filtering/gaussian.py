import numpy as np
from loguru import logger
from numpy.typing import ArrayLike, NDArray

from container_models.base import FloatArray3D
from filtering.correlation import correlate_1d
from filtering.data_formats import Axis, BorderMode
from filtering.kernels import gaussian_kernel_1d, gaussian_radius
from filtering.validation import _validate_sigma, _validate_volume


def gaussian_filter_1d(
    volume: ArrayLike,
    sigma: float,
    axis: Axis | int,
    border_mode: BorderMode | int = BorderMode.REPLICATE,
    cval: float = 0.0,
    *,
    output: NDArray[np.floating] | None = None,
) -> FloatArray3D:
    """
    Smooth a volume with a 1D Gaussian along one axis.

    The kernel is truncated at ``int(4 * sigma + 0.5)`` samples and reversed
    before correlating, so the result is a Gaussian convolution.

    :param volume: Volume of shape (depth, rows, columns).
    :param sigma: Standard deviation in samples.
    :param axis: ``0`` for rows, ``1`` for columns, ``2`` for depth.
    :param border_mode: How samples beyond the edges are resolved.
    :param cval: Fill value for ``CONSTANT`` mode.
    :param output: Optional float64 array of the input's shape to write into.
    :return: The smoothed volume.
    """
    kernel = gaussian_kernel_1d(sigma, gaussian_radius(sigma))
    return correlate_1d(volume, kernel[::-1], axis, border_mode, cval, output=output)


def gaussian_filter(
    volume: ArrayLike,
    sigma: float,
    border_mode: BorderMode | int = BorderMode.REPLICATE,
    cval: float = 0.0,
) -> FloatArray3D:
    """
    Smooth a volume with an isotropic 3D Gaussian.

    Runs :func:`gaussian_filter_1d` along rows, columns and depth, in that
    order, each pass reading the previous pass's output.

    :param volume: Volume of shape (depth, rows, columns).
    :param sigma: Standard deviation in samples, the same along every axis.
    :param border_mode: How samples beyond the edges are resolved.
    :param cval: Fill value for ``CONSTANT`` mode.
    :return: The smoothed volume.
    :raises FilterArgumentError: If sigma is not positive.
    """
    data = _validate_volume(volume)
    _validate_sigma(sigma)
    if data.size == 0:
        return data.copy()

    logger.debug(f"Gaussian filter, sigma={sigma}, on volume {data.shape}")
    result = data
    for axis in Axis:
        result = gaussian_filter_1d(result, sigma, axis, border_mode, cval)
    return result
