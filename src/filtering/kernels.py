from typing import Final

import numpy as np

from container_models.base import Kernel
from exceptions import FilterArgumentError
from filtering.validation import _validate_sigma

GAUSSIAN_TRUNCATE: Final[float] = 4.0

SOBEL_DERIVATIVE: Final = np.array([-1.0, 0.0, 1.0])
SOBEL_SMOOTHING: Final = np.array([1.0, 2.0, 1.0])
SOBEL_DERIVATIVE.setflags(write=False)
SOBEL_SMOOTHING.setflags(write=False)


def gaussian_radius(sigma: float, truncate: float = GAUSSIAN_TRUNCATE) -> int:
    """Return the kernel radius that truncates a Gaussian at `truncate` sigmas."""
    _validate_sigma(sigma)
    return int(truncate * sigma + 0.5)


def gaussian_kernel_1d(sigma: float, radius: int) -> Kernel:
    """
    Create a normalized, sampled 1D Gaussian kernel.

    The unnormalized Gaussian ``exp(-x^2 / (2 sigma^2))`` is sampled at
    ``x = -radius, ..., radius`` and divided by the sum of the samples.

    :param sigma: Standard deviation in samples.
    :param radius: Kernel radius; the kernel has ``2 * radius + 1`` taps.
    :return: Kernel whose taps sum to one.
    :raises FilterArgumentError: If sigma is not positive or radius is negative.
    """
    _validate_sigma(sigma)
    if radius < 0:
        raise FilterArgumentError(f"Kernel radius must be non-negative, got {radius}")

    x = np.arange(-radius, radius + 1, dtype=np.float64)
    with np.errstate(over="ignore"):
        kernel = np.exp(-0.5 * (x / sigma) ** 2)
    return kernel / kernel.sum()
