"""
Separable linear filtering of 3D volumes.

Volumes are float64 arrays indexed ``[z][y][x]`` with shape (depth, rows,
columns). Filter axes are numbered ``0`` = rows, ``1`` = columns,
``2`` = depth (see :class:`Axis`), which is *not* numpy's axis order.

Every filter is composed of 1D correlations along a single axis
(:func:`correlate_1d`) with one of four border modes (:class:`BorderMode`).
"""

from filtering.boundary import border_value, is_close, mirror_index, mirror_indices
from filtering.correlation import classify_kernel, correlate_1d
from filtering.data_formats import Axis, BorderMode, KernelSymmetry, Pad3D
from filtering.gaussian import gaussian_filter, gaussian_filter_1d
from filtering.kernels import (
    SOBEL_DERIVATIVE,
    SOBEL_SMOOTHING,
    gaussian_kernel_1d,
    gaussian_radius,
)
from filtering.padding import extract_slice, pad_2d, pad_3d
from filtering.sobel import gradient_magnitude, sobel

__all__ = [
    # Data formats
    "Axis",
    "BorderMode",
    "KernelSymmetry",
    "Pad3D",
    # Boundary handling
    "border_value",
    "is_close",
    "mirror_index",
    "mirror_indices",
    "extract_slice",
    "pad_2d",
    "pad_3d",
    # Correlation engine
    "classify_kernel",
    "correlate_1d",
    # Kernels
    "SOBEL_DERIVATIVE",
    "SOBEL_SMOOTHING",
    "gaussian_kernel_1d",
    "gaussian_radius",
    # Filters
    "gaussian_filter",
    "gaussian_filter_1d",
    "gradient_magnitude",
    "sobel",
]
