"""
One-dimensional correlation along a single axis of a volume.

This is the primitive every filter in :mod:`filtering` is built from. The
volume is padded along the active axis with :func:`~filtering.padding.pad_3d`,
after which each output sample is a weighted sum of ``len(kernel)``
neighbouring samples along that axis:

    out[c] = sum_k kernel[k] * a[c - r + k],    r = len(kernel) // 2

The kernel is applied as given, so this is a correlation and not a
convolution: reverse the kernel to convolve.

Kernels that are (anti)symmetric about their centre tap are evaluated in
folded form, pairing the samples at ``c - i`` and ``c + i`` before
multiplying, which halves the number of multiplications. The order of the
additions for each accumulator is fixed:

- symmetric:      a[c] * w[r] + sum_i (a[c - i] + a[c + i]) * w[r + i]
- antisymmetric:  a[c] * w[r] + sum_i (a[c + i] - a[c - i]) * w[r + i]
- general:        0 + sum_k a[c - r + k] * w[k]

The antisymmetric pair is ``a[c + i] - a[c - i]`` with the right-hand weight
so that it equals the general sum; the reversed pair would negate the result.

All lines of the volume are accumulated at once, one tap at a time.
"""

import numpy as np
from loguru import logger
from numpy.typing import ArrayLike, NDArray

from container_models.base import FloatArray1D, FloatArray3D
from exceptions import VolumeShapeError
from filtering.boundary import KERNEL_TOLERANCE
from filtering.data_formats import Axis, BorderMode, KernelSymmetry
from filtering.padding import pad_3d
from filtering.validation import _validate_axis, _validate_kernel, _validate_volume


def classify_kernel(
    kernel: ArrayLike, tolerance: float = KERNEL_TOLERANCE
) -> KernelSymmetry:
    """
    Classify a kernel by comparing the taps on both sides of its centre.

    A kernel that is both symmetric and antisymmetric within `tolerance`
    (e.g. all outer taps close to zero) is reported as symmetric.

    :param kernel: Odd-length 1D kernel.
    :param tolerance: Absolute tolerance for the tap comparison.
    :return: The kernel's symmetry class.
    """
    weights = _validate_kernel(kernel)
    radius = weights.size // 2
    right = weights[radius + 1 :]
    left = weights[:radius][::-1]

    if np.all(np.abs(right - left) < tolerance):
        return KernelSymmetry.SYMMETRIC
    if np.all(np.abs(right + left) < tolerance):
        return KernelSymmetry.ANTISYMMETRIC
    return KernelSymmetry.GENERAL


def _accumulate(
    lines: NDArray[np.floating],
    weights: FloatArray1D,
    symmetry: KernelSymmetry,
    size: int,
) -> NDArray[np.floating]:
    """
    Correlate every padded line in `lines` with `weights`.

    :param lines: Padded samples with the active axis last, shape (..., size + 2r).
    :param weights: Odd-length kernel.
    :param symmetry: Accumulator to use.
    :param size: Unpadded length of the active axis.
    :return: Array of shape (..., size).
    """
    radius = weights.size // 2

    def tap(offset: int) -> NDArray[np.floating]:
        start = radius + offset
        return lines[..., start : start + size]

    match symmetry:
        case KernelSymmetry.SYMMETRIC:
            result = tap(0) * weights[radius]
            for i in range(1, radius + 1):
                result += (tap(-i) + tap(i)) * weights[radius + i]
        case KernelSymmetry.ANTISYMMETRIC:
            result = tap(0) * weights[radius]
            for i in range(1, radius + 1):
                result += (tap(i) - tap(-i)) * weights[radius + i]
        case _:
            result = np.zeros(lines.shape[:-1] + (size,), dtype=np.float64)
            for k in range(weights.size):
                result += tap(k - radius) * weights[k]
    return result


def _validate_output(output: NDArray, shape: tuple[int, ...]) -> NDArray[np.floating]:
    if not isinstance(output, np.ndarray) or output.dtype != np.float64:
        raise VolumeShapeError("Output must be a float64 numpy array")
    if output.shape != shape:
        raise VolumeShapeError(
            f"Output shape {output.shape} does not match input shape {shape}"
        )
    return output


def correlate_1d(
    volume: ArrayLike,
    kernel: ArrayLike,
    axis: Axis | int,
    border_mode: BorderMode | int = BorderMode.REPLICATE,
    cval: float = 0.0,
    *,
    output: NDArray[np.floating] | None = None,
) -> FloatArray3D:
    """
    Correlate a volume with a 1D kernel along one axis.

    :param volume: Volume of shape (depth, rows, columns).
    :param kernel: Odd-length 1D kernel, applied without reversal.
    :param axis: ``0`` for rows, ``1`` for columns, ``2`` for depth.
    :param border_mode: How samples beyond the edges are resolved.
    :param cval: Fill value for ``CONSTANT`` mode.
    :param output: Optional float64 array of the input's shape to write into.
    :return: The correlated volume (`output` if given), same shape as the input.
        An empty volume or an empty kernel leaves the output unwritten.
    :raises FilterArgumentError: If the axis is invalid or the kernel length is even.
    :raises VolumeShapeError: If the volume is not 3D or `output` does not fit.
    """
    data = _validate_volume(volume)
    weights = _validate_kernel(kernel)
    if output is not None:
        output = _validate_output(output, data.shape)

    if data.size == 0 or weights.size == 0:
        return output if output is not None else np.zeros_like(data)

    axis = _validate_axis(axis)
    radius = weights.size // 2
    pads = [0, 0, 0]
    pads[axis] = radius
    padded = pad_3d(data, pads, border_mode, cval)

    symmetry = classify_kernel(weights)
    logger.debug(
        f"Correlating volume {data.shape} along {axis.name} "
        f"with {symmetry.name.lower()} kernel of size {weights.size}"
    )
    lines = np.moveaxis(padded, axis.array_axis, -1)
    result = _accumulate(lines, weights, symmetry, data.shape[axis.array_axis])
    result = np.moveaxis(result, -1, axis.array_axis)

    if output is None:
        return np.ascontiguousarray(result)
    output[...] = result
    return output

