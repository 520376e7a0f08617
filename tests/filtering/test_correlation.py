import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.extra.numpy import arrays
from scipy import ndimage

from container_models.base import Volume
from exceptions import FilterArgumentError, VolumeShapeError
from filtering import Axis, BorderMode, KernelSymmetry, classify_kernel, correlate_1d
from filtering.correlation import _accumulate

from tests.helper_functions import ARRAY_AXES, SCIPY_MODES, reference_correlate_1d

finite_floats = st.floats(
    min_value=-100, max_value=100, allow_nan=False, allow_infinity=False
)


class TestClassifyKernel:
    @pytest.mark.parametrize(
        "kernel, expected",
        [
            pytest.param([1.0, 2.0, 1.0], KernelSymmetry.SYMMETRIC, id="smoothing"),
            pytest.param([-1.0, 0.0, 1.0], KernelSymmetry.ANTISYMMETRIC, id="derivative"),
            pytest.param([1.0, 0.0, 0.0], KernelSymmetry.GENERAL, id="shift"),
            pytest.param([3.0], KernelSymmetry.SYMMETRIC, id="single_tap"),
            pytest.param([0.0, 5.0, 0.0], KernelSymmetry.SYMMETRIC, id="both_prefers_symmetric"),
            pytest.param(
                [1.0, 2.0, 1.0 + 1e-7], KernelSymmetry.SYMMETRIC, id="within_tolerance"
            ),
            pytest.param(
                [1.0, 2.0, 1.0 + 1e-5], KernelSymmetry.GENERAL, id="beyond_tolerance"
            ),
            pytest.param(
                [2.0, -1.0, 4.0, 1.0, -2.0],
                KernelSymmetry.ANTISYMMETRIC,
                id="antisymmetric_ignores_centre",
            ),
        ],
    )
    def test_classification(self, kernel: list[float], expected: KernelSymmetry):
        assert classify_kernel(kernel) is expected

    def test_custom_tolerance(self):
        assert classify_kernel([1.0, 0.0, 1.1], tolerance=0.5) is KernelSymmetry.SYMMETRIC


class TestCorrelate1D:
    def test_derivative_on_ramp(self):
        volume = np.array([[[0.0, 1.0, 2.0, 3.0, 4.0]]])

        result = correlate_1d(volume, [-1.0, 0.0, 1.0], Axis.COLUMN, BorderMode.REPLICATE)

        np.testing.assert_allclose(result, [[[1.0, 2.0, 2.0, 2.0, 1.0]]])

    @pytest.mark.parametrize(
        "border_mode, expected",
        [
            pytest.param(BorderMode.REFLECT, [10.0, 10.0, 20.0, 30.0], id="reflect"),
            pytest.param(BorderMode.REFLECT_101, [20.0, 10.0, 20.0, 30.0], id="reflect_101"),
            pytest.param(BorderMode.REPLICATE, [10.0, 10.0, 20.0, 30.0], id="replicate"),
            pytest.param(BorderMode.CONSTANT, [-5.0, 10.0, 20.0, 30.0], id="constant"),
        ],
    )
    def test_shift_kernel_reads_across_the_border(
        self, border_mode: BorderMode, expected: list[float]
    ):
        volume = np.array([[[10.0, 20.0, 30.0, 40.0]]])

        result = correlate_1d(volume, [1.0, 0.0, 0.0], 1, border_mode, cval=-5.0)

        np.testing.assert_array_equal(result, [[expected]])

    @pytest.mark.parametrize("axis", list(Axis))
    def test_identity_kernel(self, random_volume: Volume, axis: Axis):
        result = correlate_1d(random_volume, [0.0, 1.0, 0.0], axis)
        np.testing.assert_array_equal(result, random_volume)

    @pytest.mark.parametrize("axis", list(Axis))
    @pytest.mark.parametrize("border_mode", list(BorderMode))
    def test_single_tap_identity(
        self, random_volume: Volume, axis: Axis, border_mode: BorderMode
    ):
        result = correlate_1d(random_volume, [1.0], axis, border_mode, cval=9.0)

        np.testing.assert_array_equal(result, random_volume)
        assert not np.shares_memory(result, random_volume)

    def test_single_tap_scales(self, random_volume: Volume):
        result = correlate_1d(random_volume, [-2.0], Axis.DEPTH)
        np.testing.assert_array_equal(result, -2.0 * random_volume)

    @pytest.mark.parametrize("axis", list(Axis))
    @pytest.mark.parametrize("border_mode", list(BorderMode))
    @pytest.mark.parametrize(
        "kernel",
        [
            pytest.param([1.0, 2.0, 1.0], id="symmetric"),
            pytest.param([-1.0, 0.0, 1.0], id="antisymmetric"),
            pytest.param([0.5, -1.0, 2.0], id="general"),
        ],
    )
    def test_matches_sample_by_sample_reference(
        self,
        random_volume: Volume,
        axis: Axis,
        border_mode: BorderMode,
        kernel: list[float],
    ):
        result = correlate_1d(random_volume, kernel, axis, border_mode, cval=1.5)
        expected = reference_correlate_1d(random_volume, kernel, axis, border_mode, 1.5)
        assert result.shape == random_volume.shape
        np.testing.assert_allclose(result, expected, atol=1e-12)

    @pytest.mark.parametrize("axis", list(Axis))
    @pytest.mark.parametrize("border_mode", list(BorderMode))
    def test_matches_scipy(self, random_volume: Volume, axis: Axis, border_mode: BorderMode):
        kernel = np.array([0.1, -0.3, 0.2, 0.7, 0.3])

        result = correlate_1d(random_volume, kernel, axis, border_mode, cval=-2.0)
        expected = ndimage.correlate1d(
            random_volume,
            kernel,
            axis=ARRAY_AXES[axis],
            mode=SCIPY_MODES[border_mode],
            cval=-2.0,
        )

        np.testing.assert_allclose(result, expected, atol=1e-12)

    @pytest.mark.parametrize(
        "kernel",
        [
            pytest.param(np.array([1.0, 4.0, 6.0, 4.0, 1.0]), id="symmetric"),
            pytest.param(np.array([-1.0, -2.0, 0.0, 2.0, 1.0]), id="antisymmetric"),
        ],
    )
    def test_folded_accumulators_agree_with_general(
        self, random_volume: Volume, kernel: np.ndarray
    ):
        lines = np.pad(random_volume, ((0, 0), (0, 0), (2, 2)), mode="edge")
        size = random_volume.shape[-1]

        folded = _accumulate(lines, kernel, classify_kernel(kernel), size)
        general = _accumulate(lines, kernel, KernelSymmetry.GENERAL, size)

        np.testing.assert_allclose(folded, general, atol=1e-9)

    @given(
        first=arrays(np.float64, (2, 3, 4), elements=finite_floats),
        second=arrays(np.float64, (2, 3, 4), elements=finite_floats),
        scale=finite_floats,
        axis=st.sampled_from(list(Axis)),
    )
    def test_linearity(self, first, second, scale, axis):
        kernel = [0.25, 0.5, -0.25]

        combined = correlate_1d(scale * first + second, kernel, axis)
        separate = scale * correlate_1d(first, kernel, axis) + correlate_1d(
            second, kernel, axis
        )

        np.testing.assert_allclose(combined, separate, rtol=1e-9, atol=1e-6)

    def test_does_not_modify_input(self):
        volume = np.arange(24.0).reshape(2, 3, 4)
        original = volume.copy()

        correlate_1d(volume, [1.0, 2.0, 3.0], Axis.DEPTH)

        np.testing.assert_array_equal(volume, original)

    def test_returns_contiguous_float64(self):
        volume = np.arange(24).reshape(2, 3, 4)

        result = correlate_1d(volume, [1, 2, 1], Axis.DEPTH)

        assert result.dtype == np.float64
        assert result.flags.c_contiguous

    def test_writes_into_output(self, random_volume: Volume):
        output = np.full(random_volume.shape, np.nan)

        result = correlate_1d(random_volume, [1.0, 2.0, 1.0], Axis.ROW, output=output)

        assert result is output
        np.testing.assert_allclose(
            output, correlate_1d(random_volume, [1.0, 2.0, 1.0], Axis.ROW)
        )

    @pytest.mark.parametrize(
        "output",
        [
            pytest.param(np.zeros((4, 5, 5)), id="wrong_shape"),
            pytest.param(np.zeros((4, 5, 6), dtype=np.float32), id="wrong_dtype"),
            pytest.param([[[0.0]]], id="not_an_array"),
        ],
    )
    def test_rejects_unfit_output(self, random_volume: Volume, output):
        with pytest.raises(VolumeShapeError):
            correlate_1d(random_volume, [1.0, 2.0, 1.0], Axis.ROW, output=output)

    def test_empty_kernel_returns_zeros(self, random_volume: Volume):
        result = correlate_1d(random_volume, [], Axis.ROW)
        np.testing.assert_array_equal(result, np.zeros_like(random_volume))

    def test_empty_kernel_leaves_output_unwritten(self, random_volume: Volume):
        output = np.full(random_volume.shape, 3.0)

        result = correlate_1d(random_volume, [], Axis.ROW, output=output)

        assert result is output
        assert np.all(output == 3.0)

    def test_empty_volume_skips_axis_validation(self):
        result = correlate_1d(np.empty((0, 2, 2)), [1.0, 2.0, 1.0], 7)
        assert result.shape == (0, 2, 2)

    @pytest.mark.parametrize("axis", [-1, 3, 10])
    def test_invalid_axis_raises(self, random_volume: Volume, axis: int):
        with pytest.raises(FilterArgumentError, match="Invalid axis"):
            correlate_1d(random_volume, [1.0, 2.0, 1.0], axis)

    @pytest.mark.parametrize(
        "kernel", [pytest.param([1.0, 1.0], id="even"), pytest.param([[1.0]], id="2d")]
    )
    def test_invalid_kernel_raises(self, random_volume: Volume, kernel):
        with pytest.raises(FilterArgumentError, match="Kernel"):
            correlate_1d(random_volume, kernel, Axis.ROW)

    def test_non_3d_volume_raises(self):
        with pytest.raises(VolumeShapeError):
            correlate_1d(np.ones((3, 3)), [1.0, 2.0, 1.0], Axis.ROW)

    def test_logs_accumulator(self, random_volume: Volume, caplog: pytest.LogCaptureFixture):
        with caplog.at_level("DEBUG"):
            correlate_1d(random_volume, [-1.0, 0.0, 1.0], Axis.DEPTH)
        assert "antisymmetric kernel of size 3" in caplog.text
