from loguru import logger

from container_models import VolumeContainer
from filtering.data_formats import Axis, BorderMode
from filtering.gaussian import gaussian_filter
from filtering.sobel import sobel
from filtering.validation import _validate_axis, _validate_sigma
from mutations.base import VolumeMutation


class GaussianSmoothing(VolumeMutation):
    """Isotropic Gaussian smoothing of the whole volume."""

    def __init__(
        self,
        sigma: float,
        border_mode: BorderMode = BorderMode.REPLICATE,
        cval: float = 0.0,
    ) -> None:
        """
        :param sigma: Standard deviation in samples.
        :param border_mode: How samples beyond the edges are resolved.
        :param cval: Fill value for ``CONSTANT`` mode.
        :raises FilterArgumentError: If sigma is not positive.
        """
        _validate_sigma(sigma)
        self.sigma = sigma
        self.border_mode = BorderMode(border_mode)
        self.cval = cval

    def apply_on_volume(self, volume: VolumeContainer) -> VolumeContainer:
        logger.info(f"Applying Gaussian smoothing (sigma={self.sigma})")
        return VolumeContainer(
            data=gaussian_filter(volume.data, self.sigma, self.border_mode, self.cval)
        )


class SobelGradient(VolumeMutation):
    """Directional Sobel gradient of the volume."""

    def __init__(
        self,
        axis: Axis = Axis.ROW,
        border_mode: BorderMode = BorderMode.REPLICATE,
        cval: float = 0.0,
    ) -> None:
        self.axis = _validate_axis(axis)
        self.border_mode = BorderMode(border_mode)
        self.cval = cval

    def apply_on_volume(self, volume: VolumeContainer) -> VolumeContainer:
        logger.info(f"Applying Sobel gradient along {self.axis.name}")
        return VolumeContainer(
            data=sobel(volume.data, self.axis, self.border_mode, self.cval)
        )
