"""
Railway-oriented filter pipelines.

The filter steps selected by :class:`~settings.FilterSettings` (Gaussian
smoothing first, then the Sobel gradient) are bound together with the
``returns`` library. Every step either passes its output on along the success
track or switches to the failure track, after which the remaining steps are
skipped and the exception that caused the failure is carried to the end.

:func:`filter_volume` returns that ``Result``; :func:`run_pipeline` unwraps
it, re-raising the captured exception on failure.
"""

from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Failure, ResultE, Success, safe

from container_models import VolumeContainer
from container_models.base import Volume
from mutations import GaussianSmoothing, SobelGradient, VolumeMutation
from settings import FilterSettings, get_settings
from utils.logger import log_railway_function


def build_pipeline(settings: FilterSettings) -> list[VolumeMutation]:
    """
    Create the filter steps enabled in `settings`.

    :param settings: Filter configuration.
    :return: The steps in the order they are applied.
    """
    steps: list[VolumeMutation] = []
    if settings.use_gaussian:
        steps.append(
            GaussianSmoothing(
                sigma=settings.sigma,
                border_mode=settings.border_mode,
                cval=settings.cval,
            )
        )
    if settings.use_sobel:
        steps.append(
            SobelGradient(
                axis=settings.sobel_axis,
                border_mode=settings.border_mode,
                cval=settings.cval,
            )
        )
    return steps


@safe
def _to_container(volume: Volume | VolumeContainer) -> VolumeContainer:
    if isinstance(volume, VolumeContainer):
        return volume
    return VolumeContainer(data=volume)


@log_railway_function(
    failure_message="Failed to filter volume",
    success_message="Successfully filtered volume",
)
def filter_volume(
    volume: Volume | VolumeContainer, settings: FilterSettings | None = None
) -> ResultE[VolumeContainer]:
    """
    Run the configured filter steps on a volume.

    :param volume: Volume of shape (depth, rows, columns) or a container holding one.
    :param settings: Filter configuration, read from the environment when omitted.
    :return: ``Success`` with the filtered container, or ``Failure`` with the exception.
    """
    settings = settings or get_settings()
    return flow(
        _to_container(volume),
        *(bind(step) for step in build_pipeline(settings)),
    )


def run_pipeline(
    volume: Volume | VolumeContainer, settings: FilterSettings | None = None
) -> Volume:
    """
    Run the configured filter steps and return the filtered data.

    :raises Exception: The exception that made a step fail.
    """
    match filter_volume(volume, settings):
        case Success(container):
            return container.data
        case Failure(error):
            raise error
