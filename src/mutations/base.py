"""
Volume mutations
================

A :class:`VolumeMutation` is a single filter step applied to a
:class:`~container_models.volume.VolumeContainer`. Steps are configured
through their constructor and applied by calling them, which wraps the
result in a ``returns`` ``Result`` so that steps can be bound together into
a pipeline (see :mod:`pipelines`)::

    from returns.pipeline import flow
    from returns.pointfree import bind
    from returns.result import Success

    result = flow(
        Success(VolumeContainer(data=volume)),
        bind(GaussianSmoothing(sigma=2.0)),
        bind(SobelGradient(axis=Axis.COLUMN)),
    )

An exception raised by a step ends up as a ``Failure`` holding it.
"""

from abc import ABC, abstractmethod

from returns.result import safe

from container_models import VolumeContainer


class VolumeMutation(ABC):
    """Represents a single filter step applied to a :class:`VolumeContainer`."""

    def skip_predicate(self, volume: VolumeContainer) -> bool:
        """
        Determine whether this step should be skipped for `volume`.

        :return: ``True`` to return `volume` unchanged, ``False`` to apply the step.
        """
        return volume.is_empty

    @safe
    def __call__(self, volume: VolumeContainer) -> VolumeContainer:
        """Apply the step unless :meth:`skip_predicate` says otherwise."""
        if self.skip_predicate(volume):
            return volume
        return self.apply_on_volume(volume)

    @abstractmethod
    def apply_on_volume(self, volume: VolumeContainer) -> VolumeContainer:
        """
        Apply the step to `volume`.

        :param volume: The input container.
        :return: A container holding the filtered data.
        """
