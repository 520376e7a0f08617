"""
Pydantic data containers passed between the steps of a filter pipeline.

Each step receives a validated :class:`VolumeContainer` and returns one, so
steps can be bound together with the ``returns`` library without any of them
having to re-check the shape or dtype of the data they get.
"""

from .volume import VolumeContainer


__all__ = ["VolumeContainer"]
