from mutations.base import VolumeMutation
from mutations.filter import GaussianSmoothing, SobelGradient

__all__ = ["VolumeMutation", "GaussianSmoothing", "SobelGradient"]
