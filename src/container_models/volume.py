"""Volume container.

::

    +--------------------------------------+
    |           VolumeContainer            |
    |--------------------------------------|
    | data   : Volume  (depth, rows, cols) |
    | depth  : int                         |
    | height : int                         |
    | width  : int                         |
    | is_empty : bool                      |
    +--------------------------------------+

Mutations operate on :class:`VolumeContainer` so that filter steps can be
chained in a pipeline. The numerical functions in :mod:`filtering` work on
plain numpy arrays.
"""

import numpy as np

from container_models.base import ConfigBaseModel, Volume


class VolumeContainer(ConfigBaseModel):
    data: Volume

    @property
    def depth(self) -> int:
        """Return the number of slices."""
        return self.data.shape[0]

    @property
    def height(self) -> int:
        """Return the number of rows of each slice."""
        return self.data.shape[1]

    @property
    def width(self) -> int:
        """Return the number of columns of each slice."""
        return self.data.shape[2]

    @property
    def is_empty(self) -> bool:
        return self.data.size == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VolumeContainer):
            return NotImplemented
        return np.array_equal(self.data, other.data, equal_nan=True)
