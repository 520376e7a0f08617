from enum import Enum, IntEnum, auto
from typing import NamedTuple


class BorderMode(IntEnum):
    """How samples outside a volume are resolved.

    Unknown codes degrade to ``CONSTANT``, e.g. ``BorderMode(7) is BorderMode.CONSTANT``.
    """

    CONSTANT = 0
    REPLICATE = 1
    REFLECT = 2
    REFLECT_101 = 3

    @classmethod
    def _missing_(cls, value: object) -> "BorderMode":
        return cls.CONSTANT


class Axis(IntEnum):
    """Filter axis codes. Note that these do not follow numpy's axis order."""

    ROW = 0
    COLUMN = 1
    DEPTH = 2

    @property
    def array_axis(self) -> int:
        """The numpy axis of a ``(depth, rows, columns)`` array."""
        return _ARRAY_AXES[self]


_ARRAY_AXES = {Axis.ROW: 1, Axis.COLUMN: 2, Axis.DEPTH: 0}


class KernelSymmetry(Enum):
    """Kernel classification used to pick the accumulator."""

    SYMMETRIC = auto()
    ANTISYMMETRIC = auto()
    GENERAL = auto()


class Pad3D(NamedTuple):
    """Pad amounts on both sides of each axis of a volume."""

    row: int
    column: int
    depth: int = 0
