from collections.abc import Sequence
from functools import partial
from typing import Annotated

from numpy import asarray, floating, float64, ndarray, number
from numpy.typing import DTypeLike, NDArray
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, PlainSerializer


class ConfigBaseModel(BaseModel):
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
        revalidate_instances="always",
    )


def serialize_ndarray[T: number](array_: NDArray[T]) -> list[T]:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def coerce_to_array[T: number](
    dtype: DTypeLike, value: Sequence[T] | NDArray[T] | None
) -> NDArray[T] | None:
    """
    Coerce input to a numpy array of `dtype`.

    Nested sequences (e.g. parsed JSON) and arrays of another dtype are converted,
    arrays of the right dtype are passed through without copying.
    """
    if isinstance(value, Sequence | ndarray):
        try:
            return asarray(value, dtype=dtype)
        except OverflowError as ofe:
            raise ValueError("Array's value(s) out of range") from ofe
        except TypeError as te:
            raise ValueError(f"Array's value(s) are not numeric: {te}") from te

    return value


def validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := len(value.shape)) != n_dims:
        raise ValueError(
            f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}"
        )
    return value


type FloatArray = Annotated[
    NDArray[floating],
    BeforeValidator(partial(coerce_to_array, float64)),
    PlainSerializer(serialize_ndarray),
]

type FloatArray1D = Annotated[FloatArray, AfterValidator(partial(validate_shape, 1))]
type FloatArray2D = Annotated[FloatArray, AfterValidator(partial(validate_shape, 2))]
type FloatArray3D = Annotated[FloatArray, AfterValidator(partial(validate_shape, 3))]

type Kernel = FloatArray1D  # Shape: (K,), K odd
type Volume = FloatArray3D  # Shape: (D, H, W)
