"""Filter pipeline settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from filtering.data_formats import Axis, BorderMode


class FilterSettings(BaseSettings):
    """
    Configuration of the volume filter pipeline.

    Settings can be configured via:

    1. Environment variables (e.g., VOLFILTER_SIGMA=2.5)
    2. .env file in the working directory
    3. Default values defined below

    All settings use the VOLFILTER_ prefix for environment variables.

    .. rubric:: Examples

    Smooth and take the column gradient::

        export VOLFILTER_SIGMA=1.5
        export VOLFILTER_USE_SOBEL=true
        export VOLFILTER_SOBEL_AXIS=1
    """

    # Gaussian smoothing
    sigma: Annotated[
        float,
        Field(
            default=4.0,
            description="Standard deviation of the Gaussian in samples",
            gt=0,
            allow_inf_nan=False,
        ),
    ]
    use_gaussian: Annotated[
        bool,
        Field(default=True, description="Apply Gaussian smoothing"),
    ]

    # Sobel gradient
    use_sobel: Annotated[
        bool,
        Field(default=False, description="Apply the Sobel gradient"),
    ]
    sobel_axis: Annotated[
        Axis,
        Field(
            default=Axis.ROW,
            description="Gradient axis: 0 rows, 1 columns, 2 depth",
        ),
    ]

    # Borders
    border_mode: Annotated[
        BorderMode,
        Field(
            default=BorderMode.REPLICATE,
            description="0 constant, 1 replicate, 2 reflect, 3 reflect-101",
        ),
    ]
    cval: Annotated[
        float,
        Field(default=0.0, description="Fill value for constant borders"),
    ]

    model_config = SettingsConfigDict(
        env_prefix="VOLFILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        validate_assignment=True,
        extra="forbid",
    )

    def log_config(self) -> None:
        """Log the filter configuration."""
        logger.info("Filter configuration:")
        logger.info(f"  Gaussian: {self.use_gaussian} (sigma={self.sigma})")
        logger.info(f"  Sobel: {self.use_sobel} (axis={self.sobel_axis.name})")
        logger.info(f"  Border: {self.border_mode.name} (cval={self.cval})")


@lru_cache
def get_settings() -> FilterSettings:
    """
    Get cached settings instance.

    :return: The filter settings read from the environment.
    """
    return FilterSettings()  # type: ignore
