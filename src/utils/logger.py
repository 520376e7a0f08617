from enum import StrEnum
from functools import wraps
from itertools import chain
from typing import Any, Callable, Final

from loguru import logger
from returns.result import Failure, Success

VERBOSE: Final[bool] = False


def _debug_function_signature(func: Callable[..., Any], *args, **kwargs) -> None:
    """Log the call signature, summarizing arrays by shape."""

    def describe(value: Any) -> str:
        shape = getattr(value, "shape", None)
        return f"<array {shape}>" if shape is not None else repr(value)

    signature = ", ".join(
        chain(
            (describe(arg) for arg in args),
            (f"{key}={describe(value)}" for key, value in kwargs.items()),
        )
    )
    logger.debug(f"Calling {func.__name__}({signature})")


class FailureLevel(StrEnum):
    """Loguru level at which a failed step is reported."""

    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def log_failure(
    failure_message: str, failure_level: FailureLevel, step: str, error: Exception
) -> None:
    """Log `failure_message` at `failure_level`, with the failing step and error at DEBUG."""
    logger.debug(f"{failure_message} in {step}: {type(error).__name__}: {error}")
    logger.log(failure_level.value, failure_message)


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
):
    """Log the outcome of a function returning a `returns` ``Result``.

    Results of any other type are passed through without logging.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if VERBOSE:
                _debug_function_signature(func, *args, **kwargs)
            result = func(*args, **kwargs)
            match result:
                case Success():
                    if success_message:
                        logger.info(success_message)
                case Failure(error):
                    log_failure(failure_message, failure_level, func.__name__, error)
            return result

        return wrapper

    return decorator

