"""
Utility functions and decorators for the iris matcher.

This module provides the timing decorator applied to matcher operations and
the session identifier used to correlate log events of one interactive run.
"""

import functools
import time
import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, TypeVar

import structlog

# Initialize structured logger
logger = structlog.get_logger(__name__)

# Type variable for generic decorators
F = TypeVar("F", bound=Callable[..., Any])


def timer(func: F) -> F:
    """
    Decorator to measure and log function execution time.

    Both successful and failed calls are logged at DEBUG level; the
    exception is re-raised unchanged so callers decide how serious it is.

    Parameters
    ----------
    func : Callable
        Function to be timed.

    Returns
    -------
    Callable
        Wrapped function with timing capability.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(
                "Function execution failed",
                function_name=func.__name__,
                module=func.__module__,
                execution_time_ms=(time.perf_counter() - start_time) * 1000,
                error=str(e),
                error_type=type(e).__name__,
                success=False,
            )
            raise

        logger.debug(
            "Function execution completed",
            function_name=func.__name__,
            module=func.__module__,
            execution_time_ms=(time.perf_counter() - start_time) * 1000,
            success=True,
        )

        return result

    return wrapper


def generate_session_id() -> str:
    """
    Generate a unique session identifier.

    Returns
    -------
    str
        32-character hex identifier.
    """
    return str(uuid.uuid4()).replace("-", "")


def format_distance(distance: float, precision: int) -> str:
    """
    Format a Hamming distance with a fixed number of decimals.

    Ties round half up on the shortest decimal form of the value, so 0.125
    shows as 0.13 rather than the banker's-rounded 0.12.
    """
    rounded = Decimal(repr(distance)).quantize(
        Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP
    )
    return str(rounded)
