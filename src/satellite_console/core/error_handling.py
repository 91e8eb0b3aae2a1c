"""
Error Handling Utilities for the Satellite Console

Provides consistent error handling patterns across the codebase:
- Context manager that wraps unexpected errors with operation context
- Decorator that logs a failing call and lets the session continue

Usage:
    from satellite_console.core.error_handling import error_context

    with error_context("Loading configuration"):
        config = AppConfig.from_json_file(path)
"""

import functools
import logging
from contextlib import contextmanager
from typing import Any, Callable, TypeVar

from satellite_console.core.exceptions import SatelliteConsoleError, is_fatal

logger = logging.getLogger(__name__)

# Type variable for function return type
F = TypeVar("F", bound=Callable[..., Any])


@contextmanager
def error_context(
    operation: str,
    reraise: bool = True,
    log_level: int = logging.ERROR,
    wrap_as: type = SatelliteConsoleError,
):
    """
    Context manager for error handling with context.

    Usage:
        with error_context("Loading configuration", wrap_as=ConfigurationError):
            config = load_config()

    Args:
        operation: Description of the operation
        reraise: If True, re-raise exception. If False, log and suppress.
        log_level: Logging level for errors
        wrap_as: SatelliteConsoleError subclass used to wrap foreign exceptions
    """
    try:
        yield
    except SatelliteConsoleError as e:
        if is_fatal(e):
            logger.critical(f"{operation} failed: {e}")
        raise
    except KeyboardInterrupt:
        raise
    except Exception as e:
        error_msg = f"{operation} failed: {e}"
        logger.log(log_level, error_msg, exc_info=True)

        if reraise:
            raise wrap_as(error_msg) from e


def log_and_continue(operation: str = "Operation"):
    """
    Decorator that logs errors but allows execution to continue.

    Fatal console errors still propagate so the session can shut down.

    Args:
        operation: Description of the operation

    Returns:
        Decorated function that returns None on error
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except SatelliteConsoleError as e:
                if is_fatal(e):
                    raise
                logger.warning(f"{operation} failed (continuing): {e}")
                return None
            except Exception as e:
                logger.warning(f"{operation} failed (continuing): {e}", exc_info=True)
                return None

        return wrapper  # type: ignore

    return decorator
