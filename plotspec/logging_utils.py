"""
Logging utilities for trace serialization with debug mode support.

Provides a decorator for timing document serialization and a context
manager for timing data preparation steps (e.g. splitting a 2-D block into
traces). Debug mode also enables per-trace length diagnostics.
"""
import functools
import logging
import os
import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

# Module logger
logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Debug mode flag (environment variable or runtime)
_DEBUG_MODE = os.getenv("PLOTSPEC_DEBUG", "false").lower() in ("true", "1", "yes")


def set_debug_mode(enabled: bool) -> None:
    """
    Enable or disable debug mode at runtime for all plotspec loggers.

    Args:
        enabled: True to enable debug logging, False for normal logging

    Examples:
        >>> from plotspec.logging_utils import set_debug_mode
        >>> set_debug_mode(True)
        🔧 plotspec debug mode: ON
    """
    global _DEBUG_MODE
    _DEBUG_MODE = enabled

    level = logging.DEBUG if enabled else logging.INFO
    logging.getLogger("plotspec").setLevel(level)

    logger.info(f"🔧 plotspec debug mode: {'ON ✓' if enabled else 'OFF'}")


def is_debug_mode() -> bool:
    """Check if debug mode is currently enabled."""
    return _DEBUG_MODE


def log_serialization(func: F) -> F:
    """
    Decorator to log document serialization with timing and error reporting.

    Logs:
    - Number of traces being serialized (when the first argument has a length)
    - Execution time in milliseconds and output size
    - Error details on failure, then re-raises

    Usage:
        @log_serialization
        def to_json(self) -> str:
            ...

    Args:
        func: Serialization method to decorate

    Returns:
        Decorated function with logging
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func_name = func.__qualname__

        trace_count = "?"
        if args and hasattr(args[0], "__len__"):
            trace_count = len(args[0])

        if _DEBUG_MODE:
            logger.debug(f"📊 Serializing: {func_name} ({trace_count} traces)")

        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"❌ Serialization failed: {func_name} "
                f"({elapsed_ms:.1f}ms, {type(e).__name__}: {e})"
            )

            if _DEBUG_MODE:
                logger.exception("  📋 Full traceback:")
            else:
                logger.error("  💡 Hint: Set PLOTSPEC_DEBUG=true for full traceback")

            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        size = f", {len(result)} chars" if isinstance(result, str) else ""
        logger.info(
            f"✅ Serialized: {func_name} ({elapsed_ms:.1f}ms, {trace_count} traces{size})"
        )
        return result

    return wrapper  # type: ignore


@contextmanager
def log_data_preparation(description: str) -> Iterator[None]:
    """
    Context manager for logging data preparation steps with timing.

    Usage:
        with log_data_preparation("Splitting block over columns"):
            vectors = [block[:, j].tolist() for j in range(block.shape[1])]

    Args:
        description: Human-readable description of the preparation step

    Yields:
        None
    """
    start = time.perf_counter()

    if _DEBUG_MODE:
        logger.debug(f"🔄 {description}...")

    try:
        yield

    except Exception as e:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.error(f"  ✗ {description} failed ({elapsed_ms:.1f}ms): {e}")
        raise

    else:
        elapsed_ms = (time.perf_counter() - start) * 1000

        if _DEBUG_MODE:
            logger.debug(f"  ✓ {description} ({elapsed_ms:.1f}ms)")


def log_block_info(block: Any, label: str = "Block") -> None:
    """
    Log shape, dtype and missing-value count of an array (debug mode only).

    Args:
        block: numpy array to inspect
        label: Label for the array in logs
    """
    if not _DEBUG_MODE:
        return

    if not hasattr(block, "shape"):
        logger.debug(f"📋 {label}: Not an array (type={type(block).__name__})")
        return

    info_parts = [f"shape={block.shape}"]

    if hasattr(block, "dtype"):
        info_parts.append(f"dtype={block.dtype}")
        if block.dtype.kind == "f":
            nan_count = int((block != block).sum())
            if nan_count > 0:
                info_parts.append(f"nans={nan_count}")

    logger.debug(f"📋 {label}: {', '.join(info_parts)}")
