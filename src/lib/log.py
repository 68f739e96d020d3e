"""
Logging for bootwind using Loguru with per-conversion verbosity.

bootwind is used as a library, so importing it leaves the host's loguru
handlers untouched. Records are emitted under the "bootwind.*" module names
and reach whatever sinks the host has configured. logging_configure() adds a
bootwind-only sink with the package format for callers that want one.

Usage:
    from bootwind.lib.log import LOG, logging_configure, state_connectToLogger

    # Once, in the application:
    logging_configure()

    # At start of a conversion call:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Ambiguous mapping for 'border-1'", level=1)
    LOG("Parsed 'd-md-none' as 'd' / 'none' @ md", level=3)
"""

import sys
from contextvars import ContextVar
from typing import Any, Optional, TextIO, Union

from loguru import logger

# Current ConversionState; each thread or task sees its own
_conversion_state: ContextVar[Optional[Any]] = ContextVar('conversion_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{name}:{function}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)


def logging_configure(sink: Union[TextIO, Any] = sys.stderr, level: str = "DEBUG") -> int:
    """
    Add a sink for bootwind records only.

    Other handlers are left in place, so host logging keeps working.

    Args:
        sink: Any loguru sink (stream, path, callable)
        level: Minimum loguru level for the sink

    Returns:
        Handler id, for logger.remove()
    """
    return logger.add(sink, format=logger_format, level=level, filter="bootwind")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ConversionState to the logging context.

    Args:
        state: ConversionState (or anything with a verbosity attribute)
    """
    _conversion_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Verbosity levels:
        0 = Silent
        1 = Ambiguous mappings
        2 = Every passed-through class
        3 = Every parse and resolution
    """
    state = _conversion_state.get()

    if state is not None and getattr(state, 'verbosity', 0) >= level:
        logger.opt(depth=1).debug(message, **kwargs)
