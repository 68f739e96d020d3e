"""
bootwind - Bootstrap to Tailwind utility-class converter

Rewrites the Bootstrap utility classes of an HTML class attribute into
equivalent Tailwind classes, preserving order and responsive variants.
"""

__version__ = "1.0.0"

from .lib import Converter, convert, MappingTables, ConfigError, BootwindError, tables_default, tables_load, LOG, logging_configure, state_connectToLogger

__all__ = [
    "Converter",
    "convert",
    "MappingTables",
    "ConfigError",
    "BootwindError",
    "tables_default",
    "tables_load",
    "LOG",
    "logging_configure",
    "state_connectToLogger",
    "__version__",
]
