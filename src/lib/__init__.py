"""
bootwind - Bootstrap to Tailwind utility-class converter

Table-driven rewriting of Bootstrap utility classes into Tailwind classes.
"""

__version__ = "1.0.0"

from .tables import MappingTables, BootwindError, ConfigError, tables_default, tables_load
from .lexer import ClassListLexer, tokens_split
from .parser import ClassParser
from .resolver import MappingResolver
from .breakpoints import BreakpointRemapper
from .composer import Composer
from .converter import Converter, convert
from .log import LOG, logging_configure, state_connectToLogger

__all__ = [
    "MappingTables",
    "BootwindError",
    "ConfigError",
    "tables_default",
    "tables_load",
    "ClassListLexer",
    "tokens_split",
    "ClassParser",
    "MappingResolver",
    "BreakpointRemapper",
    "Composer",
    "Converter",
    "convert",
    "LOG",
    "logging_configure",
    "state_connectToLogger",
    "__version__",
]
