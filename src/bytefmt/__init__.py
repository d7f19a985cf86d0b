from importlib import metadata

__version__ = metadata.version("bytefmt")


from .byte import Bytes, byte2human, scaled_value, tier_of, unit_name
from .config import Config
from .directive import Directive, DirectiveError, UnsupportedVerbError, Verb
from .logged import Logged
from .util import (
    Byte,
    Exabyte,
    Gigabyte,
    Kilobyte,
    Megabyte,
    Petabyte,
    Terabyte,
)

__all__ = [
    "Bytes",
    "byte2human",
    "tier_of",
    "scaled_value",
    "unit_name",
    "Config",
    "Directive",
    "DirectiveError",
    "UnsupportedVerbError",
    "Verb",
    "Logged",
    "Byte",
    "Kilobyte",
    "Megabyte",
    "Gigabyte",
    "Terabyte",
    "Petabyte",
    "Exabyte",
]

del metadata
