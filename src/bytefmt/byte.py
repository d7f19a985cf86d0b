"""
Module for human-readable byte strings.

A byte count is expressed in the largest unit (power of 1024) it
reaches, e.g. 1128 bytes is 1.1015625K.
"""

import numpy as np

from .config import Config
from .directive import Directive, Verb
from .util import (
    Exabyte,
    Gigabyte,
    Kilobyte,
    Megabyte,
    Petabyte,
    Terabyte,
    _fixed,
    _general,
    _integer,
    _max_value,
    _names,
    _pad,
    _quote,
    _round,
    _thresholds,
    _units,
    normalize_names,
)


def tier_of(value):
    """
    Return index of the largest unit not exceeding value (0 to 6).
    """
    return int(np.searchsorted(_thresholds, np.uint64(value), side="right")) - 1


def scaled_value(value):
    """
    Return value in units of its tier as float.
    """
    return float(value) / float(_units[tier_of(value)])


def unit_name(value, names=None):
    if names is None:
        names = _names
    else:
        names = normalize_names(names)
    return names[tier_of(value)]


def render(scaled, unit, directive):
    """
    Render scaled value and unit name as one token.

    With the space flag the width applies to the unit field, otherwise
    to the whole token.
    """
    d = directive
    width = d.width
    if d.space:
        if width is None:
            unit = _pad(unit, len(unit) + 1)
        else:
            unit = _pad(unit, len(unit) + width)
        width = None
    if d.verb in (Verb.STRING, Verb.QUOTED):
        s = _general(scaled)
    elif d.verb == Verb.GENERAL:
        s = _general(scaled, d.precision)
    elif d.verb == Verb.FLOAT:
        s = _fixed(scaled, d.precision, plus=d.plus, sharp=d.sharp)
    else:
        s = _integer(_round(scaled), d.precision, plus=d.plus)
    s = _pad(s + unit, width, left=d.minus, zero=d.zero)
    if d.verb == Verb.QUOTED:
        s = _quote(s, backquote=d.sharp, ascii=d.plus)
    return s


class Bytes(object):
    """
    Byte count with unit names for human-readable output.

    str() gives the shortest form, e.g. '1.1015625K'; use format() or
    f-strings with printf-style directives for more control:

       >>> b = Bytes(1128)
       >>> f"{b:+.1f}", b.format("% 4d"), format(b, "#q")
       ('+1.1K', '1    K', '`1.1015625K`')
    """

    def __init__(self, value, *names):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(
                f"byte count must be an integer, not {type(value).__name__!r}"
            )
        value = int(value)
        if not 0 <= value <= _max_value:
            raise ValueError(f"byte count out of range [0, 2**64): {value}")
        self._value = value
        self._names = None
        self.names(*names)

    @property
    def value(self):
        return self._value

    def names(self, *names):
        """
        Set unit names and return the resulting table.

        Missing names are filled in from the defaults.  Without
        arguments, just return the current table.
        """
        if len(names) == 0:
            if self._names is None:
                self._names = list(_names)
            return list(self._names)
        self._names = normalize_names(names)
        return list(self._names)

    def with_names(self, *names):
        """
        Return copy with different unit names.

        Without arguments, the copy keeps the current names.
        """
        if len(names) == 0:
            names = self._names
        return self.__class__(self._value, *names)

    @property
    def tier(self):
        return tier_of(self._value)

    @property
    def scaled(self):
        return scaled_value(self._value)

    @property
    def unit(self):
        return self._names[self.tier]

    def kilobytes(self):
        return float(self._value) / Kilobyte

    def megabytes(self):
        return float(self._value) / Megabyte

    def gigabytes(self):
        return float(self._value) / Gigabyte

    def terabytes(self):
        return float(self._value) / Terabyte

    def petabytes(self):
        return float(self._value) / Petabyte

    def exabytes(self):
        return float(self._value) / Exabyte

    def format(self, directive="%v"):
        """
        Return string formatted according to directive.

        directive may be a Directive object or a string like '%+ 5.2d'.
        """
        if not isinstance(directive, Directive):
            directive = Directive.parse(directive)
        return render(self.scaled, self.unit, directive)

    def __format__(self, format_spec):
        if format_spec == "":
            return self.__str__()
        return self.format(Directive.from_spec(format_spec))

    def __str__(self):
        return _general(self.scaled) + self.unit

    def __repr__(self):
        if self._names == list(_names):
            return f"{self.__class__.__name__}({self._value!r})"
        names = ", ".join(repr(n) for n in self._names)
        return f"{self.__class__.__name__}({self._value!r}, {names})"

    def __int__(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Bytes):
            return NotImplemented
        return self._value == other._value and self._names == other._names

    # unit names can change in place
    __hash__ = None


def byte2human(size, directive=None, config=None):
    """
    Return byte count in human-readable format.

    Parameters:
    directive - printf-style directive or Directive; defaults to the
                one of the configuration
    config - Config, mapping, preset name or YAML file with unit names
    """
    if not isinstance(config, Config):
        config = Config(config)
    if directive is None:
        directive = config.directive
    return Bytes(size, *config.names).format(directive)
