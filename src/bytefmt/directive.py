"""
printf-style format directives for byte counts

A directive is a single conversion specifier

   %[flags][width][.precision]verb

flags:
   +      always print a sign for numeric verbs (f, d);
          ASCII-only quoting for q
   -      pad with spaces on the right rather than the left
   #      alternate form: backquoted raw string for q,
          keep decimal point for f
   ' '    (space) leave a space between value and unit; a width
          widens the unit field instead of the whole token
   0      pad with leading zeros rather than spaces

verbs:
   v      general (shortest decimal, %g with precision)
   s      string (shortest decimal, precision ignored)
   q      quoted string
   f      fixed point (default precision 6)
   d      integer (precision is minimum digit count)
"""

import re
from enum import Enum

_directive_re = re.compile(
    r"(?P<flags>[-+# 0]*)(?P<width>\d+)?(?:(?P<dot>\.)(?P<precision>\d*))?(?P<verb>.?)(?P<rest>.*)",
    re.DOTALL,
)


class DirectiveError(ValueError):
    pass


class UnsupportedVerbError(DirectiveError):
    def __init__(self, verb):
        self.verb = verb
        super().__init__(
            f'Unsupported verb "{verb}", use one of '
            + ", ".join(f'"{v.value}"' for v in Verb)
            + "."
        )


class Verb(Enum):
    GENERAL = "v"
    STRING = "s"
    QUOTED = "q"
    FLOAT = "f"
    INTEGER = "d"

    @classmethod
    def get(cls, verb):
        if isinstance(verb, cls):
            return verb
        try:
            return cls(verb)
        except ValueError:
            raise UnsupportedVerbError(verb) from None


class Directive(object):
    """
    Flags, width, precision, and verb of one conversion.

    width and precision are None if not given.
    """

    _flag_chars = (
        ("+", "plus"),
        ("-", "minus"),
        ("#", "sharp"),
        (" ", "space"),
        ("0", "zero"),
    )

    def __init__(
        self,
        verb=Verb.GENERAL,
        *,
        plus=False,
        sharp=False,
        space=False,
        minus=False,
        zero=False,
        width=None,
        precision=None,
    ):
        self.verb = Verb.get(verb)
        self.plus = bool(plus)
        self.sharp = bool(sharp)
        self.space = bool(space)
        self.minus = bool(minus)
        # zero padding is only to the left
        self.zero = bool(zero) and not self.minus
        for name, value in (("width", width), ("precision", precision)):
            if value is not None and value < 0:
                raise DirectiveError(f"{name} must not be negative: {value}")
        self.width = width
        self.precision = precision

    @classmethod
    def parse(cls, text):
        """
        Parse printf-style directive, e.g., '%+ 5.2d'.
        """
        if not text.startswith("%"):
            raise DirectiveError(f'Directive "{text}" does not start with "%".')
        return cls._parse(text[1:], text, None)

    @classmethod
    def from_spec(cls, spec):
        """
        Parse directive without leading '%' as used by format() and
        f-strings; verb defaults to 'v'.
        """
        return cls._parse(spec, spec, Verb.GENERAL)

    @classmethod
    def _parse(cls, body, text, default_verb):
        m = _directive_re.fullmatch(body)
        if m["rest"]:
            raise DirectiveError(f'Trailing characters in directive "{text}".')
        verb = m["verb"]
        if not verb:
            if default_verb is None:
                raise DirectiveError(f'Missing verb in directive "{text}".')
            verb = default_verb
        kwargs = {name: c in m["flags"] for c, name in cls._flag_chars}
        if m["width"] is not None:
            kwargs["width"] = int(m["width"])
        if m["dot"]:
            kwargs["precision"] = int(m["precision"] or 0)
        return cls(verb, **kwargs)

    def __str__(self):
        s = "%"
        for c, name in self._flag_chars:
            if getattr(self, name):
                s += c
        if self.width is not None:
            s += f"{self.width:d}"
        if self.precision is not None:
            s += f".{self.precision:d}"
        return s + self.verb.value

    def __repr__(self):
        return f"{self.__class__.__name__}.parse({str(self)!r})"

    def _key(self):
        return (
            self.verb,
            self.plus,
            self.sharp,
            self.space,
            self.minus,
            self.zero,
            self.width,
            self.precision,
        )

    def __eq__(self, other):
        if not isinstance(other, Directive):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())
