"""
some helper tools and common definitions

Tiers are powers of 1024:
   B, K (1024), M (1024**2), ... E (1024**6)
"""

from math import floor

import numpy as np

Byte = 1
Kilobyte = Byte << 10
Megabyte = Kilobyte << 10
Gigabyte = Megabyte << 10
Terabyte = Gigabyte << 10
Petabyte = Terabyte << 10
Exabyte = Petabyte << 10

_units = (Byte, Kilobyte, Megabyte, Gigabyte, Terabyte, Petabyte, Exabyte)
_names = ("B", "K", "M", "G", "T", "P", "E")

# tier 0 starts at zero bytes
_thresholds = np.array((0,) + _units[1:], dtype=np.uint64)
_max_value = (1 << 64) - 1

_escapes = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
}


def normalize_names(names):
    """
    Return unit name table backfilled from the defaults up to tier 6.

    Surplus names are kept.
    """
    names = list(names)
    if len(names) < len(_names):
        names += _names[len(names) :]
    return names


def _general(value, precision=None):
    """
    Shortest decimal representation that reads back to the same float.

    Exponent notation is used if the decimal exponent is less than -4
    or at least 6.  With precision, behave like '%.<precision>g'.
    """
    if precision is not None:
        return f"{value:.{precision}g}"
    if value == 0:
        return "0"
    s = np.format_float_scientific(value, unique=True, trim="-", exp_digits=2)
    exp = int(s[s.index("e") + 1 :])
    if exp < -4 or exp >= 6:
        return s
    return np.format_float_positional(value, unique=True, trim="-")


def _fixed(value, precision=None, plus=False, sharp=False):
    if precision is None:
        precision = 6
    sign = "+" if plus else ""
    alt = "#" if sharp else ""
    return f"{value:{sign}{alt}.{precision}f}"


def _round(value):
    """
    round half away from zero
    """
    x = abs(value)
    r = floor(x)
    if x - r >= 0.5:
        r += 1
    if value < 0:
        r = -r
    return int(r)


def _integer(value, precision=None, plus=False):
    # precision is a minimum digit count; '%.0d' of 0 prints nothing
    if precision == 0 and value == 0:
        return ""
    digits = str(abs(value))
    if precision is not None:
        digits = digits.zfill(precision)
    if value < 0:
        return "-" + digits
    if plus:
        return "+" + digits
    return digits


def _pad(s, width=None, left=False, zero=False):
    """
    Pad string to width (counted in characters).
    """
    if width is None or len(s) >= width:
        return s
    fill = width - len(s)
    if left:
        return s + " " * fill
    if zero:
        return "0" * fill + s
    return " " * fill + s


def _can_backquote(s):
    for c in s:
        if c == "\ufeff":
            return False
        if (c < " " and c != "\t") or c in "`\x7f":
            return False
    return True


def _quote(s, backquote=False, ascii=False):
    """
    Quote string with escapes for non-printable characters.

    backquote - use raw `...` quoting if the string allows it
    ascii - escape every non-ASCII character as well
    """
    if backquote and _can_backquote(s):
        return "`" + s + "`"
    out = ['"']
    for c in s:
        if c in '"\\':
            out.append("\\" + c)
        elif c.isprintable() and not (ascii and ord(c) >= 0x80):
            out.append(c)
        elif c in _escapes:
            out.append(_escapes[c])
        elif c < " " or c == "\x7f":
            out.append(f"\\x{ord(c):02x}")
        elif ord(c) < 0x10000:
            out.append(f"\\u{ord(c):04x}")
        else:
            out.append(f"\\U{ord(c):08x}")
    out.append('"')
    return "".join(out)
