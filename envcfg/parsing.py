import math
import re
from datetime import timedelta

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

_MAX_DIGITS = 20
_MAX_FRACTION_DIGITS = 19

FALSE_VALUES = frozenset({"0", "false", "False", "f", "F", "n", "N"})

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL = {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan"}
_DURATION_PART_RE = re.compile(r"([0-9]*)(\.([0-9]*))?([^0-9.]*)")

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

DURATION_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,
    "μs": _MICROSECOND,
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}


def _syntax_error(text: str) -> ValueError:
    return ValueError(f'parsing "{text}": invalid syntax')


def _range_error(text: str) -> ValueError:
    return ValueError(f'parsing "{text}": value out of range')


def _digits_value(digits: str) -> int | None:
    """Returns int(digits), or None past 20 significant digits (beyond 64 bits)."""
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        return None
    return int(significant or "0")


def _parse_signed(text: str, lo: int, hi: int) -> int:
    if not _SIGNED_RE.fullmatch(text):
        raise _syntax_error(text)
    v = _digits_value(text.lstrip("+-"))
    if v is None:
        raise _range_error(text)
    if text[0] == "-":
        v = -v
    if v < lo or v > hi:
        raise _range_error(text)
    return v


def parse_int(text: str) -> int:
    """Parses a decimal int (64-bit signed)."""
    return _parse_signed(text, INT64_MIN, INT64_MAX)


def parse_int64(text: str) -> int:
    """Parses a decimal int64."""
    return _parse_signed(text, INT64_MIN, INT64_MAX)


def _parse_unsigned(text: str, hi: int) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise _syntax_error(text)
    v = _digits_value(text)
    if v is None or v > hi:
        raise _range_error(text)
    return v


def parse_uint(text: str) -> int:
    """Parses an unsigned decimal int; any sign is rejected."""
    return _parse_unsigned(text, UINT64_MAX)


def parse_uint64(text: str) -> int:
    return _parse_unsigned(text, UINT64_MAX)


def parse_float(text: str) -> float:
    """Parses a float literal, including inf/nan spellings."""
    if text.lower() in _FLOAT_SPECIAL:
        return float(text)
    if not _FLOAT_RE.fullmatch(text):
        raise _syntax_error(text)
    v = float(text)
    if math.isinf(v):
        raise _range_error(text)
    return v


def parse_bool(text: str) -> bool:
    """Anything outside the false set is True. Never raises."""
    return text not in FALSE_VALUES


def parse_duration(text: str) -> timedelta:
    """
    Parses a duration literal such as "300ms", "-1.5h" or "2h45m".

    Components are accumulated in whole nanoseconds; the returned timedelta
    drops anything below one microsecond.
    """
    s = text
    neg = False
    if s and s[0] in "+-":
        neg = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f'invalid duration "{text}"')

    total = 0
    pos = 0
    while pos < len(s):
        m = _DURATION_PART_RE.match(s, pos)
        whole, dot, frac, unit = m.group(1), m.group(2), m.group(3) or "", m.group(4)
        if not whole and not frac:
            raise ValueError(f'invalid duration "{text}"')
        if dot is None and not whole:
            raise ValueError(f'invalid duration "{text}"')
        if not unit:
            raise ValueError(f'missing unit in duration "{text}"')
        scale = DURATION_UNITS.get(unit)
        if scale is None:
            raise ValueError(f'unknown unit "{unit}" in duration "{text}"')

        whole_v = _digits_value(whole)
        if whole_v is None:
            raise ValueError(f'invalid duration "{text}"')
        v = whole_v * scale
        if frac:
            # digits past the 19th are below a nanosecond for every unit
            frac = frac[:_MAX_FRACTION_DIGITS]
            v += int(frac) * scale // (10 ** len(frac))
        total += v
        if total > (1 << 63):
            raise ValueError(f'invalid duration "{text}"')
        pos = m.end()

    if neg:
        total = -total
    elif total > INT64_MAX:
        raise ValueError(f'invalid duration "{text}"')

    micros = abs(total) // _MICROSECOND
    return timedelta(microseconds=-micros if total < 0 else micros)
