#!/usr/bin/env python3
"""
Strict scalar parsers.

Each parser either returns its value, or raises a ValueParseError subclass
whose `kind` says what went wrong:
  FormatError            : the text is not of the type
  ValueOverflowError     : well formed, but out of range. `.clamped` has the saturated value
  NegativeError          : a negative value where none is allowed
  InvalidParameterError  : the parser was asked for an unsupported precision

Integers are 32 bit, as the framework stores them.
Reals are fixed point: real10 scales by 10**frac_digits, real2 by 2**frac_bits.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import re
from typing import Final, NamedTuple

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._interface import (INT_MAX, INT_MIN, MAX_FRAC_BITS,
                                  MAX_FRAC_DIGITS, UINT_MAX)
from confparse.errors import (FormatError, InvalidParameterError,
                              NegativeError, ValueOverflowError)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

BOOL_WORDS     : Final[dict[str, bool]] = {
    "0"     : False,
    "1"     : True,
    "false" : False,
    "true"  : True,
    "no"    : False,
    "yes"   : True,
}
REAL_RE        : Final[re.Pattern] = re.compile(r"""
    (?P<sign>[-+])?
    (?P<int>[0-9]*)
    (?:\.(?P<frac>[0-9]*))?
    (?:[eE](?P<exp>[-+]?[0-9]+))?
    """, re.VERBOSE)
REAL2_DIGITS   : Final[int] = 9
# any exponent shifting the point this far overflows 32 bits
MAX_POINT      : Final[int] = 40
EXP_DIGITS     : Final[int] = 9

class Timeval(NamedTuple):
    sec   : int
    usec  : int

def parse_bool(text:str) -> bool:
    match BOOL_WORDS.get(text, None):
        case None:
            raise FormatError("Not a bool: %s", text)
        case bool() as val:
            return val

def _digit_value(char:str) -> int:
    match char:
        case _ if "0" <= char <= "9":
            return ord(char) - ord("0")
        case _ if "A" <= char <= "Z":
            return ord(char) - ord("A") + 10
        case _ if "a" <= char <= "z":
            return ord(char) - ord("a") + 10
        case _:
            return 99

def parse_unsigned(text:str, base:int=0) -> int:
    """ Parse an unsigned 32 bit integer.
      base <= 0 autodetects: '0x' means 16, a leading '0' means 8, otherwise 10.
      Base 16 also accepts a '0x' prefix.
    """
    pos    = 0
    length = len(text)
    if pos < length and text[pos] == "+":
        pos += 1

    match base:
        case x if (x <= 0 or x == 16) and pos < length - 1 and text[pos] == "0" and text[pos+1] in "xX":
            pos  += 2
            base  = 16
        case x if x <= 0 and pos < length and text[pos] == "0":
            base = 8
        case x if x <= 0:
            base = 10
        case x if x > 36:
            raise InvalidParameterError("Unsupported integer base: %s", base)
        case _:
            pass

    if pos == length:
        raise FormatError("No digits: %s", text)

    value = 0
    for char in text[pos:]:
        if (digit:=_digit_value(char)) >= base:
            raise FormatError("Bad digit for base %s: %s", base, text)
        if value <= UINT_MAX:
            value = value * base + digit

    if value > UINT_MAX:
        raise ValueOverflowError("Unsigned overflow: %s", text, clamped=UINT_MAX)

    return value

def parse_integer(text:str, base:int=0) -> int:
    """ Parse a signed 32 bit integer.
      On overflow the clamped value is the extreme on the side of the sign.
    """
    negative = text.startswith("-")
    if not bool(text):
        raise FormatError("No digits: %s", text)

    try:
        value = parse_unsigned(text.removeprefix("-"), base)
    except ValueOverflowError as err:
        clamped = INT_MIN if negative else INT_MAX
        raise ValueOverflowError("Integer overflow: %s", text, clamped=clamped) from err

    match negative:
        case False if value > INT_MAX:
            raise ValueOverflowError("Integer overflow: %s", text, clamped=INT_MAX)
        case True if value > -INT_MIN:
            raise ValueOverflowError("Integer overflow: %s", text, clamped=INT_MIN)
        case True:
            return -value
        case False:
            return value

def _exponent(text:None|str) -> int:
    """ The exponent's value, saturated at +-10**EXP_DIGITS """
    match text:
        case None:
            return 0
        case str():
            negative = text.startswith("-")
            digits   = text.lstrip("+-").lstrip("0")

    value = int(digits or "0") if len(digits) <= EXP_DIGITS else 10 ** EXP_DIGITS
    return -value if negative else value

def parse_real10_parts(text:str, frac_digits:int) -> tuple[int, int]:
    """ Parse a decimal real into its integer part,
      and its fraction scaled to frac_digits digits (truncated).
      An exponent moves digits between the two parts.
      Both parts carry the sign.
    """
    if frac_digits < 0 or frac_digits > MAX_FRAC_DIGITS:
        raise InvalidParameterError("Fraction digits out of range: %s", frac_digits)

    match REAL_RE.fullmatch(text):
        case None:
            raise FormatError("Not a real: %s", text)
        case re.Match() as m if not bool(m['int']) and not bool(m['frac']):
            raise FormatError("Not a real: %s", text)
        case re.Match() as m:
            negative = m['sign'] == "-"
            digits   = m['int'] + (m['frac'] or "")
            point    = len(m['int']) + _exponent(m['exp'])

    # point counts significant digits only
    significant = digits.lstrip("0")
    point      -= len(digits) - len(significant)
    if not bool(significant):
        return 0, 0
    if point > MAX_POINT:
        raise ValueOverflowError("Real overflow: %s", text, clamped=INT_MIN if negative else INT_MAX)

    # past frac_digits below the point, everything truncates to zero
    point          = max(point, -frac_digits)
    padded         = significant.ljust(max(point, 0), "0")
    int_part       = int(padded[:point]) if point > 0 else 0
    frac_digit_str = ("0" * max(-point, 0)) + padded[max(point, 0):]
    frac_part      = int(frac_digit_str[:frac_digits].ljust(frac_digits, "0") or "0")
    if negative:
        return -int_part, -frac_part

    return int_part, frac_part

def parse_real10(text:str, frac_digits:int) -> int:
    """ Parse a decimal real into an int scaled by 10**frac_digits.
      eg: parse_real10("3.25", 3) == 3250
    """
    int_part, frac_part = parse_real10_parts(text, frac_digits)
    value               = int_part * (10 ** frac_digits) + frac_part
    if not (INT_MIN <= value <= INT_MAX):
        raise ValueOverflowError("Real overflow: %s", text, clamped=INT_MIN if value < 0 else INT_MAX)

    return value

def parse_unsigned_real2(text:str, frac_bits:int) -> int:
    """ Parse a non-negative real into an unsigned int with frac_bits fractional bits.
      The decimal fraction is rounded to the nearest binary fraction,
      using Knuth's round_decimals from TeX. Inverse of unparse_real2.
    """
    if frac_bits < 0 or frac_bits > MAX_FRAC_BITS:
        raise InvalidParameterError("Fraction bits out of range: %s", frac_bits)

    try:
        int_part, frac_part = parse_real10_parts(text, REAL2_DIGITS)
    except ValueOverflowError as err:
        raise ValueOverflowError("Real overflow: %s", text, clamped=UINT_MAX) from err

    if int_part < 0 or frac_part < 0:
        raise NegativeError("Negative real: %s", text)
    if int_part > (1 << (32 - frac_bits)) - 1:
        raise ValueOverflowError("Real overflow: %s", text, clamped=UINT_MAX)

    fraction = 0
    two      = 2 << frac_bits
    for _ in range(REAL2_DIGITS):
        digit      = frac_part % 10
        fraction   = (fraction + digit * two) // 10
        frac_part //= 10

    fraction = (fraction + 1) // 2
    value    = (int_part << frac_bits) + fraction
    if value > UINT_MAX:
        raise ValueOverflowError("Real overflow: %s", text, clamped=UINT_MAX)

    return value

def parse_real2(text:str, frac_bits:int) -> int:
    """ Signed version of parse_unsigned_real2 """
    negative = text.startswith("-")
    value    = parse_unsigned_real2(text.removeprefix("-"), frac_bits)
    if value > -INT_MIN or (value == -INT_MIN and not negative):
        raise ValueOverflowError("Real overflow: %s", text, clamped=INT_MIN if negative else INT_MAX)

    return -value if negative else value

def parse_milliseconds(text:str) -> int:
    """ Seconds, as a real, to integer milliseconds """
    match parse_real10(text, 3):
        case int() as val if val < 0:
            raise NegativeError("Negative time: %s", text)
        case int() as val:
            return val

def parse_timeval(text:str) -> Timeval:
    """ Seconds, as a real, to (seconds, microseconds) """
    sec, usec = parse_real10_parts(text, 6)
    if sec < 0 or usec < 0:
        raise NegativeError("Negative time: %s", text)
    if sec > UINT_MAX:
        raise ValueOverflowError("Time overflow: %s", text, clamped=Timeval(UINT_MAX, 999999))

    return Timeval(sec, usec)
