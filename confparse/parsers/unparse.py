#!/usr/bin/env python3
"""
Inverses of the scalar parsers.

unparse_real2 produces the shortest decimal that parses back to the same value:
  parse_real2(unparse_real2(x, bits), bits) == x, for bits < 29

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Final

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._interface import MAX_FRAC_BITS
from confparse.errors import InvalidParameterError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

LOWER_DIGITS : Final[str] = "0123456789abcdef"
UPPER_DIGITS : Final[str] = "0123456789ABCDEF"

def unparse_bool(val:bool) -> str:
    return "true" if val else "false"

def unparse_unsigned(q:int, base:int=10, uppercase:bool=False) -> str:
    """ base is one of 8, 10, 16. No prefix is added """
    match base:
        case 8 | 10 | 16:
            pass
        case _:
            raise InvalidParameterError("Unsupported unparse base: %s", base)

    digits = UPPER_DIGITS if uppercase else LOWER_DIGITS
    out    = []
    while q > 0:
        q, rem = divmod(q, base)
        out.append(digits[rem])

    return "".join(reversed(out)) or "0"

def unparse_real2(real:int, frac_bits:int) -> str:
    """ Adapted from Knuth's print_scaled in TeX.
      Emits fraction digits until the remaining inaccuracy is too small to matter.
    """
    if frac_bits < 0 or frac_bits > MAX_FRAC_BITS:
        raise InvalidParameterError("Fraction bits out of range: %s", frac_bits)
    if real < 0:
        return "-" + unparse_real2(-real, frac_bits)

    int_part  = real >> frac_bits
    one       = 1 << frac_bits
    real     &= one - 1
    if not bool(real):
        return str(int_part)

    out         = [str(int_part), "."]
    real        = (10 * real) + 5
    allowable   = 10
    rounder     = 5
    while rounder * 10 < one:
        rounder *= 10

    while True:
        if allowable > one:
            real += (one >> 1) - rounder
        out.append(str(real >> frac_bits))
        real       = 10 * (real & (one - 1))
        allowable *= 10
        if real <= allowable:
            break

    return "".join(out)

def unparse_real10(real:int, frac_digits:int) -> str:
    """ The inverse of parse_real10, without trailing fraction zeros """
    if real < 0:
        return "-" + unparse_real10(-real, frac_digits)

    one                 = 10 ** frac_digits
    int_part, frac_part = divmod(real, one)
    if frac_part == 0:
        return str(int_part)

    frac_str = str(frac_part).rjust(frac_digits, "0").rstrip("0")
    return f"{int_part}.{frac_str}"

def unparse_milliseconds(ms:int) -> str:
    return unparse_real10(ms, 3)
