#!/usr/bin/env python3
"""
Errors raised by the scalar and address parsers.
Each carries the CpErr_e kind that discriminates the failure.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any, ClassVar

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse.enums import CpErr_e
from .base import ConfParseError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ValueParseError(ConfParseError):
    """ A text could not be converted to a value """
    general_msg = "Value Parsing Failure:"
    kind : ClassVar[CpErr_e] = CpErr_e.FORMAT

class FormatError(ValueParseError):
    """ The text does not have the syntax of the requested type """
    general_msg = "Bad Format:"
    kind        = CpErr_e.FORMAT

class ValueOverflowError(ValueParseError):
    """ The text is well formed, but the value is out of range.
      `clamped` holds the saturated value the parser would have returned.
    """
    general_msg = "Value Overflow:"
    kind        = CpErr_e.OVERFLOW

    def __init__(self, *args, clamped:Any=None):
        super().__init__(*args)
        self.clamped = clamped

class NegativeError(ValueParseError):
    """ A negative value was given where only non-negative ones make sense """
    general_msg = "Negative Value:"
    kind        = CpErr_e.NEGATIVE

class InvalidParameterError(ValueParseError):
    """ The parser was called with a parameter outside its supported range """
    general_msg = "Invalid Parser Parameter:"
    kind        = CpErr_e.INVALID
