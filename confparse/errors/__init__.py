#!/usr/bin/env python3
"""
These are the confparse specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from confparse._errors.base import ConfParseError
from confparse._errors.value import (FormatError, InvalidParameterError,
                                     NegativeError, ValueOverflowError,
                                     ValueParseError)
from confparse._errors.registry import (RegistryAllocationError,
                                        RegistryConflictError, RegistryError,
                                        UnknownTypeError)
from confparse._errors.match import (ArityError, DuplicateKeywordError,
                                     KeywordError, MatchError, SignatureError,
                                     SlotParseError, TooManySlotsError,
                                     UnknownKeywordError)

# ##-- end 1st party imports
