#!/usr/bin/env python3
"""
These are the core enums and flags used to convey information around confparse.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum

# ##-- end stdlib imports

class SlotKind_e(enum.Enum):
    """ What a declared slot (or structural marker) means to the matcher """
    POSITIONAL        = enum.auto()
    KEYWORD           = enum.auto()
    OPTIONAL          = enum.auto()
    UNMIXED_KEYWORDS  = enum.auto()
    MIXED_KEYWORDS    = enum.auto()
    IGNORE            = enum.auto()
    IGNORE_REST       = enum.auto()

    @property
    def is_marker(self) -> bool:
        return self not in (SlotKind_e.POSITIONAL, SlotKind_e.KEYWORD, SlotKind_e.IGNORE)

class ArgExtra_f(enum.Flag):
    """ Extra parameters an argument type takes """
    NONE      = 0
    EXTRA_INT = enum.auto()
    STORE2    = enum.auto()

class CpErr_e(enum.Enum):
    """ The kind of failure a value parser reports """
    OK        = enum.auto()
    FORMAT    = enum.auto()
    OVERFLOW  = enum.auto()
    NEGATIVE  = enum.auto()
    INVALID   = enum.auto()

class AddressKind_e(enum.Enum):
    """ The shape of address a resolver is asked for """
    IP           = enum.auto()
    IP_PREFIX    = enum.auto()
    IP6          = enum.auto()
    IP6_PREFIX   = enum.auto()
    ETHER        = enum.auto()

class KeywordResult_e(enum.Enum):
    """ Outcome of trying to bind a token as a keyword argument """
    SUCCESS     = enum.auto()
    DUPLICATE   = enum.auto()
    NO_KEYWORD  = enum.auto()
    UNKNOWN     = enum.auto()
