#!/usr/bin/env python3
"""
Runtime state of a match.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from dataclasses import dataclass, field
from typing import Any

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._structs.arg_type import ArgType
from confparse._structs.slot_spec import SlotSpec
from confparse.errors import ConfParseError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass
class Slot:
    """ A SlotSpec bound to its type, the token it was given, and the parsed value """

    spec     : SlotSpec
    argtype  : ArgType
    label    : str                 = ""
    token    : None|str            = None
    value    : Any                 = None
    active   : bool                = False

    @property
    def desc(self) -> str:
        return self.spec.desc

    @property
    def extra(self) -> None|int:
        return self.spec.extra

    def bind(self, token:str) -> None:
        self.token  = token
        self.active = True

@dataclass
class MatchResult:
    """ count is the number of slots stored, or -1 on failure """

    count   : int                     = -1
    values  : dict[str, Any]          = field(default_factory=dict)
    errors  : list[str]               = field(default_factory=list)
    error   : None|ConfParseError     = None

    def __bool__(self) -> bool:
        return 0 <= self.count

    @staticmethod
    def failed(err:ConfParseError, errors:list[str]) -> MatchResult:
        return MatchResult(count=-1, errors=errors, error=err)
