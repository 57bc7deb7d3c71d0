#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Iterable

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

if TYPE_CHECKING:
    from confparse._structs.slot import MatchResult
    from confparse._structs.slot_spec import SlotSpec
    from confparse.control.context import ParseContext

class ArgMatcher_i:
    """
    A Single standard process point for matching a list of argument texts
    against a declared signature of slots, storing the parsed values if they all succeed.
    """

    @abstractmethod
    def parse(self, args:list[str], specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        pass

    @abstractmethod
    def parse_string(self, conf:str, specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        pass

    @abstractmethod
    def parse_space(self, text:str, specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        pass

    @abstractmethod
    def parse_keyword(self, text:str, specs:Iterable[SlotSpec|str|dict], ctx:None|ParseContext=None) -> MatchResult:
        pass
