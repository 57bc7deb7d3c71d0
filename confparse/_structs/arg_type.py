#!/usr/bin/env python3
"""
The registry's record of a named argument type.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any, Callable

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel

# ##-- end 3rd party imports

# ##-- 1st party imports
from confparse.enums import ArgExtra_f, SlotKind_e

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgType(BaseModel, arbitrary_types_allowed=True):
    """ A named type slots can declare.
      `parse(slot, text, ctx) -> value` converts a token,
      `store(slot, ctx)` writes slot.value to the slot's destination(s).
      Markers have a non-positional `kind` and no parse or store.
    """

    name       : str
    desc       : str                 = ""
    kind       : SlotKind_e          = SlotKind_e.POSITIONAL
    extra      : ArgExtra_f          = ArgExtra_f.NONE
    parse      : None|Callable       = None
    store      : None|Callable       = None
    use_count  : int                 = 1

    @property
    def behaviour(self) -> tuple:
        """ What must match for a re-registration to be the same type """
        return (self.desc, self.extra, self.parse, self.store, self.kind)

    @property
    def takes_extra(self) -> bool:
        return ArgExtra_f.EXTRA_INT in self.extra

    @property
    def stores_two(self) -> bool:
        return ArgExtra_f.STORE2 in self.extra

    def __str__(self) -> str:
        return f"<ArgType: {self.name} ({self.desc}) x{self.use_count}>"
