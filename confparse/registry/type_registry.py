#!/usr/bin/env python3
"""
The name -> ArgType table the matcher dispatches through.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import threading
from typing import Callable, Iterator

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._structs.arg_type import ArgType
from confparse.enums import ArgExtra_f, SlotKind_e
from confparse.errors import (RegistryAllocationError, RegistryConflictError,
                              UnknownTypeError)

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgTypeRegistry:
    """ Reference counted argument types, by name.
      Registering the same behaviour under a name again bumps its use count,
      registering different behaviour is an error.
      All access is serialised by a re-entrant lock.
    """

    def __init__(self):
        self._types : dict[str, ArgType] = {}
        self._lock                       = threading.RLock()

    def register(self, name:str, desc:str, extra:ArgExtra_f=ArgExtra_f.NONE, parse:None|Callable=None, store:None|Callable=None, kind:SlotKind_e=SlotKind_e.POSITIONAL) -> ArgType:
        with self._lock:
            try:
                entry = ArgType(name=name, desc=desc, extra=extra, parse=parse, store=store, kind=kind)
            except MemoryError as err:
                raise RegistryAllocationError("Could not allocate argument type: %s", name) from err

            match self._types.get(name, None):
                case None:
                    logging.debug("Registering Argument Type: %s", name)
                    self._types[name] = entry
                    return entry
                case ArgType() as existing if existing.behaviour != entry.behaviour:
                    raise RegistryConflictError("Argument type %s is already registered differently", name)
                case ArgType() as existing:
                    existing.use_count += 1
                    return existing

    def unregister(self, name:str) -> None:
        """ Decrement a type's use count, removing it when it reaches zero.
          Unknown names are ignored.
        """
        with self._lock:
            match self._types.get(name, None):
                case None:
                    return
                case ArgType() as existing if existing.use_count <= 1:
                    logging.debug("Removing Argument Type: %s", name)
                    del self._types[name]
                case ArgType() as existing:
                    existing.use_count -= 1

    def lookup(self, name:str) -> ArgType:
        with self._lock:
            match self._types.get(name, None):
                case None:
                    raise UnknownTypeError("unknown argument type `%s'", name)
                case ArgType() as found:
                    return found

    def clear(self) -> None:
        with self._lock:
            self._types.clear()

    def __contains__(self, name:str) -> bool:
        with self._lock:
            return name in self._types

    def __getitem__(self, name:str) -> ArgType:
        return self.lookup(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._types.keys()))

    def __repr__(self) -> str:
        return f"<ArgTypeRegistry: {len(self)} types>"
