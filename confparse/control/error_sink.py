#!/usr/bin/env python3
"""
Error sinks receive the matcher's diagnostics.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CollectingErrorSink:
    """ Keeps every message, counts errors, and logs them as they arrive.
      An optional prefix is put before each message, eg: the owner's name.
    """

    def __init__(self, prefix:None|str=None, logger:None|logmod.Logger=None):
        self._prefix    = prefix
        self._logger    = logger or logging
        self._messages  = []
        self._warnings  = []
        self._nerrors   = 0

    @property
    def nerrors(self) -> int:
        return self._nerrors

    @property
    def messages(self) -> list[str]:
        return self._messages[:]

    @property
    def warnings(self) -> list[str]:
        return self._warnings[:]

    def _format(self, fmt:str, args:tuple) -> str:
        msg = fmt % args if bool(args) else fmt
        if self._prefix:
            return f"{self._prefix}: {msg}"
        return msg

    def error(self, fmt:str, *args:Any) -> None:
        msg = self._format(fmt, args)
        self._messages.append(msg)
        self._nerrors += 1
        self._logger.error("%s", msg)

    def warning(self, fmt:str, *args:Any) -> None:
        msg = self._format(fmt, args)
        self._warnings.append(msg)
        self._logger.warning("%s", msg)

    def clear(self) -> None:
        self._messages.clear()
        self._warnings.clear()
        self._nerrors = 0

class SilentErrorSink(CollectingErrorSink):
    """ Collects, but only logs at debug level """

    def error(self, fmt:str, *args:Any) -> None:
        msg = self._format(fmt, args)
        self._messages.append(msg)
        self._nerrors += 1
        self._logger.debug("%s", msg)

    def warning(self, fmt:str, *args:Any) -> None:
        msg = self._format(fmt, args)
        self._warnings.append(msg)
        self._logger.debug("%s", msg)
