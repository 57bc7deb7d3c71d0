#!/usr/bin/env python3
"""
Protocols for the collaborators the parsers depend on, but do not implement.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
from typing import Any, Protocol, runtime_checkable

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse.enums import AddressKind_e

# ##-- end 1st party imports

@runtime_checkable
class Resolver_p(Protocol):
    """ Translates symbolic names into address bytes.
      Only consulted after strict syntax has failed.
      Prefix kinds return the address followed by its mask.
    """

    def resolve(self, name:str, kind:AddressKind_e, context:Any) -> None|bytes:
        pass

@runtime_checkable
class ElementFinder_p(Protocol):
    """ Looks up processing stages by name """

    def find(self, name:str) -> None|Any:
        pass

@runtime_checkable
class ErrorSink_p(Protocol):
    """ Receives formatted diagnostics, and counts the errors """

    @property
    def nerrors(self) -> int:
        pass

    @property
    def messages(self) -> list[str]:
        pass

    def error(self, fmt:str, *args:Any) -> None:
        pass

    def warning(self, fmt:str, *args:Any) -> None:
        pass
