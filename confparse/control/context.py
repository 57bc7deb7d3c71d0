#!/usr/bin/env python3
"""
The explicit state a match runs against.

A ParseContext bundles the collaborators the parsers need:
  registry  : the ArgTypeRegistry to look slot types up in
  resolver  : a Resolver_p for symbolic addresses
  finder    : an ElementFinder_p for `element` slots
  owner     : the id of the thing being configured, eg: "router/in/classifier"
  errh      : an ErrorSink_p for diagnostics
  config    : a TomlGuard of settings

The context is itself passed to the address parsers as their resolver,
forwarding to the configured one with the owner as context.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from confparse._interface import DEFAULT_MAX_SLOTS, LAST_WINS
from confparse.enums import AddressKind_e
from confparse.control.error_sink import CollectingErrorSink

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParseContext:

    def __init__(self, *, registry:Any=None, resolver:Any=None, finder:Any=None, owner:None|str=None, errh:Any=None, config:None|TomlGuard|dict=None):
        match registry:
            case None:
                from confparse import registry as registry_mod
                self.registry = registry_mod.default_registry()
            case _:
                self.registry = registry

        match config:
            case None:
                from confparse.utils.config import default_config
                self.config = default_config()
            case TomlGuard():
                self.config = config
            case dict():
                self.config = TomlGuard(config)
            case _:
                raise TypeError("ParseContext config must be a TomlGuard or dict", config)

        self.resolver  = resolver
        self.finder    = finder
        self.owner     = owner
        self.errh      = errh or CollectingErrorSink(prefix=owner)

    @property
    def max_slots(self) -> int:
        return self.config.on_fail(DEFAULT_MAX_SLOTS, int).matcher.max_slots()

    @property
    def duplicate_keywords(self) -> str:
        return self.config.on_fail(LAST_WINS, str).matcher.duplicate_keywords()

    def resolve(self, name:str, kind:AddressKind_e, context:Any=None) -> None|bytes:
        if self.resolver is None:
            return None
        return self.resolver.resolve(name, kind, self.owner if context is None else context)

    def find_element(self, name:str) -> None|Any:
        """ Look for name relative to each '/' separated prefix of the owner's id,
          innermost first, then as given.
        """
        if self.finder is None:
            return None

        owner_id = self.owner or ""
        idx      = len(owner_id)
        while (idx:=owner_id.rfind("/", 0, idx)) >= 0:
            match self.finder.find(owner_id[:idx+1] + name):
                case None:
                    pass
                case found:
                    return found

        return self.finder.find(name)

    def __repr__(self) -> str:
        return f"<ParseContext: owner={self.owner}>"
