#!/usr/bin/env python3
"""
A Resolver_p backed by a table of names, usually from the `[addresses]` config table:

[addresses]
gateway  = "10.0.0.1"
lan      = "10.0.0.0/8"
lan6     = "fe80::/64"
router   = "00:11:22:33:44:55"

Each name is parsed according to the kind of address it is asked for,
so "gateway" resolves as an IP, and as an IP prefix with an all-ones mask.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any, Mapping

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from confparse.enums import AddressKind_e
from confparse.errors import ValueParseError
from confparse.parsers import addresses

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class AddressTable:
    """ Resolves names to address bytes. Entries are parsed strictly, without recursion """

    def __init__(self, entries:None|Mapping[str, str]=None):
        self._entries : dict[str, str] = dict(entries or {})

    @staticmethod
    def build(config:TomlGuard) -> AddressTable:
        return AddressTable(dict(config.on_fail({}).addresses()))

    def add(self, name:str, text:str) -> None:
        self._entries[name] = text

    def resolve(self, name:str, kind:AddressKind_e, context:Any=None) -> None|bytes:
        if name not in self._entries:
            return None

        text = self._entries[name]
        try:
            match kind:
                case AddressKind_e.IP:
                    return addresses.parse_ip_address(text)
                case AddressKind_e.IP_PREFIX:
                    addr, mask = addresses.parse_ip_prefix(text, allow_bare=True)
                    return addr + mask
                case AddressKind_e.IP6:
                    return addresses.parse_ip6_address(text)
                case AddressKind_e.IP6_PREFIX:
                    addr, bits = addresses.parse_ip6_prefix(text, allow_bare=True)
                    return addr + addresses.ip6_prefix_mask(bits)
                case AddressKind_e.ETHER:
                    return addresses.parse_ethernet_address(text)
        except ValueParseError:
            logging.debug("Address entry %s is not a %s: %s", name, kind.name, text)
            return None

    def __contains__(self, name:str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
