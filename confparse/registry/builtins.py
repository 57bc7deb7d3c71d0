#!/usr/bin/env python3
"""
The builtin argument types.

Parse functions have the signature `parse(slot, text, ctx) -> value`,
and raise a ConfParseError whose message is the diagnostic for the slot.
Store functions have the signature `store(slot, ctx)`.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any, Callable, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._structs.slot import Slot
from confparse.enums import ArgExtra_f, CpErr_e, SlotKind_e
from confparse.errors import ConfParseError, SignatureError, ValueParseError
from confparse.parsers import addresses, scalars, tokenizer

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

NONE   : Final[ArgExtra_f] = ArgExtra_f.NONE
INT    : Final[ArgExtra_f] = ArgExtra_f.EXTRA_INT
STORE2 : Final[ArgExtra_f] = ArgExtra_f.STORE2

##-- store functions

def store_value(slot:Slot, ctx:Any) -> None:
    if slot.spec.dest is not None:
        slot.spec.dest.set(slot.value)

def store_pair(slot:Slot, ctx:Any) -> None:
    """ Address to dest, mask to dest2. Without a dest2, dest gets the pair """
    addr, mask = slot.value
    match slot.spec.dest, slot.spec.dest2:
        case None, None:
            pass
        case dest, None:
            dest.set((addr, mask))
        case None, dest2:
            dest2.set(mask)
        case dest, dest2:
            dest.set(addr)
            dest2.set(mask)

def store_nothing(slot:Slot, ctx:Any) -> None:
    pass

##-- end store functions

##-- text

def parse_arg(slot:Slot, text:str, ctx:Any) -> str:
    return text

def parse_string(slot:Slot, text:str, ctx:Any) -> str:
    try:
        return tokenizer.parse_string(text)
    except ValueParseError as err:
        raise ConfParseError("%s takes string (%s)", slot.label, slot.desc) from err

def parse_word(slot:Slot, text:str, ctx:Any) -> str:
    try:
        return tokenizer.parse_word(text)
    except ValueParseError as err:
        raise ConfParseError("%s takes word (%s)", slot.label, slot.desc) from err

def parse_bool(slot:Slot, text:str, ctx:Any) -> bool:
    try:
        return scalars.parse_bool(text)
    except ValueParseError as err:
        raise ConfParseError("%s takes bool (%s)", slot.label, slot.desc) from err

def parse_ignore(slot:Slot, text:str, ctx:Any) -> None:
    return None

##-- end text

##-- integers

def _signed(low:int, high:int) -> Callable:

    def parse_signed(slot:Slot, text:str, ctx:Any) -> int:
        try:
            value = scalars.parse_integer(text)
        except ValueParseError as err:
            match err.kind:
                case CpErr_e.OVERFLOW:
                    raise ConfParseError("integer overflow on %s (%s)", slot.label, slot.desc) from err
                case _:
                    raise ConfParseError("%s takes %s (%s)", slot.label, slot.argtype.desc, slot.desc) from err

        if value < low:
            raise ConfParseError("%s (%s) must be >= %d", slot.label, slot.desc, low)
        if value > high:
            raise ConfParseError("%s (%s) must be <= %d", slot.label, slot.desc, high)
        return value

    return parse_signed

def _unsigned(high:int) -> Callable:

    def parse_unsigned(slot:Slot, text:str, ctx:Any) -> int:
        try:
            value = scalars.parse_unsigned(text)
        except ValueParseError as err:
            match err.kind:
                case CpErr_e.OVERFLOW:
                    raise ConfParseError("integer overflow on %s (%s)", slot.label, slot.desc) from err
                case _:
                    raise ConfParseError("%s takes %s (%s)", slot.label, slot.argtype.desc, slot.desc) from err

        if value > high:
            raise ConfParseError("%s (%s) must be <= %d", slot.label, slot.desc, high)
        return value

    return parse_unsigned

parse_byte      = _unsigned(0xFF)
parse_short     = _signed(-0x8000, 0x7FFF)
parse_u_short   = _unsigned(0xFFFF)
parse_int       = _signed(-0x80000000, 0x7FFFFFFF)
parse_u_int     = _unsigned(0xFFFFFFFF)

##-- end integers

##-- reals

def _extra(slot:Slot) -> int:
    match slot.extra:
        case None:
            raise SignatureError("%s (%s): type %s needs an extra parameter", slot.label, slot.desc, slot.argtype.name)
        case int() as x:
            return x

def _real_error(slot:Slot, err:ValueParseError, takes:str="real") -> ConfParseError:
    match err.kind:
        case CpErr_e.OVERFLOW:
            return ConfParseError("overflow on %s (%s)", slot.label, slot.desc)
        case CpErr_e.NEGATIVE:
            return ConfParseError("%s (%s) must be >= 0", slot.label, slot.desc)
        case CpErr_e.INVALID:
            return ConfParseError("%s (%s) is an invalid real", slot.label, slot.desc)
        case _:
            return ConfParseError("%s takes %s (%s)", slot.label, takes, slot.desc)

def parse_real2(slot:Slot, text:str, ctx:Any) -> int:
    try:
        return scalars.parse_real2(text, _extra(slot))
    except ValueParseError as err:
        raise _real_error(slot, err) from err

def parse_u_real2(slot:Slot, text:str, ctx:Any) -> int:
    try:
        return scalars.parse_unsigned_real2(text, _extra(slot))
    except ValueParseError as err:
        raise _real_error(slot, err) from err

def parse_real10(slot:Slot, text:str, ctx:Any) -> int:
    try:
        return scalars.parse_real10(text, _extra(slot))
    except ValueParseError as err:
        raise _real_error(slot, err) from err

def parse_u_real10(slot:Slot, text:str, ctx:Any) -> int:
    match parse_real10(slot, text, ctx):
        case int() as val if val < 0:
            raise ConfParseError("%s (%s) must be >= 0", slot.label, slot.desc)
        case int() as val:
            return val

def parse_msec(slot:Slot, text:str, ctx:Any) -> int:
    try:
        return scalars.parse_milliseconds(text)
    except ValueParseError as err:
        raise _real_error(slot, err, takes="time in seconds") from err

def parse_timeval(slot:Slot, text:str, ctx:Any) -> scalars.Timeval:
    try:
        return scalars.parse_timeval(text)
    except ValueParseError as err:
        raise _real_error(slot, err, takes="seconds since the epoch") from err

##-- end reals

##-- addresses

def parse_ip_addr(slot:Slot, text:str, ctx:Any) -> bytes:
    try:
        return addresses.parse_ip_address(text, resolver=ctx)
    except ValueParseError as err:
        raise ConfParseError("%s takes IP address (%s)", slot.label, slot.desc) from err

def parse_ip_prefix(slot:Slot, text:str, ctx:Any) -> tuple[bytes, bytes]:
    try:
        return addresses.parse_ip_prefix(text, resolver=ctx)
    except ValueParseError as err:
        raise ConfParseError("%s takes IP address prefix (%s)", slot.label, slot.desc) from err

def parse_ip_addr_or_prefix(slot:Slot, text:str, ctx:Any) -> tuple[bytes, bytes]:
    try:
        return addresses.parse_ip_prefix(text, allow_bare=True, resolver=ctx)
    except ValueParseError as err:
        raise ConfParseError("%s takes IP address prefix (%s)", slot.label, slot.desc) from err

def parse_ip_addr_set(slot:Slot, text:str, ctx:Any) -> frozenset[bytes]:
    try:
        return addresses.parse_ip_address_set(text, resolver=ctx)
    except ValueParseError as err:
        raise ConfParseError("%s takes set of IP addresses (%s)", slot.label, slot.desc) from err

def parse_ether_addr(slot:Slot, text:str, ctx:Any) -> bytes:
    try:
        return addresses.parse_ethernet_address(text, resolver=ctx)
    except ValueParseError as err:
        raise ConfParseError("%s takes Ethernet address (%s)", slot.label, slot.desc) from err

def parse_ip6_addr(slot:Slot, text:str, ctx:Any) -> bytes:
    try:
        return addresses.parse_ip6_address(text, resolver=ctx)
    except ValueParseError as err:
        raise ConfParseError("%s takes IPv6 address (%s)", slot.label, slot.desc) from err

def _ip6_prefix(slot:Slot, text:str, ctx:Any, allow_bare:bool) -> tuple[bytes, bytes]:
    try:
        addr, bits = addresses.parse_ip6_prefix(text, allow_bare=allow_bare, resolver=ctx)
    except ValueParseError as err:
        raise ConfParseError("%s takes IPv6 address prefix (%s)", slot.label, slot.desc) from err

    return addr, addresses.ip6_prefix_mask(bits)

def parse_ip6_prefix(slot:Slot, text:str, ctx:Any) -> tuple[bytes, bytes]:
    return _ip6_prefix(slot, text, ctx, False)

def parse_ip6_addr_or_prefix(slot:Slot, text:str, ctx:Any) -> tuple[bytes, bytes]:
    return _ip6_prefix(slot, text, ctx, True)

def parse_des_cblock(slot:Slot, text:str, ctx:Any) -> bytes:
    try:
        return addresses.parse_des_cblock(text)
    except ValueParseError as err:
        raise ConfParseError("%s takes DES encryption block (%s)", slot.label, slot.desc) from err

def parse_element(slot:Slot, text:str, ctx:Any) -> None|Any:
    """ An empty argument is no element """
    if not bool(text):
        return None

    match ctx.find_element(text):
        case None:
            raise ConfParseError("%s (%s): no element named `%s'", slot.label, slot.desc, text)
        case found:
            return found

##-- end addresses

DEFAULT_TYPES : Final[list[tuple[str, str, ArgExtra_f, None|Callable, None|Callable, SlotKind_e]]] = [
    # markers
    ("OPTIONAL",           "<optional arguments marker>",          NONE,   None,                     None,          SlotKind_e.OPTIONAL),
    ("UNMIXED_KEYWORDS",   "<unmixed keyword arguments marker>",   NONE,   None,                     None,          SlotKind_e.UNMIXED_KEYWORDS),
    ("MIXED_KEYWORDS",     "<intermixed keyword arguments marker>", NONE,  None,                     None,          SlotKind_e.MIXED_KEYWORDS),
    ("KEYWORDS",           "<keyword arguments marker>",           NONE,   None,                     None,          SlotKind_e.MIXED_KEYWORDS),
    ("IGNORE",             "ignored",                              NONE,   parse_ignore,             store_nothing, SlotKind_e.IGNORE),
    ("IGNORE_REST",        "<ignore rest marker>",                 NONE,   None,                     None,          SlotKind_e.IGNORE_REST),
    # text
    ("arg",                "??",                                   NONE,   parse_arg,                store_value,   SlotKind_e.POSITIONAL),
    ("string",             "string",                               NONE,   parse_string,             store_value,   SlotKind_e.POSITIONAL),
    ("word",               "word",                                 NONE,   parse_word,               store_value,   SlotKind_e.POSITIONAL),
    ("bool",               "bool",                                 NONE,   parse_bool,               store_value,   SlotKind_e.POSITIONAL),
    # integers
    ("byte",               "byte",                                 NONE,   parse_byte,               store_value,   SlotKind_e.POSITIONAL),
    ("short",              "short",                                NONE,   parse_short,              store_value,   SlotKind_e.POSITIONAL),
    ("u_short",            "unsigned short",                       NONE,   parse_u_short,            store_value,   SlotKind_e.POSITIONAL),
    ("int",                "int",                                  NONE,   parse_int,                store_value,   SlotKind_e.POSITIONAL),
    ("u_int",              "unsigned",                             NONE,   parse_u_int,              store_value,   SlotKind_e.POSITIONAL),
    # reals
    ("real2",              "real",                                 INT,    parse_real2,              store_value,   SlotKind_e.POSITIONAL),
    ("u_real2",            "unsigned real",                        INT,    parse_u_real2,            store_value,   SlotKind_e.POSITIONAL),
    ("real10",             "real",                                 INT,    parse_real10,             store_value,   SlotKind_e.POSITIONAL),
    ("u_real10",           "unsigned real",                        INT,    parse_u_real10,           store_value,   SlotKind_e.POSITIONAL),
    ("msec",               "time in seconds",                      NONE,   parse_msec,               store_value,   SlotKind_e.POSITIONAL),
    ("timeval",            "seconds since the epoch",              NONE,   parse_timeval,            store_value,   SlotKind_e.POSITIONAL),
    # addresses
    ("ip_addr",            "IP address",                           NONE,   parse_ip_addr,            store_value,   SlotKind_e.POSITIONAL),
    ("ip_prefix",          "IP address prefix",                    STORE2, parse_ip_prefix,          store_pair,    SlotKind_e.POSITIONAL),
    ("ip_addr_or_prefix",  "IP address or prefix",                 STORE2, parse_ip_addr_or_prefix,  store_pair,    SlotKind_e.POSITIONAL),
    ("ip_addr_set",        "set of IP addresses",                  NONE,   parse_ip_addr_set,        store_value,   SlotKind_e.POSITIONAL),
    ("ether_addr",         "Ethernet address",                     NONE,   parse_ether_addr,         store_value,   SlotKind_e.POSITIONAL),
    ("element",            "element name",                         NONE,   parse_element,            store_value,   SlotKind_e.POSITIONAL),
    ("ip6_addr",           "IPv6 address",                         NONE,   parse_ip6_addr,           store_value,   SlotKind_e.POSITIONAL),
    ("ip6_prefix",         "IPv6 address prefix",                  STORE2, parse_ip6_prefix,         store_pair,    SlotKind_e.POSITIONAL),
    ("ip6_addr_or_prefix", "IPv6 address or prefix",               STORE2, parse_ip6_addr_or_prefix, store_pair,    SlotKind_e.POSITIONAL),
    ("des_cblock",         "DES cipher block",                     NONE,   parse_des_cblock,         store_value,   SlotKind_e.POSITIONAL),
]

def setup_builtins(registry:Any) -> None:
    for name, desc, extra, parse, store, kind in DEFAULT_TYPES:
        registry.register(name, desc, extra=extra, parse=parse, store=store, kind=kind)

def teardown_builtins(registry:Any) -> None:
    for name, *_ in DEFAULT_TYPES:
        registry.unregister(name)
