#!/usr/bin/env python3
"""
Network address parsers.

Strict syntax is tried first. Only when it fails is the optional `resolver`
(a Resolver_p) asked to translate the text as a symbolic name.
If neither works, a FormatError is raised.

Addresses are returned as bytes in network order.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._interface import (DES_CBLOCK_LEN, ETHER_LEN, IP6_BARE_BITS,
                                  IP6_LEN, IP_LEN)
from confparse.enums import AddressKind_e
from confparse.errors import FormatError, ValueParseError
from . import scanner
from . import scalars
from . import tokenizer

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

IP_ALL_ONES  : bytes = b"\xff" * IP_LEN

def _query(resolver:Any, text:str, kind:AddressKind_e, context:Any, length:int) -> None|bytes:
    """ Ask the resolver, if there is one, and check what it hands back """
    if resolver is None:
        return None

    match resolver.resolve(text, kind, context):
        case None:
            return None
        case bytes() as result if len(result) == length:
            logging.debug("Resolved %s as %s", text, kind.name)
            return result
        case x:
            logging.warning("Resolver returned a bad value for %s (%s): %s", text, kind.name, x)
            return None

def _strict_ip(text:str) -> None|bytes:
    """ Four dot separated decimal octets, nothing else """
    parts = text.split(".")
    if len(parts) != IP_LEN:
        return None

    values = []
    for part in parts:
        if not bool(part):
            return None
        octet = 0
        for char in part:
            if not ("0" <= char <= "9"):
                return None
            octet = octet * 10 + ord(char) - ord("0")
            if octet > 255:
                return None
        values.append(octet)

    return bytes(values)

def parse_ip_address(text:str, *, resolver:Any=None, context:Any=None) -> bytes:
    """ eg: '10.0.0.1' -> b'\\x0a\\x00\\x00\\x01' """
    if (result:=_strict_ip(text)) is not None:
        return result
    if (result:=_query(resolver, text, AddressKind_e.IP, context, IP_LEN)) is not None:
        return result

    raise FormatError("Not an IP address: %s", text)

def _prefix_mask(bits:int, length:int) -> bytes:
    total = length * 8
    value = ((1 << bits) - 1) << (total - bits) if bits > 0 else 0
    return value.to_bytes(length, "big")

def _bad_ip_prefix(text:str, allow_bare:bool, resolver:Any, context:Any) -> tuple[bytes, bytes]:
    match _query(resolver, text, AddressKind_e.IP_PREFIX, context, IP_LEN * 2):
        case bytes() as result:
            return result[:IP_LEN], result[IP_LEN:]
        case None if allow_bare and (result:=_query(resolver, text, AddressKind_e.IP, context, IP_LEN)) is not None:
            return result, IP_ALL_ONES
        case _:
            raise FormatError("Not an IP prefix: %s", text)

def parse_ip_prefix(text:str, *, allow_bare:bool=False, resolver:Any=None, context:Any=None) -> tuple[bytes, bytes]:
    """ 'addr/mask' or 'addr/bits', returning (address, mask).
      With allow_bare, a plain address gets an all-ones mask.
    """
    match text.rpartition("/"):
        case ("", "", addr_part) if allow_bare:
            mask_part = ""
        case ("", "", _):
            return _bad_ip_prefix(text, allow_bare, resolver, context)
        case (addr_part, "/", mask_part):
            pass

    if (addr:=_strict_ip(addr_part)) is None:
        return _bad_ip_prefix(text, allow_bare, resolver, context)

    if allow_bare and not bool(mask_part):
        return addr, IP_ALL_ONES

    if (mask:=_strict_ip(mask_part)) is not None:
        return addr, mask

    try:
        bits = scalars.parse_integer(mask_part)
    except ValueParseError:
        return _bad_ip_prefix(text, allow_bare, resolver, context)

    if not (0 <= bits <= 32):
        return _bad_ip_prefix(text, allow_bare, resolver, context)

    return addr, _prefix_mask(bits, IP_LEN)

def parse_ip_address_set(text:str, *, resolver:Any=None, context:Any=None) -> frozenset[bytes]:
    """ Space separated IP addresses. All must parse for any to be returned """
    return frozenset(parse_ip_address(x, resolver=resolver, context=context)
                     for x in tokenizer.split_spaces(text))

def _is_xdigit(text:str, pos:int) -> bool:
    return pos < len(text) and scanner.xvalue(text[pos]) >= 0

def _strict_ip6(text:str) -> None|bytes:
    """ Up to 8 groups of 1-4 hex digits, at most one '::',
      and optionally an embedded IPv4 address as the last two groups.
    """
    length         = len(text)
    pos            = 0
    coloncolon     = -1
    parts          = []
    last_part_pos  = 0
    while len(parts) < 8:
        if coloncolon < 0 and text.startswith("::", pos):
            coloncolon  = len(parts)
            pos        += 2
        elif bool(parts) and pos < length - 1 and text[pos] == ":" and _is_xdigit(text, pos+1):
            pos += 1

        if not _is_xdigit(text, pos):
            break

        last_part_pos = pos
        while _is_xdigit(text, pos):
            pos += 1
        if pos - last_part_pos > 4:
            return None

        parts.append(int(text[last_part_pos:pos], 16))

    # an embedded IPv4 address replaces the last group read, and adds another
    if pos < length and bool(parts) and len(parts) <= 7 and text[pos] == ".":
        match _strict_ip(text[last_part_pos:]):
            case bytes() as ip4:
                parts[-1] = (ip4[0] << 8) + ip4[1]
                parts.append((ip4[2] << 8) + ip4[3])
                pos = length
            case None:
                pass

    match len(parts):
        case x if x < 8 and coloncolon < 0:
            return None
        case 8 if coloncolon >= 0:
            return None
        case x if x < 8:
            parts[coloncolon:coloncolon] = [0] * (8 - x)
        case _:
            pass

    if pos < length:
        return None

    return b"".join(x.to_bytes(2, "big") for x in parts)

def parse_ip6_address(text:str, *, resolver:Any=None, context:Any=None) -> bytes:
    """ eg: '::1' -> 15 zero bytes then b'\\x01' """
    if (result:=_strict_ip6(text)) is not None:
        return result
    if (result:=_query(resolver, text, AddressKind_e.IP6, context, IP6_LEN)) is not None:
        return result

    raise FormatError("Not an IPv6 address: %s", text)

def ip6_prefix_mask(bits:int) -> bytes:
    """ The 16 byte mask of a /bits prefix """
    if not (0 <= bits <= IP6_LEN * 8):
        raise FormatError("Bad IPv6 prefix length: %s", bits)
    return _prefix_mask(bits, IP6_LEN)

def ip6_mask_bits(mask:bytes) -> None|int:
    """ The prefix length of a mask, or None if the mask is not a contiguous run of ones """
    value = int.from_bytes(mask, "big")
    total = len(mask) * 8
    ones  = total - (((~value) & ((1 << total) - 1)).bit_length())
    if _prefix_mask(ones, len(mask)) != mask:
        return None
    return ones

def _bad_ip6_prefix(text:str, allow_bare:bool, resolver:Any, context:Any) -> tuple[bytes, int]:
    match _query(resolver, text, AddressKind_e.IP6_PREFIX, context, IP6_LEN * 2):
        case bytes() as result if (bits:=ip6_mask_bits(result[IP6_LEN:])) is not None:
            return result[:IP6_LEN], bits
        case None if allow_bare and (result:=_query(resolver, text, AddressKind_e.IP6, context, IP6_LEN)) is not None:
            return result, IP6_LEN * 8
        case _:
            raise FormatError("Not an IPv6 prefix: %s", text)

def parse_ip6_prefix(text:str, *, allow_bare:bool=False, resolver:Any=None, context:Any=None) -> tuple[bytes, int]:
    """ 'addr/mask' or 'addr/bits', returning (address, bits).
      With allow_bare, a plain address is a /64.
      A mask given as an address must be contiguous, or the text is rejected
      without asking the resolver.
    """
    match text.rpartition("/"):
        case ("", "", addr_part) if allow_bare:
            mask_part = ""
        case ("", "", _):
            return _bad_ip6_prefix(text, allow_bare, resolver, context)
        case (addr_part, "/", mask_part):
            pass

    if (addr:=_strict_ip6(addr_part)) is None:
        return _bad_ip6_prefix(text, allow_bare, resolver, context)

    if allow_bare and not bool(mask_part):
        return addr, IP6_BARE_BITS

    if (mask:=_strict_ip6(mask_part)) is not None:
        match ip6_mask_bits(mask):
            case None:
                raise FormatError("IPv6 mask is not a prefix: %s", text)
            case int() as bits:
                return addr, bits

    try:
        bits = scalars.parse_integer(mask_part)
    except ValueParseError:
        return _bad_ip6_prefix(text, allow_bare, resolver, context)

    if not (0 <= bits <= IP6_LEN * 8):
        return _bad_ip6_prefix(text, allow_bare, resolver, context)

    return addr, bits

def _strict_ether(text:str) -> None|bytes:
    """ Six ':' separated groups of 1 or 2 hex digits """
    length = len(text)
    pos    = 0
    values = []
    for group in range(ETHER_LEN):
        if _is_xdigit(text, pos) and _is_xdigit(text, pos+1):
            values.append(int(text[pos:pos+2], 16))
            pos += 2
        elif _is_xdigit(text, pos):
            values.append(scanner.xvalue(text[pos]))
            pos += 1
        else:
            return None

        if group == ETHER_LEN - 1:
            break
        if pos >= length - 1 or text[pos] != ":":
            return None
        pos += 1

    if pos != length:
        return None

    return bytes(values)

def parse_ethernet_address(text:str, *, resolver:Any=None, context:Any=None) -> bytes:
    """ eg: '0:1:2:3:4:5' and '00:01:02:03:04:05' are the same address """
    if (result:=_strict_ether(text)) is not None:
        return result
    if (result:=_query(resolver, text, AddressKind_e.ETHER, context, ETHER_LEN)) is not None:
        return result

    raise FormatError("Not an Ethernet address: %s", text)

def parse_des_cblock(text:str) -> bytes:
    """ Exactly 16 hex digits, as 8 bytes """
    if len(text) != DES_CBLOCK_LEN * 2 or not all(scanner.xvalue(x) >= 0 for x in text):
        raise FormatError("Not a DES cblock: %s", text)

    return bytes.fromhex(text)
