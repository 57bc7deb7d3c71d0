#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
import confparse.errors
from confparse.enums import AddressKind_e
from confparse.parsers import addresses

@pytest.fixture
def resolver(mocker):
    resolver = mocker.Mock()
    resolver.resolve.return_value = None
    return resolver

class TestIPv4:

    def test_basic(self):
        assert(addresses.parse_ip_address("10.0.0.1") == bytes([10, 0, 0, 1]))

    @pytest.mark.parametrize("text", ["256.0.0.1", "1.2.3", "1.2.3.4.5", "1..2.3", "a.b.c.d", "", "1.2.3.4 "])
    def test_format(self, text):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip_address(text)

    def test_resolver_fallback(self, resolver):
        resolver.resolve.return_value = bytes([192, 168, 0, 1])
        result = addresses.parse_ip_address("gateway", resolver=resolver, context="owner")
        assert(result == bytes([192, 168, 0, 1]))
        resolver.resolve.assert_called_once_with("gateway", AddressKind_e.IP, "owner")

    def test_resolver_not_asked_when_strict_works(self, resolver):
        addresses.parse_ip_address("1.2.3.4", resolver=resolver)
        resolver.resolve.assert_not_called()

    def test_resolver_bad_length(self, resolver):
        resolver.resolve.return_value = b"\x01\x02"
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip_address("gateway", resolver=resolver)

    def test_long_octets(self):
        assert(addresses.parse_ip_address("1.2.3." + "0" * 5000 + "7") == bytes([1, 2, 3, 7]))
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip_address("1.2.3." + "9" * 5000)

    def test_long_octet_falls_back_to_resolver(self, resolver):
        text                          = "1.2.3." + "9" * 5000
        resolver.resolve.return_value = bytes([9, 9, 9, 9])
        assert(addresses.parse_ip_address(text, resolver=resolver) == bytes([9, 9, 9, 9]))
        resolver.resolve.assert_called_once_with(text, AddressKind_e.IP, None)

    def test_set(self):
        result = addresses.parse_ip_address_set("1.2.3.4  5.6.7.8 1.2.3.4")
        assert(result == frozenset([bytes([1, 2, 3, 4]), bytes([5, 6, 7, 8])]))

    def test_set_all_or_nothing(self):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip_address_set("1.2.3.4 nope")

class TestIPv4Prefix:

    def test_bits(self):
        addr, mask = addresses.parse_ip_prefix("10.0.0.0/8")
        assert(addr == bytes([10, 0, 0, 0]))
        assert(mask == bytes([255, 0, 0, 0]))

    def test_mask(self):
        _, mask = addresses.parse_ip_prefix("10.0.0.0/255.255.0.0")
        assert(mask == bytes([255, 255, 0, 0]))

    def test_bits_any_base(self):
        _, mask = addresses.parse_ip_prefix("10.0.0.0/0x8")
        assert(mask == bytes([255, 0, 0, 0]))

    def test_zero_bits(self):
        _, mask = addresses.parse_ip_prefix("0.0.0.0/0")
        assert(mask == bytes(4))

    def test_bare_rejected(self):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip_prefix("10.0.0.1")

    def test_bare_allowed(self):
        addr, mask = addresses.parse_ip_prefix("10.0.0.1", allow_bare=True)
        assert(addr == bytes([10, 0, 0, 1]))
        assert(mask == b"\xff" * 4)

    @pytest.mark.parametrize("text", ["10.0.0.0/33", "10.0.0.0/x", "10.0.0/8", "10.0.0.0/"])
    def test_format(self, text):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip_prefix(text)

    def test_resolver_prefix(self, resolver):
        resolver.resolve.return_value = bytes([10, 1, 0, 0, 255, 255, 0, 0])
        addr, mask = addresses.parse_ip_prefix("lan", resolver=resolver)
        assert(addr == bytes([10, 1, 0, 0]))
        assert(mask == bytes([255, 255, 0, 0]))

    def test_resolver_bare(self, resolver):
        resolver.resolve.side_effect = lambda name, kind, ctx: bytes([10, 1, 2, 3]) if kind is AddressKind_e.IP else None
        addr, mask = addresses.parse_ip_prefix("host", allow_bare=True, resolver=resolver)
        assert(addr == bytes([10, 1, 2, 3]))
        assert(mask == b"\xff" * 4)

class TestIPv6:

    def test_loopback(self):
        assert(addresses.parse_ip6_address("::1") == bytes(15) + b"\x01")

    def test_unspecified(self):
        assert(addresses.parse_ip6_address("::") == bytes(16))

    def test_compressed_middle(self):
        expect = bytes.fromhex("20010db8000000000000000000010002")
        assert(addresses.parse_ip6_address("2001:db8::1:2") == expect)

    def test_full(self):
        expect = bytes.fromhex("00010002000300040005000600070008")
        assert(addresses.parse_ip6_address("1:2:3:4:5:6:7:8") == expect)

    def test_embedded_ipv4(self):
        expect = bytes(10) + bytes([0xff, 0xff, 1, 2, 3, 4])
        assert(addresses.parse_ip6_address("::ffff:1.2.3.4") == expect)

    @pytest.mark.parametrize("text", ["1::2::3", "12345::", "1:2:3:4:5:6:7", "1:2:3:4:5:6:7:8::",
                                      "1:2:3:4:5:6:7:8:9", ":1", "g::", "::1.2.3", ""])
    def test_format(self, text):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip6_address(text)

    def test_resolver(self, resolver):
        resolver.resolve.return_value = bytes(15) + b"\x02"
        assert(addresses.parse_ip6_address("router", resolver=resolver) == bytes(15) + b"\x02")
        resolver.resolve.assert_called_once_with("router", AddressKind_e.IP6, None)

class TestIPv6Prefix:

    def test_mask_bytes(self):
        assert(addresses.ip6_prefix_mask(64) == b"\xff" * 8 + bytes(8))
        assert(addresses.ip6_prefix_mask(0) == bytes(16))
        assert(addresses.ip6_prefix_mask(128) == b"\xff" * 16)

    def test_mask_bits(self):
        assert(addresses.ip6_mask_bits(b"\xff" * 4 + bytes(12)) == 32)
        assert(addresses.ip6_mask_bits(bytes(16)) == 0)
        assert(addresses.ip6_mask_bits(b"\xff\x00\xff" + bytes(13)) is None)

    def test_bits(self):
        addr, bits = addresses.parse_ip6_prefix("fe80::/64")
        assert(addr == bytes.fromhex("fe80") + bytes(14))
        assert(bits == 64)

    def test_mask(self):
        _, bits = addresses.parse_ip6_prefix("fe80::/ffff:ffff::")
        assert(bits == 32)

    def test_non_contiguous_mask(self, resolver):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip6_prefix("fe80::/ffff:0:ffff::", resolver=resolver)

        resolver.resolve.assert_not_called()

    def test_bare(self):
        _, bits = addresses.parse_ip6_prefix("fe80::", allow_bare=True)
        assert(bits == 64)

    def test_bare_rejected(self):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip6_prefix("fe80::")

    def test_too_many_bits(self):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ip6_prefix("fe80::/129")

    def test_resolver_bare_is_full_length(self, resolver):
        resolver.resolve.side_effect = lambda name, kind, ctx: bytes(16) if kind is AddressKind_e.IP6 else None
        _, bits = addresses.parse_ip6_prefix("host", allow_bare=True, resolver=resolver)
        assert(bits == 128)

class TestEthernet:

    def test_short_and_long_groups(self):
        expect = bytes([0, 1, 2, 3, 4, 5])
        assert(addresses.parse_ethernet_address("0:1:2:3:4:5") == expect)
        assert(addresses.parse_ethernet_address("00:01:02:03:04:05") == expect)

    def test_hex(self):
        expect = bytes([0x00, 0x11, 0x22, 0xaa, 0xBB, 0xcc])
        assert(addresses.parse_ethernet_address("00:11:22:aa:BB:cc") == expect)

    @pytest.mark.parametrize("text", ["00-11-22-33-44-55", "0:1:2:3:4", "0:1:2:3:4:", "0:1:2:3:4:5:6", "000:1:2:3:4:5"])
    def test_format(self, text):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_ethernet_address(text)

    def test_resolver_fallback(self, resolver):
        resolver.resolve.return_value = bytes(6)
        assert(addresses.parse_ethernet_address("00-11-22-33-44-55", resolver=resolver, context="x") == bytes(6))
        resolver.resolve.assert_called_once_with("00-11-22-33-44-55", AddressKind_e.ETHER, "x")

class TestDesCblock:

    def test_basic(self):
        assert(addresses.parse_des_cblock("0011223344556677") == bytes.fromhex("0011223344556677"))

    @pytest.mark.parametrize("text", ["00112233", "001122334455667g", "00112233445566778"])
    def test_format(self, text):
        with pytest.raises(confparse.errors.FormatError):
            addresses.parse_des_cblock(text)
