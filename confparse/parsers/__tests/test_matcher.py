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
from confparse._structs.slot_spec import (IGNORE, IGNORE_REST, KEYWORDS,
                                          MIXED_KEYWORDS, OPTIONAL,
                                          UNMIXED_KEYWORDS, Box, SlotSpec)
from confparse.control.context import ParseContext
from confparse.parsers.matcher import ConfArgMatcher
from confparse.registry import ArgTypeRegistry, setup_builtins
from confparse.registry.builtins import store_value
from confparse.utils.address_table import AddressTable

@pytest.fixture
def registry():
    reg = ArgTypeRegistry()
    setup_builtins(reg)
    return reg

@pytest.fixture
def ctx(registry):
    return ParseContext(registry=registry, config={})

@pytest.fixture
def boxes():
    return Box(), Box(), Box()

@pytest.fixture
def sig(boxes):
    """ int, OPTIONAL, int, K=int """
    a, b, k = boxes
    return [SlotSpec.build("int a", dest=a),
            OPTIONAL,
            SlotSpec.build("int b", dest=b),
            SlotSpec.build("K=int k", dest=k)]

class TestMatcherBasic:

    def test_sanity(self):
        matcher = ConfArgMatcher()
        assert(matcher is not None)
        assert(not matcher.strict)

    def test_required_only(self, ctx, sig, boxes):
        result = ConfArgMatcher().parse(["5"], sig, ctx)
        assert(bool(result))
        assert(result.count == 1)
        assert(boxes[0].value == 5)
        assert(boxes[1].value is None)
        assert(boxes[2].value is None)
        assert(result.values == {"argument 1": 5})

    def test_optional_and_keyword(self, ctx, sig, boxes):
        result = ConfArgMatcher().parse(["5", "6", "K", "7"], sig, ctx)
        assert(result.count == 3)
        assert([x.value for x in boxes] == [5, 6, 7])
        assert(result.values == {"argument 1": 5, "argument 2": 6, "K": 7})

    def test_keyword_with_value_in_token(self, ctx, sig, boxes):
        result = ConfArgMatcher().parse(["5", "K 7"], sig, ctx)
        assert(result.count == 2)
        assert(boxes[2].value == 7)

    def test_intermixed_keyword(self, ctx, sig, boxes):
        result = ConfArgMatcher().parse(["K 7", "5"], sig, ctx)
        assert(result.count == 2)
        assert(boxes[0].value == 5)
        assert(boxes[2].value == 7)

    def test_too_few(self, ctx, sig, boxes):
        result = ConfArgMatcher().parse(["K", "7"], sig, ctx)
        assert(not bool(result))
        assert(result.count == -1)
        assert(isinstance(result.error, confparse.errors.ArityError))
        assert("too few arguments" in str(result.error))
        assert(str(result.error) == "too few arguments; expected `int, [int], [keywords]'")
        assert(all(x.value is None for x in boxes))
        assert(ctx.errh.nerrors == 1)

    def test_parse_string(self, ctx, sig, boxes):
        result = ConfArgMatcher().parse_string("5, 6 /* limit */, K 7", sig, ctx)
        assert(result.count == 3)
        assert([x.value for x in boxes] == [5, 6, 7])

    def test_specs_as_text(self, ctx):
        result = ConfArgMatcher().parse(["1", "2"], ["int a", "OPTIONAL", "int b"], ctx)
        assert(result.count == 2)
        assert(result.values == {"argument 1": 1, "argument 2": 2})

    def test_callable_dest(self, ctx):
        found  = []
        result = ConfArgMatcher().parse(["3"], [SlotSpec.build("int a", dest=found.append)], ctx)
        assert(result.count == 1)
        assert(found == [3])

    def test_default_context(self, boxes):
        result = ConfArgMatcher().parse(["1"], [SlotSpec.build("int a", dest=boxes[0])])
        assert(result.count == 1)
        assert(boxes[0].value == 1)

class TestMatcherArity:

    def test_too_many(self, ctx):
        result = ConfArgMatcher().parse(["1", "2"], ["int a"], ctx)
        assert(isinstance(result.error, confparse.errors.ArityError))
        assert(str(result.error) == "too many arguments; expected `int'")

    def test_empty_signature(self, ctx):
        result = ConfArgMatcher().parse(["1"], [], ctx)
        assert(str(result.error) == "expected empty argument list")

    def test_empty_args_empty_signature(self, ctx):
        result = ConfArgMatcher().parse([], [], ctx)
        assert(result.count == 0)
        assert(bool(result))

    def test_ignore_rest(self, ctx, boxes):
        result = ConfArgMatcher().parse(["1", "junk", "more junk"],
                                        [SlotSpec.build("int a", dest=boxes[0]), IGNORE_REST],
                                        ctx)
        assert(result.count == 1)
        assert(boxes[0].value == 1)

    def test_ignore_rest_still_needs_required(self, ctx):
        result = ConfArgMatcher().parse([], ["int a", IGNORE_REST], ctx)
        assert(str(result.error) == "too few arguments; expected `int, ...'")

    def test_ignore_slot(self, ctx):
        result = ConfArgMatcher().parse(["1", "whatever", "3"], ["int a", IGNORE, "int c"], ctx)
        assert(result.count == 3)
        assert(result.values == {"argument 1": 1, "argument 3": 3})

    def test_space_words(self, ctx, boxes):
        result = ConfArgMatcher().parse_space("1  2", [SlotSpec.build("int a", dest=boxes[0]),
                                                       SlotSpec.build("int b", dest=boxes[1])],
                                              ctx)
        assert(result.count == 2)
        assert(result.values == {"word 1": 1, "word 2": 2})

    def test_space_too_few(self, ctx):
        result = ConfArgMatcher().parse_space("1", ["int a", "int b"], ctx)
        assert(str(result.error) == "too few words; expected `int int'")

class TestMatcherKeywords:

    def test_unknown_keyword(self, ctx, sig):
        result = ConfArgMatcher().parse(["5", "6", "X 7"], sig, ctx)
        assert(isinstance(result.error, confparse.errors.UnknownKeywordError))
        assert(result.error.bad == ["X"])
        assert(result.error.valid == ["K"])
        assert("bad keyword(s) X" in str(result.error))
        assert("(valid keywords are K)" in str(result.error))

    def test_all_bad_keywords_reported(self, ctx, sig):
        result = ConfArgMatcher().parse(["5", "6", "X 7", "Y 8"], sig, ctx)
        assert(result.error.bad == ["X", "Y"])

    def test_unknown_keyword_in_positional_place(self, ctx, sig):
        result = ConfArgMatcher().parse(["X 7"], sig, ctx)
        assert(result.errors == ["argument 1 takes int (a)"])

    def test_arity_reported_before_keywords(self, registry):
        ctx    = ParseContext(registry=registry, config={"matcher": {"duplicate_keywords": "reject"}})
        result = ConfArgMatcher().parse(["K 1", "K 2"], ["int a", "K=int k"], ctx)
        assert(isinstance(result.error, confparse.errors.ArityError))

    def test_duplicate_last_wins(self, ctx, boxes):
        result = ConfArgMatcher().parse(["K 1", "K 2"], [KEYWORDS, SlotSpec.build("K=int", dest=boxes[0])], ctx)
        assert(result.count == 1)
        assert(boxes[0].value == 2)
        assert(len(ctx.errh.warnings) == 1)
        assert(ctx.errh.nerrors == 0)

    def test_duplicate_reject(self, registry, boxes):
        ctx    = ParseContext(registry=registry, config={"matcher": {"duplicate_keywords": "reject"}})
        result = ConfArgMatcher().parse(["K 1", "K 2"], [KEYWORDS, SlotSpec.build("K=int", dest=boxes[0])], ctx)
        assert(isinstance(result.error, confparse.errors.DuplicateKeywordError))
        assert(result.error.bad == ["K (duplicate keyword)"])
        assert(boxes[0].value is None)

    def test_unmixed_keywords(self, ctx):
        specs  = ["int a", UNMIXED_KEYWORDS, "K=int k"]
        result = ConfArgMatcher().parse(["K 1"], specs, ctx)
        assert(not bool(result))
        assert(result.errors == ["argument 1 takes int (a)"])

        result = ConfArgMatcher().parse(["1", "K 2"], specs, ctx)
        assert(result.values == {"argument 1": 1, "K": 2})

    def test_mixed_keywords(self, ctx):
        result = ConfArgMatcher().parse(["K 1", "5"], ["int a", MIXED_KEYWORDS, "K=int k"], ctx)
        assert(result.values == {"argument 1": 5, "K": 1})

    def test_bare_keyword_before_keyword_pair(self, ctx, boxes):
        specs  = ["int a", SlotSpec.build("K=int k", dest=boxes[1]), SlotSpec.build("L=int l", dest=boxes[2])]
        result = ConfArgMatcher().parse(["5", "K", "L 7"], specs, ctx)
        assert(not bool(result))
        assert(result.errors == ["keyword K takes int (k)"])

    def test_bare_keyword_before_bare_keyword(self, ctx, boxes):
        specs  = ["int a", SlotSpec.build("K=arg k", dest=boxes[1]), SlotSpec.build("L=int l", dest=boxes[2])]
        result = ConfArgMatcher().parse(["5", "K", "L", "7"], specs, ctx)
        assert(result.values == {"argument 1": 5, "K": "", "L": 7})
        assert(boxes[2].value == 7)

    def test_bare_keyword_takes_plain_value(self, ctx, boxes):
        specs  = ["int a", SlotSpec.build("K=string k", dest=boxes[1]), SlotSpec.build("L=int l", dest=boxes[2])]
        result = ConfArgMatcher().parse(["5", "K", "hello"], specs, ctx)
        assert(result.values == {"argument 1": 5, "K": "hello"})

    def test_keywords_marker_with_no_keyword_arguments(self, ctx):
        result = ConfArgMatcher().parse(["5"], ["int a", KEYWORDS, "K=int k"], ctx)
        assert(result.count == 1)

    def test_keyword_string_value(self, ctx, boxes):
        result = ConfArgMatcher().parse(["NAME \"a b\""], [KEYWORDS, SlotSpec.build("NAME=string", dest=boxes[0])], ctx)
        assert(result.count == 1)
        assert(boxes[0].value == "a b")

    def test_parse_keyword(self, ctx, boxes):
        spec   = [SlotSpec.build("TTL=byte time to live", dest=boxes[0])]
        result = ConfArgMatcher().parse_keyword("TTL 64", spec, ctx)
        assert(result.count == 1)
        assert(boxes[0].value == 64)

    def test_parse_keyword_ignores_unknown(self, ctx, boxes):
        spec   = [SlotSpec.build("TTL=byte time to live", dest=boxes[0])]
        result = ConfArgMatcher().parse_keyword("FOO 1", spec, ctx)
        assert(bool(result))
        assert(result.count == 0)
        assert(boxes[0].value is None)

class TestMatcherParsing:

    def test_all_or_nothing(self, ctx, boxes):
        a, b, _ = boxes
        result  = ConfArgMatcher().parse(["1", "x"], [SlotSpec.build("int a", dest=a),
                                                      SlotSpec.build("int b", dest=b)], ctx)
        assert(not bool(result))
        assert(a.value is None)
        assert(result.errors == ["argument 2 takes int (b)"])

    def test_every_parse_error_reported(self, ctx):
        result = ConfArgMatcher().parse(["y", "x"], ["int a", "int b"], ctx)
        assert(len(result.errors) == 2)
        assert(ctx.errh.nerrors == 2)

    def test_range(self, ctx):
        result = ConfArgMatcher().parse(["300"], ["byte t"], ctx)
        assert(result.errors == ["argument 1 (t) must be <= 255"])

    def test_overflow(self, ctx):
        result = ConfArgMatcher().parse(["99999999999"], ["int a"], ctx)
        assert(result.errors == ["integer overflow on argument 1 (a)"])

    def test_keyword_label(self, ctx):
        result = ConfArgMatcher().parse(["K x"], [KEYWORDS, "K=int k"], ctx)
        assert(result.errors == ["keyword K takes int (k)"])

    def test_real_extra(self, ctx, boxes):
        result = ConfArgMatcher().parse(["1.5"], [SlotSpec.build("real10:3 seconds", dest=boxes[0])], ctx)
        assert(result.count == 1)
        assert(boxes[0].value == 1500)

    def test_real_missing_extra(self, ctx):
        result = ConfArgMatcher().parse(["1.5"], ["real10 seconds"], ctx)
        assert(isinstance(result.error, confparse.errors.SignatureError))

    def test_unsigned_real_negative(self, ctx):
        result = ConfArgMatcher().parse(["-1"], ["u_real10:2 r"], ctx)
        assert(result.errors == ["argument 1 (r) must be >= 0"])

    def test_degenerate_numbers_never_escape(self, ctx):
        specs  = ["real10:3 a", "msec b", "ip_addr c"]
        args   = ["1e-99999999999999999999", "0" * 45 + "2.5", "1.2.3." + "0" * 5000 + "7"]
        result = ConfArgMatcher().parse(args, specs, ctx)
        assert(result.values == {"argument 1": 0, "argument 2": 2500, "argument 3": bytes([1, 2, 3, 7])})

        result = ConfArgMatcher().parse(["1e" + "1" * 5000, "1", "1.2.3." + "9" * 5000], specs, ctx)
        assert(not bool(result))
        assert(len(result.errors) == 2)
        assert(result.errors[1] == "argument 3 takes IP address (c)")

    def test_arg_type_is_raw(self, ctx):
        result = ConfArgMatcher().parse(["'a b'"], ["arg x"], ctx)
        assert(result.values == {"argument 1": "'a b'"})

    def test_ip_prefix_two_dests(self, ctx, boxes):
        addr, mask, _ = boxes
        result        = ConfArgMatcher().parse(["10.0.0.0/8"], [SlotSpec.build("ip_prefix net", dest=addr, dest2=mask)], ctx)
        assert(result.count == 1)
        assert(addr.value == bytes([10, 0, 0, 0]))
        assert(mask.value == bytes([255, 0, 0, 0]))

    def test_ip_prefix_one_dest(self, ctx, boxes):
        result = ConfArgMatcher().parse(["10.0.0.0/8"], [SlotSpec.build("ip_prefix net", dest=boxes[0])], ctx)
        assert(result.count == 1)
        assert(boxes[0].value == (bytes([10, 0, 0, 0]), bytes([255, 0, 0, 0])))

    def test_ip6_prefix_mask(self, ctx, boxes):
        addr, mask, _ = boxes
        ConfArgMatcher().parse(["fe80::/64"], [SlotSpec.build("ip6_prefix net", dest=addr, dest2=mask)], ctx)
        assert(mask.value == b"\xff" * 8 + bytes(8))

    def test_resolver(self, registry, boxes):
        ctx    = ParseContext(registry=registry, config={}, resolver=AddressTable({"gw": "10.0.0.1"}))
        result = ConfArgMatcher().parse(["gw"], [SlotSpec.build("ip_addr g", dest=boxes[0])], ctx)
        assert(result.count == 1)
        assert(boxes[0].value == bytes([10, 0, 0, 1]))

    def test_unresolved(self, ctx):
        result = ConfArgMatcher().parse(["gw"], ["ip_addr g"], ctx)
        assert(result.errors == ["argument 1 takes IP address (g)"])

    def test_element(self, registry, mocker, boxes):
        finder = mocker.Mock()
        finder.find.side_effect = lambda name: "found" if name == "a/queue" else None
        ctx    = ParseContext(registry=registry, config={}, finder=finder, owner="a/b")
        result = ConfArgMatcher().parse(["queue"], [SlotSpec.build("element e", dest=boxes[0])], ctx)
        assert(result.count == 1)
        assert(boxes[0].value == "found")

    def test_element_missing(self, registry, mocker):
        finder = mocker.Mock()
        finder.find.return_value = None
        ctx    = ParseContext(registry=registry, config={}, finder=finder, owner="a/b")
        result = ConfArgMatcher().parse(["queue"], ["element e"], ctx)
        assert(result.errors == ["argument 1 (e): no element named `queue'"])

    def test_custom_type(self, registry, ctx, boxes):
        registry.register("upper", "upper word", parse=lambda slot, text, ctx: text.upper(), store=store_value)
        result = ConfArgMatcher().parse(["abc"], [SlotSpec.build("upper u", dest=boxes[0])], ctx)
        assert(boxes[0].value == "ABC")

    def test_parser_reports_to_sink(self, registry, ctx):
        def bad_parse(slot, text, ctx):
            ctx.errh.error("bad %s", text)
            return None

        registry.register("bad", "always bad", parse=bad_parse, store=store_value)
        result = ConfArgMatcher().parse(["x"], ["bad b"], ctx)
        assert(not bool(result))
        assert(result.errors == ["bad x"])

class TestMatcherSignature:

    def test_unknown_type(self, ctx):
        result = ConfArgMatcher().parse(["1"], ["nosuchtype"], ctx)
        assert(isinstance(result.error, confparse.errors.UnknownTypeError))
        assert(str(result.error) == "unknown argument type `nosuchtype'")

    def test_too_many_slots(self, registry):
        ctx    = ParseContext(registry=registry, config={"matcher": {"max_slots": 2}})
        result = ConfArgMatcher().parse(["1"], ["int a", OPTIONAL, "int b", "int c"], ctx)
        assert(isinstance(result.error, confparse.errors.TooManySlotsError))

    def test_positional_after_keyword(self, ctx):
        result = ConfArgMatcher().parse(["1"], ["K=int k", "int a"], ctx)
        assert(isinstance(result.error, confparse.errors.SignatureError))

    def test_duplicate_keyword_slots(self, ctx):
        result = ConfArgMatcher().parse([], ["K=int", "K=int"], ctx)
        assert(isinstance(result.error, confparse.errors.SignatureError))

    def test_strict_raises(self, ctx, sig):
        with pytest.raises(confparse.errors.ArityError):
            ConfArgMatcher(strict=True).parse(["K", "7"], sig, ctx)

    def test_errors_prefixed_with_owner(self, registry):
        ctx = ParseContext(registry=registry, config={}, owner="router")
        ConfArgMatcher().parse([], ["int a"], ctx)
        assert(ctx.errh.messages == ["router: too few arguments; expected `int'"])
