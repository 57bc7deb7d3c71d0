#!/usr/bin/env python3
"""
Command line access to the tokenizer, escape codec, and matcher.

  python -m confparse split   "a, b /* c */, 'd, e'"
  python -m confparse spaces  "a 'b c' d"
  python -m confparse quote   "text with\ttabs"
  python -m confparse unquote '"text with\\ttabs"'
  python -m confparse check   --slot "int count" --slot OPTIONAL --slot "TTL=byte" "5, TTL 64"

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import argparse
import logging as logmod
import sys

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._interface import PRINTER_NAME, __version__
from confparse.control.context import ParseContext
from confparse.parsers import escapes, tokenizer
from confparse.parsers.matcher import ConfArgMatcher
from confparse.structs import Box, SlotSpec
from confparse.utils.address_table import AddressTable
from confparse.utils.config import load_config
from confparse.utils.log_config import ConfLogConfig

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(PRINTER_NAME)
##-- end logging

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("confparse", description="Parse configuration argument strings")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-c", "--config", action="append", default=[], help="toml files to merge over the defaults")
    parser.add_argument("-v", "--verbose", action="store_true")
    cmds = parser.add_subparsers(dest="cmd", required=True)

    split = cmds.add_parser("split", help="split on commas")
    split.add_argument("text")

    spaces = cmds.add_parser("spaces", help="split on whitespace")
    spaces.add_argument("text")

    quote = cmds.add_parser("quote", help="double quote text")
    quote.add_argument("--allow-newlines", action="store_true")
    quote.add_argument("text")

    unquote = cmds.add_parser("unquote", help="remove quotes and decode escapes")
    unquote.add_argument("text")

    check = cmds.add_parser("check", help="match a configuration string against a signature")
    check.add_argument("-s", "--slot", action="append", default=[], help="a slot, as [KEYWORD=]TYPE[:EXTRA] [description]")
    check.add_argument("--space", action="store_true", help="split on whitespace instead of commas")
    check.add_argument("text")
    return parser

def _check(args:argparse.Namespace, ctx:ParseContext) -> int:
    specs = []
    boxes = []
    for text in args.slot:
        spec = SlotSpec.build(text)
        if not spec.is_marker:
            box  = Box()
            spec = SlotSpec.build(spec, dest=box)
            boxes.append((spec, box))
        specs.append(spec)

    matcher = ConfArgMatcher()
    match args.space:
        case True:
            result = matcher.parse_space(args.text, specs, ctx)
        case False:
            result = matcher.parse_string(args.text, specs, ctx)

    if not bool(result):
        for msg in result.errors:
            printer.error("%s", msg)
        return 1

    printer.info("Matched %s slots", result.count)
    for key, val in result.values.items():
        printer.info("  %-15s : %r", key, val)
    return 0

def main(argv:None|list[str]=None) -> int:
    log_config = ConfLogConfig()
    args       = _build_parser().parse_args(argv)
    config     = load_config(*args.config)
    log_config.setup(config)
    if args.verbose:
        log_config.set_level("DEBUG")

    logging.debug("Running: %s", args.cmd)
    match args.cmd:
        case "split":
            for arg in tokenizer.split_commas(args.text):
                printer.info("%s", arg)
        case "spaces":
            for word in tokenizer.split_spaces(args.text):
                printer.info("%s", word)
        case "quote":
            printer.info("%s", escapes.quote(args.text, allow_newlines=args.allow_newlines))
        case "unquote":
            printer.info("%s", escapes.unquote(args.text))
        case "check":
            ctx = ParseContext(config=config, resolver=AddressTable.build(config), owner="confparse")
            return _check(args, ctx)

    return 0

if __name__ == "__main__":
    sys.exit(main())
