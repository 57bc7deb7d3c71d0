#!/usr/bin/env python3
"""
Confparse : Typed parsing of configuration argument strings.

  conf   = "10.0.0.1/8, TTL 64, DROP true"
  result = ConfArgMatcher().parse_string(conf, ["ip_prefix net", "TTL=byte", "DROP=bool"])
  result.values

"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._interface import __version__
from . import errors
from .control.context import ParseContext
from .control.error_sink import CollectingErrorSink
from .parsers.escapes import quote, unquote
from .parsers.matcher import ConfArgMatcher
from .parsers.tokenizer import split_commas, split_spaces, uncomment
from .registry import default_registry, static_cleanup, static_initialize
from .registry.type_registry import ArgTypeRegistry
from .structs import (IGNORE, IGNORE_REST, KEYWORDS, MIXED_KEYWORDS, OPTIONAL,
                      UNMIXED_KEYWORDS, Box, MatchResult, SlotSpec, Target)

# ##-- end 1st party imports
