#!/usr/bin/env python3
"""
The public data structures of confparse
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from confparse._structs.arg_type import ArgType
from confparse._structs.logger_spec import LoggerSpec
from confparse._structs.slot import MatchResult, Slot
from confparse._structs.slot_spec import (IGNORE, IGNORE_REST, KEYWORDS,
                                          MIXED_KEYWORDS, OPTIONAL,
                                          UNMIXED_KEYWORDS, Box, SlotSpec,
                                          Target)
from confparse.parsers.scalars import Timeval

# ##-- end 1st party imports
