#!/usr/bin/env python3
"""
Shared constants for confparse.
Kept free of 1st party imports so anything can import it.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
from importlib.resources import files
from typing import Final

# ##-- end stdlib imports

# Vars:
__version__ : Final[str] = "0.1.0"

# -- data
data_path                     = files("confparse.__data")
config_file                   = data_path.joinpath("confparse.toml")

# -- integer limits, the framework stores into 32 bit slots
UINT_MAX         : Final[int] = 0xFFFFFFFF
INT_MAX          : Final[int] = 0x7FFFFFFF
INT_MIN          : Final[int] = -0x80000000
MAX_FRAC_DIGITS  : Final[int] = 9
MAX_FRAC_BITS    : Final[int] = 28

# -- tokenizer
SPACE_CHARS      : Final[str] = " \t\n\r\f\v"
KEYWORD_PUNCT    : Final[str] = "_.:"

# -- matcher
DEFAULT_MAX_SLOTS  : Final[int] = 80
ARGNAME            : Final[str] = "argument"
ARG_SEPARATOR      : Final[str] = ", "
SPACE_ARGNAME      : Final[str] = "word"
SPACE_SEPARATOR    : Final[str] = " "
KEYWORDS_SIG       : Final[str] = "[keywords]"
IGNORE_REST_SIG    : Final[str] = "..."
UNKNOWN_TYPE_SIG   : Final[str] = "??"
LAST_WINS          : Final[str] = "last-wins"
REJECT             : Final[str] = "reject"

# -- addresses
IP_LEN           : Final[int] = 4
IP6_LEN          : Final[int] = 16
ETHER_LEN        : Final[int] = 6
DES_CBLOCK_LEN   : Final[int] = 8
IP6_BARE_BITS    : Final[int] = 64

# -- logging
PRINTER_NAME     : Final[str] = "confparse._printer"
