#!/usr/bin/env python3
"""
Quoting and unquoting of configuration strings.

Text is treated as a sequence of bytes, one per character (latin-1),
so `\\<48 49>` and `\\110` both produce characters in 0..255.
Use quote_bytes / unquote_bytes when working with bytes directly.

Round trip: unquote(quote(x)) == x.
The other direction does not hold, eg: quote(unquote("'a'")) == '"a"'

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Final

# ##-- end stdlib imports

# ##-- 1st party imports
from . import scanner
from . import tokenizer

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

SIMPLE_ESCAPES  : Final[dict[str, str]] = {
    "a" : "\a",
    "b" : "\b",
    "f" : "\f",
    "n" : "\n",
    "r" : "\r",
    "t" : "\t",
    "v" : "\v",
}
QUOTE_ESCAPES   : Final[dict[str, str]] = {
    "\\" : "\\\\",
    '"'  : '\\"',
    "$"  : "\\$",
    "\t" : "\\t",
    "\r" : "\\r",
    "\n" : "\\n",
}
OCTAL_DIGITS    : Final[str] = "01234567"
LATIN1          : Final[str] = "latin-1"

def _process_backslash(text:str, pos:int, out:list[str]) -> int:
    """ text[pos] is a backslash with at least one character after it.
      Appends the decoded character(s) to out, returns the position after the escape
    """
    length = len(text)
    match text[pos+1]:
        case "\r" if pos < length - 2 and text[pos+2] == "\n":
            return pos + 3
        case "\r" | "\n":
            # line continuation
            return pos + 2
        case x if x in SIMPLE_ESCAPES:
            out.append(SIMPLE_ESCAPES[x])
            return pos + 2
        case x if x in OCTAL_DIGITS:
            value, count = 0, 0
            pos += 1
            while pos < length and text[pos] in OCTAL_DIGITS and count < 3:
                value  = value * 8 + int(text[pos])
                pos   += 1
                count += 1
            out.append(chr(value & 0xFF))
            return pos
        case "x":
            value = 0
            pos  += 2
            while pos < length and (digit:=scanner.xvalue(text[pos])) >= 0:
                value = value * 16 + digit
                pos  += 1
            out.append(chr(value & 0xFF))
            return pos
        case "<":
            return _process_backslash_angle(text, pos, out)
        case x:
            # \\ \' \" \$ and anything else stand for themselves
            out.append(x)
            return pos + 2

def _process_backslash_angle(text:str, pos:int, out:list[str]) -> int:
    """ \\<0a 1B 2c> -> '\\x0a\\x1b\\x2c'.
      Spaces, comments and stray characters inside the block are ignored.
    """
    length        = len(text)
    value, count  = 0, 0
    pos          += 2
    while pos < length:
        char = text[pos]
        if char == ">":
            return pos + 1
        elif (digit:=scanner.xvalue(char)) >= 0:
            value  = value * 16 + digit
            count += 1
        elif scanner.is_comment_start(text, pos):
            pos = scanner.skip_comment(text, pos)
            continue

        if count == 2:
            out.append(chr(value))
            value, count = 0, 0
        pos += 1

    # ran out of string
    return length

def unquote(text:str) -> str:
    """ Remove comments and quotation marks, and decode escapes.
      Single quoted text is taken verbatim,
      double quoted text and \\<...> blocks have escapes processed.
    """
    text         = tokenizer.uncomment(text)
    length       = len(text)
    out          = []
    start        = 0
    quote_state  = None
    pos          = 0
    while pos < length:
        match text[pos]:
            case '"' | "'" as char if quote_state is None:
                out.append(text[start:pos])
                start       = pos + 1
                quote_state = char
            case '"' | "'" as char if quote_state == char:
                out.append(text[start:pos])
                start       = pos + 1
                quote_state = None
            case "\\" if pos < length - 1 and (quote_state == '"' or (quote_state is None and text[pos+1] == "<")):
                out.append(text[start:pos])
                start = _process_backslash(text, pos, out)
                pos   = start
                continue
            case _:
                pass

        pos += 1

    if start == 0:
        return text

    out.append(text[start:])
    return "".join(out)

def quote(text:str, *, allow_newlines:bool=False) -> str:
    """ Double quote text so that unquote gives it back exactly.
      Control characters and characters 127-255 become 3 digit octal escapes.
    """
    out = ['"']
    for char in text:
        match char:
            case "\n" if allow_newlines:
                out.append(char)
            case x if x in QUOTE_ESCAPES:
                out.append(QUOTE_ESCAPES[x])
            case x if ord(x) < 32 or 127 <= ord(x) <= 255:
                out.append("\\{:03o}".format(ord(x)))
            case x:
                out.append(x)

    out.append('"')
    return "".join(out)

def quote_bytes(data:bytes, *, allow_newlines:bool=False) -> bytes:
    return quote(data.decode(LATIN1), allow_newlines=allow_newlines).encode(LATIN1)

def unquote_bytes(data:bytes) -> bytes:
    return unquote(data.decode(LATIN1)).encode(LATIN1)
