#!/usr/bin/env python3
"""
Scanner primitives.

Every function that walks a configuration string takes the text and a
position, and returns the position just past the construct it skipped.
Comments (`//...` and `/*...*/`), single and double quoted runs,
and `\\<hex...>` blocks are treated as opaque units by everything above.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._interface import SPACE_CHARS

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def is_space_char(ch:str) -> bool:
    return ch in SPACE_CHARS

def is_space(text:str) -> bool:
    """ True if the text is empty or entirely whitespace """
    return all(x in SPACE_CHARS for x in text)

def eat_space(text:str) -> str:
    """ Strip leading whitespace """
    return text.lstrip(SPACE_CHARS)

def is_word(text:str) -> bool:
    """ A word is non-empty, and has no quotes, commas, spaces, controls or non-ascii """
    if not bool(text):
        return False
    return not any(x in "\"'," or ord(x) <= 32 or ord(x) >= 127 for x in text)

def xvalue(ch:str) -> int:
    """ The value of a hex digit, or -1 """
    match ch:
        case _ if "0" <= ch <= "9":
            return ord(ch) - ord("0")
        case _ if "A" <= ch <= "F":
            return ord(ch) - ord("A") + 10
        case _ if "a" <= ch <= "f":
            return ord(ch) - ord("a") + 10
        case _:
            return -1

def is_comment_start(text:str, pos:int) -> bool:
    return (text[pos] == "/"
            and pos < len(text) - 1
            and text[pos+1] in "/*")

def skip_comment(text:str, pos:int) -> int:
    """ text[pos:] starts with '//' or '/*'.
      A line comment ends after its newline (\\n, \\r, or \\r\\n),
      a block comment after its '*/', or at the end of the text.
    """
    length = len(text)
    if text[pos+1] == "/":
        pos += 2
        while pos < length - 1 and text[pos] not in "\n\r":
            pos += 1
        if pos < length - 1 and text[pos] == "\r" and text[pos+1] == "\n":
            pos += 1
        return min(pos + 1, length)

    pos += 2
    while pos < length - 2 and not (text[pos] == "*" and text[pos+1] == "/"):
        pos += 1
    return min(pos + 2, length)

def skip_backslash_angle(text:str, pos:int) -> int:
    """ text[pos:] starts with '\\<'. Comments inside the block are skipped,
      so a '>' in a comment does not close it.
    """
    length = len(text)
    pos   += 2
    while pos < length:
        if text[pos] == ">":
            return pos + 1
        elif is_comment_start(text, pos):
            pos = skip_comment(text, pos)
        else:
            pos += 1

    return length

def skip_double_quote(text:str, pos:int) -> int:
    """ text[pos] is '"'. Backslash escapes the next character """
    length = len(text)
    pos   += 1
    while pos < length:
        if pos < length - 1 and text[pos] == "\\":
            if text[pos+1] == "<":
                pos = skip_backslash_angle(text, pos)
            else:
                pos += 2
        elif text[pos] == '"':
            return pos + 1
        else:
            pos += 1

    return length

def skip_single_quote(text:str, pos:int) -> int:
    """ text[pos] is "'". No escapes inside single quotes """
    end = text.find("'", pos + 1)
    if end < 0:
        return len(text)
    return end + 1

def skip_opaque(text:str, pos:int) -> int:
    """ Skip a quoted run or backslash-angle block if one starts at pos,
      otherwise a single character.
    """
    match text[pos]:
        case "'":
            return skip_single_quote(text, pos)
        case '"':
            return skip_double_quote(text, pos)
        case "\\" if pos < len(text) - 1 and text[pos+1] == "<":
            return skip_backslash_angle(text, pos)
        case _:
            return pos + 1
