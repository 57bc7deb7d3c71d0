#!/usr/bin/env python3
"""
Tokenizer for configuration strings.

  split_commas  : "a, b /* c */, 'd, e'" -> ["a", "b", "'d, e'"]
  split_spaces  : "a 'b c' d"            -> ["a", "'b c'", "d"]
  uncomment     : removes comments outside of quotes

Tokens are returned as written, quotes included. Use confparse.parsers.escapes.unquote
to get at their contents.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Iterable

# ##-- end stdlib imports

# ##-- 1st party imports
from confparse._interface import ARG_SEPARATOR, KEYWORD_PUNCT, SPACE_SEPARATOR
from confparse.errors import FormatError
from . import scanner
from . import escapes

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _partial_uncomment(text:str, pos:int, *, stop_at_comma:bool=False) -> tuple[str, int]:
    """ Strip comments and surrounding whitespace from text[pos:].
      When stop_at_comma, stops at the first top level comma.
      Returns the cleaned argument and the position scanning stopped at.
    """
    length = len(text)
    # skip initial spaces and comments
    while pos < length:
        if scanner.is_comment_start(text, pos):
            pos = scanner.skip_comment(text, pos)
        elif not scanner.is_space_char(text[pos]):
            break
        else:
            pos += 1

    # accumulate text, skipping comments
    parts  = []
    left   = pos
    right  = pos
    closed = False
    while pos < length:
        if scanner.is_space_char(text[pos]):
            pos += 1
        elif scanner.is_comment_start(text, pos):
            pos    = scanner.skip_comment(text, pos)
            closed = True
        elif text[pos] == "," and stop_at_comma:
            break
        else:
            if closed:
                parts.append(text[left:right])
                left   = pos
                closed = False
            pos   = scanner.skip_opaque(text, pos)
            right = pos

    parts.append(text[left:right])
    return " ".join(parts), pos

def uncomment(text:str) -> str:
    """ Remove comments, and leading and trailing whitespace.
      Text separated only by a comment is joined with a single space.
    """
    result, _ = _partial_uncomment(text, 0)
    return result

def split_commas(text:str) -> list[str]:
    """ Split a configuration string into its comma separated arguments.
      A trailing comma gives an extra empty argument,
      but an empty configuration has no arguments at all.
    """
    args   = []
    length = len(text)
    pos    = 0
    first  = True
    if not bool(text):
        return args

    while pos <= length:
        arg, pos = _partial_uncomment(text, pos, stop_at_comma=True)
        if bool(arg) or pos < length or not first:
            args.append(arg)

        # step past the comma
        pos   += 1
        first  = False

    return args

def split_spaces(text:str) -> list[str]:
    """ Split on whitespace. Quotes, backslash-angle blocks, and comments are opaque.
      There are no comma semantics.
    """
    words  = []
    length = len(text)
    start  = None
    pos    = 0
    while pos < length:
        match text[pos]:
            case "/" if scanner.is_comment_start(text, pos):
                if start is not None:
                    words.append(text[start:pos])
                pos   = scanner.skip_comment(text, pos)
                start = None
                continue
            case x if scanner.is_space_char(x):
                if start is not None:
                    words.append(text[start:pos])
                start = None
                pos  += 1
                continue
            case _ if start is None:
                start = pos
            case _:
                pass

        pos = scanner.skip_opaque(text, pos)

    if start is not None:
        words.append(text[start:])

    return words

def join_commas(args:Iterable[str]) -> str:
    """ Not a quoting-safe inverse of split_commas """
    return ARG_SEPARATOR.join(args)

def join_spaces(args:Iterable[str]) -> str:
    """ Not a quoting-safe inverse of split_spaces """
    return SPACE_SEPARATOR.join(args)

def _string_end(text:str) -> int:
    """ The end of the leading whitespace-free run, with quotes opaque """
    pos    = 0
    length = len(text)
    while pos < length and not scanner.is_space_char(text[pos]):
        pos = scanner.skip_opaque(text, pos)

    return pos

def split_string(text:str) -> tuple[str, str]:
    """ Take a leading string, returning it unquoted, and the remaining text """
    end = _string_end(text)
    if end == 0:
        raise FormatError("No string at the start of text: %s", text)

    return escapes.unquote(text[:end]), text[end:]

def parse_string(text:str) -> str:
    """ The text must be a single, possibly quoted, string """
    end = _string_end(text)
    if end == 0 or end != len(text):
        raise FormatError("Not a single string: %s", text)

    return escapes.unquote(text)

def parse_word(text:str) -> str:
    """ A string whose unquoted value is also a word """
    match parse_string(text):
        case str() as word if scanner.is_word(word):
            return word
        case _:
            raise FormatError("Not a word: %s", text)

def split_keyword(text:str) -> tuple[str, str]:
    """ Split text into a leading keyword of alphanumerics and '_.:',
      and the remainder with its leading blanks removed.
    """
    pos    = 0
    length = len(text)
    while pos < length and not scanner.is_space_char(text[pos]):
        char = text[pos]
        if not (char in KEYWORD_PUNCT or (char.isascii() and char.isalnum())):
            raise FormatError("Not a keyword: %s", text)
        pos += 1

    if pos == 0:
        raise FormatError("Empty keyword: %s", text)

    return text[:pos], scanner.eat_space(text[pos:])
