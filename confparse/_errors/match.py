#!/usr/bin/env python3
"""
Errors of the argument matcher
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

from .base import ConfParseError

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class MatchError(ConfParseError):
    """ In the course of matching arguments against a signature, a failure occurred. """
    general_msg = "Argument Matching Failure:"
    pass

class SignatureError(MatchError):
    """ The declared signature itself is malformed """
    general_msg = "Bad Signature:"
    pass

class TooManySlotsError(SignatureError):
    """ The signature declares more slots than the matcher has room for """
    general_msg = "Signature Too Long:"
    pass

class ArityError(MatchError):
    """ Too few or too many positional arguments were supplied """
    general_msg = "Wrong Argument Count:"
    pass

class KeywordError(MatchError):
    """ Keyword arguments were malformed. Lists every bad keyword at once """
    general_msg = "Bad Keyword Arguments:"

    def __init__(self, *args, bad:None|list[str]=None, valid:None|list[str]=None):
        super().__init__(*args)
        self.bad   = bad or []
        self.valid = valid or []

class UnknownKeywordError(KeywordError):
    general_msg = "Unknown Keyword:"
    pass

class DuplicateKeywordError(KeywordError):
    general_msg = "Duplicate Keyword:"
    pass

class SlotParseError(MatchError):
    """ One or more bound arguments failed to parse as their declared type """
    general_msg = "Argument Parse Failure:"

    def __init__(self, *args, errors:None|list[str]=None):
        super().__init__(*args)
        self.errors = errors or []
