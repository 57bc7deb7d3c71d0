#!/usr/bin/env python3
"""
The root of the confparse error hierarchy.

"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class ConfParseError(Exception):
    """
      The base class for all confparse Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific Configuration Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)
