#!/usr/bin/env python3
"""
Errors of the argument type registry
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

class RegistryError(ConfParseError):
    """ In the course of (un)registering or looking up an argument type, a failure occurred. """
    general_msg = "Argument Type Registry Failure:"
    pass

class UnknownTypeError(RegistryError):
    """ A signature referenced a type name nobody registered """
    general_msg = "Unknown Argument Type:"
    pass

class RegistryConflictError(RegistryError):
    """ A type name was registered again with different behaviour """
    general_msg = "Conflicting Argument Type Registration:"
    pass

class RegistryAllocationError(RegistryError):
    """ Space for a new type entry could not be allocated """
    general_msg = "Out of Memory Registering Argument Type:"
    pass
