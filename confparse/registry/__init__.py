#!/usr/bin/env python3
"""
The argument type registry.

A process wide default registry is set up by static_initialize,
and torn down by static_cleanup.
Callers can instead make and pass their own ArgTypeRegistry.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import threading

# ##-- end stdlib imports

# ##-- 1st party imports
from .type_registry import ArgTypeRegistry
from .builtins import DEFAULT_TYPES, setup_builtins, teardown_builtins

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

_default_registry : None|ArgTypeRegistry = None
_static_lock                             = threading.Lock()

def static_initialize() -> ArgTypeRegistry:
    """ Create the default registry with the builtin types, if it doesn't exist yet """
    global _default_registry
    with _static_lock:
        if _default_registry is not None:
            logging.debug("Default registry already initialized")
            return _default_registry

        logging.debug("Initializing default registry")
        _default_registry = ArgTypeRegistry()
        setup_builtins(_default_registry)
        return _default_registry

def static_cleanup() -> None:
    global _default_registry
    with _static_lock:
        if _default_registry is None:
            return

        logging.debug("Cleaning up default registry")
        teardown_builtins(_default_registry)
        _default_registry.clear()
        _default_registry = None

def default_registry() -> ArgTypeRegistry:
    match _default_registry:
        case None:
            return static_initialize()
        case x:
            return x
