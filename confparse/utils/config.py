#!/usr/bin/env python3
"""
Loading confparse's settings.

The packaged defaults in confparse/__data/confparse.toml are read first,
then each user file is merged over them.
Keys of a top level table merge individually,
anything deeper, eg: a [logging.*] table, is replaced whole.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import pathlib as pl

# ##-- end stdlib imports

# ##-- 3rd party imports
import tomlguard
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from confparse._interface import config_file

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@ftz.cache
def default_config() -> TomlGuard:
    """ The packaged defaults, read once """
    return tomlguard.read(config_file.read_text())

def _merge(over:TomlGuard, base:TomlGuard) -> TomlGuard:
    """ over's values shadow base's, within each table they share """
    shared = {key: TomlGuard.merge(over[key], base[key], shadow=True)
              for key in over.keys() & base.keys()
              if isinstance(over[key], TomlGuard) and isinstance(base[key], TomlGuard)}
    return TomlGuard.merge(TomlGuard(shared), over, base, shadow=True)

def load_config(*paths:str|pl.Path) -> TomlGuard:
    """ The default config, with any given toml files merged over it """
    config = default_config()
    for path in paths:
        path = pl.Path(path)
        if not path.exists():
            logging.warning("Config file does not exist: %s", path)
            continue

        logging.debug("Merging config file: %s", path)
        config = _merge(tomlguard.read(path.read_text()), config)

    return config
