#!/usr/bin/env python3
"""
Logging setup for the confparse cli, and for programs that want
confparse's `[logging]` config table applied.

[logging.stream]  : the root logger's console output
[logging.file]    : the root logger's file output
[logging.printer] : the printer, which the cli uses instead of `print`
[logging.extra]   : any other named loggers, eg: "confparse.parsers.matcher"

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from confparse._interface import PRINTER_NAME
from confparse._structs.logger_spec import LoggerSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ConfLogConfig:
    """ Utility class to setup [stdout, file] logging,
      and a 'printer' logger, so output to the user also goes into the log trace.
    """

    def __init__(self):
        self.root                 = logmod.root
        self.stream_initial_spec  = LoggerSpec.build({"name"   : LoggerSpec.RootName,
                                                      "level"  : "WARNING",
                                                      "target" : "stdout",
                                                      "format" : "{levelname}  : INIT : {message}",
                                                     })
        self.printer_initial_spec = LoggerSpec.build({"name"      : PRINTER_NAME,
                                                      "level"     : "INFO",
                                                      "target"    : "stdout",
                                                      "format"    : "{message}",
                                                      "propagate" : False,
                                                     })
        self.applied : list[LoggerSpec] = []
        self.stream_initial_spec.apply()
        self.printer_initial_spec.apply()
        logging.debug("Post Log Setup")

    def setup(self, config:TomlGuard) -> None:
        """ a setup that uses config values """
        self.stream_initial_spec.clear()
        self.printer_initial_spec.clear()
        specs = [
            LoggerSpec.build(config.on_fail({}).logging.stream(), name=LoggerSpec.RootName),
            LoggerSpec.build(config.on_fail({}).logging.file(), name=LoggerSpec.RootName),
            LoggerSpec.build(config.on_fail({}).logging.printer(), name=PRINTER_NAME),
            ]
        for key, data in config.on_fail({}).logging.extra().items():
            specs.append(LoggerSpec.build(data, name=key))

        for spec in specs:
            spec.apply()
            self.applied.append(spec)

    def set_level(self, level:int|str) -> None:
        self.stream_initial_spec.set_level(level)
        self.printer_initial_spec.set_level(level)
