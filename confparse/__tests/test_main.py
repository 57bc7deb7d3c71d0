#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
from confparse import __main__ as cli
from confparse._interface import PRINTER_NAME

@pytest.fixture
def printed(mocker, caplog):
    mocker.patch.object(cli, "ConfLogConfig")
    caplog.set_level(logmod.INFO, logger=PRINTER_NAME)
    return caplog

def _lines(caplog) -> list[str]:
    return [x.getMessage() for x in caplog.records if x.name == PRINTER_NAME]

class TestMain:

    def test_split(self, printed):
        assert(cli.main(["split", "a, b /* c */, 'd, e'"]) == 0)
        assert(_lines(printed) == ["a", "b", "'d, e'"])

    def test_spaces(self, printed):
        assert(cli.main(["spaces", "a 'b c' d"]) == 0)
        assert(_lines(printed) == ["a", "'b c'", "d"])

    def test_quote(self, printed):
        assert(cli.main(["quote", "a\tb"]) == 0)
        assert(_lines(printed) == ['"a\\tb"'])

    def test_unquote(self, printed):
        assert(cli.main(["unquote", '"a\\tb"']) == 0)
        assert(_lines(printed) == ["a\tb"])

    def test_check(self, printed):
        result = cli.main(["check", "--slot", "int count", "--slot", "OPTIONAL",
                           "--slot", "TTL=byte time to live", "5, TTL 64"])
        assert(result == 0)
        lines = _lines(printed)
        assert(lines[0] == "Matched 2 slots")

    def test_check_space(self, printed):
        assert(cli.main(["check", "--space", "-s", "int a", "-s", "int b", "1 2"]) == 0)

    def test_check_failure(self, printed):
        assert(cli.main(["check", "--slot", "int count", "x"]) == 1)
        assert("argument 1 takes int (count)" in _lines(printed))

    def test_requires_command(self, printed):
        with pytest.raises(SystemExit):
            cli.main([])
