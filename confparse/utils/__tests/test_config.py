#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
from tomlguard import TomlGuard
from confparse.utils.config import default_config, load_config

class TestLoadConfig:

    def test_defaults(self):
        config = load_config()
        assert(isinstance(config, TomlGuard))
        assert(config.matcher.max_slots == 80)
        assert(config.matcher.duplicate_keywords == "last-wins")
        assert(config.logging.printer.target == "stdout")

    def test_merge(self, tmp_path):
        user = tmp_path / "user.toml"
        user.write_text('[matcher]\nduplicate_keywords = "reject"\n\n[addresses]\ngw = "10.0.0.1"\n')
        config = load_config(user)
        assert(config.matcher.duplicate_keywords == "reject")
        assert(config.matcher.max_slots == 80)
        assert(config.addresses.gw == "10.0.0.1")

    def test_later_files_win(self, tmp_path):
        first  = tmp_path / "first.toml"
        second = tmp_path / "second.toml"
        first.write_text("[matcher]\nmax_slots = 10\n")
        second.write_text("[matcher]\nmax_slots = 20\n")
        assert(load_config(first, second).matcher.max_slots == 20)

    def test_missing_file(self, tmp_path, caplog):
        config = load_config(tmp_path / "nothing.toml")
        assert(config.matcher.max_slots == 80)
        assert("does not exist" in caplog.text)

    def test_defaults_cached(self):
        assert(load_config() is load_config())
        assert(load_config() is default_config())

    def test_user_file_leaves_defaults_alone(self, tmp_path):
        user = tmp_path / "user.toml"
        user.write_text("[matcher]\nmax_slots = 5\n")
        assert(load_config(user).matcher.max_slots == 5)
        assert(default_config().matcher.max_slots == 80)

    def test_nested_table_replaced_whole(self, tmp_path):
        user = tmp_path / "user.toml"
        user.write_text('[logging.printer]\nlevel = "DEBUG"\n')
        config = load_config(user)
        assert(config.logging.printer.level == "DEBUG")
        assert(config.on_fail(None).logging.printer.target() is None)
        assert(config.logging.stream.target == "stderr")
