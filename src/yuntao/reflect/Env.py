#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os


class Env:
    """Process environment: working directory and pod configuration"""

    _instance = None

    def __init__(self, work_dir=None):
        self._work_dir = work_dir
        self._config = None

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def work_dir(self):
        return self._work_dir if self._work_dir is not None else os.getcwd()

    def config_file(self):
        return os.path.join(self.work_dir(), "etc", "reflect", "config.props")

    def props(self):
        """Load etc/reflect/config.props once; missing file gives no props"""
        if self._config is None:
            path = self.config_file()
            props = {}
            if os.path.isfile(path):
                with open(path, encoding="utf-8") as f:
                    props = Env.read_props(f)
            self._config = props
        return self._config

    def config(self, key, def_val=None):
        """Get configuration value.

        Args:
            key: Config key, e.g. 'log.level'
            def_val: Default value if not found
        """
        return self.props().get(key, def_val)

    @staticmethod
    def read_props(lines):
        """Parse 'key=value' lines, skipping blanks and // or # comments"""
        props = {}
        for line in lines:
            line = line.strip()
            if not line or line.startswith("//") or line.startswith("#"):
                continue
            eq = line.find("=")
            if eq < 0:
                from .Err import ParseErr
                raise ParseErr.make_str("props line", line)
            props[line[:eq].strip()] = line[eq + 1:].strip()
        return props
