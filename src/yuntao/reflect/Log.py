#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import logging
import threading
from datetime import datetime

from .Enum import Enum


class LogLevel(Enum):
    """
    LogLevel represents the severity of a log message.
    """

    _vals = None

    @staticmethod
    def debug():
        return LogLevel.vals()[0]

    @staticmethod
    def info():
        return LogLevel.vals()[1]

    @staticmethod
    def warn():
        return LogLevel.vals()[2]

    @staticmethod
    def err():
        return LogLevel.vals()[3]

    @staticmethod
    def silent():
        return LogLevel.vals()[4]

    @staticmethod
    def vals():
        """Get all log level values"""
        if LogLevel._vals is None:
            LogLevel._vals = (
                LogLevel(0, "debug"),
                LogLevel(1, "info"),
                LogLevel(2, "warn"),
                LogLevel(3, "err"),
                LogLevel(4, "silent"),
            )
        return LogLevel._vals

    @staticmethod
    def from_str(name, checked=True):
        """Parse LogLevel from string"""
        return LogLevel._from_str(name.lower(), checked)


class LogRec:
    """
    LogRec represents a single log record.
    """

    def __init__(self, time, level, log_name, msg, err=None):
        self._time = time
        self._level = level
        self._log_name = log_name
        self._msg = msg
        self._err = err

    def time(self):
        return self._time

    def level(self):
        return self._level

    def log_name(self):
        return self._log_name

    def msg(self):
        return self._msg

    def err(self):
        return self._err

    def to_str(self):
        return f"[{self._level.name()}] {self._log_name}: {self._msg}"


class Log:
    """
    Log provides named logs backed by the standard logging module.
    """

    _logs = {}
    _handlers = []  # Global handlers
    _lock = threading.Lock()

    def __init__(self, name, register=True):
        """Create a new log. If register=True, adds to global registry."""
        if not Log._is_valid_name(name):
            from .Err import ArgErr
            raise ArgErr.make(f"Invalid log name: {name}")

        if register and name in Log._logs:
            from .Err import ArgErr
            raise ArgErr.make(f"Log already registered: {name}")

        self._name = name
        self._level = Log._configured_level(name)
        self._py_logger = logging.getLogger(f"yuntao.{name}")

        if register:
            Log._logs[name] = self

    @staticmethod
    def _is_valid_name(name):
        if not name:
            return False
        for c in name:
            if not (c.isalnum() or c == '.' or c == '_'):
                return False
        return True

    @staticmethod
    def _configured_level(name):
        from .Env import Env
        level = Env.cur().config(f"{name}.log.level") or Env.cur().config("log.level")
        if level is None:
            return LogLevel.info()
        return LogLevel.from_str(level, False) or LogLevel.info()

    @staticmethod
    def make(name, register=True):
        return Log(name, register)

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        with Log._lock:
            log = Log._logs.get(name)
            if log is None:
                log = Log(name, True)
            return log

    @staticmethod
    def find(name, checked=True):
        """Find a log by name"""
        log = Log._logs.get(name)
        if log is not None:
            return log
        if checked:
            from .Err import ArgErr
            raise ArgErr.make(f"Unknown log: {name}")
        return None

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(new_level)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def is_enabled(self, level):
        return level.ordinal() >= self._level.ordinal() and level != LogLevel.silent()

    def debug(self, msg, err=None):
        if self.is_enabled(LogLevel.debug()):
            self._log(LogLevel.debug(), msg, err)

    def info(self, msg, err=None):
        if self.is_enabled(LogLevel.info()):
            self._log(LogLevel.info(), msg, err)

    def warn(self, msg, err=None):
        if self.is_enabled(LogLevel.warn()):
            self._log(LogLevel.warn(), msg, err)

    def err(self, msg, err=None):
        if self.is_enabled(LogLevel.err()):
            self._log(LogLevel.err(), msg, err)

    def _log(self, level, msg, err):
        rec = LogRec(datetime.now(), level, self._name, msg, err)
        self.log(rec)

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in list(Log._handlers):
            handler(rec)

        py_level = {
            LogLevel.debug(): logging.DEBUG,
            LogLevel.info(): logging.INFO,
            LogLevel.warn(): logging.WARNING,
            LogLevel.err(): logging.ERROR,
        }.get(rec.level(), logging.INFO)

        self._py_logger.log(py_level, rec.msg(), exc_info=rec.err())

    def to_str(self):
        return self._name

    @staticmethod
    def handlers():
        return tuple(Log._handlers)

    @staticmethod
    def add_handler(handler):
        """Add a global log handler receiving every LogRec"""
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr.make("Handler must be callable")
        Log._handlers.append(handler)

    @staticmethod
    def remove_handler(handler):
        if handler in Log._handlers:
            Log._handlers.remove(handler)
