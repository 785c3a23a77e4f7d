#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Err(Exception):
    """Base error class"""

    def __init__(self, msg=None, cause=None):
        Exception.__init__(self, msg)
        self._msg = msg
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def make(cls, msg=None, cause=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg, cause)

    def msg(self):
        # Empty string when no message provided, not None
        return self._msg if self._msg is not None else ""

    def cause(self):
        return self._cause

    def to_str(self):
        name = type(self).__name__
        if self._msg:
            return f"{name}: {self._msg}"
        return name

    def __str__(self):
        return self.to_str()


class ParseErr(Err):
    """Malformed type signature"""

    @staticmethod
    def make_str(what, s):
        return ParseErr(f"Invalid {what}: '{s}'")


class ArgErr(Err):
    """Argument error"""
    pass


class UnknownTypeErr(Err):
    """Type signature does not name a registered type"""
    pass


class UnknownSlotErr(Err):
    """Checked slot lookup found nothing"""
    pass


class InvalidHierarchyErr(Err):
    """Declaring type is not an ancestor of the usage site"""
    pass


class NoSuchMemberErr(Err):
    """Invocation requested against a member that was never resolved"""
    pass


class InvocationErr(Err):
    """Dispatch failed; cause() holds the original exception"""
    pass
